import json
import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def sample_catalog() -> dict:
    """A small String Catalog covering comments, plurals and bare entries."""
    return {
        "sourceLanguage": "en",
        "version": "1.0",
        "strings": {
            "home.title": {
                "localizations": {
                    "en": {"stringUnit": {"state": "translated", "value": "Welcome"}},
                    "de": {"stringUnit": {"state": "translated", "value": "Willkommen"}},
                }
            },
            "cart.itemsCount": {
                "localizations": {
                    "en": {
                        "variations": {
                            "plural": {
                                "one": {"stringUnit": {"value": "%d item"}},
                                "other": {"stringUnit": {"value": "%d items"}},
                            }
                        }
                    }
                }
            },
            "alert.message": {
                "comment": "Shown when an upload fails",
                "localizations": {
                    "en": {"stringUnit": {"state": "translated", "value": "%@ failed with code %d"}}
                },
            },
            "orphan": {},
        },
    }


@pytest.fixture
def write_catalog(tmp_path: Path):
    """Return a helper that writes a catalog dict to an .xcstrings file."""

    def _write(data: dict, name: str = "localization.xcstrings") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
