from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from xcstrings_codegen.logging import logger


class CatalogError(RuntimeError):
    """Base class for problems with the String Catalog input."""


class CatalogNotFoundError(CatalogError):
    """Raised when the catalog file does not exist."""


class InvalidCatalogError(CatalogError):
    """Raised when the catalog is not JSON or lacks the expected structure."""

    def __init__(self, path: Path | None, problems: list[str]) -> None:
        where = f" ({path})" if path is not None else ""
        super().__init__(f"Invalid xcstrings structure{where}: " + "; ".join(problems))
        self.path = path
        self.problems = problems


# Only what the reader relies on is enforced; entry contents are read
# leniently so partially filled catalogs still generate.
CATALOG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "String Catalog (structure used by xcstrings-codegen)",
    "type": "object",
    "required": ["strings"],
    "properties": {
        "sourceLanguage": {"type": "string"},
        "version": {"type": "string"},
        "strings": {"type": "object"},
    },
}

_validator = Draft202012Validator(CATALOG_SCHEMA)


@dataclass(frozen=True)
class CatalogInput:
    """The three generator inputs extracted from one catalog."""

    keys: list[str]
    comments: dict[str, str] = field(default_factory=dict)
    plural_keys: frozenset[str] = frozenset()


def validate_catalog(document: Any, path: Path | None = None) -> None:
    """
    Check the catalog's top-level structure.

    Raises:
        InvalidCatalogError: with one message per schema violation.
    """
    errors = sorted(
        _validator.iter_errors(document),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    if errors:
        problems = []
        for err in errors:
            location = "/".join(str(p) for p in err.absolute_path) or "<root>"
            problems.append(f"{location}: {err.message}")
        raise InvalidCatalogError(path, problems)


def _comment_for(localizations: dict[str, Any], locale: str) -> str | None:
    loc = localizations.get(locale)
    if not isinstance(loc, dict):
        return None
    unit = loc.get("stringUnit")
    if not isinstance(unit, dict):
        return None
    value = unit.get("value")
    return value if isinstance(value, str) else None


def _is_plural(localizations: dict[str, Any]) -> bool:
    for loc in localizations.values():
        if not isinstance(loc, dict):
            continue
        variations = loc.get("variations")
        if isinstance(variations, dict) and "plural" in variations:
            return True
    return False


def parse_catalog(document: Any, locale: str = "en", path: Path | None = None) -> CatalogInput:
    """
    Extract keys, comments and plural keys from a decoded catalog.

    The comment of a key is its `stringUnit` value in `locale`; a key is
    plural when any localization carries `variations.plural`. Keys come
    back sorted so generation is deterministic.
    """
    validate_catalog(document, path)

    keys: list[str] = []
    comments: dict[str, str] = {}
    plural_keys: set[str] = set()

    for key, entry in document["strings"].items():
        keys.append(key)
        if not isinstance(entry, dict):
            continue
        localizations = entry.get("localizations")
        if not isinstance(localizations, dict):
            continue

        comment = _comment_for(localizations, locale)
        if comment is not None:
            comments[key] = comment
        if _is_plural(localizations):
            plural_keys.add(key)

    keys.sort()
    return CatalogInput(keys=keys, comments=comments, plural_keys=frozenset(plural_keys))


def load_catalog(path: Path, locale: str = "en") -> CatalogInput:
    """
    Read and parse an .xcstrings file.

    Raises:
        CatalogNotFoundError: if `path` is not a file.
        InvalidCatalogError: if the file is not JSON or is structurally invalid.
        CatalogError: if the file exists but cannot be read.
    """
    path = Path(path)
    if not path.is_file():
        raise CatalogNotFoundError(f"Input xcstrings not found at {path}")

    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidCatalogError(path, [f"not valid JSON: {exc}"]) from exc
    except OSError as exc:
        raise CatalogError(f"Cannot read xcstrings at {path}: {exc}") from exc

    catalog = parse_catalog(document, locale, path)
    logger.info(
        "catalog_loaded",
        path=str(path),
        keys=len(catalog.keys),
        comments=len(catalog.comments),
        plural=len(catalog.plural_keys),
    )
    return catalog
