# xcstrings_codegen/utils/yaml_io.py
# YAML helpers with safe defaults (config files, effective-settings dumps).

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def read_yaml(path: Path) -> Any:
    """Parse a YAML file with the safe loader; an empty file yields None."""
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def to_yaml(data: Any) -> str:
    """
    Serialize Python data to a YAML string using safe dumper.

    - Ensure Unicode output.
    - Block style for readability.
    - Sort keys disabled to preserve field ordering.
    """
    return yaml.safe_dump(
        data,
        allow_unicode=True,
        default_flow_style=False,
        sort_keys=False,
    )
