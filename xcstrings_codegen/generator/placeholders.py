"""
Placeholder type inference from catalog comment text.

The scan is a heuristic, not a format-string parser: every pattern in
`PLACEHOLDER_PATTERNS` is matched against the whole comment independently
and contributes one entry per match, in table order. `"%d of %@"` therefore
infers `[STRING, INT]`, because string patterns come first in the table.
Generated signatures depend on this order, so it must not be changed to a
positional scan.
"""

from __future__ import annotations

import re
from collections.abc import Collection
from enum import Enum

from xcstrings_codegen.logging import logger


class PlaceholderType(Enum):
    """Runtime argument type of one format position."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"

    @property
    def swift_type(self) -> str:
        if self is PlaceholderType.INT:
            return "Int"
        if self is PlaceholderType.FLOAT:
            return "Double"
        return "Any"


def _positional_and_plain(
    conversion: str, ptype: PlaceholderType
) -> list[tuple[str, PlaceholderType]]:
    escaped = re.escape(conversion)
    return [(rf"%\d+\${escaped}", ptype), (f"%{escaped}", ptype)]


PLACEHOLDER_PATTERNS: tuple[tuple[str, PlaceholderType], ...] = tuple(
    entry
    for conversions, ptype in (
        (("@",), PlaceholderType.STRING),
        (("d", "u", "ld", "lld", "x", "X", "lx", "lX", "o", "c"), PlaceholderType.INT),
        (("f", "e", "E", "g", "G"), PlaceholderType.FLOAT),
    )
    for conversion in conversions
    for entry in _positional_and_plain(conversion, ptype)
)


def _compile(pattern: str) -> re.Pattern[str] | None:
    try:
        return re.compile(pattern)
    except re.error as exc:
        logger.warning("placeholder_pattern_invalid", pattern=pattern, error=str(exc))
        return None


def scan_placeholders(
    text: str,
    patterns: tuple[tuple[str, PlaceholderType], ...] = PLACEHOLDER_PATTERNS,
) -> list[PlaceholderType]:
    """Collect one entry per pattern match, in pattern-table order."""
    found: list[PlaceholderType] = []
    for pattern, ptype in patterns:
        regex = _compile(pattern)
        if regex is None:
            continue
        found.extend(ptype for _ in regex.finditer(text))
    return found


def infer_placeholders(
    key: str,
    comment: str | None,
    plural_keys: Collection[str] = frozenset(),
    patterns: tuple[tuple[str, PlaceholderType], ...] = PLACEHOLDER_PATTERNS,
) -> list[PlaceholderType]:
    """
    Infer the ordered argument types for `key`.

    Plural keys (membership in `plural_keys` only, never guessed from the
    comment) always get an INT selector: it is inserted at position 0 when
    the comment did not already yield one.
    """
    found = scan_placeholders(comment or "", patterns)
    if key in plural_keys and PlaceholderType.INT not in found:
        found.insert(0, PlaceholderType.INT)
    return found
