"""
Identifier sanitizing and per-scope collision resolution.

Catalog segments are arbitrary strings; emitted Swift identifiers are not.
Two sanitizers cover the two identifier kinds that appear in the output:

- `type_name` for nested namespaces (`home_screen` -> `HomeScreen`)
- `leaf_name` for accessors (`item-count` -> `item_count`)

Both escape Swift keywords with backticks as the very last step. Collision
checks in `ScopeNames` work on the unescaped form.
"""

from __future__ import annotations

from xcstrings_codegen.logging import logger

SWIFT_KEYWORDS: frozenset[str] = frozenset(
    {
        "associatedtype", "class", "deinit", "enum", "extension", "fileprivate",
        "func", "import", "init", "inout", "internal", "let", "open", "operator",
        "private", "precedencegroup", "protocol", "public", "rethrows", "static",
        "struct", "subscript", "typealias", "var",
        "break", "case", "continue", "default", "defer", "do", "else",
        "fallthrough", "for", "guard", "if", "in", "repeat", "return", "switch",
        "where", "while",
        "as", "Any", "catch", "false", "is", "nil", "super", "self", "Self",
        "throw", "throws", "true", "try", "_",
        "__COLUMN__", "__FILE__", "__FUNCTION__", "__LINE__",
    }
)

# Name used for a segment that sanitizes to nothing usable ("" or "_").
EMPTY_IDENTIFIER = "__"


def identifier_filler(separator: str) -> str:
    """Character substituted for anything illegal in an identifier."""
    if separator.isalnum() or separator == "_":
        return separator
    return "_"


def escape_identifier(name: str) -> str:
    """Backtick-escape Swift keywords; anything else is returned unchanged."""
    if name in SWIFT_KEYWORDS:
        return f"`{name}`"
    return name


def _legal_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def raw_type_name(segment: str, separator: str) -> str:
    filler = identifier_filler(separator)
    parts = [part for part in segment.split(separator) if part]
    joined = "".join(part[0].upper() + part[1:] for part in parts)
    joined = "".join(ch if _legal_char(ch) else filler for ch in joined)
    if joined in ("", "_"):
        return EMPTY_IDENTIFIER
    if not (joined[0].isalpha() or joined[0] == filler):
        joined = filler + joined
    return joined


def type_name(segment: str, separator: str) -> str:
    """Namespace identifier for a path segment: `home_screen` -> `HomeScreen`."""
    return escape_identifier(raw_type_name(segment, separator))


def raw_leaf_name(segment: str, separator: str) -> str:
    filler = identifier_filler(separator)
    result = "".join(ch if ch.isalnum() else filler for ch in segment)
    if result in ("", "_"):
        return EMPTY_IDENTIFIER
    if result[0].isdigit():
        result = filler + result
    return result


def leaf_name(segment: str, separator: str) -> str:
    """Accessor identifier for a leaf segment; lower camel case is kept as-is."""
    return escape_identifier(raw_leaf_name(segment, separator))


def _capitalize_first(name: str) -> str:
    return name[:1].upper() + name[1:]


def _lower_first(name: str) -> str:
    return name[:1].lower() + name[1:]


class ScopeNames:
    """
    Identifiers already taken inside one emitted namespace body.

    A new instance is created for every scope; nothing is shared between
    scopes or between runs. Each collision gets a single disambiguation
    attempt; if the disambiguated name is taken as well it is used anyway
    and a warning is logged.

    `owner` is the unescaped name of the root type. It stands in for the
    missing previous segment when resolving collisions in the root scope.
    """

    def __init__(
        self,
        separator: str,
        reserved: tuple[str, ...] = (),
        owner: str | None = None,
    ) -> None:
        self.separator = separator
        self.owner = owner
        self._used: set[str] = set(reserved)

    def __contains__(self, name: str) -> bool:
        return name in self._used

    def _claim(self, candidate: str, prefix: str | None, key: str) -> str:
        if candidate in self._used and prefix is not None:
            candidate = prefix + _capitalize_first(candidate)
        if candidate in self._used:
            logger.warning("identifier_collision", identifier=candidate, key=key)
        self._used.add(candidate)
        return escape_identifier(candidate)

    def leaf(self, segment: str, full_key: str) -> str:
        """
        Resolve the accessor name for a leaf.

        On collision the sanitized previous segment of `full_key` is
        prepended: `home.item_count` next to `home.item-count` becomes
        `homeItem_count`. Root-level keys use the lower-cased owner name
        instead (`a_b` next to `a-b` becomes `l10nA_b`).
        """
        candidate = raw_leaf_name(segment, self.separator)
        parts = full_key.split(self.separator)
        if len(parts) > 1:
            prefix: str | None = raw_leaf_name(parts[-2], self.separator)
        elif self.owner:
            prefix = _lower_first(self.owner)
        else:
            prefix = None
        return self._claim(candidate, prefix, full_key)

    def namespace(self, segment: str, path: tuple[str, ...]) -> str:
        """Resolve a child namespace name; `path` is the owning scope's path."""
        candidate = raw_type_name(segment, self.separator)
        prefix = raw_type_name(path[-1], self.separator) if path else self.owner
        return self._claim(candidate, prefix, self.separator.join(path + (segment,)))
