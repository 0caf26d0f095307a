"""
Swift accessor generation for String Catalog keys.

    generate(
        ["home.title", "home.subtitle"],
        comments={},
        plural_keys=frozenset(),
        config=GeneratorConfig(separator="."),
    )

returns a complete Swift source document. The function is pure: no I/O,
no state kept between calls, byte-identical output for identical input.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass

from xcstrings_codegen.generator.emitter import INDENT, NamespaceEmitter, swift_string_literal
from xcstrings_codegen.generator.naming import escape_identifier
from xcstrings_codegen.generator.tree import build_tree

HEADER = "// Generated using xcstrings-codegen. Do not edit.\n"


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for one generation run."""

    separator: str = "_"
    table: str = "localization"
    type_name: str = "L10n"
    access: str = "public"
    # Only used upstream to pick which localized value becomes the comment.
    comments_locale: str = "en"


def runtime_support(separator: str) -> str:
    """
    Fixed helper section appended once to every generated document.

    `translate(base:_:)` returns nil when the composed key has no
    translation, which is how `get(_:)` reports an unknown suffix.
    """
    sep = swift_string_literal(separator)
    sep_inner = sep[1:-1]
    return f"""
fileprivate extension String {{
{INDENT}func camelCased(with separator: Character) -> String {{
{INDENT}{INDENT}return lowercased()
{INDENT}{INDENT}{INDENT}.split(separator: separator)
{INDENT}{INDENT}{INDENT}.enumerated()
{INDENT}{INDENT}{INDENT}.map {{ $0.offset > 0 ? $0.element.capitalized : $0.element.lowercased() }}
{INDENT}{INDENT}{INDENT}.joined()
{INDENT}}}
}}

fileprivate func translate(base: String, _ key: String) -> String? {{
{INDENT}let localizableKey = "\\(base){sep_inner}\\(key.camelCased(with: {sep}))"
{INDENT}let localizedKey = translate(localizableKey)
{INDENT}if localizedKey == localizableKey {{
{INDENT}{INDENT}return nil
{INDENT}}}
{INDENT}return localizedKey
}}

fileprivate func translate(_ key: String, _ args: CVarArg...) -> String {{
{INDENT}let format = key.localize(withTable: tableName)
{INDENT}return String(format: format, arguments: args)
}}

fileprivate extension String {{
{INDENT}func localize(withTable tableName: String = "") -> String {{
{INDENT}{INDENT}NSLocalizedString(self, tableName: tableName, value: self, comment: "")
{INDENT}}}
}}
"""


def generate(
    keys: Iterable[str],
    comments: Mapping[str, str] | None = None,
    plural_keys: Collection[str] = frozenset(),
    config: GeneratorConfig | None = None,
) -> str:
    """
    Render the accessor document for `keys`.

    Callers pass keys already sorted; the tree itself does not depend on
    insertion order.
    """
    config = config or GeneratorConfig()
    root = build_tree(keys, config.separator)
    emitter = NamespaceEmitter(
        separator=config.separator,
        access=config.access,
        comments=comments or {},
        plural_keys=plural_keys,
        root_name=config.type_name,
    )

    out = HEADER
    out += "\nimport Foundation\n\n"
    out += f"fileprivate let tableName: String = {swift_string_literal(config.table)}\n"
    out += f"{config.access} enum {escape_identifier(config.type_name)} {{\n"
    out += emitter.render_body(root, level=1)
    out += "}\n"
    out += runtime_support(config.separator)
    return out


__all__ = ["GeneratorConfig", "HEADER", "generate", "runtime_support"]
