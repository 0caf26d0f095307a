"""
Swift source rendering for a key hierarchy.

Every non-empty child node becomes a nested `enum`; every leaf becomes a
`static var` (no placeholders) or `static func` (one parameter per
placeholder) that calls the `translate` support functions with the
original, unsanitized key.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass

from xcstrings_codegen.generator.naming import ScopeNames
from xcstrings_codegen.generator.placeholders import PlaceholderType, infer_placeholders
from xcstrings_codegen.generator.tree import Leaf, TreeNode

INDENT = "    "
LOOKUP_HELPER = "get"


def swift_string_literal(value: str) -> str:
    """Quote `value` as a single-line Swift string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def _one_line(text: str) -> str:
    return " ".join(text.splitlines())


def doc_comment(text: str, indent: str) -> str:
    lines = [line for line in text.splitlines() if line.strip()]
    return "".join(f"{indent}/// {line}\n" for line in lines)


@dataclass(frozen=True)
class Accessor:
    """Signature and call arguments of one generated accessor."""

    declaration: str
    call_args: list[str]


def accessor_signature(name: str, placeholders: list[PlaceholderType], access: str) -> Accessor:
    if not placeholders:
        return Accessor(f"{access} static var {name}: String", [])

    params: list[str] = []
    call_args: list[str] = []
    for idx, ptype in enumerate(placeholders, start=1):
        param = f"p{idx}"
        params.append(f"_ {param}: {ptype.swift_type}")
        if ptype is PlaceholderType.STRING:
            call_args.append(f"String(describing: {param})")
        else:
            call_args.append(param)
    return Accessor(f"{access} static func {name}({', '.join(params)}) -> String", call_args)


class NamespaceEmitter:
    """
    Renders namespace bodies for one generation run.

    Holds only the run's read-only inputs; each scope gets its own
    `ScopeNames` so identifier uniqueness is enforced per namespace body.
    """

    def __init__(
        self,
        *,
        separator: str,
        access: str,
        comments: Mapping[str, str],
        plural_keys: Collection[str],
        root_name: str | None = None,
    ) -> None:
        self.separator = separator
        self.access = access
        self.comments = comments
        self.plural_keys = plural_keys
        self.root_name = root_name

    def render_leaf(self, leaf: Leaf, name: str, indent: str) -> str:
        key = leaf.full_key
        comment = self.comments.get(key)
        placeholders = infer_placeholders(key, comment, self.plural_keys)

        # Comments with no visible text fall back to the key annotation.
        out = doc_comment(comment, indent) if comment else ""
        if not out and key in self.plural_keys:
            out = f"{indent}/// Plural format key: {_one_line(key)}\n"
        elif not out:
            out = f"{indent}/// key: {_one_line(key)}\n"

        accessor = accessor_signature(name, placeholders, self.access)
        call = ", ".join([swift_string_literal(key), *accessor.call_args])
        out += f"{indent}{accessor.declaration} {{ translate({call}) }}\n"
        return out

    def render_body(self, node: TreeNode, level: int, path: tuple[str, ...] = ()) -> str:
        """
        Render the contents of the namespace for `node` at `path`.

        Leaves come first, then the dynamic lookup helper (not at the root),
        then one nested enum per non-empty child.
        """
        indent = INDENT * level
        has_helper = bool(path) and (bool(node.leaves) or bool(node.children))
        names = ScopeNames(
            self.separator,
            reserved=(LOOKUP_HELPER,) if has_helper else (),
            owner=None if path else self.root_name,
        )

        out = ""
        for leaf in node.leaves:
            out += self.render_leaf(leaf, names.leaf(leaf.name, leaf.full_key), indent)

        if has_helper:
            base = swift_string_literal(self.separator.join(path))
            out += (
                f"{indent}{self.access} static func {LOOKUP_HELPER}(_ key: String) -> String? "
                f"{{ translate(base: {base}, key) }}\n"
            )

        for segment, child in node.sorted_children():
            if child.is_empty():
                continue
            enum_name = names.namespace(segment, path)
            out += f"{indent}{self.access} enum {enum_name} {{\n"
            out += self.render_body(child, level + 1, path + (segment,))
            out += f"{indent}}}\n"

        return out
