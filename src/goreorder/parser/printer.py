"""Renders a GoFile back to Go source text."""

from typing import List

from goreorder.parser.nodes import Decl, GenDecl, GoFile, Node, Spacing

INDENT = "\t"


def print_file(go_file: GoFile) -> str:
    """
    Serializes a GoFile.

    The first declaration is always separated from the package clause by a
    blank line; later ones follow their spacing directive.
    """
    parts = [go_file.header]
    for index, decl in enumerate(go_file.decls):
        parts.append(_separator(index == 0 or decl.before == Spacing.EMPTY_LINE))
        parts.append(render_decl(decl))

    if go_file.tail:
        parts.append(_separator(not go_file.decls or go_file.tail_before == Spacing.EMPTY_LINE))
        parts.append("\n".join(go_file.tail))

    return "".join(parts) + "\n"


def _separator(blank_line: bool) -> str:
    return "\n\n" if blank_line else "\n"


def render_decl(decl: Decl) -> str:
    """Renders one declaration with its doc, trailing comment and footer."""
    lines: List[str] = list(decl.doc)
    if isinstance(decl, GenDecl) and decl.synthetic:
        body = _render_block(decl)
    else:
        body = decl.text
    lines.append(body + decl.comment)
    lines.extend(decl.after)
    return "\n".join(lines)


def _render_block(decl: GenDecl) -> str:
    lines = [f"{decl.token} ("]
    for spec in decl.specs:
        lines.extend(_render_spec(spec))
    lines.append(")")
    return "\n".join(lines)


def _render_spec(spec: Node) -> List[str]:
    lines = [_indent(line) for line in spec.doc]
    lines.append(INDENT + spec.text + spec.comment)
    lines.extend(_indent(line) for line in spec.after)
    return lines


def _indent(line: str) -> str:
    return INDENT + line if line else ""
