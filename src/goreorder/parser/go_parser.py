"""
Parses Go source into a declaration tree with comments attached.

Comment attachment rules:
- comments on the same line as the end of a node are that node's trailing comment
- other comments attach as doc to the next node; blank-line gaps are kept
- comments after the last spec of a block become that spec's footer
- comments after the last declaration become the file tail
"""

from typing import List, Optional

from goreorder.exceptions import ParserError
from goreorder.logging_config import logger
from goreorder.parser.language_manager import new_go_parser
from goreorder.parser.nodes import (
    BadDecl,
    Decl,
    FuncDecl,
    GenDecl,
    GoFile,
    ImportDecl,
    Node,
    Spacing,
    TypeSpec,
    ValueSpec,
)

SPEC_NODE_TYPES = {"const_spec", "var_spec", "type_spec", "type_alias"}
GEN_DECL_TOKENS = {
    "const_declaration": "const",
    "var_declaration": "var",
    "type_declaration": "type",
}


def parse_source(content: str, source_name: str = "<source>") -> GoFile:
    """
    Parses Go source text into a GoFile.

    Args:
        content: Go source code.
        source_name: Name used in error messages (usually the file path).

    Returns:
        The parsed GoFile.

    Raises:
        ParserError: If tree-sitter reports a syntax error or the package clause is missing.
    """
    logger.debug(f"Parsing Go source: {source_name}")
    data = content.encode("utf-8")
    tree = new_go_parser().parse(data)
    root = tree.root_node

    error_node = _find_error_node(root)
    if error_node is not None:
        line = error_node.start_point[0] + 1
        col = error_node.start_point[1] + 1
        if error_node.is_missing:
            message = f"missing {error_node.type}"
        else:
            message = "syntax error"
        raise ParserError(source_name, message, line, col)

    return _FileBuilder(data, source_name).build(root)


def _find_error_node(node):
    """Depth-first search for the first ERROR or MISSING node."""
    if node.type == "ERROR" or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = _find_error_node(child)
        if found is not None:
            return found
    return None


def type_name_of(node, text) -> Optional[str]:
    """
    Extracts the base name of a type expression.

    Handles T, pkg.T, *T, T[A, B] and (T).
    """
    if node is None:
        return None
    if node.type in ("type_identifier", "identifier"):
        return text(node)
    if node.type == "qualified_type":
        return type_name_of(node.child_by_field_name("name"), text)
    if node.type == "generic_type":
        return type_name_of(node.child_by_field_name("type"), text)
    if node.type in ("pointer_type", "parenthesized_type"):
        inner = node.named_children
        return type_name_of(inner[0], text) if inner else None
    return None


class _FileBuilder:
    def __init__(self, data: bytes, source_name: str):
        self.data = data
        self.source_name = source_name

    def text(self, node) -> str:
        return self.data[node.start_byte:node.end_byte].decode("utf-8")

    def slice(self, start: int, end: int) -> str:
        return self.data[start:end].decode("utf-8")

    def build(self, root) -> GoFile:
        children = root.named_children
        package = next((c for c in children if c.type == "package_clause"), None)
        if package is None:
            raise ParserError(self.source_name, "expected 'package' clause", 1, 1)

        header_end = package.end_byte
        prev_end_row = package.end_point[0]
        prev_end_byte = package.end_byte
        last: Optional[Decl] = None
        pending = []
        decls: List[Decl] = []

        for node in children:
            if node.start_byte < package.end_byte:
                continue
            if node.type == "comment":
                if not pending and node.start_point[0] == prev_end_row:
                    if last is None:
                        header_end = node.end_byte
                    else:
                        last.comment += self.slice(prev_end_byte, node.end_byte)
                    prev_end_byte = node.end_byte
                    prev_end_row = node.end_point[0]
                else:
                    pending.append(node)
                continue

            decl = self.build_decl(node)
            decl.doc = self.doc_lines(pending, node)
            start_row = pending[0].start_point[0] if pending else node.start_point[0]
            decl.before = Spacing.EMPTY_LINE if start_row - prev_end_row > 1 else Spacing.NEW_LINE
            decls.append(decl)
            last = decl
            pending = []
            prev_end_row = node.end_point[0]
            prev_end_byte = node.end_byte

        go_file = GoFile(header=self.slice(0, header_end), decls=decls)
        if pending:
            go_file.tail = self.doc_lines(pending, None)
            if pending[0].start_point[0] - prev_end_row > 1:
                go_file.tail_before = Spacing.EMPTY_LINE
        logger.debug(f"Parsed {len(decls)} top-level declarations from {self.source_name}")
        return go_file

    def doc_lines(self, comments, next_node) -> List[str]:
        lines: List[str] = []
        prev_row = None
        for comment in comments:
            if prev_row is not None and comment.start_point[0] - prev_row > 1:
                lines.append("")
            lines.append(self.text(comment))
            prev_row = comment.end_point[0]
        if comments and next_node is not None and next_node.start_point[0] - prev_row > 1:
            lines.append("")
        return lines

    def build_decl(self, node) -> Decl:
        if node.type == "import_declaration":
            return ImportDecl(text=self.text(node))

        if node.type == "function_declaration":
            return FuncDecl(
                text=self.text(node),
                name=self.text(node.child_by_field_name("name")),
                result_type=self.result_type_name(node.child_by_field_name("result")),
            )

        if node.type == "method_declaration":
            return FuncDecl(
                text=self.text(node),
                name=self.text(node.child_by_field_name("name")),
                receiver_type=self.receiver_type_name(node.child_by_field_name("receiver")),
                result_type=self.result_type_name(node.child_by_field_name("result")),
            )

        if node.type in GEN_DECL_TOKENS:
            return GenDecl(
                text=self.text(node),
                token=GEN_DECL_TOKENS[node.type],
                specs=self.build_specs(node),
                parenthesized=any(c.type in ("(", "var_spec_list") for c in node.children),
            )

        logger.debug(f"Keeping unrecognised top-level node '{node.type}' verbatim")
        return BadDecl(text=self.text(node), node_type=node.type)

    def spec_children(self, decl_node):
        for child in decl_node.named_children:
            if child.type == "var_spec_list":
                yield from child.named_children
            else:
                yield child

    def build_specs(self, decl_node) -> List[Node]:
        specs: List[Node] = []
        pending = []
        last: Optional[Node] = None
        prev_end_row = decl_node.start_point[0]
        prev_end_byte = decl_node.start_byte

        for child in self.spec_children(decl_node):
            if child.type == "comment":
                if not pending and last is not None and child.start_point[0] == prev_end_row:
                    last.comment += self.slice(prev_end_byte, child.end_byte)
                    prev_end_byte = child.end_byte
                else:
                    pending.append(child)
                continue
            if child.type not in SPEC_NODE_TYPES:
                continue

            spec = self.build_spec(child)
            spec.doc = self.doc_lines(pending, child)
            specs.append(spec)
            last = spec
            pending = []
            prev_end_row = child.end_point[0]
            prev_end_byte = child.end_byte

        if pending and last is not None:
            last.after = self.doc_lines(pending, None)
        return specs

    def build_spec(self, node) -> Node:
        if node.type in ("type_spec", "type_alias"):
            return TypeSpec(text=self.text(node), name=self.text(node.child_by_field_name("name")))

        names = [self.text(c) for c in node.children_by_field_name("name") if c.type == "identifier"]
        values = node.children_by_field_name("value")
        return ValueSpec(
            text=self.text(node),
            names=names,
            type_name=type_name_of(node.child_by_field_name("type"), self.text),
            uses_iota=any(self.contains_iota(v) for v in values),
        )

    def contains_iota(self, node) -> bool:
        if node.type == "iota" or (node.type == "identifier" and self.text(node) == "iota"):
            return True
        return any(self.contains_iota(child) for child in node.named_children)

    def receiver_type_name(self, receiver) -> str:
        if receiver is None:
            return ""
        for param in receiver.named_children:
            if param.type == "parameter_declaration":
                return type_name_of(param.child_by_field_name("type"), self.text) or ""
        return ""

    def result_type_name(self, result) -> Optional[str]:
        """Name of the first result when it is written as T or *T."""
        if result is None:
            return None
        first = result
        if result.type == "parameter_list":
            params = [p for p in result.named_children if p.type == "parameter_declaration"]
            if not params:
                return None
            first = params[0].child_by_field_name("type")
            if first is None:
                return None
        if first.type == "pointer_type":
            inner = first.named_children
            first = inner[0] if inner else None
        if first is not None and first.type == "type_identifier":
            return self.text(first)
        return None
