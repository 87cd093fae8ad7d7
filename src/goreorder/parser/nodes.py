"""
Declaration tree produced by the Go parser and consumed by the reorder engine.

Nodes carry their original source text verbatim. The engine relocates them and
only ever touches ``doc`` (synthetic header comments) and ``before`` (spacing).
Identity matters: nodes compare by identity so the same declaration is never
counted twice.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Spacing(str, Enum):
    """Whitespace directive placed before a node when printing."""
    NEW_LINE = "new_line"
    EMPTY_LINE = "empty_line"


@dataclass(eq=False)
class Node:
    """
    Common shape of every declaration and spec.

    Attributes:
        text: Source text of the node itself, without surrounding comments.
        doc: Comment lines preceding the node. An empty string marks a blank line.
        comment: Comment on the same line after the node, if any.
        after: Comment lines following the node inside its block (block footers).
        before: Spacing directive before the node.
    """
    text: str = ""
    doc: List[str] = field(default_factory=list)
    comment: str = ""
    after: List[str] = field(default_factory=list)
    before: Spacing = Spacing.NEW_LINE


@dataclass(eq=False)
class ValueSpec(Node):
    """One const or var spec, e.g. ``A, B int = 1, 2``."""
    names: List[str] = field(default_factory=list)
    type_name: Optional[str] = None
    uses_iota: bool = False

    @property
    def name(self) -> str:
        return self.names[0] if self.names else ""


@dataclass(eq=False)
class TypeSpec(Node):
    """One type spec or alias, e.g. ``Server struct{}``."""
    name: str = ""


@dataclass(eq=False)
class Decl(Node):
    """A top-level declaration."""

    @property
    def kind(self) -> str:
        return "decl"


@dataclass(eq=False)
class ImportDecl(Decl):
    @property
    def kind(self) -> str:
        return "import"


@dataclass(eq=False)
class GenDecl(Decl):
    """
    A const, var or type declaration.

    Parsed declarations keep ``text`` verbatim. Merged blocks built by the
    engine are ``synthetic``: they have no text and are printed from ``specs``.
    """
    token: str = ""
    specs: List[Node] = field(default_factory=list)
    parenthesized: bool = False
    synthetic: bool = False

    @property
    def kind(self) -> str:
        return self.token


@dataclass(eq=False)
class FuncDecl(Decl):
    """
    A function or method declaration.

    Attributes:
        name: Function name.
        receiver_type: Base type name of the receiver for methods, None for functions.
        result_type: First result type name when it is ``T`` or ``*T``, else None.
    """
    name: str = ""
    receiver_type: Optional[str] = None
    result_type: Optional[str] = None

    @property
    def is_method(self) -> bool:
        return self.receiver_type is not None

    @property
    def kind(self) -> str:
        return "method" if self.is_method else "func"


@dataclass(eq=False)
class BadDecl(Decl):
    """A top-level node the engine does not recognise; kept verbatim."""
    node_type: str = ""

    @property
    def kind(self) -> str:
        return "other"


@dataclass(eq=False)
class GoFile:
    """
    A parsed Go source file.

    Attributes:
        header: Everything up to and including the package clause.
        decls: Top-level declarations in order.
        tail: Comment lines after the last declaration.
        tail_before: Spacing between the last declaration and the tail.
    """
    header: str
    decls: List[Decl] = field(default_factory=list)
    tail: List[str] = field(default_factory=list)
    tail_before: Spacing = Spacing.NEW_LINE
