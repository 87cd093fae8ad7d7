"""
Closed vocabularies and the categorized declaration model.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from goreorder.parser.nodes import Decl, FuncDecl, GenDecl, ValueSpec


class Section(str, Enum):
    """Top-level sections a file is organized into."""
    IMPORTS = "imports"
    MAIN = "main"
    INIT = "init"
    EXPORTED_CONSTS = "exported_consts"
    EXPORTED_ENUMS = "exported_enums"
    EXPORTED_VARS = "exported_vars"
    EXPORTED_TYPES = "exported_types"
    EXPORTED_FUNCS = "exported_funcs"
    UNEXPORTED_CONSTS = "unexported_consts"
    UNEXPORTED_ENUMS = "unexported_enums"
    UNEXPORTED_VARS = "unexported_vars"
    UNEXPORTED_TYPES = "unexported_types"
    UNEXPORTED_FUNCS = "unexported_funcs"
    UNCATEGORIZED = "uncategorized"


class TypeElement(str, Enum):
    """Elements of a type group layout."""
    TYPEDEF = "typedef"
    CONSTRUCTORS = "constructors"
    EXPORTED_METHODS = "exported_methods"
    UNEXPORTED_METHODS = "unexported_methods"


class EnumElement(str, Enum):
    """Elements of an enum group layout."""
    TYPEDEF = "typedef"
    IOTA = "iota"
    EXPORTED_METHODS = "exported_methods"
    UNEXPORTED_METHODS = "unexported_methods"


class Mode(str, Enum):
    """How code outside the configured sections is handled."""
    STRICT = "strict"
    WARN = "warn"
    APPEND = "append"
    DROP = "drop"


DEFAULT_SECTION_ORDER = [section.value for section in Section]
DEFAULT_TYPE_LAYOUT = [element.value for element in TypeElement]
DEFAULT_ENUM_LAYOUT = [element.value for element in EnumElement]
DEFAULT_MODE = Mode.STRICT.value


@dataclass
class TypeGroup:
    """A type with its constructors and methods."""
    type_name: str
    type_decl: Optional[GenDecl] = None
    constructors: List[FuncDecl] = field(default_factory=list)
    exported_methods: List[FuncDecl] = field(default_factory=list)
    unexported_methods: List[FuncDecl] = field(default_factory=list)

    @property
    def has_methods(self) -> bool:
        return bool(self.exported_methods or self.unexported_methods)


@dataclass
class EnumGroup:
    """An enum type with its iota const block and methods."""
    type_name: str
    const_decl: GenDecl
    type_decl: Optional[GenDecl] = None
    exported_methods: List[FuncDecl] = field(default_factory=list)
    unexported_methods: List[FuncDecl] = field(default_factory=list)


@dataclass
class CategorizedDecls:
    """
    Declarations of one file sorted into sections.

    ``input_count`` is the number of units the categorizer filed, counting each
    const/var spec individually. The reassembler checks its output against it.
    """
    imports: List[Decl] = field(default_factory=list)
    main: Optional[FuncDecl] = None
    init: List[FuncDecl] = field(default_factory=list)
    exported_consts: List[ValueSpec] = field(default_factory=list)
    exported_enums: List[EnumGroup] = field(default_factory=list)
    exported_vars: List[ValueSpec] = field(default_factory=list)
    exported_types: List[TypeGroup] = field(default_factory=list)
    exported_funcs: List[FuncDecl] = field(default_factory=list)
    unexported_consts: List[ValueSpec] = field(default_factory=list)
    unexported_enums: List[EnumGroup] = field(default_factory=list)
    unexported_vars: List[ValueSpec] = field(default_factory=list)
    unexported_types: List[TypeGroup] = field(default_factory=list)
    unexported_funcs: List[FuncDecl] = field(default_factory=list)
    uncategorized: List[Decl] = field(default_factory=list)
    input_count: int = 0

    def has_content(self, section: Section) -> bool:
        """True if the bucket behind ``section`` holds anything."""
        if section is Section.MAIN:
            return self.main is not None
        return bool(getattr(self, section.value))


class ReorderResult(BaseModel):
    """
    Outcome of reordering one source.
    """
    source: str
    warnings: List[str] = Field(default_factory=list)
    unmatched_sections: List[str] = Field(default_factory=list)  # Folded into uncategorized (or dropped)
    input_count: int = 0
    output_count: int = 0


class SectionInfo(BaseModel):
    """
    A section detected in a file by the position of its first declaration.
    """
    name: str
    label: str
    position: int  # 1-indexed declaration position
    expected: int  # 1-indexed position in the configured order, 0 if not configured


class SectionOrder(BaseModel):
    sections: List[SectionInfo] = Field(default_factory=list)

    @property
    def in_order(self) -> bool:
        expected = [s.expected for s in self.sections if s.expected]
        return expected == sorted(expected)
