"""Maps a single declaration to the section it belongs to, for order analysis."""

from typing import Dict, Optional

from goreorder.categorize.categorizer import enum_type_name, is_exported
from goreorder.parser.nodes import Decl, FuncDecl, GenDecl, ImportDecl, TypeSpec, ValueSpec
from goreorder.schemas import Section

SECTION_LABELS: Dict[Section, str] = {
    Section.IMPORTS: "Imports",
    Section.MAIN: "main()",
    Section.INIT: "init()",
    Section.EXPORTED_CONSTS: "Exported Constants",
    Section.EXPORTED_ENUMS: "Exported Enums",
    Section.EXPORTED_VARS: "Exported Variables",
    Section.EXPORTED_TYPES: "Exported Types",
    Section.EXPORTED_FUNCS: "Exported Functions",
    Section.UNEXPORTED_CONSTS: "unexported constants",
    Section.UNEXPORTED_ENUMS: "unexported enums",
    Section.UNEXPORTED_VARS: "unexported variables",
    Section.UNEXPORTED_TYPES: "unexported types",
    Section.UNEXPORTED_FUNCS: "unexported functions",
    Section.UNCATEGORIZED: "Uncategorized",
}


def _by_case(name: str, exported: Section, unexported: Section) -> Section:
    return exported if is_exported(name) else unexported


def identify_section(decl: Decl) -> Optional[Section]:
    """
    Section a declaration would be filed under, judged on its own.

    Methods count towards the types section of their receiver. Const and var
    blocks are judged by their first spec. Returns None for declarations that
    do not belong to any section (empty blocks, unrecognised nodes).
    """
    if isinstance(decl, ImportDecl):
        return Section.IMPORTS

    if isinstance(decl, FuncDecl):
        if decl.is_method:
            return _by_case(decl.receiver_type, Section.EXPORTED_TYPES, Section.UNEXPORTED_TYPES)
        if decl.name == "main":
            return Section.MAIN
        if decl.name == "init":
            return Section.INIT
        return _by_case(decl.name, Section.EXPORTED_FUNCS, Section.UNEXPORTED_FUNCS)

    if not isinstance(decl, GenDecl) or not decl.specs:
        return None

    first = decl.specs[0]
    if decl.token == "type" and isinstance(first, TypeSpec):
        return _by_case(first.name, Section.EXPORTED_TYPES, Section.UNEXPORTED_TYPES)
    if not isinstance(first, ValueSpec):
        return None
    if decl.token == "const":
        type_name = enum_type_name(decl)
        if type_name is not None:
            return _by_case(type_name, Section.EXPORTED_ENUMS, Section.UNEXPORTED_ENUMS)
        return _by_case(first.name, Section.EXPORTED_CONSTS, Section.UNEXPORTED_CONSTS)
    return _by_case(first.name, Section.EXPORTED_VARS, Section.UNEXPORTED_VARS)
