"""
Section emitters.

Every Section has exactly one emitter in SECTION_EMITTERS; the table is checked
for full coverage when this module is imported.
"""

from typing import Callable, Dict, List

from goreorder.categorize.categorizer import MERGED_HEADERS
from goreorder.config import ReorderConfig
from goreorder.emit.merge import merge_value_specs
from goreorder.parser.nodes import Decl, GenDecl, Spacing, ValueSpec
from goreorder.schemas import (
    CategorizedDecls,
    EnumElement,
    EnumGroup,
    Section,
    TypeElement,
    TypeGroup,
)

SectionEmitter = Callable[[CategorizedDecls, ReorderConfig], List[Decl]]



def _spaced(decls: List[Decl]) -> List[Decl]:
    for decl in decls:
        decl.before = Spacing.EMPTY_LINE
    return decls


def enum_header(type_name: str) -> str:
    return f"// {type_name} values."


def retag_enum_block(group: EnumGroup) -> GenDecl:
    """Replace an earlier values header on the group's const block with a fresh one."""
    decl = group.const_decl
    header = enum_header(group.type_name)
    doc = list(decl.doc)
    if doc and doc[0] == header:
        doc.pop(0)
    while doc and doc[0] == "":
        doc.pop(0)
    decl.doc = [header] + doc
    return decl


def type_group_parts(group: TypeGroup) -> Dict[str, List[Decl]]:
    """Declarations of a type group keyed by layout element."""
    return {
        TypeElement.TYPEDEF.value: [group.type_decl] if group.type_decl is not None else [],
        TypeElement.CONSTRUCTORS.value: list(group.constructors),
        TypeElement.EXPORTED_METHODS.value: list(group.exported_methods),
        TypeElement.UNEXPORTED_METHODS.value: list(group.unexported_methods),
    }


def enum_group_parts(group: EnumGroup) -> Dict[str, List[Decl]]:
    """Declarations of an enum group keyed by layout element."""
    return {
        EnumElement.TYPEDEF.value: [group.type_decl] if group.type_decl is not None else [],
        EnumElement.IOTA.value: [group.const_decl],
        EnumElement.EXPORTED_METHODS.value: list(group.exported_methods),
        EnumElement.UNEXPORTED_METHODS.value: list(group.unexported_methods),
    }


def emit_type_group(group: TypeGroup, layout: List[str]) -> List[Decl]:
    """Emits one type group; elements missing from the layout are skipped."""
    parts = type_group_parts(group)
    decls: List[Decl] = []
    for element in layout:
        decls.extend(parts.get(element, []))
    return _spaced(decls)


def emit_enum_group(group: EnumGroup, layout: List[str]) -> List[Decl]:
    """Emits one enum group; the const block gets a ``// <Type> values.`` header."""
    parts = enum_group_parts(group)
    decls: List[Decl] = []
    for element in layout:
        if element == EnumElement.IOTA.value:
            decls.append(retag_enum_block(group))
        else:
            decls.extend(parts.get(element, []))
    return _spaced(decls)


def emit_value_block(specs: List[ValueSpec], token: str, exported: bool) -> List[Decl]:
    if not specs:
        return []
    exported_header, unexported_header = MERGED_HEADERS[token]
    header = exported_header if exported else unexported_header
    return [merge_value_specs(specs, token, header)]


def _emit_imports(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    return list(cat.imports)


def _emit_main(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    return _spaced([cat.main]) if cat.main is not None else []


def _emit_init(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    return list(cat.init)


def _emit_exported_consts(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    return emit_value_block(cat.exported_consts, "const", exported=True)


def _emit_unexported_consts(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    return emit_value_block(cat.unexported_consts, "const", exported=False)


def _emit_exported_vars(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    return emit_value_block(cat.exported_vars, "var", exported=True)


def _emit_unexported_vars(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    return emit_value_block(cat.unexported_vars, "var", exported=False)


def _emit_enums(groups: List[EnumGroup], config: ReorderConfig) -> List[Decl]:
    decls: List[Decl] = []
    for group in groups:
        decls.extend(emit_enum_group(group, config.types.enum_layout))
    return decls


def _emit_exported_enums(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    return _emit_enums(cat.exported_enums, config)


def _emit_unexported_enums(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    return _emit_enums(cat.unexported_enums, config)


def _emit_types(groups: List[TypeGroup], config: ReorderConfig) -> List[Decl]:
    decls: List[Decl] = []
    for group in groups:
        decls.extend(emit_type_group(group, config.types.type_layout))
    return decls


def _emit_exported_types(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    return _emit_types(cat.exported_types, config)


def _emit_unexported_types(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    return _emit_types(cat.unexported_types, config)


def _emit_exported_funcs(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    return _spaced(list(cat.exported_funcs))


def _emit_unexported_funcs(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    return _spaced(list(cat.unexported_funcs))


def _emit_uncategorized(cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    return list(cat.uncategorized)


SECTION_EMITTERS: Dict[Section, SectionEmitter] = {
    Section.IMPORTS: _emit_imports,
    Section.MAIN: _emit_main,
    Section.INIT: _emit_init,
    Section.EXPORTED_CONSTS: _emit_exported_consts,
    Section.EXPORTED_ENUMS: _emit_exported_enums,
    Section.EXPORTED_VARS: _emit_exported_vars,
    Section.EXPORTED_TYPES: _emit_exported_types,
    Section.EXPORTED_FUNCS: _emit_exported_funcs,
    Section.UNEXPORTED_CONSTS: _emit_unexported_consts,
    Section.UNEXPORTED_ENUMS: _emit_unexported_enums,
    Section.UNEXPORTED_VARS: _emit_unexported_vars,
    Section.UNEXPORTED_TYPES: _emit_unexported_types,
    Section.UNEXPORTED_FUNCS: _emit_unexported_funcs,
    Section.UNCATEGORIZED: _emit_uncategorized,
}

_missing_emitters = [section.value for section in Section if section not in SECTION_EMITTERS]
if _missing_emitters:
    raise RuntimeError(f"No emitter registered for sections: {', '.join(_missing_emitters)}")


def emit_section(section: Section, cat: CategorizedDecls, config: ReorderConfig) -> List[Decl]:
    """
    Renders one section's declarations.

    Args:
        section: Section to emit.
        cat: Sorted categorized declarations.
        config: Validated configuration (read only).

    Returns:
        Declarations in output order; empty if the section has no content.
    """
    return SECTION_EMITTERS[Section(section)](cat, config)
