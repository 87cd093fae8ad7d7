"""
Declaration categorization for Go source files.

The algorithm uses four passes over one shared accumulator:

Pass 1 - Collect type names: builds the group arena from every type defined in
the file and every method receiver, so later passes can match constructors and
methods regardless of declaration order.

Pass 2 - Classify: files each declaration into its bucket. Methods join their
receiver's group, New*/Must* functions whose first result is a known type
become constructors, typed iota const blocks become enum groups.

Pass 3 - Pair enums with types: each enum group takes the type definition and
methods of its same-named type group, which then leaves the type buckets.

Pass 4 - Promote typedef-less groups: groups for types defined in another file
are still emitted with their methods and constructors.
"""

from typing import Dict, List, Optional, Set

from goreorder.logging_config import logger
from goreorder.parser.nodes import Decl, FuncDecl, GenDecl, ImportDecl, Spacing, TypeSpec, ValueSpec
from goreorder.schemas import CategorizedDecls, EnumGroup, TypeGroup

CONSTRUCTOR_PREFIXES = ("New", "Must")

# Synthetic headers written on merged blocks; stripped when blocks are split again
MERGED_HEADERS = {
    "const": ("// Exported constants.", "// unexported constants."),
    "var": ("// Exported variables.", "// unexported variables."),
}


def is_exported(name: str) -> bool:
    """True if the name starts with an uppercase letter."""
    return bool(name) and name[0].isupper()


def enum_type_name(decl: GenDecl) -> Optional[str]:
    """
    Type name of a const block that forms an enum, else None.

    A block is an enum only if some value uses iota AND some spec carries an
    explicit type. A bare iota block is plain constants.
    """
    if decl.token != "const":
        return None
    specs = [s for s in decl.specs if isinstance(s, ValueSpec)]
    if not any(s.uses_iota for s in specs):
        return None
    for spec in specs:
        if spec.type_name:
            return spec.type_name
    return None


class GroupArena:
    """Type groups stored in a list and looked up by name."""

    def __init__(self):
        self.groups: List[TypeGroup] = []
        self.index: Dict[str, int] = {}

    def __contains__(self, name: str) -> bool:
        return name in self.index

    def get(self, name: str) -> Optional[TypeGroup]:
        position = self.index.get(name)
        return self.groups[position] if position is not None else None

    def ensure(self, name: str) -> TypeGroup:
        if name not in self.index:
            self.index[name] = len(self.groups)
            self.groups.append(TypeGroup(type_name=name))
        return self.groups[self.index[name]]


def categorize_declarations(decls: List[Decl]) -> CategorizedDecls:
    """
    Organizes all declarations of one file by category.

    Args:
        decls: Top-level declarations in source order.

    Returns:
        Categorized declarations, not yet sorted.
    """
    cat = CategorizedDecls()
    arena = collect_type_names(decls)
    classify(decls, cat, arena)
    pair_enums_with_types(cat, arena)
    promote_typeless_groups(cat, arena)
    logger.debug(
        f"Categorized {cat.input_count} declarations: "
        f"{len(cat.exported_types) + len(cat.unexported_types)} types, "
        f"{len(cat.exported_enums) + len(cat.unexported_enums)} enums, "
        f"{len(cat.exported_funcs) + len(cat.unexported_funcs)} funcs, "
        f"{len(cat.uncategorized)} uncategorized"
    )
    return cat


def collect_type_names(decls: List[Decl]) -> GroupArena:
    """Pass 1: seed the arena with defined types and method receivers."""
    arena = GroupArena()
    for decl in decls:
        if isinstance(decl, GenDecl) and decl.token == "type":
            for spec in decl.specs:
                if isinstance(spec, TypeSpec):
                    arena.ensure(spec.name)
        elif isinstance(decl, FuncDecl) and decl.is_method:
            arena.ensure(decl.receiver_type)
    return arena


def classify(decls: List[Decl], cat: CategorizedDecls, arena: GroupArena) -> None:
    """Pass 2: file every declaration into its bucket or group."""
    for decl in decls:
        if isinstance(decl, ImportDecl):
            cat.imports.append(decl)
            cat.input_count += 1
        elif isinstance(decl, FuncDecl):
            _classify_func(decl, cat, arena)
        elif isinstance(decl, GenDecl) and decl.specs:
            if decl.token == "type":
                _classify_types(decl, cat, arena)
            else:
                _classify_values(decl, cat)
        else:
            # Empty blocks and shapes the engine does not know stay verbatim
            cat.uncategorized.append(decl)
            cat.input_count += 1


def _classify_func(fn: FuncDecl, cat: CategorizedDecls, arena: GroupArena) -> None:
    cat.input_count += 1

    if fn.is_method:
        group = arena.ensure(fn.receiver_type)
        if is_exported(fn.name):
            group.exported_methods.append(fn)
        else:
            group.unexported_methods.append(fn)
        return

    if fn.name == "main" and cat.main is None:
        cat.main = fn
        return
    if fn.name == "init":
        cat.init.append(fn)
        return

    # Constructor only if the first result is literally a known type (or pointer to it)
    if fn.name.startswith(CONSTRUCTOR_PREFIXES) and fn.result_type and fn.result_type in arena:
        arena.get(fn.result_type).constructors.append(fn)
        return

    if is_exported(fn.name):
        cat.exported_funcs.append(fn)
    else:
        cat.unexported_funcs.append(fn)


def _classify_types(decl: GenDecl, cat: CategorizedDecls, arena: GroupArena) -> None:
    for spec in decl.specs:
        group = arena.ensure(spec.name)
        if group.type_decl is not None:
            logger.warning(f"Type '{spec.name}' is defined more than once; keeping both definitions")
            cat.uncategorized.append(_single_type_decl(decl, spec))
            cat.input_count += 1
            continue

        group.type_decl = _single_type_decl(decl, spec)
        cat.input_count += 1
        if is_exported(spec.name):
            cat.exported_types.append(group)
        else:
            cat.unexported_types.append(group)


def _single_type_decl(decl: GenDecl, spec: TypeSpec) -> GenDecl:
    """
    One declaration per type.

    Ungrouped declarations are kept as they are. Specs of a grouped
    ``type (...)`` block become ``type X ...`` declarations carrying the spec's
    comments; the block's own doc goes to its first spec and its trailing
    comment to the last.
    """
    if not decl.parenthesized and len(decl.specs) == 1:
        return decl

    doc = list(spec.doc)
    after = list(spec.after)
    if spec is decl.specs[0]:
        doc = list(decl.doc) + doc
    if spec is decl.specs[-1]:
        after = after + list(decl.after)
        if decl.comment:
            after.append(decl.comment.strip())
    return GenDecl(
        text=f"type {spec.text}",
        doc=doc,
        comment=spec.comment,
        after=after,
        before=decl.before,
        token="type",
        specs=[spec],
    )


def _classify_values(decl: GenDecl, cat: CategorizedDecls) -> None:
    type_name = enum_type_name(decl)
    if type_name is not None:
        group = EnumGroup(type_name=type_name, const_decl=decl)
        if is_exported(type_name):
            cat.exported_enums.append(group)
        else:
            cat.unexported_enums.append(group)
        cat.input_count += 1
        return

    if decl.token == "const":
        exported_bucket, unexported_bucket = cat.exported_consts, cat.unexported_consts
    else:
        exported_bucket, unexported_bucket = cat.exported_vars, cat.unexported_vars

    for spec in _split_value_specs(decl):
        if is_exported(spec.name):
            exported_bucket.append(spec)
        else:
            unexported_bucket.append(spec)
        cat.input_count += 1


def _split_value_specs(decl: GenDecl) -> List[ValueSpec]:
    """
    Detach the specs of a const/var declaration for merging.

    Comments owned by the declaration itself move onto its specs so nothing is
    lost; synthetic headers from an earlier run are dropped.
    """
    specs = [s for s in decl.specs if isinstance(s, ValueSpec)]
    headers = MERGED_HEADERS[decl.token]
    block_doc = strip_headers(decl.doc, headers)

    first, last = specs[0], specs[-1]
    first.doc = block_doc + first.doc
    if decl.parenthesized:
        if decl.comment:
            last.after = last.after + [decl.comment.strip()]
    else:
        # `const X = 1 // note`: the trailing comment belongs to the only spec
        last.comment += decl.comment
    last.after = last.after + list(decl.after)
    for spec in specs:
        spec.before = Spacing.NEW_LINE
    return specs


def strip_headers(doc: List[str], headers) -> List[str]:
    """Remove synthetic header lines and any blank lines they leave at the top."""
    kept = [line for line in doc if line not in headers]
    while kept and kept[0] == "":
        kept.pop(0)
    return kept


def pair_enums_with_types(cat: CategorizedDecls, arena: GroupArena) -> None:
    """Pass 3: attach type definitions and methods to enum groups."""
    claimed: Set[str] = set()
    for enum_group in cat.exported_enums + cat.unexported_enums:
        if enum_group.type_name in claimed:
            continue
        claimed.add(enum_group.type_name)

        group = arena.get(enum_group.type_name)
        if group is None:
            continue
        enum_group.type_decl = group.type_decl
        enum_group.exported_methods = group.exported_methods
        enum_group.unexported_methods = group.unexported_methods

        # Enum layouts have no constructor slot; such functions stay standalone
        for ctor in group.constructors:
            if is_exported(ctor.name):
                cat.exported_funcs.append(ctor)
            else:
                cat.unexported_funcs.append(ctor)

        cat.exported_types = [g for g in cat.exported_types if g is not group]
        cat.unexported_types = [g for g in cat.unexported_types if g is not group]

    for name in claimed:
        if name in arena.index:
            # Mark as consumed so pass 4 does not emit the same methods again
            arena.groups[arena.index[name]] = TypeGroup(type_name=name)


def promote_typeless_groups(cat: CategorizedDecls, arena: GroupArena) -> None:
    """Pass 4: keep groups whose type is defined in another file."""
    for group in arena.groups:
        if group.type_decl is not None:
            continue
        if not (group.has_methods or group.constructors):
            continue
        if is_exported(group.type_name):
            cat.exported_types.append(group)
        else:
            cat.unexported_types.append(group)
