"""Deterministic ordering of categorized declarations."""

from goreorder.schemas import CategorizedDecls


def _by_name(item) -> str:
    return item.name


def _by_type_name(group) -> str:
    return group.type_name


def sort_categorized(cat: CategorizedDecls) -> CategorizedDecls:
    """
    Sorts every bucket and group by name, in place.

    Ordering is case-sensitive code point order, so "Zeta" sorts before
    "alpha". Imports, init functions and uncategorized declarations keep
    their source order.
    """
    for bucket in (cat.exported_consts, cat.unexported_consts, cat.exported_vars, cat.unexported_vars):
        bucket.sort(key=_by_name)

    for enums in (cat.exported_enums, cat.unexported_enums):
        enums.sort(key=_by_type_name)
        for group in enums:
            group.exported_methods.sort(key=_by_name)
            group.unexported_methods.sort(key=_by_name)

    for types in (cat.exported_types, cat.unexported_types):
        types.sort(key=_by_type_name)
        for group in types:
            group.constructors.sort(key=_by_name)
            group.exported_methods.sort(key=_by_name)
            group.unexported_methods.sort(key=_by_name)

    cat.exported_funcs.sort(key=_by_name)
    cat.unexported_funcs.sort(key=_by_name)
    return cat
