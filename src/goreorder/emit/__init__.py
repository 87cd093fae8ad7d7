"""
This facade exposes the public API for the emit module.
"""
from .emitter import (
    SECTION_EMITTERS,
    emit_enum_group,
    emit_section,
    emit_type_group,
    emit_value_block,
    enum_group_parts,
    type_group_parts,
)
from .merge import merge_value_specs

__all__ = [
    "SECTION_EMITTERS",
    "emit_enum_group",
    "emit_section",
    "emit_type_group",
    "emit_value_block",
    "enum_group_parts",
    "merge_value_specs",
    "type_group_parts",
]
