"""
This facade exposes the public API for the categorize module.
"""
from .categorizer import categorize_declarations, enum_type_name, is_exported
from .identify import SECTION_LABELS, identify_section
from .sorter import sort_categorized

__all__ = [
    "categorize_declarations",
    "enum_type_name",
    "is_exported",
    "identify_section",
    "SECTION_LABELS",
    "sort_categorized",
]
