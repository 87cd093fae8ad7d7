"""
go-reorder - Deterministic declaration ordering for Go source files

Groups types with their constructors and methods, enums with their values,
and arranges top-level sections in a configurable order.
"""

__version__ = "0.1.0"

# Core exports
from goreorder.config import ReorderConfig, default_config, find_config, load_config
from goreorder.exceptions import (
    ConfigValidationError,
    ConservationError,
    GoReorderError,
    ParserError,
    UnmatchedSectionError,
)
from goreorder.reorder import analyze_section_order, reorder_file, reorder_source, reorder_source_detailed
from goreorder.schemas import ReorderResult, SectionOrder

__all__ = [
    "__version__",
    "reorder_source",
    "reorder_source_detailed",
    "reorder_file",
    "analyze_section_order",
    "ReorderConfig",
    "default_config",
    "load_config",
    "find_config",
    "ReorderResult",
    "SectionOrder",
    "GoReorderError",
    "ParserError",
    "ConfigValidationError",
    "UnmatchedSectionError",
    "ConservationError",
]
