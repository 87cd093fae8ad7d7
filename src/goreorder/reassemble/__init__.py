"""
This facade exposes the public API for the reassemble module.
"""
from .reassembler import (
    ReassemblyResult,
    collect_uncategorized,
    count_output,
    find_unmatched,
    reassemble,
)

__all__ = [
    "ReassemblyResult",
    "collect_uncategorized",
    "count_output",
    "find_unmatched",
    "reassemble",
]
