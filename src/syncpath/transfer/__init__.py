"""Chunked transfer planning."""

from .ranges import (
    SplitRange,
    count_parts,
    get_split_ranges,
    plan_transfer,
    iter_file_parts
)

__all__ = [
    "SplitRange",
    "count_parts",
    "get_split_ranges",
    "plan_transfer",
    "iter_file_parts"
]
