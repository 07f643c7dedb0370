"""
satsort: sorting lines by solving a SAT encoding of the sorted permutation.
"""
from satsort.config import SortConfig
from satsort.core.errors import (
    SatSortError, ConfigError, MalformedInputError, ResourceLimitError, EncodingInvariantError
)
from satsort.sorter import sort_lines, write_dimacs, encode_lines

__all__ = [
    "SortConfig",
    "SatSortError", "ConfigError", "MalformedInputError", "ResourceLimitError", "EncodingInvariantError",
    "sort_lines", "write_dimacs", "encode_lines"
]
