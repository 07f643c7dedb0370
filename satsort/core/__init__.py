from satsort.core.errors import (
    SatSortError, ConfigError, MalformedInputError, ResourceLimitError, EncodingInvariantError
)
from satsort.core.logging import get_logger

__all__ = [
    "SatSortError", "ConfigError", "MalformedInputError", "ResourceLimitError",
    "EncodingInvariantError", "get_logger"
]
