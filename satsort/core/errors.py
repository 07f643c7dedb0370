class SatSortError(Exception):
    """Base exception for all satsort related errors."""
    pass

class ConfigError(SatSortError):
    """Raised when the configuration file or environment is invalid."""
    pass

class MalformedInputError(SatSortError):
    """Raised when the input stream is not a sequence of terminated lines."""
    pass

class ResourceLimitError(SatSortError):
    """Raised when the input or the encoding exceeds a hard ceiling."""
    pass

class EncodingInvariantError(SatSortError):
    """Raised when the solver or the decoded result contradicts the encoding."""
    pass
