class CalgridError(Exception):
    """Base error."""

class ConfigurationError(CalgridError, ValueError):
    """Raised when a calendar configuration cannot produce a month sequence."""

class MetadataGenerationError(ConfigurationError):
    """Raised when a calendar system cannot size or bound a month."""

class UnknownCalendarError(CalgridError, KeyError):
    """Raised when a calendar system name is not registered."""
