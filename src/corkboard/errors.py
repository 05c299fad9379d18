"""Exception types."""


class CorkboardError(Exception):
    """Base class for corkboard errors."""


class StoreError(CorkboardError):
    """A persistence primitive failed."""


class ConfigError(CorkboardError):
    """A configuration value is invalid."""
