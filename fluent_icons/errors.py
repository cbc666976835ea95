"""Exception types raised by the icon generator."""


class FluentIconsError(RuntimeError):
    """Base class for fatal generation errors."""


class RetrievalError(FluentIconsError):
    """Raised when the icon repository cannot be checked out at the requested version."""


class TraversalError(FluentIconsError):
    """Raised when the asset tree cannot be read."""


class ConfigError(FluentIconsError):
    """Raised when the configuration file cannot be parsed."""
