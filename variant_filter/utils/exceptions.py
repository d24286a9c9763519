class VariantFilterError(Exception):
    """Base exception for all variant filter related errors."""

    pass


class ConfigurationError(VariantFilterError):
    """Raised when there is an issue with configuration settings."""

    pass


class InvalidRunParameterError(ConfigurationError):
    """Raised when a run-parameter token is not recognised."""

    pass


class UnsupportedTypeError(VariantFilterError):
    """Raised when an unsupported type is requested from a factory."""

    pass


class FilterException(VariantFilterError):
    """Raised when a filter is misconfigured or cannot be dispatched.

    Missing annotation data is never reported this way: a filter that cannot
    make a decision fails the record instead.
    """

    pass


class ProcessingError(VariantFilterError):
    """Raised when there is an issue running a filter chain."""

    pass


class RunCancelledError(ProcessingError):
    """Raised when a filter run is stopped before all batches completed."""

    def __init__(self, message: str, completed: int = 0):
        super().__init__(message)
        self.completed = completed


class SerializationError(VariantFilterError):
    """Raised when there is an issue with record serialization."""

    pass
