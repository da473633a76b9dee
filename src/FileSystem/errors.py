"""
Exceptions raised by the file service layer.

Per-call filesystem failures are reported as return values by the adapters;
these exceptions cover adapter setup and misuse of the facade.
"""


class FileServiceError(Exception):
    """Base exception for file service errors."""
    pass


class FileServiceSetupError(FileServiceError):
    """The configured adapter could not be created."""
    pass


class AdapterNotFoundError(FileServiceSetupError):
    """No adapter is registered or importable under the configured name."""
    pass


class AdapterConfigurationError(FileServiceSetupError):
    """The adapter options do not match what the adapter accepts."""
    pass


class FileServiceNotInitialisedError(FileServiceError):
    """An operation was called on a facade without a resolved adapter."""
    pass
