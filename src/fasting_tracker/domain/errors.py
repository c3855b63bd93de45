"""Errors raised by the fasting tracker."""


class FastingTrackerError(Exception):
    """Base class for fasting tracker errors."""


class InvalidSettingsError(FastingTrackerError, ValueError):
    """Raised when a settings value is outside the accepted range."""


class StorageReadError(FastingTrackerError):
    """Raised when a persisted value cannot be read."""


class ParseError(StorageReadError):
    """Raised when a persisted value has an unexpected shape."""


class StorageWriteError(FastingTrackerError):
    """Raised when a value cannot be written to or deleted from storage."""


class ContextMisuseError(FastingTrackerError, RuntimeError):
    """Raised when the tracker is used before it has been set up."""
