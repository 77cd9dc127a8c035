"""Custom exceptions for service layer operations."""


class SourceReadError(Exception):
    """Raised when reading or fetching the SRT source fails."""


class OutputWriteError(Exception):
    """Raised when writing the generated EDL fails."""
