"""Custom exceptions for szero."""


class SzeroError(Exception):
    """Base exception for all szero errors."""


class SourceReadError(SzeroError, OSError):
    """Raised when a source file or directory is missing or unreadable."""


class ManifestParseError(SzeroError):
    """Raised when a package manifest is not well-formed structured data."""


class ReportError(SzeroError):
    """Raised when report inputs are structurally malformed."""
