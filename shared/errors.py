"""
Errors raised by the semantic splitter.

Recoverable edge cases (blank documents, single sentences, oversized
sentences) are not errors and never raise.
"""


class SplitterError(Exception):
    """Base class for splitter errors."""

    pass


class InvalidConfiguration(SplitterError, ValueError):
    """Raised at construction when a splitter setting is out of range."""

    pass


class DimensionMismatch(SplitterError, ValueError):
    """Raised when two compared vectors have different lengths."""

    pass


class ProviderFailure(SplitterError, RuntimeError):
    """Raised when the embedding provider returns a malformed response."""

    pass
