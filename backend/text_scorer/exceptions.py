"""
Errors raised by the scoring engine.

Only two conditions ever leave the pipeline: text that cannot be scored at
all, and a compression facility that is not working. Everything else
resolves to a clamped numeric default.
"""


class TextScorerError(Exception):
    """Base class for scoring engine errors."""

    retryable = False


class InvalidInputError(TextScorerError, ValueError):
    """Raised when the text is empty or whitespace-only."""


class CompressionUnavailableError(TextScorerError):
    """Raised when gzip compression fails in the running environment.

    The caller may retry the request; the engine never retries internally.
    """

    retryable = True
