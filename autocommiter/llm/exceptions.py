"""LLM-related exception classes.

- LLMError: Base exception for inference failures
- MissingAPIKeyError: Raised when no API key is configured
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass
