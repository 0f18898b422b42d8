"""Custom exceptions for force_ui."""


class ForceUIError(Exception):
    """Base exception for all force_ui exceptions."""


class EnhancementError(ForceUIError):
    """Raised when the optional LLM classification step cannot produce a result."""

    def __init__(self, message: str, last_error: Exception | None = None):
        super().__init__(message)
        self.last_error = last_error
