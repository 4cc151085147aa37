"""
Exceptions raised while analyzing phrases.

All exceptions inherit from GomamayoError so callers can catch library errors in one place.
"""

from typing import Any, Dict, Optional


class GomamayoError(Exception):
    """Base exception for all gomamayo errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class TokenizationError(GomamayoError):
    """Raised when the input cannot be split into tokens."""

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        ctx = context or {}
        if text is not None:
            ctx["text"] = text
        super().__init__(message, ctx)
        self.text = text


class UnknownReadingError(GomamayoError):
    """Raised when a token has no pronunciation and no kana reading."""

    def __init__(self, text: str) -> None:
        super().__init__(f"No reading found for token: {text}", {"text": text})
        self.text = text


class InputError(GomamayoError):
    """Raised when the input phrase itself cannot be obtained."""

    def __init__(self, message: str = "No input was given.", source: Optional[str] = None) -> None:
        super().__init__(message, {"source": source} if source else None)
        self.source = source
