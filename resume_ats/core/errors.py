from __future__ import annotations


class AIScoringError(RuntimeError):
    """Raised by the AI scoring path; the scoring facade recovers by falling back."""

    def __init__(self, message: str, *, code: str = "ai_failed"):
        super().__init__(message)
        self.code = code


class ConfigurationError(AIScoringError):
    def __init__(self, message: str):
        super().__init__(message, code="ai_unconfigured")


class TransportError(AIScoringError):
    def __init__(self, message: str):
        super().__init__(message, code="ai_transport")


class ResponseFormatError(AIScoringError):
    def __init__(self, message: str):
        super().__init__(message, code="ai_response_format")


class ResponseValidationError(AIScoringError):
    def __init__(self, message: str):
        super().__init__(message, code="ai_response_invalid")


class AICancelledError(AIScoringError):
    def __init__(self, message: str = "AI scoring was cancelled by the caller."):
        super().__init__(message, code="ai_cancelled")


class InputError(ValueError):
    """Malformed resume input. Never swallowed by the scoring facade."""
