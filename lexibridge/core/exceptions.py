"""
Exception taxonomy for the dictionary translation service.

Pipeline stages raise these and the engine catches them at stage boundaries;
only the HTTP layer turns them into error responses.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Dictionary errors
    DATA_UNAVAILABLE = "DATA_UNAVAILABLE"
    NO_TRANSLATION_FOUND = "NO_TRANSLATION_FOUND"

    # Fallback errors
    FALLBACK_FAILED = "FALLBACK_FAILED"

    # Language errors
    UNSUPPORTED_LANGUAGE = "UNSUPPORTED_LANGUAGE"

    # Configuration errors
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"

    # Generic errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class LexiBridgeException(Exception):
    """Base exception for the translation service."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class DataUnavailableError(LexiBridgeException):
    """Raised when a dictionary table cannot be fetched from the store."""

    def __init__(self, table: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Dictionary table '{table}' is unavailable",
            error_code=ErrorCode.DATA_UNAVAILABLE,
            details={"table": table, **(details or {})},
            status_code=503
        )


class NoTranslationFoundError(LexiBridgeException):
    """Raised when a word or phrase has no entry for the target language."""

    def __init__(self, text: str, target_language: str):
        super().__init__(
            message=f"No translation found for '{text}' in {target_language}",
            error_code=ErrorCode.NO_TRANSLATION_FOUND,
            details={"text": text, "target_language": target_language},
            status_code=404
        )


class FallbackFailureError(LexiBridgeException):
    """Raised when the remote fallback call fails or returns nothing usable."""

    def __init__(self, message: str = "Fallback translation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.FALLBACK_FAILED,
            details=details,
            status_code=502
        )


class UnsupportedLanguageError(LexiBridgeException):
    """Raised when a language has no transliteration table or registry entry."""

    def __init__(self, language: str, operation: str = "translation"):
        super().__init__(
            message=f"Language '{language}' is not supported for {operation}",
            error_code=ErrorCode.UNSUPPORTED_LANGUAGE,
            details={"language": language, "operation": operation},
            status_code=400
        )


class InvalidConfigurationError(LexiBridgeException):
    """Raised when settings fail validation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_CONFIGURATION,
            details=details,
            status_code=500
        )
