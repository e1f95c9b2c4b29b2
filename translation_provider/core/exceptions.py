"""
Custom exceptions for the translation provider.
Provides a small error hierarchy with structured context.

Version: 1.0
"""

from typing import Optional, Dict, Any
import logging

import requests

__all__ = [
    # Base
    'TranslationProviderError',
    # Remote operations
    'ProviderError',
    # Configuration
    'ConfigurationError', 'InvalidDsnError',
    # Utilities
    'response_summary',
]


logger = logging.getLogger(__name__)

# Bodies longer than this are truncated in str() output
_BODY_PREVIEW_CHARS = 500


# ============================================================================
# BASE EXCEPTION
# ============================================================================

class TranslationProviderError(Exception):
    """
    Base exception for all translation provider errors.

    All custom exceptions inherit from this class for unified error handling.
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize exception with message and optional context.

        Args:
            message: Error message
            **context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context."""
        if not self.context:
            return self.message

        context_str = ', '.join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({context_str})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'context': self.context
        }


# ============================================================================
# REMOTE OPERATION EXCEPTIONS
# ============================================================================

class ProviderError(TranslationProviderError):
    """
    Raised when a remote provider operation failed.

    Carries the offending HTTP response so callers can inspect the status
    code and body before deciding whether to retry or abort.
    """

    def __init__(
        self,
        message: str,
        response: Optional[requests.Response] = None,
        **context: Any
    ) -> None:
        status_code = response.status_code if response is not None else None
        super().__init__(message, status_code=status_code, **context)
        self.response = response
        self.status_code = status_code

    @property
    def body(self) -> str:
        """Raw response body, empty when no response is attached."""
        if self.response is None:
            return ""
        return self.response.text or ""

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data['body'] = self.body[:_BODY_PREVIEW_CHARS]
        return data


# ============================================================================
# CONFIGURATION EXCEPTIONS
# ============================================================================

class ConfigurationError(TranslationProviderError):
    """Raised when provider configuration is missing or invalid."""

    def __init__(self, message: str, field: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, field=field, **context)
        self.field = field


class InvalidDsnError(ConfigurationError):
    """Raised when a provider DSN cannot be parsed."""

    def __init__(self, message: str, dsn: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, field='dsn', **context)
        self.dsn = dsn


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def response_summary(response: requests.Response) -> str:
    """
    Render a response as "<status>: <body>" for debug logging.

    Args:
        response: HTTP response

    Returns:
        Single line summary
    """
    return f"{response.status_code}: {response.text}"
