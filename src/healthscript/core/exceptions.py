"""
Exception handling for HealthScript application.

Infrastructure-level exceptions raised by adapters and core services.
Business rule violations live in ``healthscript.domain.errors``.
"""

from typing import Any, Dict, Optional


class HealthScriptException(Exception):
    """Base exception class for HealthScript application."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class DatabaseError(HealthScriptException):
    """Raised when there's a database operation error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "DATABASE_ERROR", details)


class AuthenticationError(HealthScriptException):
    """Raised when a bearer token is missing, malformed or expired."""

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, "AUTH_ERROR", details)


class AuthorizationError(HealthScriptException):
    """Raised when the authenticated role may not perform an action."""

    def __init__(
        self, message: str = "Access denied", details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, "AUTHORIZATION_ERROR", details)


class ExternalServiceError(HealthScriptException):
    """Raised when there's an external service error."""

    def __init__(
        self, service: str, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        self.service = service
        full_message = f"{service} service error: {message}"
        super().__init__(full_message, "EXTERNAL_SERVICE_ERROR", details)


class OCRError(ExternalServiceError):
    """Raised when the tesseract engine fails or is not installed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("Tesseract", message, details)


class DocumentRenderError(HealthScriptException):
    """Raised when a prescription document cannot be rendered."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, "DOCUMENT_RENDER_ERROR", details)
