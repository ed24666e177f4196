"""Error Hierarchy — typed, categorized exceptions for all SecureBoard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors (400-level) are recoverable and never reach the store
    - Infrastructure errors (500-level) carry no driver or network detail in message
    - to_response() produces the REST envelope used by every error handler

Design Decisions:
    - Single hierarchy with SecureBoardError base: one FastAPI handler catches all
    - Client-facing messages are fixed strings ("Invalid ID", "Comment cannot be empty")
      so the frontend can display them as-is
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs, never for end users."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field_name: str | None = None
    debug_info: dict[str, Any] | None = None


class SecureBoardError(Exception):
    """Base exception for all SecureBoard errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Validation Errors (400-level) ──────────────────────────────

class InvalidIdentifierError(SecureBoardError):
    """Submitted user id is absent or not a clean positive integer."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid ID", "INVALID_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class EmptyContentError(SecureBoardError):
    """Submitted comment is absent, not text, or zero-length."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Comment cannot be empty", "EMPTY_CONTENT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(SecureBoardError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class ExternalServiceError(SecureBoardError):
    """Random user service call failed after all retries."""
    def __init__(self, service: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"External service '{service}' unavailable ({reason})",
            "EXTERNAL_SERVICE_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.service = service
        self.reason = reason
