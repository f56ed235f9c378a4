"""Error Hierarchy — typed, categorized exceptions for every user API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (4xx) serialize with status "fail", server errors (5xx) with "error"
    - to_response() is the only REST envelope for errors
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with UserApiError base: the global handler catches all of it
    - Severity drives log level in the handler: classified errors are expected traffic
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    INTERNAL = "internal"


class UserApiError(Exception):
    """Base exception for all classified user API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    @property
    def status(self) -> str:
        """'fail' for client errors, 'error' for server errors."""
        return "fail" if 400 <= self.http_status < 500 else "error"

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {"status": self.status, "message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(UserApiError):
    """Input failed schema validation or a business rule."""
    def __init__(self, message: str, violations: list[dict] | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.violations = violations or []


class NotFoundError(UserApiError):
    """Requested resource does not exist."""
    def __init__(self, message: str):
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )


class UnauthorizedError(UserApiError):
    """Credentials rejected."""
    def __init__(self, message: str):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, 401,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalServerError(UserApiError):
    """Persistence layer failed (unreachable store, constraint violation, ...)."""
    def __init__(self, message: str, operation: str | None = None):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
