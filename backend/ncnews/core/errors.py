"""Error Hierarchy - typed, categorized exceptions for every NC News failure mode.

Invariants:
    - Every HTTP-facing error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) are recoverable; infrastructure errors (500-level) are critical
    - to_response() always carries a short "msg"; no backend error text ever reaches it
    - Every client error body, domain or framework, is built by error_body()
    - StoreRejection is internal to the query/translation boundary and never reaches a client

Design Decisions:
    - Single hierarchy with NcNewsError base: one FastAPI handler catches all of it
    - BadRequestError carries an ErrorReason so "unknown field" and "unknown user" stay
      distinct even though both are 400
"""

from dataclasses import dataclass
from enum import Enum

from ncnews.core.domain_types import ErrorReason, StoreFailure


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
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs, never for clients."""
    resource_id: str | None = None
    field_name: str | None = None


def error_body(
    message: str, code: str, category: ErrorCategory, severity: ErrorSeverity,
) -> dict:
    """The one {"msg", "error"} envelope every error response uses."""
    return {
        "msg": message,
        "error": {
            "code": code,
            "category": category.value,
            "severity": severity.value,
        },
    }


class NcNewsError(Exception):
    """Base exception for all client-visible NC News errors."""

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
        """Convert to the standard REST error body."""
        return error_body(self.message, self.code, self.category, self.severity)


# ─── Client Errors (400-level) ──────────────────────────────────

class BadRequestError(NcNewsError):
    """Malformed or semantically invalid input."""
    def __init__(self, reason: ErrorReason, context: ErrorContext | None = None):
        super().__init__(
            reason.value, "BAD_REQUEST", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.reason = reason


class ResourceNotFoundError(NcNewsError):
    """A well-formed identifier with no matching row."""
    def __init__(
        self, resource_type: str, resource_id: int | str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreFaultError(NcNewsError):
    """Store failure that matches no known client-error shape."""
    def __init__(self, failure: StoreFailure, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "STORE_FAULT", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.failure = failure


class DatabaseError(NcNewsError):
    """Database connection or session lifecycle failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


# ─── Query Layer Signal (not HTTP-facing) ───────────────────────

class StoreRejection(Exception):
    """Raised by the query layer when the backend rejects a statement."""

    def __init__(self, failure: StoreFailure, operation: str):
        super().__init__(f"{operation} rejected by store: {failure.value}")
        self.failure = failure
        self.operation = operation
