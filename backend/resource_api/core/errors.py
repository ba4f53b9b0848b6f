"""Error Hierarchy: typed, categorized exceptions for all Resource API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors map to 400/404; store and internal failures map to 500
    - to_response() always produces the flat envelope {"error": <message>}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ResourceApiError base: one global handler renders all of them
    - Not-found carries the fixed message "Not found" so clients can match on the body
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONSTRAINT = "constraint"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging, never sent to clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_id: int | None = None


class ResourceApiError(Exception):
    """Base exception for all Resource API errors."""

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
        """Convert to the REST error envelope."""
        return {"error": self.message}

    def log_extra(self) -> dict:
        """Structured fields for the logging `extra` argument."""
        return {
            "error_code": self.code,
            "resource_id": self.context.resource_id,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ConstraintViolationError(ResourceApiError):
    """The store rejected a write because of a schema constraint."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONSTRAINT_VIOLATION", ErrorCategory.CONSTRAINT,
            ErrorSeverity.WARNING, context, 400,
        )


class ResourceNotFoundError(ResourceApiError):
    """Requested resource does not exist."""
    def __init__(self, resource_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            "Not found", "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ResourceApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
