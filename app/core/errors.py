"""Error Hierarchy — typed, categorized exceptions for every Customer API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error knows its HTTP status; the boundary layer never guesses
    - to_response() produces the REST envelope (ApiError: status + message)
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CustomerApiError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: carries the missing entity/id without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: Any = None


class CustomerApiError(Exception):
    """Base exception for all Customer API errors."""

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
                "status": self.http_status,
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity": self.context.entity,
                    "entity_id": self.context.entity_id,
                },
            }
        }

    def __str__(self) -> str:
        return f"{self.code} ({self.http_status}): {self.message}"


# ─── Domain Errors (400-level) ──────────────────────────────────

class CustomerValidationError(CustomerApiError):
    """Submitted customer failed one or more field rules."""
    def __init__(self, violations: list[str], context: ErrorContext | None = None):
        super().__init__(
            ",".join(violations),
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 422,
        )
        self.violations = violations


class DuplicateCustomerError(CustomerApiError):
    """A customer with the same identity already exists."""
    def __init__(self, first_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"A Customer with name {first_name} already exists",
            "DUPLICATE_CUSTOMER", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.first_name = first_name


class EntityNotFoundError(CustomerApiError):
    """Requested entity does not exist."""
    def __init__(self, entity: str, entity_id: Any, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.entity = entity
        ctx.entity_id = entity_id
        super().__init__(
            f"{entity} was not found for parameters {{id={entity_id}}}",
            "ENTITY_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.entity = entity
        self.entity_id = entity_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CustomerApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
