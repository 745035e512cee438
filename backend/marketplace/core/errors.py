"""Error Hierarchy — typed, categorized exceptions for all marketplace failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are scoped to the request; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope consumed by api/error_handlers.py
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with MarketplaceError base: one global handler catches all
    - ErrorContext as dataclass: entity/entity_id for observability without coupling to logging
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: int | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class MarketplaceError(Exception):
    """Base exception for all marketplace errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity": self.context.entity,
                    "entity_id": self.context.entity_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InputValidationError(MarketplaceError):
    """Malformed or out-of-range input caught before reaching the store."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ResourceNotFoundError(MarketplaceError):
    """Referenced entity does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or resource_type
        ctx.entity_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class RoleMismatchError(MarketplaceError):
    """Actor lacks the role the operation requires."""
    def __init__(
        self, user_id: int, required_role: str, actual_role: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or "User"
        ctx.entity_id = user_id
        super().__init__(
            f"User '{user_id}' has role '{actual_role}', operation requires '{required_role}'",
            "ROLE_MISMATCH", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 403,
        )
        self.required_role = required_role
        self.actual_role = actual_role


class UniquenessViolationError(MarketplaceError):
    """A unique column (e.g. users.email) already holds this value."""
    def __init__(self, field: str, value: str, context: ErrorContext | None = None):
        super().__init__(
            f"A record with {field} '{value}' already exists",
            "UNIQUENESS_VIOLATION", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.field = field


class InvalidTransitionError(MarketplaceError):
    """Status change not permitted by the workflow graph."""
    def __init__(
        self, kind: str, current: str, target: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Cannot move {kind} from '{current}' to '{target}'",
            "INVALID_TRANSITION", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.current = current
        self.target = target


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(MarketplaceError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
