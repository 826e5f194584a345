"""Error Hierarchy — typed, categorized exceptions for all Filmoteca failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error carries a message key + params, rendered per locale by to_response()
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with FilmotecaError base: one global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from filmoteca.core.domain_types import Locale, ResourceType
from filmoteca.core.language_strings import render


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
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class FilmotecaError(Exception):
    """Base exception for all Filmoteca errors."""

    def __init__(
        self,
        message_key: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        params: dict[str, Any] | None = None,
    ):
        self.message_key = message_key
        self.params = params or {}
        super().__init__(self.render())
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def message(self) -> str:
        """English rendering, used in logs."""
        return self.render()

    def render(self, locale: str | Locale | None = Locale.EN) -> str:
        return render(locale, self.message_key, **self.params)

    def to_response(self, locale: str | Locale | None = Locale.EN) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.render(locale),
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class RequiredFieldError(FilmotecaError):
    """A required body field is missing or blank."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        super().__init__(
            "required_field", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, {"field": field_name},
        )
        self.field = field_name


class ResourceNotFoundError(FilmotecaError):
    """Requested resource does not exist."""
    def __init__(
        self,
        resource_type: ResourceType,
        resource_id: int | str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type.value
        ctx.resource_id = str(resource_id)
        super().__init__(
            "resource_not_found", "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, ctx, 404,
            {"resource": resource_type, "resource_id": resource_id},
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateResourceError(FilmotecaError):
    """A unique (case-insensitive) field already holds this value."""
    def __init__(
        self,
        resource_type: ResourceType,
        field_name: str,
        value: str,
        http_status: int = 409,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type.value
        super().__init__(
            "duplicate_resource", "DUPLICATE_RESOURCE", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, http_status,
            {"resource": resource_type, "field": field_name, "value": value},
        )
        self.resource_type = resource_type
        self.field = field_name
        self.value = value


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(FilmotecaError):
    """Database operation failed. User-facing message stays generic."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "internal_error", "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
