"""Error Hierarchy — typed, categorized exceptions for all WASAPhoto failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are deterministic given Store state; never retried
    - Infrastructure errors (500-level) are surfaced as a generic message
    - to_response() produces the {"message": ...} envelope the clients expect

Design Decisions:
    - Single hierarchy with WasaPhotoError base: FastAPI global handler catches all (ADR: uniform error shape)
    - MalformedCredentialError subclasses UnauthenticatedError: callers that only care
      about "no valid caller" catch the parent
    - RelationshipStateError keeps already_present as data so add/remove conflicts
      share one kind; the status code stays per call site (ADR: follow/ban removal
      of an absent relation answers 403, like/unlike answers 409)
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
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: int | None = None
    photo_id: int | None = None
    debug_info: dict[str, Any] | None = None


class WasaPhotoError(Exception):
    """Base exception for all WASAPhoto errors."""

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
        return {"message": self.message}

    def to_log_extra(self) -> dict:
        """Structured fields for the JSON log formatter."""
        return {
            "error_code": self.code,
            "user_id": self.context.user_id,
            "photo_id": self.context.photo_id,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class UnauthenticatedError(WasaPhotoError):
    """Caller credential is missing, unparsable or unknown."""
    def __init__(
        self,
        message: str = "Not Active Token",
        code: str = "UNAUTHENTICATED",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class MalformedCredentialError(UnauthenticatedError):
    """Authorization header absent or not of the form 'Bearer <integer>'."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"No Token in the Header: {reason}",
            "MALFORMED_CREDENTIAL", context,
        )
        self.reason = reason


class ForbiddenError(WasaPhotoError):
    """Caller is not allowed to perform the action."""
    def __init__(
        self, message: str = "Forbidden Action", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class ResourceNotFoundError(WasaPhotoError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(WasaPhotoError):
    """Resource already present (duplicate insert or uniqueness violation)."""
    def __init__(
        self,
        message: str = "This resource is already in the database",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class RelationshipStateError(WasaPhotoError):
    """Relation already in the requested state: present on add, absent on remove."""
    def __init__(
        self,
        relation: str,
        already_present: bool,
        http_status: int = 409,
        context: ErrorContext | None = None,
    ):
        if already_present:
            message = f"{relation} already exists"
            code = "RELATION_ALREADY_PRESENT"
        else:
            message = f"{relation} does not exist"
            code = "RELATION_ABSENT"
        super().__init__(
            message, code, ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, http_status,
        )
        self.relation = relation
        self.already_present = already_present


class BadRequestError(WasaPhotoError):
    """Request input failed validation."""
    def __init__(
        self, message: str, field: str | None = None, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Bad Request: {message}", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(WasaPhotoError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "Internal Server Error",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
        self.detail = f"Database {operation} failed: {message}"
