"""Error Hierarchy: typed, categorized exceptions for every Blog API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; data-access errors (500-level) are critical
    - to_response() produces the envelope {"error": str, "success": False}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BlogError base: one global handler catches all
    - MethodNotAllowedError overrides to_response(): the 405 body uses "message", not "error"
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    METHOD = "method"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATA_ACCESS = "data_access"
    DATABASE = "database"
    INTERNAL = "internal"


class BlogError(Exception):
    """Base exception for all Blog API errors."""

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

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message, "success": False}


# ─── Client Errors (400-level) ──────────────────────────────────

class MethodNotAllowedError(BlogError):
    """HTTP method outside the route's allow-list."""
    def __init__(self, method: str | None = None):
        super().__init__(
            "Method not allowed", "METHOD_NOT_ALLOWED", ErrorCategory.METHOD,
            ErrorSeverity.WARNING, 405,
        )
        self.method = method

    def to_response(self) -> dict:
        return {"message": self.message, "success": False}


class MissingParameterError(BlogError):
    """Required input absent from the request."""
    def __init__(self, field: str):
        super().__init__(
            f"{field} parameter missing", "MISSING_PARAMETER",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 400,
        )
        self.field = field


class InvalidParameterError(BlogError):
    """Input present but could not be coerced to the expected type."""
    def __init__(self, field: str):
        super().__init__(
            f"Invalid {field} parameter", "INVALID_PARAMETER",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, 400,
        )
        self.field = field


class ResourceNotFoundError(BlogError):
    """Lookup succeeded but matched no record."""
    def __init__(self, message: str, entity: str | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.entity = entity


# ─── Data-Access Errors (500-level) ─────────────────────────────

class DataAccessFailure(BlogError):
    """A route's data-access call failed; message names the verb and entity only."""
    def __init__(self, verb: str, entity: str):
        super().__init__(
            f"Error {verb} the {entity}", "DATA_ACCESS_FAILURE",
            ErrorCategory.DATA_ACCESS, ErrorSeverity.CRITICAL, 500,
        )
        self.verb = verb
        self.entity = entity


class DatabaseError(BlogError):
    """Database operation failed (raised by the data-access layer)."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
