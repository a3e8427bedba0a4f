"""
Error hierarchy for service-level failures.

Validation and conflict failures are raised as distinct exception types so
the API layer can map each to its own status code. Missing entities are not
errors: services return None/False for them.
"""

from typing import Any, Dict, Optional


class CleanTasksError(Exception):
    """Base exception for all service-level errors."""

    code = "INTERNAL_ERROR"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> Dict[str, Any]:
        """Convert to the standard API envelope."""
        return {"error_code": 1, "message": self.message, "data": {"code": self.code}}


class ValidationError(CleanTasksError, ValueError):
    """Input failed a validation rule. Always fixable by the caller."""

    code = "VALIDATION_ERROR"
    http_status = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def to_response(self) -> Dict[str, Any]:
        response = super().to_response()
        response["data"]["field"] = self.field
        return response


class ConflictError(CleanTasksError):
    """A uniqueness invariant would be violated."""

    code = "CONFLICT"
    http_status = 409
