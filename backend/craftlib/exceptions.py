"""
Craft Library exceptions

Application errors carry an error code, a message, optional details and the
HTTP status the API answers with. Constraint violations are not wrapped:
they surface as sqlalchemy.exc.IntegrityError straight from the store.
"""
from typing import Any, Dict, Optional


class CraftLibraryException(Exception):
    """Base class for all Craft Library errors."""

    error_code = "CRAFT_LIBRARY_ERROR"
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class NotFoundError(CraftLibraryException):
    """Raised when a row requested by id does not exist"""

    error_code = "NOT_FOUND"
    status_code = 404

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class ValidationError(CraftLibraryException):
    """Raised when a request is well-formed but cannot be applied"""

    error_code = "VALIDATION_ERROR"
    status_code = 400
