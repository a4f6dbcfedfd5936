"""
Custom exceptions for consistent error reporting.

Storage errors from SQLAlchemy are never wrapped; only the domain conditions
of the parcel store get their own types.
"""

from typing import Any, Dict


class AppException(Exception):
    """Base application exception."""
    
    def __init__(self, message: str, error_code: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ResourceNotFoundError(AppException):
    """Raised when requested resource is not found."""
    
    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(
            message=message,
            error_code="ERR_NOT_FOUND_001",
            details={"resource": resource, "id": resource_id}
        )


class ParcelNotFoundError(ResourceNotFoundError):
    """Raised when no parcel row matches the requested number."""
    
    def __init__(self, number: int):
        self.number = number
        super().__init__(resource="Parcel", resource_id=number)


class StatusNotAllowedError(AppException):
    """
    Raised when a status-gated write touched no rows.
    
    The parcel is either missing or no longer in the status the
    operation requires.
    """
    
    def __init__(self, message: str, number: int, required_status: str):
        super().__init__(
            message=message,
            error_code="ERR_STATUS_001",
            details={"number": number, "required_status": required_status}
        )
