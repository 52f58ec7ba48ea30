"""Custom exceptions for the grievance analysis application"""

from typing import Any, Dict, Optional


class AppError(Exception):
    """
    Base exception for all application errors

    Attributes:
        message: Human-readable error message
        code: Short error code for identification
    """

    code: str = "GENERAL_ERROR"
    message: str = "An application error occurred"

    def __init__(
        self,
        code: Optional[str] = None,
        message: Optional[str] = None,
        **kwargs: Any
    ):
        self.code = code or self.code
        self.message = message or self.message
        self.extra = kwargs
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for response"""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                **self.extra,
            }
        }

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

class InvalidInputError(AppError):
    """Raised when submitted data is invalid (blank description, malformed complaint list, etc.)"""
    code = "INVALID_INPUT"
    message = "The provided input is invalid or malformed"

class AnalysisFailedError(AppError):
    """Raised when a caller refuses to proceed with a degraded analysis"""
    code = "ANALYSIS_FAILED"
    message = "The complaint analysis failed. Please try again later"

class PermissionDeniedError(AppError):
    """Raised when a user role may not perform an action on a grievance"""
    code = "PERMISSION_DENIED"
    message = "You are not authorized to perform this action"

class InvalidStatusTransitionError(AppError):
    """Raised when a grievance status change is not allowed by the workflow"""
    code = "INVALID_STATUS_TRANSITION"
    message = "The requested status change is not allowed"
