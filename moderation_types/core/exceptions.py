"""
Custom exceptions for the moderation result model.

The value object itself never raises; these exceptions cover the
deserialization boundary where upstream payloads are turned into results.
"""

from typing import Optional, Dict, Any


class ModerationModelException(Exception):
    """Base exception for all moderation model related errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "MODERATION_MODEL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class MalformedPayloadException(ModerationModelException):
    """Exception raised when an upstream payload cannot be deserialized."""

    def __init__(
        self,
        message: str,
        source: str = "unknown",
        errors: Optional[list] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code="MALFORMED_PAYLOAD",
            details={**(details or {}), "source": source, "errors": errors or []}
        )
