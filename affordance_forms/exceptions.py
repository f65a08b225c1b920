"""Custom exceptions for Affordance Forms with HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    AFFORDANCE_FORM_ERROR = "AFFORDANCE_FORM_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Template errors
    TEMPLATE_LOAD_ERROR = "TEMPLATE_LOAD_ERROR"

    # Write path errors
    FORM_WRITE_ERROR = "FORM_WRITE_ERROR"
    LINK_NOT_FOUND = "LINK_NOT_FOUND"
    AFFORDANCE_NOT_FOUND = "AFFORDANCE_NOT_FOUND"
    AFFORDANCE_MODEL_NOT_FOUND = "AFFORDANCE_MODEL_NOT_FOUND"

    # Read path
    UNSUPPORTED_OPERATION = "UNSUPPORTED_OPERATION"


class AffordanceFormException(Exception):
    """Base exception for affordance form errors with HTTP status code support.

    All custom exceptions inherit from this class so the web layer can
    translate them into one consistent error body.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.AFFORDANCE_FORM_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize affordance form exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class TemplateLoadException(AffordanceFormException):
    """Form template could not be located, read or compiled."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.TEMPLATE_LOAD_ERROR,
            status_code=500,
            details=details,
        )


class FormWriteException(AffordanceFormException):
    """Rendering a resource as an HTML form failed."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.FORM_WRITE_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class LinkNotFoundException(FormWriteException):
    """Resource has no link with the required relation."""

    def __init__(self, rel: str, details: dict[str, Any] | None = None):
        self.rel = rel
        super().__init__(
            f"No link with rel '{rel}' found",
            code=ErrorCode.LINK_NOT_FOUND,
            status_code=404,
            details={"rel": rel, **(details or {})},
        )


class AffordanceNotFoundException(FormWriteException):
    """Link carries no affordance to render."""

    def __init__(self, rel: str, details: dict[str, Any] | None = None):
        self.rel = rel
        super().__init__(
            f"Link with rel '{rel}' has no affordances",
            code=ErrorCode.AFFORDANCE_NOT_FOUND,
            status_code=404,
            details={"rel": rel, **(details or {})},
        )


class AffordanceModelNotFoundException(FormWriteException):
    """Affordance has no model for the requested media type."""

    def __init__(self, affordance: str, media_type: str, details: dict[str, Any] | None = None):
        self.affordance = affordance
        self.media_type = media_type
        super().__init__(
            f"Affordance '{affordance}' has no model for media type '{media_type}'",
            code=ErrorCode.AFFORDANCE_MODEL_NOT_FOUND,
            status_code=404,
            details={"affordance": affordance, "media_type": media_type, **(details or {})},
        )


class UnsupportedOperationException(AffordanceFormException, NotImplementedError):
    """Operation is never supported, e.g. reading HTML back into a resource."""

    def __init__(self, message: str = "Reading HTML into a resource is not supported"):
        super().__init__(
            message,
            code=ErrorCode.UNSUPPORTED_OPERATION,
            status_code=415,
        )
