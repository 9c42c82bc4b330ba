# ==============================================================================
# CUSTOM EXCEPTIONS - Application Error Hierarchy
# ==============================================================================
# Structured exception classes for consistent error handling
# Each exception maps to the HTTP status code of the response envelope
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Base exception for all application errors.

    Provides a consistent interface for error handling with:
    - Error code for programmatic identification
    - HTTP status code mapping
    - Human-readable message and optional context

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error identifier
        status_code: HTTP status code to return
        details: Additional context dictionary

    Example:
        >>> raise AppException(
        ...     message="Something went wrong",
        ...     error_code="INTERNAL_ERROR",
        ...     status_code=500
        ... )
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        error_code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self, include_details: bool = False) -> Dict[str, Any]:
        """
        Convert exception to the error envelope.

        Args:
            include_details: Attach the ``details`` context (non-production only)

        Returns:
            Dictionary ready for a JSON response
        """
        payload: Dict[str, Any] = {
            "success": False,
            "error": self.message,
            "code": self.error_code,
        }
        if include_details and self.details:
            payload["details"] = self.details
        return payload

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}', "
            f"status_code={self.status_code})"
        )


# ==============================================================================
# DATABASE EXCEPTIONS
# ==============================================================================

class DatabaseError(AppException):
    """
    Raised when the document store cannot serve a request.

    Covers connection failures and driver errors.
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="DATABASE_ERROR",
            status_code=500,
            details=details,
        )


# ==============================================================================
# RESOURCE EXCEPTIONS
# ==============================================================================

class NotFoundError(AppException):
    """
    Raised when a requested resource does not exist.

    Maps to HTTP 404 Not Found.

    Attributes:
        resource_type: Type of resource that was not found
        resource_id: Identifier of the missing resource
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
    ) -> None:
        details = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = str(resource_id)

        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            status_code=404,
            details=details,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class AlreadyExistsError(AppException):
    """
    Raised when attempting to create a resource that already exists.

    Conflicts share the 400 status of validation failures in this API.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        _details = details or {}
        if resource_type:
            _details["resource_type"] = resource_type

        super().__init__(
            message=message,
            error_code="ALREADY_EXISTS",
            status_code=400,
            details=_details,
        )


class UnavailableError(AppException):
    """
    Raised when an entity exists but fails a gating predicate.

    Typical case: an artwork that is not approved, or a course that
    is not published and approved. Maps to HTTP 400.
    """

    def __init__(
        self,
        message: str = "Item is not available",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="NOT_AVAILABLE",
            status_code=400,
            details=details,
        )


# ==============================================================================
# VALIDATION EXCEPTIONS
# ==============================================================================

class ValidationError(AppException):
    """
    Raised when input validation fails.

    Maps to HTTP 400 Bad Request.
    Contains field-level validation errors when available.
    """

    def __init__(
        self,
        message: str = "Validation error",
        errors: Optional[Any] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=400,
            details={"validation_errors": errors} if errors else None,
        )
        self.errors = errors or {}


# ==============================================================================
# AUTHENTICATION & AUTHORIZATION EXCEPTIONS
# ==============================================================================

class AuthenticationError(AppException):
    """
    Raised when authentication fails.

    Maps to HTTP 401 Unauthorized.

    Common causes:
    - Missing session cookie
    - Invalid or expired token
    - Account removed or deactivated
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="AUTHENTICATION_ERROR",
            status_code=401,
            details=details,
        )


class InvalidCredentialsError(AppException):
    """
    Raised when a login attempt fails.

    Deliberately generic: an unknown email and a wrong password
    produce the same response. Maps to HTTP 400.
    """

    def __init__(
        self,
        message: str = "Invalid email or password",
    ) -> None:
        super().__init__(
            message=message,
            error_code="INVALID_CREDENTIALS",
            status_code=400,
        )


class AuthorizationError(AppException):
    """
    Raised when user lacks permission for an action.

    Maps to HTTP 403 Forbidden.

    The user is authenticated but either the role or the
    ownership of the target resource does not match.
    """

    def __init__(
        self,
        message: str = "Permission denied",
        required_permission: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        _details = details or {}
        if required_permission:
            _details["required_permission"] = required_permission

        super().__init__(
            message=message,
            error_code="AUTHORIZATION_ERROR",
            status_code=403,
            details=_details,
        )


class TokenExpiredError(AuthenticationError):
    """
    Raised when JWT token has expired.
    """

    def __init__(
        self,
        message: str = "Token expired",
    ) -> None:
        super().__init__(message=message)
        self.error_code = "TOKEN_EXPIRED"


class InvalidTokenError(AuthenticationError):
    """
    Raised when JWT token is invalid or malformed.
    """

    def __init__(
        self,
        message: str = "Invalid token",
    ) -> None:
        super().__init__(message=message)
        self.error_code = "INVALID_TOKEN"


# ==============================================================================
# BUSINESS LOGIC EXCEPTIONS
# ==============================================================================

class InsufficientStockError(AppException):
    """
    Raised when a requested artwork quantity exceeds its stock.

    Maps to HTTP 400 Bad Request.
    """

    def __init__(
        self,
        available: int,
        requested: Optional[int] = None,
    ) -> None:
        details: Dict[str, Any] = {"available": available}
        if requested is not None:
            details["requested"] = requested

        super().__init__(
            message=f"Only {available} available in stock",
            error_code="INSUFFICIENT_STOCK",
            status_code=400,
            details=details,
        )


class BusinessRuleError(AppException):
    """
    Raised when a business rule is violated.

    Maps to HTTP 400 Bad Request.
    """

    def __init__(
        self,
        message: str = "Business rule violation",
        rule: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        _details = details or {}
        if rule:
            _details["violated_rule"] = rule

        super().__init__(
            message=message,
            error_code="BUSINESS_RULE_ERROR",
            status_code=400,
            details=_details,
        )


class StorageError(AppException):
    """
    Raised when the image hosting backend rejects an operation.

    Callers treat image cleanup as best-effort, so this error is
    normally logged rather than returned to the client.
    """

    def __init__(
        self,
        message: str = "Image storage operation failed",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="STORAGE_ERROR",
            status_code=500,
            details=details,
        )
