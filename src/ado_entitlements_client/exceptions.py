"""
Exception hierarchy for the entitlement client library.

Every failure of an operation surfaces as a subclass of EntitlementClientError.
The four families let callers branch on the cause:

- CredentialError: the credential could not produce a header; nothing was sent
- NetworkError: transport failure (invalid URL, connect, timeout, I/O)
- HttpResponseError: the service answered with an undeclared status code
- DataConversionError: declared status, but the body did not match the model
"""

from typing import Any, Dict, Optional


class EntitlementClientError(Exception):
    """
    Base exception for all entitlement client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        error_code: Service error key, e.g. "GroupEntitlementNotFoundException"
        details: Additional error details from the response
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.insert(0, f"[{self.error_code}]")
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"error_code={self.error_code!r})"
        )


# =============================================================================
# Credential Errors
# =============================================================================


class CredentialError(EntitlementClientError):
    """
    The credential failed to produce an authorization header.

    Raised before any network I/O takes place.
    """

    def __init__(
        self,
        message: str = "Failed to acquire credentials",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# HTTP Status Errors
# =============================================================================


class HttpResponseError(EntitlementClientError):
    """
    The service answered with a status code the operation does not declare.

    status_code is always set. error_code is filled from the Azure DevOps
    error envelope when the body carries one.
    """

    def __init__(
        self,
        message: str = "Unexpected response status",
        *,
        status_code: int,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class ValidationError(HttpResponseError):
    """The service rejected the request as malformed (400)."""

    def __init__(
        self,
        message: str = "Invalid request",
        *,
        status_code: int = 400,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, error_code=error_code, details=details)


class AuthenticationError(HttpResponseError):
    """
    Authentication failed or credentials are invalid (401).

    Raised when:
    - No Authorization header was sent to an authenticated endpoint
    - The personal access token is expired or revoked
    - The bearer token was issued for the wrong scope
    """

    def __init__(
        self,
        message: str = "Authentication required",
        *,
        status_code: int = 401,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, error_code=error_code, details=details)


class AuthorizationError(HttpResponseError):
    """
    Access denied due to insufficient permissions (403).

    Managing entitlements requires Project Collection Administrator or
    User Entitlements Administrator rights in the organization.
    """

    def __init__(
        self,
        message: str = "Access denied",
        *,
        status_code: int = 403,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, error_code=error_code, details=details)


class NotFoundError(HttpResponseError):
    """
    Requested resource was not found (404).

    Also raised for an unknown organization name.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        *,
        status_code: int = 404,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, error_code=error_code, details=details)


class ConflictError(HttpResponseError):
    """Request conflicts with the current state of the resource (409)."""

    def __init__(
        self,
        message: str = "Resource conflict",
        *,
        status_code: int = 409,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, error_code=error_code, details=details)


class RateLimitError(HttpResponseError):
    """
    Rate limit exceeded (429).

    The client should wait before retrying. The retry_after attribute
    indicates how many seconds to wait.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        status_code: int = 429,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(message, status_code=status_code, error_code=error_code, details=details)
        self.retry_after = retry_after


class ServerError(HttpResponseError):
    """Server-side error occurred (5xx)."""

    def __init__(
        self,
        message: str = "Server error",
        *,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code=status_code, error_code=error_code, details=details)


class ServiceUnavailableError(ServerError):
    """The service is temporarily unavailable (503)."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        *,
        status_code: int = 503,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(message, status_code=status_code, error_code=error_code, details=details)
        self.retry_after = retry_after


# =============================================================================
# Data Conversion Errors
# =============================================================================


class DataConversionError(EntitlementClientError):
    """
    The response carried a declared success status but its body could not
    be converted into the operation's response model.

    Attributes:
        body: The raw response body text
        original_error: The underlying parse/validation error
    """

    def __init__(
        self,
        message: str = "Failed to deserialize response",
        *,
        status_code: Optional[int] = None,
        body: str = "",
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, status_code=status_code)
        self.body = body
        self.original_error = original_error

    def __str__(self) -> str:
        return f"{self.message}:\n{self.body}"


# =============================================================================
# Network Errors (Client-side)
# =============================================================================


class NetworkError(EntitlementClientError):
    """
    Network-level error occurred.

    Raised when the URL is invalid, the connection cannot be established,
    or the exchange fails midway.
    """

    def __init__(
        self,
        message: str = "Network error",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            status_code=None,
            error_code=None,
            details=details,
        )


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


class ConnectionError(NetworkError):
    """Failed to establish connection to the server."""

    def __init__(
        self,
        message: str = "Failed to connect to server",
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)


# =============================================================================
# Exception Mapping
# =============================================================================

STATUS_CODE_EXCEPTIONS = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
    500: ServerError,
    502: ServerError,
    503: ServiceUnavailableError,
    504: ServerError,
}


def exception_from_response(
    status_code: int,
    message: str,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> HttpResponseError:
    """
    Create an appropriate exception for an undeclared response status.

    Args:
        status_code: HTTP status code
        message: Error message
        error_code: Service error key
        details: Additional error details

    Returns:
        Appropriate HttpResponseError subclass
    """
    exception_class = STATUS_CODE_EXCEPTIONS.get(status_code)
    if exception_class is None:
        exception_class = ServerError if 500 <= status_code < 600 else HttpResponseError
    return exception_class(
        message,
        status_code=status_code,
        error_code=error_code,
        details=details,
    )
