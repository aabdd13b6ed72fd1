"""Tests for exception classes."""

import pytest

from ado_entitlements_client.exceptions import (
    EntitlementClientError,
    CredentialError,
    HttpResponseError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    DataConversionError,
    NetworkError,
    TimeoutError,
    ConnectionError,
    exception_from_response,
)


class TestEntitlementClientError:
    """Tests for the base EntitlementClientError class."""

    def test_basic_creation(self):
        """Test creating a basic exception."""
        error = EntitlementClientError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.status_code is None
        assert error.error_code is None
        assert error.details == {}

    def test_with_status_code(self):
        """Test exception with status code."""
        error = EntitlementClientError("Error", status_code=500)
        assert error.status_code == 500
        assert "(HTTP 500)" in str(error)

    def test_with_error_code(self):
        """Test exception with error code."""
        error = EntitlementClientError("Error", error_code="UserNotFoundException")
        assert str(error).startswith("[UserNotFoundException]")

    def test_repr(self):
        """Test exception repr."""
        error = NotFoundError("gone")
        assert repr(error) == "NotFoundError(message='gone', status_code=404, error_code=None)"


class TestHierarchy:
    """Tests for the error families."""

    @pytest.mark.parametrize(
        "error_class",
        [
            ValidationError,
            AuthenticationError,
            AuthorizationError,
            NotFoundError,
            ConflictError,
            RateLimitError,
            ServerError,
            ServiceUnavailableError,
        ],
    )
    def test_status_errors_are_http_response_errors(self, error_class):
        """Test every status error belongs to the HTTP response family."""
        error = error_class()
        assert isinstance(error, HttpResponseError)
        assert isinstance(error, EntitlementClientError)
        assert error.status_code is not None

    def test_network_family(self):
        """Test timeouts and connection failures are network errors."""
        assert issubclass(TimeoutError, NetworkError)
        assert issubclass(ConnectionError, NetworkError)
        assert NetworkError().status_code is None

    def test_credential_error(self):
        """Test credential errors carry no status."""
        error = CredentialError()
        assert not isinstance(error, HttpResponseError)
        assert error.status_code is None

    def test_service_unavailable_is_server_error(self):
        """Test 503 is a server error."""
        assert issubclass(ServiceUnavailableError, ServerError)


class TestDataConversionError:
    """Tests for DataConversionError."""

    def test_message_includes_body(self):
        """Test the string form shows the offending body."""
        cause = ValueError("bad")
        error = DataConversionError(
            "Failed to deserialize response",
            status_code=200,
            body='{"count": "x"}',
            original_error=cause,
        )
        assert str(error) == 'Failed to deserialize response:\n{"count": "x"}'
        assert error.original_error is cause
        assert error.status_code == 200
        assert not isinstance(error, HttpResponseError)


class TestRateLimitError:
    """Tests for RateLimitError."""

    def test_retry_after(self):
        """Test retry_after attribute."""
        error = RateLimitError(retry_after=30)
        assert error.retry_after == 30
        assert error.status_code == 429


class TestExceptionFromResponse:
    """Tests for the exception_from_response factory."""

    @pytest.mark.parametrize(
        "status_code,expected",
        [
            (400, ValidationError),
            (401, AuthenticationError),
            (403, AuthorizationError),
            (404, NotFoundError),
            (409, ConflictError),
            (429, RateLimitError),
            (500, ServerError),
            (502, ServerError),
            (503, ServiceUnavailableError),
            (504, ServerError),
        ],
    )
    def test_mapped_status_codes(self, status_code, expected):
        """Test mapped status codes create the right class."""
        error = exception_from_response(status_code, "failed")
        assert type(error) is expected
        assert error.status_code == status_code

    def test_unmapped_server_status(self):
        """Test unmapped 5xx statuses create a ServerError."""
        error = exception_from_response(599, "odd")
        assert type(error) is ServerError
        assert error.status_code == 599

    @pytest.mark.parametrize("status_code", [200, 302, 418])
    def test_unmapped_status(self, status_code):
        """Test other statuses create a plain HttpResponseError."""
        error = exception_from_response(status_code, "unexpected")
        assert type(error) is HttpResponseError
        assert error.status_code == status_code

    def test_error_code_and_details(self):
        """Test error code and details are passed through."""
        details = {"typeKey": "AccessCheckException"}
        error = exception_from_response(
            403,
            "denied",
            error_code="AccessCheckException",
            details=details,
        )
        assert error.error_code == "AccessCheckException"
        assert error.details == details
