"""
Async HTTP pipeline and request dispatcher for the entitlement API.

This module provides the shared request context built on httpx:
- Endpoint, scopes and credential shared read-only by all operations
- Authorization header injection
- Table-driven request construction from OperationDescriptor entries
- Status mapping to typed results or typed errors
- Timeout configuration and connection-level retries in the transport
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union
import logging

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ado_entitlements_types.endpoints import DEFAULT_ENDPOINT

from ado_entitlements_client._version import __version__
from ado_entitlements_client.credentials import AnonymousCredential, Credential
from ado_entitlements_client.exceptions import (
    ConnectionError as ClientConnectionError,
    CredentialError,
    DataConversionError,
    EntitlementClientError,
    NetworkError,
    RateLimitError,
    ServiceUnavailableError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)
from ado_entitlements_client.operations import OperationDescriptor

logger = logging.getLogger(__name__)

USER_AGENT = f"ado-entitlements-client/{__version__}"

PathParams = Mapping[str, str]
QueryInput = Union[BaseModel, Mapping[str, Any], None]


class AsyncHTTPClient:
    """
    Shared request context for all entitlement operations.

    This client handles:
    - Endpoint URL management
    - Authorization header injection from the credential
    - Request construction from operation descriptors
    - Response status mapping and deserialization

    One instance is shared by every endpoint client. It holds no per-call
    state, so operations may run concurrently.
    """

    def __init__(
        self,
        credential: Optional[Credential] = None,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        scopes: Optional[Sequence[str]] = None,
        timeout: float = 30.0,
        max_retries: int = 3,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            credential: Credential producing the Authorization header
            endpoint: Service endpoint (e.g., "https://vsaex.dev.azure.com")
            scopes: Scopes passed to the credential, defaults to ["<endpoint>/"]
            timeout: Request timeout in seconds
            max_retries: Connection retries performed by the transport
            headers: Additional headers to include in all requests
            transport: Custom httpx transport (proxies, mocking)
        """
        self.endpoint = endpoint.rstrip("/")
        self.credential = credential or AnonymousCredential()
        self.scopes = list(scopes) if scopes else [f"{self.endpoint}/"]
        self.timeout = timeout
        self.max_retries = max_retries
        self._default_headers = headers or {}
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            transport = self._transport or httpx.AsyncHTTPTransport(retries=self.max_retries)
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=transport,
                follow_redirects=True,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # =========================================================================
    # Request construction
    # =========================================================================

    def build_url(
        self,
        operation: OperationDescriptor,
        organization: str,
        path_params: Optional[PathParams] = None,
    ) -> str:
        """Build the absolute URL of an operation, without query string."""
        if not isinstance(organization, str) or not organization.strip():
            raise ValueError("organization must be a non-empty string")
        path = operation.format_path(dict(path_params or {}))
        return f"{self.endpoint}/{organization}/_apis/{path}"

    def build_params(
        self,
        operation: OperationDescriptor,
        options: QueryInput = None,
    ) -> List[Tuple[str, Any]]:
        """
        Build the query parameters of an operation.

        api-version always comes first. Optional parameters follow in the
        order their options model declares them, and only when set.
        """
        params: List[Tuple[str, Any]] = [("api-version", operation.api_version)]
        if options is None:
            return params
        if operation.query_model is None:
            raise ValueError(f"{operation.name} does not accept query parameters")
        if not isinstance(options, operation.query_model):
            if isinstance(options, BaseModel):
                raise TypeError(
                    f"{operation.name} expects {operation.query_model.__name__}, "
                    f"got {type(options).__name__}"
                )
            options = operation.query_model.model_validate(dict(options))
        params.extend(options.to_params().items())
        return params

    def _build_headers(self, operation: OperationDescriptor) -> Dict[str, str]:
        """Build request headers without authentication."""
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
            **self._default_headers,
        }
        if operation.has_body:
            headers["Content-Type"] = operation.content_type
        return headers

    async def _add_auth_header(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Add the Authorization header if the credential yields one."""
        try:
            auth_header = await self.credential.authorization_header(self.scopes)
        except EntitlementClientError:
            raise
        except Exception as e:
            raise CredentialError(f"Failed to acquire authorization header: {e}") from e
        if auth_header:
            headers["Authorization"] = auth_header
        return headers

    def _encode_body(self, operation: OperationDescriptor, body: Any) -> Any:
        """Convert the request body to its JSON-compatible wire form."""
        if not operation.has_body:
            if body is not None:
                raise ValueError(f"{operation.name} does not take a request body")
            return None
        if body is None:
            raise ValueError(f"{operation.name} requires a request body")
        if not isinstance(body, BaseModel):
            body = operation.body_model.model_validate(body)
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)

    # =========================================================================
    # Response handling
    # =========================================================================

    def _handle_error_response(self, operation: OperationDescriptor, response: httpx.Response) -> None:
        """Convert an undeclared response status to the matching exception."""
        status_code = response.status_code
        error_code = None
        details: Dict[str, Any] = {}

        # Azure DevOps error envelope: {"message", "typeKey", "errorCode", ...}
        try:
            error_data = response.json()
        except ValueError:
            error_data = None

        if isinstance(error_data, dict):
            message = error_data.get("message") or f"HTTP {status_code}"
            error_code = error_data.get("typeKey") or (
                str(error_data["errorCode"]) if error_data.get("errorCode") else None
            )
            details = error_data
        else:
            message = response.text or f"HTTP {status_code}"

        message = f"{operation.name} failed: {message}"
        logger.warning(f"{operation.name} returned HTTP {status_code}")

        error = exception_from_response(status_code, message, error_code=error_code, details=details)
        if isinstance(error, (RateLimitError, ServiceUnavailableError)):
            retry_after = response.headers.get("Retry-After")
            if retry_after and retry_after.isdigit():
                error.retry_after = int(retry_after)
        raise error

    def _handle_response(self, operation: OperationDescriptor, response: httpx.Response) -> Any:
        """Map the status code and deserialize the body of a declared success."""
        logger.debug(f"{operation.name} -> HTTP {response.status_code}")

        if response.status_code not in operation.success_status:
            self._handle_error_response(operation, response)

        if operation.response_model is None:
            return None

        try:
            return operation.response_model.model_validate_json(response.content)
        except PydanticValidationError as e:
            logger.error(f"{operation.name}: response does not match {operation.response_model.__name__}")
            raise DataConversionError(
                "Failed to deserialize response",
                status_code=response.status_code,
                body=response.text,
                original_error=e,
            ) from e

    # =========================================================================
    # Dispatch
    # =========================================================================

    async def execute(
        self,
        operation: OperationDescriptor,
        organization: str,
        *,
        path_params: Optional[PathParams] = None,
        options: QueryInput = None,
        body: Any = None,
    ) -> Any:
        """
        Execute one operation end-to-end.

        Args:
            operation: Descriptor of the operation to run
            organization: Azure DevOps organization name
            path_params: Values for the path template placeholders
            options: Optional query parameters (options model or mapping)
            body: Request body (model, dict or list) for operations that take one

        Returns:
            The deserialized response model, or None for no-content operations

        Raises:
            ValueError: On missing organization, path parameters or body
            CredentialError: If the credential fails (nothing is sent)
            NetworkError: On invalid URLs, connection failures or timeouts
            HttpResponseError: If the status is not a declared success
            DataConversionError: If the body does not match the response model
        """
        url = self.build_url(operation, organization, path_params)
        params = self.build_params(operation, options)
        payload = self._encode_body(operation, body)
        headers = await self._add_auth_header(self._build_headers(operation))

        client = await self._get_client()
        logger.debug(f"{operation.method} {url}")
        try:
            request = client.build_request(
                operation.method,
                url,
                params=params,
                json=payload,
                headers=headers,
            )
            response = await client.send(request)
        except httpx.TimeoutException as e:
            raise ClientTimeoutError(f"Request timed out: {e}") from e
        except httpx.ConnectError as e:
            raise ClientConnectionError(f"Connection failed: {e}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"Request failed: {e}") from e

        return self._handle_response(operation, response)
