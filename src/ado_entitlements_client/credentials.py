"""
Credentials producing the Authorization header of each request.

A credential is asked for a header value with the client's scopes before
every request. Returning None sends the request without an Authorization
header.
"""

from abc import ABC, abstractmethod
from base64 import b64encode
from typing import Any, Optional, Sequence
import inspect
import logging

logger = logging.getLogger(__name__)


class Credential(ABC):
    """Abstract base class for credentials."""

    @abstractmethod
    async def authorization_header(self, scopes: Sequence[str]) -> Optional[str]:
        """Return the full Authorization header value, or None."""
        ...


class AnonymousCredential(Credential):
    """Sends no Authorization header (transport-level or unauthenticated access)."""

    async def authorization_header(self, scopes: Sequence[str]) -> Optional[str]:
        return None

    def __repr__(self) -> str:
        return "AnonymousCredential()"


class HeaderCredential(Credential):
    """Sends a fixed, pre-formatted header value such as "Bearer abc"."""

    def __init__(self, value: Optional[str]):
        self._value = value

    async def authorization_header(self, scopes: Sequence[str]) -> Optional[str]:
        return self._value

    def __repr__(self) -> str:
        return "HeaderCredential(***)"


class BearerTokenCredential(Credential):
    """Simple bearer token credential."""

    def __init__(self, access_token: str):
        self._access_token = access_token

    async def authorization_header(self, scopes: Sequence[str]) -> Optional[str]:
        return f"Bearer {self._access_token}"

    def set_token(self, access_token: str) -> None:
        """Replace the access token used by subsequent requests."""
        self._access_token = access_token

    def __repr__(self) -> str:
        return "BearerTokenCredential(***)"


class PersonalAccessTokenCredential(Credential):
    """
    Azure DevOps personal access token.

    PATs travel as HTTP basic auth with an empty user name.
    """

    def __init__(self, pat: str):
        self._pat = pat

    async def authorization_header(self, scopes: Sequence[str]) -> Optional[str]:
        encoded = b64encode(f":{self._pat}".encode("utf-8")).decode("ascii")
        return f"Basic {encoded}"

    def __repr__(self) -> str:
        return "PersonalAccessTokenCredential(***)"


class TokenProviderCredential(Credential):
    """
    Adapter for azure-identity style token credentials.

    Accepts any object with ``get_token(*scopes)`` returning an object that
    has a ``token`` attribute. Both sync (``azure.identity``) and async
    (``azure.identity.aio``) credentials work.
    """

    def __init__(self, provider: Any):
        if not hasattr(provider, "get_token"):
            raise TypeError(f"{type(provider).__name__} does not provide get_token()")
        self._provider = provider

    async def authorization_header(self, scopes: Sequence[str]) -> Optional[str]:
        access_token = self._provider.get_token(*scopes)
        if inspect.isawaitable(access_token):
            access_token = await access_token
        if access_token is None:
            return None
        token = getattr(access_token, "token", access_token)
        if not token:
            return None
        logger.debug(f"Acquired token for scopes {list(scopes)}")
        return f"Bearer {token}"

    def __repr__(self) -> str:
        return f"TokenProviderCredential({type(self._provider).__name__})"
