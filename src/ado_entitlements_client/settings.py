import os
from typing import List, Optional

from ado_entitlements_types.endpoints import DEFAULT_ENDPOINT

from ado_entitlements_client.credentials import (
    AnonymousCredential,
    BearerTokenCredential,
    Credential,
    PersonalAccessTokenCredential,
)


class EntitlementClientSettings:
    """Client configuration read from the environment."""

    def __init__(self):
        self.ENDPOINT = os.environ.get("ADO_ENTITLEMENTS_ENDPOINT", DEFAULT_ENDPOINT)

        # Authentication: a bearer token wins over a personal access token
        self.ACCESS_TOKEN = os.environ.get("ADO_ACCESS_TOKEN", None)
        self.PAT = os.environ.get("ADO_PAT", None)
        self.SCOPES = _split_csv(os.environ.get("ADO_SCOPES", ""))

        self.TIMEOUT = float(os.environ.get("ADO_TIMEOUT", "30"))
        self.MAX_RETRIES = int(os.environ.get("ADO_MAX_RETRIES", "3"))

    def credential(self) -> Credential:
        if self.ACCESS_TOKEN:
            return BearerTokenCredential(self.ACCESS_TOKEN)
        if self.PAT:
            return PersonalAccessTokenCredential(self.PAT)
        return AnonymousCredential()

    def __repr__(self) -> str:
        return (
            f"EntitlementClientSettings(endpoint={self.ENDPOINT!r}, "
            f"credential={type(self.credential()).__name__})"
        )


def _split_csv(value: str) -> Optional[List[str]]:
    items = [item.strip() for item in value.split(",") if item.strip()]
    return items or None
