# manuals_search/drive/auth.py
"""Service-account authentication for the Drive API."""

import json
import logging
from typing import Any, Optional

import anyio
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from ..errors import CredentialError

logger = logging.getLogger(__name__)


DRIVE_READONLY_SCOPE = "https://www.googleapis.com/auth/drive.readonly"


def parse_service_key(raw: str) -> dict[str, Any]:
    """Parse the service-account JSON held in GOOGLE_SERVICE_KEY."""
    try:
        info = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CredentialError(f"Invalid GOOGLE_SERVICE_KEY: {e}") from e

    if not isinstance(info, dict):
        raise CredentialError("Invalid GOOGLE_SERVICE_KEY: expected a JSON object")
    return info


class ServiceAccountAuth:
    """
    Bearer tokens for a Google service account.

    Tokens are refreshed in a worker thread since google-auth's transport
    is blocking.
    """

    def __init__(self, info: dict[str, Any], scopes: Optional[list[str]] = None):
        try:
            self._credentials = service_account.Credentials.from_service_account_info(
                info,
                scopes=scopes or [DRIVE_READONLY_SCOPE],
            )
        except (ValueError, GoogleAuthError) as e:
            raise CredentialError(f"Invalid service account credential: {e}") from e

    @classmethod
    def from_service_key(
        cls, raw: str, scopes: Optional[list[str]] = None
    ) -> "ServiceAccountAuth":
        return cls(parse_service_key(raw), scopes=scopes)

    @property
    def service_account_email(self) -> str:
        return self._credentials.service_account_email

    async def get_token(self) -> str:
        """Return a valid access token, refreshing it when needed."""
        if not self._credentials.valid:
            logger.debug("Refreshing access token for %s", self.service_account_email)
            try:
                await anyio.to_thread.run_sync(self._credentials.refresh, Request())
            except GoogleAuthError as e:
                raise CredentialError(f"Failed to obtain access token: {e}") from e
        return self._credentials.token
