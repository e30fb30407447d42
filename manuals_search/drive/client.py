# manuals_search/drive/client.py

import logging
from typing import Awaitable, Callable, List, Optional

import httpx

from ..errors import DriveAPIError
from ..models.manual import DriveEntry

logger = logging.getLogger(__name__)


TokenProvider = Callable[[], Awaitable[str]]

LIST_FIELDS = "nextPageToken, files(id,name,mimeType,webViewLink)"


def _quote(value: str) -> str:
    """Escape a value for a Drive query string literal."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def children_query(parent_id: str) -> str:
    return f"'{_quote(parent_id)}' in parents and trashed=false"


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        if isinstance(error, str) and error:
            return data.get("error_description") or error

    return f"Drive API request failed: {response.status_code} {response.reason_phrase}"


class DriveClient:
    """Read-only client for the Drive v3 files API."""

    def __init__(
        self,
        token_provider: TokenProvider,
        base_url: str = "https://www.googleapis.com/drive/v3",
        page_size: int = 1000,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._token_provider = token_provider
        self.base_url = base_url.rstrip("/")
        self.page_size = page_size
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "DriveClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def list_children(self, parent_id: str) -> List[DriveEntry]:
        """
        List the direct children of a folder, following every result page.

        Args:
            parent_id: Drive id of the folder

        Returns:
            All non-trashed children, files and folders alike
        """
        entries: List[DriveEntry] = []
        page_token: Optional[str] = None
        pages = 0

        while True:
            data = await self._list_page(parent_id, page_token)
            entries.extend(DriveEntry.model_validate(f) for f in data.get("files") or [])
            pages += 1

            page_token = data.get("nextPageToken") or None
            if not page_token:
                break

        logger.debug(
            "Listed %d children of %s across %d page(s)", len(entries), parent_id, pages
        )
        return entries

    async def _list_page(self, parent_id: str, page_token: Optional[str]) -> dict:
        params = {
            "q": children_query(parent_id),
            "fields": LIST_FIELDS,
            "pageSize": self.page_size,
        }
        if page_token:
            params["pageToken"] = page_token

        token = await self._token_provider()

        try:
            response = await self._http.get(
                f"{self.base_url}/files",
                params=params,
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as e:
            raise DriveAPIError(f"Drive API request failed: {e}") from e

        if response.is_error:
            raise DriveAPIError(_error_message(response), status_code=response.status_code)

        return response.json()
