from typing import Any

import httpx
from loguru import logger

from xtream.core.exceptions import XtreamRequestError


class BaseClient:
    """
    Base asynchronous HTTP client with logging and status translation.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.headers = headers or {}
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    async def get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx.AsyncClient instance."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
                transport=self.transport,
            )
        return self._client

    async def close(self):
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Send one request and turn transport or status failures into XtreamRequestError."""
        client = await self.get_client()

        try:
            response = await client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            reason = e.response.reason_phrase or f"HTTP {status}"
            logger.error(f"Request failed ({method} {url}): {status} {reason}")
            raise XtreamRequestError(reason, status_code=status) from e
        except httpx.RequestError as e:
            logger.error(f"Request failed ({method} {url}): {str(e)}")
            raise XtreamRequestError(str(e) or "Request failed") from e

    async def get(self, url: str, params: dict[str, Any] | None = None, **kwargs) -> Any:
        """Perform a GET request and return the JSON response."""
        response = await self._request("GET", url, params=params, **kwargs)
        return response.json()
