from typing import Any

import httpx
from loguru import logger

from xtream.core.base_client import BaseClient
from xtream.core.constants import API_PATH
from xtream.core.version import __version__


class XtreamClient(BaseClient):
    """
    Client for the player API of an Xtream Codes panel.
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {
            "User-Agent": f"xtream-api/{__version__}",
            "Accept": "application/json",
        }
        super().__init__(base_url=base_url, timeout=timeout, headers=headers, transport=transport)
        self.username = username
        self.password = password

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        """Override request to always include the account credentials."""
        params = kwargs.get("params", {})
        if params is None:
            params = {}
        params = {"username": self.username, "password": self.password, **params}
        kwargs["params"] = params
        return await super()._request(method, url, **kwargs)

    async def call(self, action: str, **params: Any) -> Any:
        """Run one player API action; params with a None value are left out."""
        query = {"action": action}
        query.update({key: value for key, value in params.items() if value is not None})
        logger.debug(f"Xtream action {action} {params or ''}")
        return await self.get(API_PATH, params=query)
