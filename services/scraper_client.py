"""
services/scraper_client.py
---------------------------
Async HTTP client for the account lookup endpoint.
The endpoint answers with an HTML page that embeds a PHP print_r() dump;
this client only fetches the body, parsing lives in account_parser.
"""

import asyncio
from typing import Optional

import aiohttp

from config import SCRAPER_TIMEOUT, SCRAPER_URL
from utils.logger import get_logger

logger = get_logger(__name__)


class ScraperError(Exception):
    """The lookup endpoint could not be reached or answered with an error."""


class ScraperClient:
    """
    Args:
        url: Lookup endpoint.
        timeout: Total request timeout in seconds.
    """

    def __init__(self, url: str = SCRAPER_URL, timeout: float = SCRAPER_TIMEOUT):
        self.url = url
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def start(self) -> None:
        """Create the HTTP session."""
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )

    async def stop(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    @staticmethod
    def build_params(user_id: str, server_id: str) -> dict[str, str]:
        """Query parameters the endpoint expects; role/zone mirror user/server."""
        return {
            "userId": user_id,
            "serverId": server_id,
            "role_id": user_id,
            "zone_id": server_id,
        }

    async def fetch(self, user_id: str, server_id: str) -> str:
        """
        Fetch the raw lookup page for an account.

        Returns:
            The response body as text.

        Raises:
            ScraperError: On connection errors, timeouts or non-2xx responses.
        """
        if self._session is None:
            await self.start()

        params = self.build_params(user_id, server_id)
        try:
            async with self._session.get(self.url, params=params) as resp:
                resp.raise_for_status()
                body = await resp.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Lookup failed for {user_id} ({server_id}): {e!r}")
            raise ScraperError(str(e) or type(e).__name__) from e

        logger.info(f"Fetched lookup page for {user_id} ({server_id}): {len(body)} chars")
        return body
