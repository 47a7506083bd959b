"""
services/info_service.py
-------------------------
Business logic for the /info lookup: fetch, parse, format, count.
"""

from typing import Optional

from models.account_info import AccountInfo
from repositories.user_repo import UserRepository
from services.account_parser import format_report, parse_account_info
from services.scraper_client import ScraperClient
from utils.logger import get_logger

logger = get_logger(__name__)


class InfoService:
    """Runs account lookups and keeps the per-user success counters."""

    def __init__(
        self,
        client: Optional[ScraperClient] = None,
        user_repo: Optional[UserRepository] = None,
    ):
        self.client = client or ScraperClient()
        self.user_repo = user_repo or UserRepository()

    async def lookup(self, user_id: str, server_id: str) -> AccountInfo:
        """
        Fetch and parse one account.

        Raises:
            ScraperError: If the endpoint could not be reached.
        """
        body = await self.client.fetch(user_id, server_id)
        return parse_account_info(body)

    async def build_report(self, user_id: str, server_id: str) -> str:
        """Fetch an account and render the report text."""
        info = await self.lookup(user_id, server_id)
        logger.info(
            f"Lookup {user_id} ({server_id}): nickname={info.nickname!r}, "
            f"{len(info.binds)} binds"
        )
        return format_report(info)

    def record_success(self, telegram_id: int, username: str) -> None:
        """Count a completed lookup. Storage errors are logged, never raised."""
        try:
            self.user_repo.record_success(telegram_id, username)
        except OSError as e:
            logger.error(f"Failed to save success count for user {telegram_id}: {e}")
