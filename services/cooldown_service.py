"""
services/cooldown_service.py
-----------------------------
Per-user cooldown between /info calls.
Timestamps are persisted in cooldown.json and never expire.
"""

import time
from typing import Callable, Optional

from config import COOLDOWN_SECONDS
from repositories.cooldown_repo import CooldownRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class CooldownService:
    """
    Args:
        repo: Timestamp storage.
        seconds: Minimum gap between two calls from the same user.
        clock: Returns the current unix time; replaceable in tests.
    """

    def __init__(
        self,
        repo: Optional[CooldownRepository] = None,
        seconds: int = COOLDOWN_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.repo = repo or CooldownRepository()
        self.seconds = seconds
        self.clock = clock

    def _now(self) -> int:
        return int(self.clock())

    def remaining(self, user_id: int) -> int:
        """Seconds the user still has to wait, 0 when the cooldown has expired."""
        elapsed = self._now() - self.repo.get_last(user_id)
        if elapsed < self.seconds:
            return self.seconds - elapsed
        return 0

    def touch(self, user_id: int) -> None:
        """Start a new cooldown window for the user."""
        self.repo.set_last(user_id, self._now())
