"""
repositories/cooldown_repo.py
------------------------------
Data access layer for cooldown.json (user ID -> last /info timestamp).
"""

from typing import Optional

from db.json_store import JsonStore
from db.stores import cooldown_store


class CooldownRepository:
    """Repository for per-user last-invocation timestamps."""

    def __init__(self, store: Optional[JsonStore] = None):
        self.store = store or cooldown_store

    def get_last(self, telegram_id: int) -> int:
        """Last recorded invocation as unix seconds, 0 if never seen."""
        try:
            return int(self.store.data.get(str(telegram_id), 0))
        except (TypeError, ValueError):
            return 0

    def set_last(self, telegram_id: int, timestamp: int) -> None:
        """
        Record an invocation and persist.

        Raises:
            OSError: If cooldown.json cannot be written.
        """
        self.store.data[str(telegram_id)] = timestamp
        self.store.save()
