"""
repositories/user_repo.py
--------------------------
Data access layer for user records in database.json.
"""

from typing import Optional

from db.json_store import JsonStore
from db.stores import database_store
from models.user import UserRecord
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for the `users` map and the global success counter."""

    def __init__(self, store: Optional[JsonStore] = None):
        self.store = store or database_store

    def _users(self) -> dict:
        return self.store.data.setdefault("users", {})

    def get(self, telegram_id: int) -> Optional[UserRecord]:
        """
        Fetch a user by their Telegram ID.

        Returns:
            UserRecord or None.
        """
        return self._parse(str(telegram_id), self._users().get(str(telegram_id)))

    def get_all(self) -> list[UserRecord]:
        """All stored users, in insertion order. Malformed entries are skipped."""
        users = (self._parse(uid, raw) for uid, raw in self._users().items())
        return [user for user in users if user is not None]

    @staticmethod
    def _parse(uid: str, raw) -> Optional[UserRecord]:
        """Build a UserRecord from a stored entry, None if it is missing or malformed."""
        if not raw:
            return None
        try:
            if not isinstance(raw, dict):
                raise TypeError(f"expected an object, got {type(raw).__name__}")
            return UserRecord.from_dict(int(uid), raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed user entry {uid!r}: {e}")
            return None

    def record_success(self, telegram_id: int, username: str) -> UserRecord:
        """
        Increment a user's success counter and the global total, then persist.
        The stored username is refreshed on every call.

        Args:
            telegram_id: The Telegram user ID.
            username: Current Telegram handle (may be empty).

        Returns:
            The updated UserRecord.

        Raises:
            OSError: If database.json cannot be written.
        """
        users = self._users()
        user = self.get(telegram_id) or UserRecord(user_id=telegram_id)
        user.username = username
        user.success += 1
        users[str(telegram_id)] = user.to_dict()
        self.store.data["total_success"] = int(self.store.data.get("total_success", 0)) + 1
        self.store.save()
        logger.info(f"User {telegram_id} (@{username}) success count is now {user.success}")
        return user

    def get_total_success(self) -> int:
        return int(self.store.data.get("total_success", 0))
