"""
models/user.py
--------------
Domain model for a bot user and their success counter.
"""

from dataclasses import dataclass


@dataclass
class UserRecord:
    """
    A Telegram user who has completed at least one /info lookup.

    Attributes:
        user_id: Telegram user ID.
        username: Telegram handle without the leading '@' (may be empty).
        success: Number of completed /info lookups.
    """
    user_id: int
    username: str = ""
    success: int = 0

    def to_dict(self) -> dict:
        """Serialize to the shape stored in database.json."""
        return {"username": self.username, "success": self.success}

    @classmethod
    def from_dict(cls, user_id: int, raw: dict) -> "UserRecord":
        return cls(
            user_id=user_id,
            username=raw.get("username") or "",
            success=int(raw.get("success") or 0),
        )

    def __str__(self) -> str:
        return f"@{self.username} - {self.success}x"
