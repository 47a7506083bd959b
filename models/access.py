"""
models/access.py
----------------
Outcome of the /info access gate.
"""

from dataclasses import dataclass, field
from enum import Enum


class AccessStatus(str, Enum):
    ALLOWED = "allowed"
    BAD_FORMAT = "bad_format"
    NO_USERNAME = "no_username"
    NOT_JOINED = "not_joined"
    COOLDOWN = "cooldown"
    FEATURE_DISABLED = "feature_disabled"


@dataclass
class AccessDecision:
    """
    Attributes:
        status: Which check decided the outcome.
        missing_chats: Chats the user still has to join (NOT_JOINED only).
        remaining: Seconds left before the next allowed call (COOLDOWN only).
    """
    status: AccessStatus
    missing_chats: list[str] = field(default_factory=list)
    remaining: int = 0

    @property
    def allowed(self) -> bool:
        return self.status is AccessStatus.ALLOWED
