"""
services/access_service.py
---------------------------
The /info access gate.

Checks run in order and stop at the first failure:
    1. at least two arguments (USER_ID SERVER_ID)
    2. admins bypass everything below
    3. the user has a Telegram username
    4. the user joined every required chat
    5. the cooldown has expired
    6. the /info feature is enabled
A user who gets past the cooldown check starts a new cooldown window,
even if the feature turns out to be disabled.
"""

from typing import Optional, Sequence

from telegram import Bot, User

from config import REQUIRED_CHATS
from models.access import AccessDecision, AccessStatus
from repositories.feature_repo import FeatureRepository
from security.auth import is_admin
from security.membership import missing_chats
from services.cooldown_service import CooldownService
from utils.logger import get_logger

logger = get_logger(__name__)

INFO_FEATURE = "info"


class AccessService:
    """Decides whether a user may run /info right now."""

    def __init__(
        self,
        cooldown_service: Optional[CooldownService] = None,
        feature_repo: Optional[FeatureRepository] = None,
        required_chats: Sequence[str] = REQUIRED_CHATS,
    ):
        self.cooldown_service = cooldown_service or CooldownService()
        self.feature_repo = feature_repo or FeatureRepository()
        self.required_chats = list(required_chats)

    async def check(self, bot: Bot, user: User, args: Sequence[str]) -> AccessDecision:
        """
        Run the gate for one /info call.

        Args:
            bot: Used for the membership lookups.
            user: The Telegram user issuing the command.
            args: Command arguments after /info.

        Returns:
            An AccessDecision; only ALLOWED lets the lookup proceed.
        """
        if len(args) < 2:
            return AccessDecision(AccessStatus.BAD_FORMAT)

        if is_admin(user.id):
            return AccessDecision(AccessStatus.ALLOWED)

        if not user.username:
            return AccessDecision(AccessStatus.NO_USERNAME)

        missing = await missing_chats(bot, user.id, self.required_chats)
        if missing:
            logger.info(f"User {user.id} has not joined {', '.join(missing)}")
            return AccessDecision(AccessStatus.NOT_JOINED, missing_chats=missing)

        remaining = self.cooldown_service.remaining(user.id)
        if remaining > 0:
            return AccessDecision(AccessStatus.COOLDOWN, remaining=remaining)

        try:
            self.cooldown_service.touch(user.id)
        except OSError as e:
            logger.error(f"Failed to record cooldown for user {user.id}: {e}")

        if not self.feature_repo.is_enabled(INFO_FEATURE):
            return AccessDecision(AccessStatus.FEATURE_DISABLED)

        return AccessDecision(AccessStatus.ALLOWED)
