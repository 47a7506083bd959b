"""
security/auth.py
-----------------
Admin checks for the Telegram bot.
Admin-only commands are silently ignored for everybody else.
"""

from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

from config import ADMIN_IDS
from utils.logger import get_logger

logger = get_logger(__name__)


def is_admin(user_id: int) -> bool:
    """True if the Telegram user ID is in the configured ADMIN_IDS."""
    return user_id in ADMIN_IDS


def admin_only(func: Callable):
    """
    Decorator that restricts a handler to admins.

    Usage:
        @admin_only
        async def my_handler(update, context):
            ...

    Behavior:
        - Non-admins get no reply at all.
        - The attempt is logged.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        if not is_admin(user.id):
            logger.warning(
                f"🚫 Non-admin tried an admin command: user_id={user.id}, "
                f"username={user.username}"
            )
            return

        return await func(update, context, *args, **kwargs)

    return wrapper
