"""
security/membership.py
-----------------------
Checks whether a user has joined the required Telegram channel and group.
"""

from telegram import Bot, ChatMember
from telegram.error import TelegramError

from utils.logger import get_logger

logger = get_logger(__name__)

_JOINED_STATUSES = (ChatMember.MEMBER, ChatMember.ADMINISTRATOR, ChatMember.OWNER)


async def is_joined(bot: Bot, user_id: int, chat: str) -> bool:
    """
    Return True if the user is a member, administrator or creator of the chat.
    Lookup errors (bot not in the chat, unknown chat...) count as not joined.
    """
    try:
        member = await bot.get_chat_member(chat, user_id)
    except TelegramError as e:
        logger.error(f"Error checking join status of {user_id} in {chat}: {e}")
        return False
    return member.status in _JOINED_STATUSES


async def missing_chats(bot: Bot, user_id: int, chats: list[str]) -> list[str]:
    """The chats from `chats` the user has not joined, in the given order."""
    return [chat for chat in chats if not await is_joined(bot, user_id, chat)]
