"""
utils/messaging.py
------------------
Reply helpers that never raise.
A failed send or delete is logged and the handler carries on.
"""

from typing import Optional

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, Message, Update
from telegram.error import TelegramError

from utils.logger import get_logger

logger = get_logger(__name__)


def link_keyboard(*buttons: tuple[str, str]) -> InlineKeyboardMarkup:
    """One URL button per row, from (text, url) pairs."""
    return InlineKeyboardMarkup(
        [[InlineKeyboardButton(text, url=url)] for text, url in buttons]
    )


async def reply(
    update: Update, text: str, reply_markup: Optional[InlineKeyboardMarkup] = None
) -> Optional[Message]:
    """Reply in the chat the update came from. Returns None if sending failed."""
    try:
        return await update.effective_chat.send_message(text, reply_markup=reply_markup)
    except TelegramError as e:
        logger.error(f"Failed to send message to chat {update.effective_chat.id}: {e}")
        return None


async def delete(message: Optional[Message]) -> None:
    """Delete a message we sent earlier, if there is one."""
    if message is None:
        return
    try:
        await message.delete()
    except TelegramError as e:
        logger.error(f"Failed to delete message {message.message_id}: {e}")
