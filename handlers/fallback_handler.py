"""
handlers/fallback_handler.py
-----------------------------
Replies to anything that is not a known command.
"""

from telegram import Update
from telegram.ext import ContextTypes

from utils.messaging import reply

UNKNOWN_TEXT = "❌ Perintah tidak dikenali."


async def unknown_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle any message no other handler picked up."""
    await reply(update, UNKNOWN_TEXT)
