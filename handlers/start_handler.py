"""
handlers/start_handler.py
--------------------------
Handles the /start command.
Shows the admin command list to admins and the /info usage to everyone else.
"""

from telegram import Update
from telegram.ext import ContextTypes

from security.auth import is_admin
from utils.logger import get_logger
from utils.messaging import reply

logger = get_logger(__name__)

ADMIN_TEXT = (
    "👑 ADMIN MODE\n\n"
    "Perintah:\n"
    "/info USER SERVER\n"
    "/offinfo\n"
    "/oninfo\n"
    "/ranking"
)

WELCOME_TEXT = (
    "👋 Welcome!\n"
    "Gunakan:\n"
    "/info USER_ID SERVER_ID\n\n"
    "Contoh:\n"
    "/info 643461181 8554"
)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - show the commands this user may run."""
    user = update.effective_user
    logger.info(f"User {user.id} (@{user.username}) started the bot.")
    await reply(update, ADMIN_TEXT if is_admin(user.id) else WELCOME_TEXT)
