"""
main.py
-------
Entry point for the account info Telegram bot.

Responsibilities:
    - Load the JSON stores (database.json, cooldown.json).
    - Configure and start the Telegram bot with all handlers.
    - Run the lookup HTTP session and the health endpoint on the bot's event loop.
"""

from telegram import BotCommand
from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    filters,
)

from config import TELEGRAM_BOT_TOKEN
from db.stores import init_storage
from handlers.admin_handler import offinfo_command, oninfo_command, ranking_command
from handlers.fallback_handler import unknown_command
from handlers.info_handler import info_command, info_service
from handlers.start_handler import start_command
from utils.logger import get_logger
from web.health import HealthServer

logger = get_logger(__name__)
health_server = HealthServer()


async def set_bot_commands(application: Application) -> None:
    """Register the public commands menu in Telegram."""
    commands = [
        BotCommand("start", "🚀 Mulai bot"),
        BotCommand("info", "🔎 Cek akun: /info USER_ID SERVER_ID"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


async def on_startup(application: Application) -> None:
    """post_init hook: open the lookup session, start the health server, set the menu."""
    await info_service.client.start()
    try:
        await health_server.start()
    except OSError:
        logger.warning("Continuing without the health endpoint.")
    await set_bot_commands(application)


async def on_shutdown(application: Application) -> None:
    """post_shutdown hook: release everything opened in on_startup."""
    await health_server.stop()
    await info_service.client.stop()


def build_application(token: str) -> Application:
    """Create the Telegram application and register every handler."""
    app = (
        Application.builder()
        .token(token)
        .post_init(on_startup)
        .post_shutdown(on_shutdown)
        .build()
    )

    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("info", info_command))
    app.add_handler(CommandHandler("offinfo", offinfo_command))
    app.add_handler(CommandHandler("oninfo", oninfo_command))
    app.add_handler(CommandHandler("ranking", ranking_command))

    # Catch-all, only reached when no command above matched.
    # In groups only stray commands get a reply, plain chatter is ignored.
    app.add_handler(
        MessageHandler(filters.ChatType.PRIVATE | filters.COMMAND, unknown_command)
    )
    return app


def main() -> None:
    """Initialize and run the bot."""
    if not TELEGRAM_BOT_TOKEN:
        raise RuntimeError("BOT_TOKEN is not set. Add it to the environment or .env file.")

    # ── 1. Storage setup ──────────────────────────────────
    logger.info("Loading storage...")
    init_storage()

    # ── 2. Build the Telegram application ─────────────────
    logger.info("Starting Telegram bot...")
    app = build_application(TELEGRAM_BOT_TOKEN)

    # ── 3. Start polling ──────────────────────────────────
    logger.info("🚀 Bot is running! Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=["message"])
    logger.info("Bot stopped.")


if __name__ == "__main__":
    main()
