"""
handlers/admin_handler.py
--------------------------
Admin-only commands: toggle /info and show the success ranking.
"""

from telegram import Update
from telegram.ext import ContextTypes

from repositories.feature_repo import FeatureRepository
from security.auth import admin_only
from services.access_service import INFO_FEATURE
from services.ranking_service import RankingService
from utils.logger import get_logger
from utils.messaging import reply

logger = get_logger(__name__)
feature_repo = FeatureRepository()
ranking_service = RankingService()

SAVE_FAILED_TEXT = "⚠️ Gagal menyimpan pengaturan."


async def _set_info_feature(update: Update, enabled: bool, text: str) -> None:
    try:
        feature_repo.set_enabled(INFO_FEATURE, enabled)
    except OSError as e:
        logger.error(f"Failed to persist /info flag: {e}")
        await reply(update, SAVE_FAILED_TEXT)
        return
    logger.info(f"Admin {update.effective_user.id} set /info enabled={enabled}")
    await reply(update, text)


@admin_only
async def offinfo_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /offinfo command - disable /info for non-admins."""
    await _set_info_feature(update, False, "🚫 Fitur /info dinonaktifkan.")


@admin_only
async def oninfo_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /oninfo command - enable /info again."""
    await _set_info_feature(update, True, "✅ Fitur /info diaktifkan.")


@admin_only
async def ranking_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /ranking command - list users by completed lookups."""
    await reply(update, ranking_service.format_ranking())
