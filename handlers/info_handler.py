"""
handlers/info_handler.py
-------------------------
Handles /info USER_ID SERVER_ID.
Runs the access gate, then delegates the lookup to InfoService.
"""

from telegram import Update
from telegram.ext import ContextTypes

from config import STOCK_ADMIN_URL
from models.access import AccessDecision, AccessStatus
from services.access_service import AccessService
from services.info_service import InfoService
from services.scraper_client import ScraperError
from utils.logger import get_logger
from utils.messaging import delete, link_keyboard, reply

logger = get_logger(__name__)
access_service = AccessService()
info_service = InfoService()

BAD_FORMAT_TEXT = "❌ Format salah.\nContoh: /info 643461181 8554"

USERNAME_TUTORIAL = (
    "⚠️ Kamu wajib punya username Telegram untuk menggunakan /info.\n\n"
    "📌 Cara membuat username Telegram:\n"
    "1️⃣ Buka Telegram di Android / iOS\n"
    "2️⃣ Masuk ke Settings / Pengaturan\n"
    "3️⃣ Pilih Username → Buat username baru\n"
    "4️⃣ Username minimal 5 karakter, hanya huruf, angka, dan _\n"
    "5️⃣ Simpan, lalu coba lagi /info\n\n"
    "Contoh: @ncus999"
)

NOT_JOINED_TEXT = "🚫 Akses ditolak.\nSilakan join terlebih dahulu:"
DISABLED_TEXT = "🚫 Fitur /info sedang dinonaktifkan oleh admin."
LOADING_TEXT = "Gathering your information…"
FAILURE_TEXT = "❌ Terjadi kesalahan saat mengambil data."
STOCK_BUTTON = ("Stok Admin Disini", STOCK_ADMIN_URL)


def join_buttons(chats: list[str]) -> list[tuple[str, str]]:
    """(text, url) pairs pointing at each chat's public t.me link."""
    names = [chat.lstrip("@") for chat in chats]
    return [(f"📢 Join {name}", f"https://t.me/{name}") for name in names]


async def _reply_denied(update: Update, decision: AccessDecision) -> None:
    """Tell the user why the gate refused the call."""
    if decision.status is AccessStatus.BAD_FORMAT:
        await reply(update, BAD_FORMAT_TEXT)
    elif decision.status is AccessStatus.NO_USERNAME:
        await reply(update, USERNAME_TUTORIAL)
    elif decision.status is AccessStatus.NOT_JOINED:
        await reply(
            update,
            NOT_JOINED_TEXT,
            reply_markup=link_keyboard(*join_buttons(decision.missing_chats)),
        )
    elif decision.status is AccessStatus.COOLDOWN:
        await reply(update, f"⏳ Cooldown {decision.remaining} second.")
    elif decision.status is AccessStatus.FEATURE_DISABLED:
        await reply(update, DISABLED_TEXT, reply_markup=link_keyboard(STOCK_BUTTON))


async def info_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Handle /info command - look up a game account.

    Usage:
        /info 643461181 8554
    """
    user = update.effective_user
    args = context.args or []

    decision = await access_service.check(context.bot, user, args)
    if not decision.allowed:
        logger.info(f"/info denied for user {user.id}: {decision.status.value}")
        await _reply_denied(update, decision)
        return

    target_id, server_id = args[0], args[1]
    loading = await reply(update, LOADING_TEXT)

    try:
        report = await info_service.build_report(target_id, server_id)
    except ScraperError:
        await delete(loading)
        await reply(update, FAILURE_TEXT)
        return
    except Exception:
        logger.exception(f"Unexpected error processing /info {target_id} {server_id}")
        await delete(loading)
        await reply(update, FAILURE_TEXT)
        return

    await delete(loading)
    await reply(update, report, reply_markup=link_keyboard(STOCK_BUTTON))
    info_service.record_success(user.id, user.username or "")
