"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    """Read an integer env var, falling back to the default when unset or invalid."""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("BOT_TOKEN", "")

# ── Scraper endpoint ──────────────────────────────────────
SCRAPER_URL: str = os.getenv("SCRAPER_URL", "https://cancelmlbb.online/tes.php")
SCRAPER_TIMEOUT: int = _int_env("SCRAPER_TIMEOUT", 30)

# ── Required memberships ──────────────────────────────────
CHANNEL: str = os.getenv("CHANNEL", "@allgamencus")
GROUP: str = os.getenv("GROUP", "@mahsuselitz")
REQUIRED_CHATS: list[str] = [c for c in (CHANNEL, GROUP) if c]

# ── Links ─────────────────────────────────────────────────
STOCK_ADMIN_URL: str = os.getenv(
    "STOK_ADMIN", "https://whatsapp.com/channel/0029VbA4PrD5fM5TMgECoE1E"
)

# ── Cooldown ──────────────────────────────────────────────
COOLDOWN_SECONDS: int = _int_env("COOLDOWN", 180)

# ── Admins ────────────────────────────────────────────────
_raw_ids = os.getenv("ADMIN_IDS", "7268861803,123456789")
ADMIN_IDS: list[int] = [
    int(uid.strip()) for uid in _raw_ids.split(",") if uid.strip().isdigit()
]

# ── Health check ──────────────────────────────────────────
PORT: int = _int_env("PORT", 3000)

# ── Storage ───────────────────────────────────────────────
DATA_DIR: Path = Path(os.getenv("DATA_DIR", "."))
DATABASE_FILE: Path = DATA_DIR / "database.json"
COOLDOWN_FILE: Path = DATA_DIR / "cooldown.json"

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
