"""
db/stores.py
------------
The two shared JSON stores used by the bot.
Call `init_storage()` once on startup to create or load the files:
    - database.json: users, global success counter, feature flags
    - cooldown.json: last /info invocation per user
"""

from config import COOLDOWN_FILE, DATABASE_FILE
from db.json_store import JsonStore
from utils.logger import get_logger

logger = get_logger(__name__)


def default_database() -> dict:
    """Initial content of database.json."""
    return {"users": {}, "total_success": 0, "feature": {"info": True}}


database_store = JsonStore(DATABASE_FILE, default_database)
cooldown_store = JsonStore(COOLDOWN_FILE, dict)


def init_storage() -> None:
    """
    Load both stores, creating missing files with their defaults.
    Safe to call multiple times.
    """
    database_store.load()
    cooldown_store.load()
    logger.info(
        f"Storage ready: {database_store.path} "
        f"({len(database_store.data.get('users', {}))} users), "
        f"{cooldown_store.path} ({len(cooldown_store.data)} cooldowns)"
    )
