"""
repositories/feature_repo.py
-----------------------------
Data access layer for the admin-toggled feature flags in database.json.
"""

from typing import Optional

from db.json_store import JsonStore
from db.stores import database_store
from utils.logger import get_logger

logger = get_logger(__name__)


class FeatureRepository:
    """Repository for the `feature` map. Unknown features are enabled."""

    def __init__(self, store: Optional[JsonStore] = None):
        self.store = store or database_store

    def is_enabled(self, name: str) -> bool:
        return bool(self.store.data.get("feature", {}).get(name, True))

    def set_enabled(self, name: str, enabled: bool) -> None:
        """
        Turn a feature on or off and persist.

        Raises:
            OSError: If database.json cannot be written.
        """
        self.store.data.setdefault("feature", {})[name] = enabled
        self.store.save()
        logger.info(f"Feature '{name}' {'enabled' if enabled else 'disabled'}")
