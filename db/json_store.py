"""
db/json_store.py
----------------
Whole-file JSON snapshot storage.
Each store keeps its document in memory and rewrites the file on every save.
"""

import json
import os
from pathlib import Path
from typing import Callable

from utils.logger import get_logger

logger = get_logger(__name__)


class JsonStore:
    """
    A JSON document persisted as a single file.

    Args:
        path: Location of the JSON file.
        default_factory: Builds the document used when the file is missing
            or unreadable.
    """

    def __init__(self, path: Path, default_factory: Callable[[], dict]):
        self.path = Path(path)
        self._default_factory = default_factory
        self._data: dict | None = None

    @property
    def data(self) -> dict:
        """The in-memory document, loaded on first access."""
        if self._data is None:
            self.load()
        return self._data

    def load(self) -> dict:
        """
        Read the file into memory, creating it with defaults if it does not exist.
        A corrupt file is logged and replaced by defaults in memory only.
        """
        if not self.path.exists():
            self._data = self._default_factory()
            try:
                self.save()
                logger.info(f"Created {self.path}")
            except OSError:
                logger.warning(f"Could not create {self.path}, keeping defaults in memory")
            return self._data

        try:
            with self.path.open("r", encoding="utf-8") as fh:
                loaded = json.load(fh)
            if not isinstance(loaded, dict):
                raise ValueError(f"expected a JSON object, got {type(loaded).__name__}")
            self._data = loaded
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read {self.path}: {e}")
            self._data = self._default_factory()
        return self._data

    def save(self) -> None:
        """
        Rewrite the whole file from the in-memory document.

        Raises:
            OSError: If the file cannot be written.
        """
        if self._data is None:
            self._data = self._default_factory()
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as fh:
                json.dump(self._data, fh, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Failed to write {self.path}: {e}")
            raise
