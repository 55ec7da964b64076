"""
history_store.py

Saved text history ("Saved Vault").
Each record is {id, text, timestamp}, newest first.

Backends:
- InMemoryHistoryStore: process lifetime only
- JsonFileHistoryStore: JSON list on disk, loaded on start and
  rewritten on every change
"""
import json
import logging
import os
import tempfile
import threading
import time
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional

from ..config import get_settings

logger = logging.getLogger(__name__)


class HistoryStoreError(Exception):
    """Raised when history cannot be read or written."""


@dataclass
class HistoryItem:
    """A saved piece of output text."""
    id: str
    text: str
    timestamp: int  # epoch milliseconds

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "HistoryItem":
        return cls(
            id=str(data["id"]),
            text=str(data["text"]),
            timestamp=int(data["timestamp"])
        )


class HistoryStore:
    """
    Base history store.
    Subclasses persist the list by overriding _persist().
    """

    def __init__(self):
        self._items: List[HistoryItem] = []
        self._lock = threading.Lock()

    def load(self) -> List[HistoryItem]:
        """Load saved items. Base store has nothing to load."""
        return self.list_items()

    def _persist(self, items: List[HistoryItem]):
        """Write a new list before it replaces the current one. No-op for in-memory stores."""

    def _new_id(self, timestamp: int) -> str:
        """Timestamp based id, bumped if another item already has it."""
        taken = {item.id for item in self._items}
        candidate = timestamp
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def list_items(self) -> List[HistoryItem]:
        """All items, newest first."""
        with self._lock:
            return list(self._items)

    def get(self, item_id: str) -> Optional[HistoryItem]:
        with self._lock:
            for item in self._items:
                if item.id == item_id:
                    return item
        return None

    def add(self, text: str) -> HistoryItem:
        """Save text as a new item at the top of the list."""
        timestamp = int(time.time() * 1000)
        with self._lock:
            item = HistoryItem(id=self._new_id(timestamp), text=text, timestamp=timestamp)
            items = [item] + self._items
            self._persist(items)
            self._items = items
        logger.info(f"[HistoryStore] Saved item {item.id} ({len(text)} chars)")
        return item

    def delete(self, item_id: str) -> bool:
        """Remove an item. Returns False if it did not exist."""
        with self._lock:
            remaining = [item for item in self._items if item.id != item_id]
            if len(remaining) == len(self._items):
                return False
            self._persist(remaining)
            self._items = remaining
        logger.info(f"[HistoryStore] Deleted item {item_id}")
        return True

    def clear(self):
        with self._lock:
            self._persist([])
            self._items = []
        logger.info("[HistoryStore] Cleared history")

    def __len__(self) -> int:
        return len(self._items)


class InMemoryHistoryStore(HistoryStore):
    """History kept in memory only."""


class JsonFileHistoryStore(HistoryStore):
    """
    History persisted as a JSON list.
    The file is read once on construction and replaced atomically
    after every change.
    """

    def __init__(self, path):
        super().__init__()
        self.path = Path(path)
        self.load()

    def load(self) -> List[HistoryItem]:
        if not self.path.exists():
            logger.info(f"[JsonFileHistoryStore] No history at {self.path}, starting empty")
            with self._lock:
                self._items = []
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            items = [HistoryItem.from_dict(entry) for entry in raw]
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise HistoryStoreError(f"Cannot read history file {self.path}: {e}") from e

        with self._lock:
            self._items = items
        logger.info(f"[JsonFileHistoryStore] Loaded {len(items)} items from {self.path}")
        return list(items)

    def _persist(self, items: List[HistoryItem]):
        data = [item.to_dict() for item in items]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as e:
            raise HistoryStoreError(f"Cannot write history file {self.path}: {e}") from e


# Singleton instance
_history_store = None

def get_history_store() -> HistoryStore:
    """Get or create the configured history store."""
    global _history_store
    if _history_store is None:
        settings = get_settings()
        if settings.HISTORY_BACKEND == "memory":
            _history_store = InMemoryHistoryStore()
        else:
            _history_store = JsonFileHistoryStore(settings.HISTORY_FILE_PATH)
    return _history_store
