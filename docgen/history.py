# docgen/history.py

"""
Local history of documentation runs.

Each entry keeps the file content before and after documentation was
inserted. Entries are stored newest first in a JSON file and capped to a
fixed number; contents are stored as given, without validation.
"""

from __future__ import annotations
import json
import logging
import os
import threading
import uuid
from dataclasses import dataclass, asdict, field
from datetime import datetime, timezone
from typing import List, Optional

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class HistoryRecord:
    """One stored documentation run."""
    filename: str
    language: str
    content_before: str
    content_after: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: str = field(default_factory=_now)

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryRecord":
        return cls(
            filename=data.get("filename", ""),
            language=data.get("language", ""),
            content_before=data.get("content_before", ""),
            content_after=data.get("content_after", ""),
            id=data.get("id") or str(uuid.uuid4()),
            created_at=data.get("created_at") or _now(),
        )


class HistoryStore:
    """JSON-file backed history, newest entry first."""

    def __init__(self, history_file: str = ".docgen_history.json",
                 max_entries: int = 50, enabled: bool = True):
        """
        Initialize the history store.

        Args:
            history_file: Path to the JSON history file
            max_entries: Number of entries kept (at least 1); older ones are dropped
            enabled: When False nothing is read or written
        """
        self.history_file = history_file
        if max_entries < 1:
            logger.warning(f"history max_entries must be at least 1, got {max_entries}; using 1")
            max_entries = 1
        self.max_entries = max_entries
        self.enabled = enabled
        self._lock = threading.Lock()
        self._entries: List[HistoryRecord] = self._load() if enabled else []

    def _load(self) -> List[HistoryRecord]:
        if not os.path.exists(self.history_file):
            return []
        try:
            with open(self.history_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load history from {self.history_file}: {e}")
            return []
        if not isinstance(data, list):
            logger.warning(f"Ignoring malformed history file {self.history_file}")
            return []
        return [HistoryRecord.from_dict(item) for item in data if isinstance(item, dict)]

    def _save(self) -> None:
        try:
            with open(self.history_file, "w", encoding="utf-8") as f:
                json.dump([asdict(e) for e in self._entries], f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save history to {self.history_file}: {e}")

    def add(self, filename: str, language: str, content_before: str,
            content_after: str) -> HistoryRecord:
        """Store a run and return the created record."""
        record = HistoryRecord(
            filename=filename,
            language=language,
            content_before=content_before,
            content_after=content_after,
        )
        if not self.enabled:
            return record

        with self._lock:
            self._entries.insert(0, record)
            del self._entries[self.max_entries:]
            self._save()
        logger.info(f"Saved history entry {record.id} for {filename}")
        return record

    def list(self) -> List[HistoryRecord]:
        return list(self._entries)

    def get(self, record_id: str) -> Optional[HistoryRecord]:
        return next((e for e in self._entries if e.id == record_id), None)

    def delete(self, record_id: str) -> bool:
        """Remove an entry; returns False if no entry has that id."""
        with self._lock:
            remaining = [e for e in self._entries if e.id != record_id]
            if len(remaining) == len(self._entries):
                return False
            self._entries = remaining
            if self.enabled:
                self._save()
        return True

    def clear(self) -> None:
        with self._lock:
            self._entries = []
            if self.enabled and os.path.exists(self.history_file):
                os.remove(self.history_file)
        logger.info("History cleared")
