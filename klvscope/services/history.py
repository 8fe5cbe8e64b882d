"""In-memory history of recently processed buffers."""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from ..parser import parse
from .errors import err_bad_payload, err_history_not_found


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    label: str
    data: str
    result_count: int
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=utc_now)


class HistoryStore:
    """Newest-first, size-bounded history. Nothing is persisted."""

    def __init__(self, limit: int = 10):
        if limit < 1:
            raise ValueError("history limit must be positive")
        self.limit = limit
        self._entries: list[HistoryEntry] = []
        self._lock = threading.Lock()

    def add(self, data: str, label: str | None = None) -> HistoryEntry:
        if not data.strip():
            raise err_bad_payload("Cannot record an empty buffer")

        result_count = len(parse(data).entries)
        with self._lock:
            entry = HistoryEntry(
                label=label or f"Entry {len(self._entries) + 1}",
                data=data,
                result_count=result_count,
            )
            self._entries = [entry, *self._entries[: self.limit - 1]]
        return entry

    def list(self) -> list[HistoryEntry]:
        with self._lock:
            return list(self._entries)

    def get(self, entry_id: str) -> HistoryEntry:
        with self._lock:
            for entry in self._entries:
                if entry.id == entry_id:
                    return entry
        raise err_history_not_found()

    def clear(self) -> None:
        with self._lock:
            self._entries = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
