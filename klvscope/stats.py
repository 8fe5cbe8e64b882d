"""Summary counts and search over parsed entries."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .directory import UNKNOWN_FIELD
from .entries import Entry


@dataclass(frozen=True, slots=True)
class EntryStatistics:
    total: int
    known_keys: int
    unknown_keys: int
    total_value_length: int


def summarize(entries: Sequence[Entry]) -> EntryStatistics:
    known = sum(1 for entry in entries if entry.field_name != UNKNOWN_FIELD)
    return EntryStatistics(
        total=len(entries),
        known_keys=known,
        unknown_keys=len(entries) - known,
        total_value_length=sum(entry.length for entry in entries),
    )


def filter_entries(entries: Iterable[Entry], term: str | None) -> list[Entry]:
    """Keep entries whose key, value or field name contains ``term``.

    The key match is case-sensitive; value and field name are matched
    case-insensitively.
    """

    if not term:
        return list(entries)
    needle = term.lower()
    return [
        entry
        for entry in entries
        if term in entry.key or needle in entry.value.lower() or needle in entry.field_name.lower()
    ]
