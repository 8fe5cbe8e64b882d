"""Text renderings of parsed entries."""
from __future__ import annotations

import json
from enum import Enum
from typing import Sequence

from .entries import Entry

TABULAR_HEADER = "Key,Name,Length,Value,Position"


class ExportFormat(str, Enum):
    STRUCTURED = "structured"
    TABULAR = "tabular"
    FIXED_WIDTH = "fixed-width"

    @classmethod
    def resolve(cls, name: str | ExportFormat | None) -> ExportFormat:
        """Map a format name or alias to a member; unknown names mean structured."""

        if isinstance(name, cls):
            return name
        normalized = (name or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            return _ALIASES.get(normalized, cls.STRUCTURED)


_ALIASES = {
    "json": ExportFormat.STRUCTURED,
    "csv": ExportFormat.TABULAR,
    "table": ExportFormat.FIXED_WIDTH,
}


def _structured(entries: Sequence[Entry]) -> str:
    return json.dumps([entry.to_dict() for entry in entries], indent=2, ensure_ascii=False)


def _tabular(entries: Sequence[Entry]) -> str:
    # Embedded double quotes are written as-is.
    rows = "\n".join(
        f'"{e.key}","{e.field_name}","{e.length}","{e.value}","{e.offset}"' for e in entries
    )
    return f"{TABULAR_HEADER}\n{rows}"


def _fixed_width(entries: Sequence[Entry]) -> str:
    return "\n".join(
        f"{e.key.ljust(5)} {e.field_name.ljust(30)} {str(e.length).ljust(3)} {e.value}" for e in entries
    )


_RENDERERS = {
    ExportFormat.STRUCTURED: _structured,
    ExportFormat.TABULAR: _tabular,
    ExportFormat.FIXED_WIDTH: _fixed_width,
}


def export(entries: Sequence[Entry], format: str | ExportFormat | None = ExportFormat.STRUCTURED) -> str:
    """Render ``entries`` as structured JSON, a delimited table or fixed-width text."""

    return _RENDERERS[ExportFormat.resolve(format)](entries)
