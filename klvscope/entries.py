"""Value objects produced and consumed by the KLV parser, builder and exporter."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class CurrencyDetail:
    iso_code: str
    display_name: str
    flag_glyph: str


@dataclass(frozen=True, slots=True)
class MccDetail:
    code: str
    description: str


@dataclass(frozen=True, slots=True)
class Entry:
    """One parsed field.

    ``offset`` is the position of the key in the whitespace-stripped buffer.
    """

    key: str
    length: int
    value: str
    offset: int
    field_name: str
    annotated_value: str | None = None
    currency_detail: CurrencyDetail | None = None
    mcc_detail: MccDetail | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping, omitting annotations that were never set."""

        return {name: value for name, value in asdict(self).items() if value is not None}


@dataclass(frozen=True, slots=True)
class BuildEntry:
    key: str
    value: str


@dataclass(slots=True)
class ParseOutcome:
    entries: list[Entry] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    valid: bool
    entry_count: int
    errors: list[str]
    total_length: int
