"""Utility helpers to build and scan KLV (key, length, value) buffers."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Iterable, Iterator

KEY_WIDTH: Final = 3
LENGTH_WIDTH: Final = 2
HEADER_WIDTH: Final = KEY_WIDTH + LENGTH_WIDTH

ERR_INCOMPLETE_ENTRY: Final = "ERR_INCOMPLETE_ENTRY"
ERR_INVALID_FORMAT: Final = "ERR_INVALID_FORMAT"
ERR_INCOMPLETE_VALUE: Final = "ERR_INCOMPLETE_VALUE"

# \s on str also matches the ASCII separators U+001C-U+001F, which must survive.
_WHITESPACE = re.compile(r"[\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+")
# ASCII only: str patterns treat \d as any Unicode decimal digit.
_KEY_PATTERN = re.compile(r"[0-9]{3}")
_LENGTH_PATTERN = re.compile(r"[0-9]{2}")


@dataclass(slots=True)
class KLVFormatError(Exception):
    code: str
    message: str
    position: int

    def __str__(self) -> str:  # noqa: D401 override
        return self.message


def incomplete_entry(position: int) -> KLVFormatError:
    return KLVFormatError(code=ERR_INCOMPLETE_ENTRY, message=f"Incomplete entry at position {position}", position=position)


def invalid_format(position: int) -> KLVFormatError:
    return KLVFormatError(code=ERR_INVALID_FORMAT, message=f"Invalid format at position {position}", position=position)


def incomplete_value(position: int) -> KLVFormatError:
    return KLVFormatError(code=ERR_INCOMPLETE_VALUE, message=f"Incomplete value at position {position}", position=position)


@dataclass(frozen=True)
class KLVItem:
    key: str
    value: str

    def serialize(self) -> str:
        # Neither side is truncated: long keys and 100+ char values widen their fields.
        key = self.key.rjust(KEY_WIDTH, "0")
        length = str(len(self.value)).rjust(LENGTH_WIDTH, "0")
        return f"{key}{length}{self.value}"


def strip_whitespace(raw: str) -> str:
    """Remove every (Unicode) whitespace character from ``raw``."""

    return _WHITESPACE.sub("", raw)


def build_klv(items: Iterable[KLVItem]) -> str:
    """Serialize iterable of KLV items into a flat buffer."""

    return "".join(item.serialize() for item in items)


def scan_klv(buffer: str) -> Iterator[tuple[int, str, int, str]]:
    """Yield ``(offset, key, length, value)`` for each field of a whitespace-free buffer.

    Scanning is single pass and stops with :class:`KLVFormatError` at the first
    structural problem; fields yielded before the failure remain valid.
    """

    idx = 0
    total = len(buffer)
    while idx < total:
        if idx + HEADER_WIDTH > total:
            raise incomplete_entry(idx)
        key = buffer[idx : idx + KEY_WIDTH]
        length_field = buffer[idx + KEY_WIDTH : idx + HEADER_WIDTH]
        if not _KEY_PATTERN.fullmatch(key) or not _LENGTH_PATTERN.fullmatch(length_field):
            raise invalid_format(idx)
        length = int(length_field)
        value_start = idx + HEADER_WIDTH
        value_end = value_start + length
        if value_end > total:
            raise incomplete_value(value_start)
        yield idx, key, length, buffer[value_start:value_end]
        idx = value_end
