"""Serialize ordered (key, value) pairs back into a KLV buffer."""
from __future__ import annotations

import logging
from typing import Iterable, Mapping

from .entries import BuildEntry
from .klv import KEY_WIDTH, KLVItem, build_klv

logger = logging.getLogger("klvscope.builder")

_MAX_VALUE_LENGTH = 99

BuildSource = BuildEntry | Mapping[str, str] | tuple[str, str]


def _coerce(entry: BuildSource) -> KLVItem:
    if isinstance(entry, BuildEntry):
        return KLVItem(key=entry.key, value=entry.value)
    if isinstance(entry, Mapping):
        return KLVItem(key=entry.get("key") or "", value=entry.get("value") or "")
    key, value = entry
    return KLVItem(key=key, value=value)


def build(entries: Iterable[BuildSource]) -> str:
    """Build a KLV buffer, silently dropping entries with an empty key or value.

    Because empty values are dropped, a zero-length field can be parsed but
    not built. Keys longer than three characters and values longer than 99
    characters are emitted as given, producing a buffer that will not parse
    back into the same fields.
    """

    items = [item for item in (_coerce(entry) for entry in entries) if item.key and item.value]
    for item in items:
        if len(item.key) > KEY_WIDTH or len(item.value) > _MAX_VALUE_LENGTH:
            logger.warning(
                "klv field exceeds wire width",
                extra={"key": item.key, "value_length": len(item.value)},
            )
    return build_klv(items)
