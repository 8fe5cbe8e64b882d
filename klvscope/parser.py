"""KLV parsing and validation."""
from __future__ import annotations

import dataclasses
import logging

from .decorators import DECORATORS
from .directory import lookup_field_name
from .entries import Entry, ParseOutcome, ValidationOutcome
from .klv import KLVFormatError, scan_klv, strip_whitespace

logger = logging.getLogger("klvscope.parser")


def _decorate(entry: Entry) -> Entry:
    for decorator in DECORATORS:
        patch = decorator(entry.key, entry.value)
        if patch is not None:
            entry = dataclasses.replace(entry, **patch)
    return entry


def parse(raw: str) -> ParseOutcome:
    """Split ``raw`` into entries, stopping at the first structural error.

    Whitespace anywhere in ``raw`` is ignored. Errors are returned as
    messages in the outcome rather than raised.
    """

    outcome = ParseOutcome()
    buffer = strip_whitespace(raw)
    try:
        for offset, key, length, value in scan_klv(buffer):
            entry = Entry(
                key=key,
                length=length,
                value=value,
                offset=offset,
                field_name=lookup_field_name(key),
            )
            outcome.entries.append(_decorate(entry))
    except KLVFormatError as exc:
        logger.debug(
            "klv parse halted",
            extra={"code": exc.code, "position": exc.position, "parsed_entries": len(outcome.entries)},
        )
        outcome.errors.append(exc.message)
    return outcome


def validate(raw: str) -> ValidationOutcome:
    outcome = parse(raw)
    return ValidationOutcome(
        valid=not outcome.errors,
        entry_count=len(outcome.entries),
        errors=outcome.errors,
        total_length=len(strip_whitespace(raw)),
    )
