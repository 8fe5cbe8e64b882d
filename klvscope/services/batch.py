"""Line-oriented batch parsing."""
from __future__ import annotations

from dataclasses import dataclass

from ..entries import Entry
from ..parser import parse
from .errors import err_batch_too_large


@dataclass(slots=True)
class BatchResult:
    line: int
    input: str
    entries: list[Entry]
    errors: list[str]

    @property
    def valid(self) -> bool:
        return not self.errors


def split_batch(text: str) -> list[str]:
    """Return the trimmed non-blank lines of ``text``."""

    return [line.strip() for line in text.split("\n") if line.strip()]


def process_batch(text: str, *, max_lines: int | None = None) -> list[BatchResult]:
    """Parse every non-blank line of ``text`` independently.

    ``line`` numbers count non-blank lines only, starting at 1.
    """

    lines = split_batch(text)
    if max_lines is not None and len(lines) > max_lines:
        raise err_batch_too_large(max_lines)

    results: list[BatchResult] = []
    for number, line in enumerate(lines, start=1):
        outcome = parse(line)
        results.append(BatchResult(line=number, input=line, entries=outcome.entries, errors=outcome.errors))
    return results
