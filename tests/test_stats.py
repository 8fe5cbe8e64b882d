from klvscope.parser import parse
from klvscope.stats import filter_entries, summarize

ENTRIES = parse("00206AB48DE02604457712303abc").entries


def test_summarize_counts_known_and_unknown():
    stats = summarize(ENTRIES)
    assert stats.total == 3
    assert stats.known_keys == 2
    assert stats.unknown_keys == 1
    assert stats.total_value_length == 13


def test_summarize_empty():
    stats = summarize([])
    assert (stats.total, stats.known_keys, stats.unknown_keys, stats.total_value_length) == (0, 0, 0, 0)


def test_filter_by_key_value_and_name():
    assert [e.key for e in filter_entries(ENTRIES, "026")] == ["026"]
    assert [e.key for e in filter_entries(ENTRIES, "ab48")] == ["002"]
    assert [e.key for e in filter_entries(ENTRIES, "merchant")] == ["026"]
    assert [e.key for e in filter_entries(ENTRIES, "unknown")] == ["123"]


def test_filter_without_term_returns_everything():
    assert filter_entries(ENTRIES, "") == ENTRIES
    assert filter_entries(ENTRIES, None) == ENTRIES
