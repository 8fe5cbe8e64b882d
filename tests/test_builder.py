import logging

import pytest

from klvscope.builder import build
from klvscope.entries import BuildEntry
from klvscope.parser import parse


def test_build_two_entries():
    entries = [BuildEntry(key="002", value="AB48DE"), BuildEntry(key="026", value="4577")]
    assert build(entries) == "00206AB48DE026044577"


def test_build_accepts_mappings_and_tuples():
    assert build([{"key": "2", "value": "AB"}, ("49", "840")]) == "00202AB04903840"


def test_build_drops_empty_key_or_value():
    entries = [
        BuildEntry(key="", value="AB"),
        BuildEntry(key="002", value=""),
        BuildEntry(key="026", value="4577"),
    ]
    assert build(entries) == "026044577"


def test_build_empty_list():
    assert build([]) == ""


def test_zero_length_field_parses_but_cannot_be_built():
    parsed = parse("00200")
    assert parsed.entries[0].value == ""
    rebuilt = build(BuildEntry(key=e.key, value=e.value) for e in parsed.entries)
    assert rebuilt == ""


def test_long_key_is_not_truncated(caplog):
    with caplog.at_level(logging.WARNING, logger="klvscope.builder"):
        assert build([BuildEntry(key="1234", value="AB")]) == "123402AB"
    assert "exceeds wire width" in caplog.text


def test_value_of_100_chars_overflows_length_field():
    value = "x" * 100
    data = build([BuildEntry(key="002", value=value)])
    assert data == "002100" + value
    assert parse(data).entries[0].length == 10


@pytest.mark.parametrize(
    "pairs",
    [
        [("002", "AB48DE")],
        [("41", "x")],
        [("002", "AB48DE"), ("026", "4577"), ("049", "840"), ("999", "z" * 99), ("7", "x")],
        [("1", "a"), ("12", "bc"), ("123", "def"), ("045", "TestMerchant\x1d01")],
    ],
    ids=["single", "one-char", "mixed", "padded-keys"],
)
def test_round_trip_preserves_pairs(pairs):
    parsed = parse(build(BuildEntry(key=k, value=v) for k, v in pairs))
    assert parsed.errors == []
    assert [(e.key, e.value) for e in parsed.entries] == [(k.rjust(3, "0"), v) for k, v in pairs]
    assert [e.length for e in parsed.entries] == [len(v) for _, v in pairs]
    for prev, nxt in zip(parsed.entries, parsed.entries[1:]):
        assert nxt.offset == prev.offset + 5 + prev.length
