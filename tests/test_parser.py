from klvscope.parser import parse, validate


def test_parse_single_entry():
    outcome = parse("00206AB48DE")
    assert outcome.errors == []
    assert len(outcome.entries) == 1
    entry = outcome.entries[0]
    assert entry.key == "002"
    assert entry.length == 6
    assert entry.value == "AB48DE"
    assert entry.offset == 0
    assert entry.field_name == "Tracking Number"
    assert entry.annotated_value is None


def test_parse_multiple_entries_follow_offset_law():
    outcome = parse("00206AB48DE02604457704903840")
    assert outcome.errors == []
    assert [e.key for e in outcome.entries] == ["002", "026", "049"]
    assert [e.offset for e in outcome.entries] == [0, 11, 20]
    for prev, nxt in zip(outcome.entries, outcome.entries[1:]):
        assert nxt.offset == prev.offset + 5 + prev.length


def test_incomplete_entry():
    outcome = parse("002")
    assert outcome.entries == []
    assert outcome.errors == ["Incomplete entry at position 0"]


def test_invalid_key_format():
    outcome = parse("A0206ABCDEF")
    assert outcome.entries == []
    assert len(outcome.errors) == 1
    assert "Invalid format" in outcome.errors[0]


def test_invalid_length_format():
    outcome = parse("002A6ABCDEF")
    assert outcome.errors == ["Invalid format at position 0"]


def test_unicode_digits_are_not_accepted():
    outcome = parse("٠٠٢06AB48DE")
    assert outcome.errors == ["Invalid format at position 0"]


def test_incomplete_value_reports_value_position():
    outcome = parse("00210ABC")
    assert outcome.entries == []
    assert outcome.errors == ["Incomplete value at position 5"]


def test_error_after_valid_entries_keeps_earlier_entries():
    outcome = parse("00206AB48DE02610")
    assert [e.key for e in outcome.entries] == ["002"]
    assert outcome.errors == ["Incomplete value at position 16"]


def test_trailing_fragment_is_incomplete_entry():
    outcome = parse("00206AB48DE0260")
    assert len(outcome.entries) == 1
    assert outcome.errors == ["Incomplete entry at position 11"]


def test_empty_and_whitespace_input():
    for raw in ("", "   ", "\n\t  "):
        outcome = parse(raw)
        assert outcome.entries == []
        assert outcome.errors == []


def test_whitespace_is_stripped_before_scanning():
    outcome = parse(" 002 06 AB48\nDE\t")
    assert outcome.errors == []
    assert outcome.entries[0].value == "AB48DE"


def test_zero_length_value():
    outcome = parse("00200")
    assert outcome.errors == []
    assert outcome.entries[0].value == ""
    assert outcome.entries[0].length == 0


def test_unknown_and_generic_keys():
    outcome = parse("12303abc99903xyz")
    assert [e.field_name for e in outcome.entries] == ["Unknown", "Generic Key"]


def test_currency_annotation():
    outcome = parse("04903840")
    entry = outcome.entries[0]
    assert entry.key == "049"
    assert entry.value == "840"
    assert entry.annotated_value == "🇺🇸 USD - US Dollar"
    assert entry.currency_detail is not None
    assert entry.currency_detail.iso_code == "USD"


def test_mcc_annotation():
    outcome = parse("026045411")
    entry = outcome.entries[0]
    assert entry.annotated_value == "5411 - Grocery Stores, Supermarkets"
    assert entry.mcc_detail is not None
    assert entry.mcc_detail.code == "5411"


def test_special_characters_and_long_values():
    value = "x" * 99
    outcome = parse(f"99999{value}00203€!#")
    assert outcome.errors == []
    assert outcome.entries[0].length == 99
    assert outcome.entries[1].value == "€!#"


def test_validate_valid_buffer():
    result = validate("00206AB48DE 026044577")
    assert result.valid is True
    assert result.entry_count == 2
    assert result.errors == []
    assert result.total_length == 20


def test_validate_invalid_buffer():
    result = validate("00206AB48DEXYZ")
    assert result.valid is False
    assert result.entry_count == 1
    assert result.errors == ["Incomplete entry at position 11"]
    assert result.total_length == 14


def test_validate_empty_string():
    result = validate("")
    assert result.valid is True
    assert result.entry_count == 0
    assert result.total_length == 0


def test_validate_agrees_with_parse():
    for raw in ("", "002", "00206AB48DE", "A0206ABCDEF", "00210ABC", "04903840é"):
        assert validate(raw).valid == (not parse(raw).errors)


def test_parse_never_raises_on_arbitrary_text():
    for raw in ("ééééééé", "🇺🇸🇺🇸🇺🇸", " 　", "00203🇺🇸", "9" * 7):
        outcome = parse(raw)
        assert isinstance(outcome.errors, list)
        assert len(outcome.errors) <= 1


def test_group_separator_is_kept_inside_values():
    outcome = parse("00203A\x1dB02600")
    assert outcome.errors == []
    assert outcome.entries[0].value == "A\x1dB"
    assert outcome.entries[1].offset == 8
    assert validate("00203A\x1fB").total_length == 8
