import pytest

from klvscope.klv import (
    ERR_INCOMPLETE_VALUE,
    ERR_INVALID_FORMAT,
    KLVFormatError,
    KLVItem,
    build_klv,
    scan_klv,
    strip_whitespace,
)


def test_serialize_pads_key_and_length():
    assert KLVItem(key="2", value="AB").serialize() == "00202AB"


def test_build_klv_concatenates():
    assert build_klv([KLVItem("002", "AB48DE"), KLVItem("026", "4577")]) == "00206AB48DE026044577"


def test_strip_whitespace_handles_unicode_spaces():
    assert strip_whitespace("002 06 AB48DE\n") == "00206AB48DE"
    assert strip_whitespace("002\xa006\u3000AB48\u2028DE\ufeff\x85") == "00206AB48DE"
    assert strip_whitespace("\t\v\f\r\u2003\u202f\u205f") == ""


def test_strip_whitespace_keeps_control_separators():
    assert strip_whitespace("A\x1cB\x1dC\x1eD\x1fE") == "A\x1cB\x1dC\x1eD\x1fE"
    assert strip_whitespace("A\x00B\x07C") == "A\x00B\x07C"


def test_scan_yields_offsets():
    assert list(scan_klv("00202AB02600")) == [(0, "002", 2, "AB"), (7, "026", 0, "")]


def test_scan_stops_with_error_after_good_fields():
    scanner = scan_klv("00202ABxxxxx")
    assert next(scanner) == (0, "002", 2, "AB")
    with pytest.raises(KLVFormatError) as excinfo:
        next(scanner)
    assert excinfo.value.code == ERR_INVALID_FORMAT
    assert excinfo.value.position == 7
    assert str(excinfo.value) == "Invalid format at position 7"


def test_scan_incomplete_value():
    with pytest.raises(KLVFormatError) as excinfo:
        list(scan_klv("00299AB"))
    assert excinfo.value.code == ERR_INCOMPLETE_VALUE
    assert excinfo.value.position == 5
