import pytest

from klvscope.directory import (
    CURRENCY_TABLE,
    FIELD_DIRECTORY,
    lookup_currency,
    lookup_field_name,
    lookup_mcc,
)
from klvscope.mcc_codes import MCC_TABLE


def test_field_directory_has_numeric_three_digit_keys():
    assert len(FIELD_DIRECTORY) > 100
    assert all(len(key) == 3 and key.isdigit() for key in FIELD_DIRECTORY)


def test_lookup_field_name():
    assert lookup_field_name("002") == "Tracking Number"
    assert lookup_field_name("999") == "Generic Key"
    assert lookup_field_name("123") == "Unknown"
    assert lookup_field_name("") == "Unknown"


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        FIELD_DIRECTORY["123"] = "Injected"  # type: ignore[index]
    with pytest.raises(TypeError):
        MCC_TABLE["0000"] = "Injected"  # type: ignore[index]


def test_currency_lookup_pads_probe():
    assert lookup_currency("36") == CURRENCY_TABLE["036"]
    assert lookup_currency("36").iso_code == "AUD"
    assert lookup_currency("001") is None


def test_mcc_lookup_pads_probe():
    assert lookup_mcc("742") == "Veterinary Services"
    assert lookup_mcc("0000") is None
    assert all(len(code) == 4 and code.isdigit() for code in MCC_TABLE)
