import json

from klvscope.exporter import TABULAR_HEADER, ExportFormat, export
from klvscope.parser import parse

ENTRIES = parse("00206AB48DE026044577").entries


def test_structured_export_uses_entry_field_names():
    payload = json.loads(export(ENTRIES, "structured"))
    assert payload[0] == {
        "key": "002",
        "length": 6,
        "value": "AB48DE",
        "offset": 0,
        "field_name": "Tracking Number",
    }
    assert payload[1]["annotated_value"] == "4577 (Unknown MCC)"
    assert "mcc_detail" not in payload[1]


def test_structured_export_is_indented_and_keeps_glyphs():
    text = export(parse("04903840").entries, ExportFormat.STRUCTURED)
    assert text.startswith("[\n  {\n    \"key\": \"049\"")
    assert "🇺🇸" in text


def test_tabular_export():
    lines = export(ENTRIES, "tabular").split("\n")
    assert lines[0] == TABULAR_HEADER == "Key,Name,Length,Value,Position"
    assert lines[1] == '"002","Tracking Number","6","AB48DE","0"'
    assert lines[2] == '"026","Merchant Category Code","4","4577","11"'


def test_fixed_width_export():
    lines = export(ENTRIES, "fixed-width").split("\n")
    assert lines[0] == "002   " + "Tracking Number".ljust(30) + " 6   AB48DE"
    assert len(lines) == 2


def test_empty_exports():
    assert export([], "structured") == "[]"
    assert export([], "tabular").split("\n")[0] == TABULAR_HEADER
    assert export([], "tabular").strip() == TABULAR_HEADER
    assert export([], "fixed-width") == ""


def test_aliases_and_unknown_formats():
    assert export(ENTRIES, "csv") == export(ENTRIES, "tabular")
    assert export(ENTRIES, "table") == export(ENTRIES, "fixed-width")
    assert export(ENTRIES, "json") == export(ENTRIES, "structured")
    assert export(ENTRIES, "yaml") == export(ENTRIES, "structured")
    assert export(ENTRIES) == export(ENTRIES, None)
