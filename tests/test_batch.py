import pytest

from klvscope.services.batch import process_batch, split_batch
from klvscope.services.errors import ServiceError


def test_split_batch_drops_blank_lines():
    assert split_batch("  00206AB48DE \n\n   \n026044577\n") == ["00206AB48DE", "026044577"]


def test_process_batch_numbers_non_blank_lines():
    results = process_batch("00206AB48DE026044577\n\n25103EMV25107Visa26105542200015INVALID_ENTRY\n")
    assert [r.line for r in results] == [1, 2]
    assert results[0].valid
    assert [e.key for e in results[0].entries] == ["002", "026"]
    assert not results[1].valid
    assert results[1].input == "25103EMV25107Visa26105542200015INVALID_ENTRY"
    assert len(results[1].errors) == 1


def test_process_batch_empty_input():
    assert process_batch("\n \n") == []


def test_process_batch_line_limit():
    with pytest.raises(ServiceError) as excinfo:
        process_batch("00200\n00200\n00200", max_lines=2)
    assert excinfo.value.code == "ERR_BATCH_TOO_LARGE"
    assert excinfo.value.status_code == 413
