from fastapi.testclient import TestClient

from klvscope.api import app


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_requires_api_key():
    with TestClient(app) as anonymous:
        response = anonymous.post("/v1/parse", json={"data": "00200"})
        assert response.status_code == 422
        response = anonymous.post("/v1/parse", json={"data": "00200"}, headers={"X-API-Key": "nope"})
        assert response.status_code == 401


def test_parse_endpoint(client):
    response = client.post("/v1/parse", json={"data": "04903840 026045411"})
    assert response.status_code == 200
    body = response.json()
    assert body["errors"] == []
    assert body["entries"][0]["currency_detail"]["iso_code"] == "USD"
    assert body["entries"][1]["annotated_value"] == "5411 - Grocery Stores, Supermarkets"
    assert body["statistics"] == {"total": 2, "known_keys": 2, "unknown_keys": 0, "total_value_length": 7}
    assert body["history_id"] is None


def test_parse_records_history(client, history):
    response = client.post("/v1/parse", params={"record": "true"}, json={"data": "00206AB48DE"})
    history_id = response.json()["history_id"]
    assert history_id == history.list()[0].id

    listed = client.get("/v1/history").json()
    assert [item["id"] for item in listed] == [history_id]
    assert client.get(f"/v1/history/{history_id}").json()["result_count"] == 1


def test_parse_search_filters_entries(client):
    body = client.post("/v1/parse", params={"search": "tracking"}, json={"data": "00206AB48DE026044577"}).json()
    assert [entry["key"] for entry in body["entries"]] == ["002"]


def test_validate_endpoint(client):
    body = client.post("/v1/validate", json={"data": "00210ABC"}).json()
    assert body == {
        "valid": False,
        "entry_count": 0,
        "errors": ["Incomplete value at position 5"],
        "total_length": 8,
    }


def test_build_endpoint(client):
    response = client.post(
        "/v1/build",
        json={"entries": [{"key": "002", "value": "AB48DE"}, {"key": "026", "value": "4577"}, {"key": "", "value": "x"}]},
    )
    assert response.json() == {"data": "00206AB48DE026044577", "length": 20}


def test_export_endpoint(client):
    response = client.post("/v1/export", json={"data": "00206AB48DE", "format": "csv"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="klv-export.csv"' in response.headers["content-disposition"]
    assert response.text.split("\n")[1] == '"002","Tracking Number","6","AB48DE","0"'


def test_export_defaults_to_structured(client):
    response = client.post("/v1/export", json={"data": "00206AB48DE"})
    assert response.json()[0]["key"] == "002"


def test_export_rejects_unknown_format_value(client):
    response = client.post("/v1/export", json={"data": "00206AB48DE", "format": "yaml"})
    assert response.status_code == 422


def test_batch_endpoint(client):
    body = client.post("/v1/batch", json={"data": "00206AB48DE\n\n002"}).json()
    assert body["processed"] == 2
    assert body["valid"] == 1
    assert body["results"][1]["errors"] == ["Incomplete entry at position 0"]


def test_history_crud(client):
    created = client.post("/v1/history", json={"data": "00200", "label": "manual"})
    assert created.status_code == 201
    assert created.json()["label"] == "manual"

    missing = client.get("/v1/history/does-not-exist")
    assert missing.status_code == 404
    assert missing.json()["code"] == "ERR_HISTORY_NOT_FOUND"

    blank = client.post("/v1/history", json={"data": " "})
    assert blank.status_code == 400

    assert client.delete("/v1/history").status_code == 204
    assert client.get("/v1/history").json() == []


def test_directory_endpoints(client):
    fields = client.get("/v1/directory/fields").json()
    assert fields["999"] == "Generic Key"
    currencies = client.get("/v1/directory/currencies").json()
    assert {"numeric_code": "840", "iso_code": "USD", "display_name": "US Dollar", "flag_glyph": "🇺🇸"} in currencies
    mcc = client.get("/v1/directory/mcc").json()
    assert {"code": "0742", "description": "Veterinary Services"} in mcc


def test_metrics_exposes_parse_counters(client):
    client.post("/v1/validate", json={"data": "002"})
    text = client.get("/metrics").text
    assert "klvscope_buffers_parsed_total" in text
    assert 'klvscope_parse_errors_total{kind="incomplete_entry"}' in text
