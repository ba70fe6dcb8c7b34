# tests/test_api.py
from fastapi.testclient import TestClient

from receipt_points.config import Settings
from receipt_points.main import create_app
from receipt_points.tests.payloads import MM_RECEIPT, TARGET_RECEIPT

def test_process_then_points(client):
    r = client.post("/receipts/process", json=TARGET_RECEIPT)
    assert r.status_code == 200
    rid = r.json()["id"]
    r = client.get(f"/receipts/{rid}/points")
    assert r.status_code == 200
    assert r.json() == {"points": 12}

def test_unknown_id_404(client):
    r = client.get("/receipts/does-not-exist/points")
    assert r.status_code == 404
    assert r.json()["detail"] == "Receipt not found"

def test_malformed_json_400(client, repository):
    r = client.post("/receipts/process", content="{not json",
                    headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["error"] == "Failed to decode receipt"
    assert len(repository) == 0

def test_numeric_total_400(client, repository):
    r = client.post("/receipts/process", json={**TARGET_RECEIPT, "total": 6.49})
    assert r.status_code == 400
    assert len(repository) == 0

def test_caller_id_ignored(client, repository):
    r = client.post("/receipts/process", json={**TARGET_RECEIPT, "id": "mine"})
    rid = r.json()["id"]
    assert rid != "mine"
    assert repository.get("mine") is None
    assert repository.get(rid).retailer == "Target"

def test_empty_and_null_fields_accepted(client):
    rid = client.post("/receipts/process", json={}).json()["id"]
    assert client.get(f"/receipts/{rid}/points").json() == {"points": 75}
    rid = client.post("/receipts/process", json={"retailer": None, "items": None, "total": "0.01"}).json()["id"]
    assert client.get(f"/receipts/{rid}/points").json() == {"points": 0}

def test_items_order_preserved(client, repository):
    payload = {"items": [{"shortDescription": "b", "price": "1"}, {"shortDescription": "a", "price": "2"}]}
    rid = client.post("/receipts/process", json=payload).json()["id"]
    assert [i.short_description for i in repository.get(rid).items] == ["b", "a"]

def test_html_confirmation(client, repository):
    r = client.post("/receipts/process", json=TARGET_RECEIPT, headers={"Accept": "text/html"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "Receipt processed successfully!" in r.text
    (rid,) = [k for k in repository._receipts]
    assert f"ID: {rid}" in r.text

def test_home_form(client):
    r = client.get("/")
    assert r.status_code == 200
    assert '<form id="jsonForm"' in r.text
    assert "/receipts/process" in r.text

def test_health_counts_receipts(client):
    assert client.get("/health").json() == {"ok": True, "receipts": 0}
    client.post("/receipts/process", json=MM_RECEIPT)
    assert client.get("/health").json() == {"ok": True, "receipts": 1}

def test_alphanumeric_mode():
    client = TestClient(create_app(settings=Settings(RETAILER_POINTS_MODE="alphanumeric")))
    rid = client.post("/receipts/process", json=MM_RECEIPT).json()["id"]
    assert client.get(f"/receipts/{rid}/points").json() == {"points": 109}
