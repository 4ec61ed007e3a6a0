import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    return TestClient(app)


def _upload(mail, filename="mail.eml"):
    return {"file": (filename, mail.encode("utf-8"), "message/rfc822")}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_render_returns_pdf(client, sample_mail):
    response = client.post("/api/documents/render", files=_upload(sample_mail))

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert 'filename="mail.pdf"' in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")


def test_render_reports_missing_structure(client, mail_builder):
    response = client.post(
        "/api/documents/render", files=_upload(mail_builder(tables=4))
    )

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["error_code"] == "missing-table"
    assert "table 5" in detail["error"]


def test_empty_upload_is_rejected(client):
    response = client.post("/api/documents/render", files=_upload(""))
    assert response.status_code == 400
    assert response.json()["detail"]["error_code"] == "input-file"


def test_oversized_upload_is_rejected(client, sample_mail, monkeypatch):
    monkeypatch.setenv("RECEIPTD_MAX_FILE_SIZE", "10")
    response = client.post("/api/documents/render", files=_upload(sample_mail))
    assert response.status_code == 413
    assert response.json()["detail"]["error_code"] == "too-large"


def test_extract_returns_fields(client, sample_mail):
    response = client.post("/api/documents/extract", files=_upload(sample_mail))

    assert response.status_code == 200
    body = response.json()
    assert body["doc_type"] == "Invoice"
    assert body["layout"] == "Standard"
    assert body["doc_number"] == "30003"
    assert body["item_lines"][0]["description"] == "Crushed Stone"
    assert [t["name"] for t in body["totals"]] == ["Subtotal:", "Tax:", "Total:"]


def test_extract_uses_configured_vat_number(client, sample_mail, monkeypatch):
    monkeypatch.setenv("RECEIPTD_VAT_NUMBER", "GB123456789")
    response = client.post("/api/documents/extract", files=_upload(sample_mail))
    assert response.json()["vat_number"] == "GB123456789"


def test_extract_reports_bad_mail(client):
    response = client.post("/api/documents/extract", files=_upload("no markup here"))
    assert response.status_code == 422
    assert response.json()["detail"]["error_code"] == "missing-html"
