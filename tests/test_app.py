import pytest
from fastapi.testclient import TestClient

import config
from app import app, get_analyzer
from services.analysis import LashAnalyzer
from services.classifier import LashClassifier
from services.report import ReportGenerator

JPEG = ("eye.jpg", b"\xff\xd8\xff\xe0fake-jpeg", "image/jpeg")


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def use_gateway(gateway):
    app.dependency_overrides[get_analyzer] = lambda: LashAnalyzer(
        LashClassifier(gateway), ReportGenerator(gateway)
    )


def test_ping(client):
    r = client.get("/ping")
    assert r.status_code == 200
    assert "status" in r.json()


def test_generate_map_requires_image(client):
    r = client.post("/generate-map", data={"language": "en"})
    assert r.status_code == 400
    assert "error" in r.json()


def test_generate_map_defaults_to_polish(client):
    r = client.post("/generate-map", files={"image": JPEG})
    assert r.status_code == 200
    assert r.json()["map"].startswith("Przykładowa mapa rzęs")


def test_generate_map_english(client):
    r = client.post("/generate-map", files={"image": JPEG}, data={"language": "EN"})
    assert r.status_code == 200
    assert "Sample lash map" in r.json()["map"]


def test_generate_map_rejects_large_upload(client, monkeypatch):
    monkeypatch.setattr(config, "MAX_UPLOAD_BYTES", 4)
    r = client.post("/generate-map", files={"image": JPEG})
    assert r.status_code == 413
    assert "error" in r.json()


def test_analyze_returns_result(client, stub_gateway):
    gateway = stub_gateway('{"type": "natural"}', "\n Strengths of the natural lashes:\n- dense \n")
    use_gateway(gateway)

    r = client.post("/analyze", files={"image": JPEG}, data={"language": "en", "mode": "detailed"})

    assert r.status_code == 200
    assert r.json() == {
        "status": "success",
        "type": "natural",
        "mode": "detailed",
        "result": "Strengths of the natural lashes:\n- dense",
    }
    assert gateway.calls[0]["image"].data_url().startswith("data:image/jpeg;base64,")


def test_analyze_requires_image(client, stub_gateway):
    use_gateway(stub_gateway())
    r = client.post("/analyze", data={"language": "en"})
    assert r.status_code == 400
    assert "error" in r.json()


def test_analyze_report_failure_is_500(client, stub_gateway):
    use_gateway(stub_gateway('{"type": "natural"}', RuntimeError("model unavailable")))
    r = client.post("/analyze", files={"image": JPEG})
    assert r.status_code == 500
    body = r.json()
    assert body["error"]
    assert "model unavailable" in body["details"]


def test_analyze_classification_failure_still_succeeds(client, stub_gateway):
    use_gateway(stub_gateway(RuntimeError("OPENAI_API_KEY not set"), "raport"))
    r = client.post("/analyze", files={"image": JPEG})
    assert r.status_code == 200
    assert r.json()["type"] == "extensions"


def test_oversized_request_rejected_before_model_call(client, stub_gateway, monkeypatch):
    gateway = stub_gateway()
    use_gateway(gateway)
    monkeypatch.setattr(config, "MAX_UPLOAD_BYTES", 4)

    big = ("eye.jpg", b"\xff" * (128 * 1024), "image/jpeg")
    r = client.post("/analyze", files={"image": big})

    assert r.status_code == 413
    assert "error" in r.json()
    assert gateway.calls == []
