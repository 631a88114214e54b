from fastapi.testclient import TestClient

from offerings.config import Settings, get_settings
from offerings.errors import FetchError
from offerings.main import app

client = TestClient(app)


def _use_settings(settings):
    app.dependency_overrides[get_settings] = lambda: settings


def teardown_function():
    app.dependency_overrides.clear()


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_preview_uploaded_csv(feed_csv, settings):
    _use_settings(settings)
    files = {"file": ("oferta.csv", feed_csv.encode("utf-8-sig"), "text/csv")}
    r = client.post("/offerings/preview", files=files, params={"today": "2024-06-01"})
    assert r.status_code == 200

    data = r.json()
    assert data["count"] == 2
    assert data["reference_date"] == "2024-06-01"
    assert [item["ficha"] for item in data["items"]] == ["2900002", "2900001"]
    assert data["items"][1]["enrollment_url"].endswith("search=2900001")


def test_preview_rejects_non_csv(settings):
    _use_settings(settings)
    files = {"file": ("oferta.xlsx", b"PK\x03\x04", "application/octet-stream")}
    r = client.post("/offerings/preview", files=files)
    assert r.status_code == 422


def test_offerings_from_feed(monkeypatch, feed_csv, settings):
    _use_settings(settings)
    monkeypatch.setattr("offerings.pipeline.fetch_feed_text", lambda url, **kwargs: feed_csv)

    r = client.get("/offerings", params={"today": "2100-01-01"})
    assert r.status_code == 200
    assert r.json()["count"] == 0
    assert r.json()["message"] == "No hay fichas vigentes."


def test_offerings_missing_configuration():
    _use_settings(Settings(_env_file=None, sheet_csv_url=None))

    r = client.get("/offerings")
    assert r.status_code == 500
    assert "SHEET_CSV_URL" in r.json()["detail"]


def test_offerings_fetch_failure(monkeypatch, settings):
    _use_settings(settings)

    def fail(url, **kwargs):
        raise FetchError("No se pudo leer el CSV (HTTP 503).", status_code=503)

    monkeypatch.setattr("offerings.pipeline.fetch_feed_text", fail)

    r = client.get("/offerings")
    assert r.status_code == 502
    assert r.json() == {"detail": "No se pudo leer el CSV (HTTP 503)."}


def test_startup_configures_logging():
    app.dependency_overrides.clear()
    with TestClient(app) as started:
        assert started.get("/health").status_code == 200
