import pytest
from fastapi.testclient import TestClient

from compair.config import Settings
from compair.main import app
from compair.routers import compare as compare_router


@pytest.fixture
def client():
    return TestClient(app)


def upload(name, content):
    return (name, content, "text/plain")


def test_status(client):
    resp = client.get("/status")
    assert resp.status_code == 200
    assert resp.json()["status"] == "running"


def test_index_page_is_served(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert 'id="compareBtn"' in resp.text


def test_compare_files(client):
    resp = client.post(
        "/api/compare-files",
        files={
            "file1": upload("a.txt", b"hello world\nsame"),
            "file2": upload("b.txt", b"hello there\nsame\nextra"),
        },
        data={"request_id": "7"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["request_id"] == "7"
    assert body["title"] == "a.txt - b.txt"
    result = body["result"]
    assert result["line_count"] == 3
    assert result["changed_line_count"] == 2
    assert result["lines"][0]["rendered_a"] == 'hello <span class="changed">world</span>'
    assert result["lines"][1]["identical"] is True
    assert result["lines"][2]["rendered_b"] == '<span class="changed">extra</span>'


def test_request_id_is_generated_when_absent(client):
    resp = client.post(
        "/api/compare-files",
        files={"file1": upload("a.txt", b"x"), "file2": upload("b.txt", b"x")},
    )
    assert resp.status_code == 200
    assert resp.json()["request_id"]


def test_missing_file_is_reported(client):
    resp = client.post("/api/compare-files", files={"file1": upload("a.txt", b"x")})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Please select both files."


def test_undecodable_file_is_reported(client):
    resp = client.post(
        "/api/compare-files",
        files={"file1": upload("a.txt", b"x"), "file2": ("b.bin", b"\xff\xfe\xfa", "application/octet-stream")},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("Could not read b.bin")


def test_oversized_file_is_rejected(client, monkeypatch):
    monkeypatch.setattr(
        compare_router.service,
        "settings",
        Settings(encoding="utf-8", max_upload_bytes=4, highlight_class="changed", log_level="INFO"),
    )
    resp = client.post(
        "/api/compare-files",
        files={"file1": upload("a.txt", b"small"), "file2": upload("b.txt", b"x")},
    )
    assert resp.status_code == 413


def test_compare_text(client):
    resp = client.post(
        "/api/compare-text",
        json={"text_a": "a  b", "text_b": "a b", "file_name_a": "left", "file_name_b": "right"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "left - right"
    words = body["result"]["lines"][0]["words"]
    assert [w["changed"] for w in words] == [False, True, True]


def test_compare_text_defaults_file_names(client):
    body = client.post("/api/compare-text", json={"text_a": "", "text_b": ""}).json()
    assert body["title"] == "file1 - file2"
    assert body["result"]["lines"][0]["identical"] is True
