import json
import os

import pytest
from fastapi.testclient import TestClient

from brief_relay.errors import AuthenticationError
from brief_relay.links import encode
from brief_relay.main import app, get_settings, get_transport

from conftest import RecordingTransport


@pytest.fixture
def make_client(cfg):
    def _make(transport, settings=None):
        app.dependency_overrides[get_settings] = lambda: settings or cfg
        app.dependency_overrides[get_transport] = lambda: transport
        return TestClient(app)
    yield _make
    app.dependency_overrides.clear()


def test_healthz(make_client, transport):
    assert make_client(transport).get("/healthz").json() == {"status": "ok"}


def test_submit_sends_one_message(make_client, transport):
    resp = make_client(transport).post("/api/submit-brief", data={"formData": json.dumps({"name": "Acme"})})
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert len(transport.calls) == 1
    message, _ = transport.calls[0]
    assert "Acme" in message.get_body(("plain",)).get_content()


def test_submit_with_files_and_folder_link(make_client, transport, cfg):
    resp = make_client(transport).post(
        "/api/submit-brief",
        data={"formData": json.dumps({"المنصات": ["facebook", "tiktok"]}),
              "driveLink": "https://drive.example.com/folder"},
        files=[("files", ("brief.txt", b"hello", "text/plain")), ("files", ("logo.png", b"\x89PNG", "image/png"))],
    )
    assert resp.status_code == 200
    message, _ = transport.calls[0]
    assert [p.get_filename() for p in message.iter_attachments()] == ["brief.txt", "logo.png"]
    html = message.get_body(("html",)).get_content()
    assert "facebook, tiktok" in html
    assert "https://drive.example.com/folder" in html
    assert os.listdir(cfg.upload_dir) == []


def test_missing_form_data_is_bad_request(make_client, transport):
    resp = make_client(transport).post("/api/submit-brief", data={"driveLink": "x"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "BadRequest"
    assert resp.json()["success"] is False
    assert transport.calls == []


def test_missing_credentials(make_client, transport, cfg):
    client = make_client(transport, cfg.model_copy(update={"email_pass": None}))
    resp = client.post("/api/submit-brief", data={"formData": json.dumps({"name": "Acme"})})
    assert resp.status_code == 500
    assert resp.json()["error"] == "ConfigurationError"
    assert transport.calls == []


def test_rejected_credentials(make_client):
    transport = RecordingTransport(error=AuthenticationError("Mail server rejected the sender credentials (535)"))
    resp = make_client(transport).post("/api/submit-brief", data={"formData": json.dumps({"name": "Acme"})})
    assert resp.status_code == 502
    assert resp.json()["error"] == "AuthenticationError"


def test_oversized_upload_rejected_before_transport(make_client, transport, cfg):
    client = make_client(transport, cfg.model_copy(update={"max_file_bytes": 4}))
    resp = client.post(
        "/api/submit-brief",
        data={"formData": json.dumps({"name": "Acme"})},
        files=[("files", ("big.bin", b"123456789", "application/octet-stream"))],
    )
    assert resp.status_code == 413
    assert resp.json()["error"] == "PayloadTooLarge"
    assert transport.calls == []
    assert os.listdir(cfg.upload_dir) == []


def test_share_link_create_and_resolve(make_client, transport):
    client = make_client(transport)
    reference = "https://drive.google.com/drive/folders/abc"
    body = client.post("/api/share-link", json={"reference": reference, "base_url": "https://brief.example.com"}).json()
    assert body["token"] == encode(reference)
    assert body["link"] == f"https://brief.example.com/form?d={body['token']}"
    assert client.get("/api/share-link", params={"d": body["token"]}).json() == {"reference": reference}


def test_share_link_defaults_to_public_base_url(make_client, transport):
    body = make_client(transport).post("/api/share-link", json={"reference": "x"}).json()
    assert body["link"].startswith("http://localhost:3000/form?d=")


def test_undecodable_token_resolves_to_nothing(make_client, transport):
    assert make_client(transport).get("/api/share-link", params={"d": "!!!"}).json() == {"reference": None}
