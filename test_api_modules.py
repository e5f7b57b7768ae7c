#!/usr/bin/env python3
"""
Tests for the relay service endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from mindchat.api.server import app
from mindchat.relay import SYSTEM_PROMPT

client = TestClient(app)


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_chat_streams_reply(fake_upstream):
    r = client.post(
        "/api/chat",
        json={"messages": [{"id": "1", "role": "user", "content": "Hello"}], "apiKey": "sk-valid"},
    )
    assert r.status_code == 200, r.text
    assert r.headers["content-type"].startswith("text/plain")
    assert r.text == "".join(fake_upstream.reply)

    call = fake_upstream.completion_calls[0]
    assert call["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert call["messages"][1] == {"role": "user", "content": "Hello"}
    assert len(call["messages"]) == 2


def test_chat_without_key_is_rejected(fake_upstream):
    for body in (
        {"messages": [{"role": "user", "content": "Hello"}]},
        {"messages": [{"role": "user", "content": "Hello"}], "apiKey": ""},
        {"messages": [{"role": "user", "content": "Hello"}], "apiKey": None},
    ):
        r = client.post("/api/chat", json=body)
        assert r.status_code == 401
        assert r.json() == {"error": "API key is required"}
    assert fake_upstream.api_keys == []
    assert fake_upstream.completion_calls == []


def test_chat_upstream_failure_returns_500(fake_upstream, auth_error):
    fake_upstream.completion_error = auth_error
    r = client.post(
        "/api/chat",
        json={"messages": [{"role": "user", "content": "Hello"}], "apiKey": "sk-bad"},
    )
    assert r.status_code == 500
    assert r.json() == {"error": str(auth_error)}


def test_chat_failure_after_streaming_started_aborts_response(fake_upstream, caplog):
    fake_upstream.reply = ["Hello", ConnectionResetError("upstream connection lost")]

    # Headers are already sent, so the failure can only abort the transfer
    with pytest.raises(Exception):
        client.post(
            "/api/chat",
            json={"messages": [{"role": "user", "content": "Hello"}], "apiKey": "sk-valid"},
        )

    assert fake_upstream.streams[0].closed
    assert "Upstream stream aborted" in caplog.text


def test_chat_malformed_messages_return_500(fake_upstream):
    r = client.post(
        "/api/chat",
        json={"messages": [{"role": "narrator", "content": "Hello"}], "apiKey": "sk-valid"},
    )
    assert r.status_code == 500
    assert "error" in r.json()
    assert fake_upstream.completion_calls == []


def test_chat_invalid_json_returns_500(fake_upstream):
    r = client.post("/api/chat", content=b"not json", headers={"content-type": "application/json"})
    assert r.status_code == 500
    assert "error" in r.json()


def test_validate_accepts_working_key(fake_upstream):
    r = client.post("/api/validate", json={"apiKey": "sk-valid"})
    assert r.status_code == 200
    assert r.json() == {"valid": True}
    assert fake_upstream.api_keys == ["sk-valid"]


def test_validate_rejects_unauthorized_key(fake_upstream, auth_error):
    fake_upstream.models_error = auth_error
    r = client.post("/api/validate", json={"apiKey": "sk-bad"})
    assert r.status_code == 400
    assert r.json() == {"valid": False, "error": "Invalid API key"}


def test_validate_requires_key(fake_upstream):
    r = client.post("/api/validate", json={})
    assert r.status_code == 400
    assert r.json() == {"valid": False, "error": "API key is required"}
    assert fake_upstream.model_list_calls == 0


def test_validate_invalid_json(fake_upstream):
    r = client.post("/api/validate", content=b"{", headers={"content-type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"valid": False, "error": "Invalid API key"}
