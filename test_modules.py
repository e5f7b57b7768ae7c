#!/usr/bin/env python3
"""
Tests for the configuration, error handling and key storage modules.
"""

import json

from mindchat.auth import KeyStore
from mindchat.config import settings
from mindchat.utils import (
    AuthError,
    ErrorHandler,
    InputError,
    RelayError,
    SessionBusyError,
    UpstreamError,
    ValidationFailure,
)


def test_config_module():
    """Model parameters are fixed for every relay call."""
    assert settings.model.model_name == "gpt-4"
    assert settings.model.temperature == 0.7
    assert settings.model.max_tokens == 1000
    assert settings.storage.api_key_name == "openai-api-key"
    assert settings.ui.api_key_prefix == "sk-"


def test_api_config():
    assert settings.api.chat_path == "/api/chat"
    assert settings.api.validate_path == "/api/validate"
    assert settings.api.request_timeout is None


def test_error_status_codes():
    assert InputError("x").status_code == 400
    assert AuthError("x").status_code == 401
    assert UpstreamError("x").status_code == 500
    assert ValidationFailure("x").status_code == 400
    assert RelayError("x", status_code=429).status_code == 429
    assert isinstance(SessionBusyError("x"), InputError)


def test_classify_api_key_errors():
    note = ErrorHandler.classify(RelayError("Incorrect API key provided: sk-abc", status_code=500))
    assert note.category == "api_key"
    assert note.title == "API Key Error"

    note = ErrorHandler.classify(RelayError("Unauthorized", status_code=401))
    assert note.category == "api_key"


def test_classify_rate_limit_errors():
    note = ErrorHandler.classify(RelayError("Rate limit reached for gpt-4 in organization", status_code=500))
    assert note.category == "rate_limit"
    assert note.title == "Rate Limit Exceeded"


def test_classify_generic_errors():
    note = ErrorHandler.classify(RuntimeError("Connection reset by peer"))
    assert note.category == "generic"
    assert note.title == "Error"
    assert note.description == "Connection reset by peer"


def test_classify_input_errors_keep_their_text():
    note = ErrorHandler.classify(InputError("Please enter an API key"))
    assert note.category == "input"
    assert note.description == "Please enter an API key"

    note = ErrorHandler.classify(ValidationFailure("The API key could not be validated with OpenAI"))
    assert note.title == "Invalid API Key"


def test_key_store_persists_between_instances(tmp_path):
    path = tmp_path / "nested" / "storage.json"
    store = KeyStore(path)
    assert store.get("openai-api-key") is None

    store.set("openai-api-key", "sk-first")
    assert KeyStore(path).get("openai-api-key") == "sk-first"
    assert json.loads(path.read_text(encoding="utf-8")) == {"openai-api-key": "sk-first"}

    store.remove("openai-api-key")
    assert KeyStore(path).get("openai-api-key") is None


def test_key_store_ignores_corrupt_file(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{not json", encoding="utf-8")
    assert KeyStore(path).get("openai-api-key") is None

    path.write_text(json.dumps(["sk-list"]), encoding="utf-8")
    assert KeyStore(path).get("openai-api-key") is None


def test_key_store_notifies_changes_from_other_writers(tmp_path):
    path = tmp_path / "storage.json"
    this_tab = KeyStore(path)
    other_tab = KeyStore(path)
    seen = []
    unsubscribe = this_tab.subscribe(lambda name, value: seen.append((name, value)))

    other_tab.set("openai-api-key", "sk-other")
    assert this_tab.poll() == ["openai-api-key"]
    assert this_tab.get("openai-api-key") == "sk-other"
    assert seen == [("openai-api-key", "sk-other")]

    # Nothing changed since the last read
    assert this_tab.poll() == []

    other_tab.remove("openai-api-key")
    this_tab.poll()
    assert seen[-1] == ("openai-api-key", None)

    unsubscribe()
    other_tab.set("openai-api-key", "sk-again")
    this_tab.poll()
    assert len(seen) == 2


def test_key_store_own_writes_are_not_reported(tmp_path):
    store = KeyStore(tmp_path / "storage.json")
    seen = []
    store.subscribe(lambda name, value: seen.append(name))
    store.set("openai-api-key", "sk-mine")
    assert store.poll() == []
    assert seen == []
