import socket
from types import SimpleNamespace

import httpx
import openai
import pytest


@pytest.fixture(autouse=True)
def no_network(monkeypatch):
    """Prevent accidental network calls in unit tests by stubbing socket.create_connection."""

    def fake_create_connection(*a, **k):
        raise RuntimeError("Network calls disabled in tests")

    monkeypatch.setattr(socket, "create_connection", fake_create_connection)


@pytest.fixture
def auth_error():
    """The error the SDK raises for a rejected key."""
    request = httpx.Request("GET", "https://api.openai.com/v1/models")
    response = httpx.Response(401, request=request)
    return openai.AuthenticationError("Incorrect API key provided: sk-bad.", response=response, body=None)


class FakeStream:
    def __init__(self, pieces):
        self.pieces = list(pieces)
        self.closed = False

    def __iter__(self):
        for piece in self.pieces:
            if isinstance(piece, BaseException):
                raise piece
            if piece is None:
                yield SimpleNamespace(choices=[])
            else:
                yield SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=piece))])

    def close(self):
        self.closed = True


class FakeUpstream:
    """Controls and records what the fake OpenAI client does."""

    def __init__(self):
        self.reply = ["Hello", ", ", "I'm", " here", " to", " listen."]
        self.api_keys = []
        self.completion_calls = []
        self.model_list_calls = 0
        self.completion_error = None
        self.models_error = None
        self.streams = []

    def client(self, api_key=None, **_kwargs):
        self.api_keys.append(api_key)
        upstream = self

        class Completions:
            def create(self, **kwargs):
                upstream.completion_calls.append(kwargs)
                if upstream.completion_error is not None:
                    raise upstream.completion_error
                stream = FakeStream(upstream.reply)
                upstream.streams.append(stream)
                return stream

        class Models:
            def list(self):
                upstream.model_list_calls += 1
                if upstream.models_error is not None:
                    raise upstream.models_error
                return [SimpleNamespace(id="gpt-4"), SimpleNamespace(id="gpt-3.5-turbo")]

        return SimpleNamespace(
            chat=SimpleNamespace(completions=Completions()),
            models=Models(),
        )


@pytest.fixture
def fake_upstream(monkeypatch):
    """Replace the OpenAI SDK client with a recording fake."""
    upstream = FakeUpstream()
    monkeypatch.setattr("mindchat.relay.client.OpenAI", upstream.client)
    return upstream
