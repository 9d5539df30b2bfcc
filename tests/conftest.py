import pytest

from gemini_proxy import create_app
from gemini_proxy.config import Settings


class FakeResponse:
    def __init__(self, status_code=200, json_body=None, text=""):
        self.status_code = status_code
        self._json_body = json_body
        self.text = text

    def json(self):
        if self._json_body is None:
            raise ValueError("No JSON object could be decoded")
        return self._json_body


def gemini_reply(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class StubUpstream:
    def __init__(self):
        self.response = FakeResponse(200, gemini_reply("Hello"))
        self.calls = []

    def reply(self, status_code=200, json_body=None, text=""):
        self.response = FakeResponse(status_code, json_body, text)

    def reply_with_text(self, text, status_code=200):
        self.reply(status_code, gemini_reply(text))

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture
def app():
    return create_app(Settings(gemini_api_key="test-key"))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def upstream(monkeypatch):
    """Replace requests.post with a stub; use reply()/reply_with_text() to control it."""
    stub = StubUpstream()
    monkeypatch.setattr("gemini_proxy.gemini.requests.post", stub.post)
    return stub


@pytest.fixture
def valid_body():
    return {"userQuery": "Write a birthday note for Sam", "systemPrompt": "You are terse."}
