import json

import pytest

from yatranslate.config import API_KEY_ENV, URL_ENV
from yatranslate.transport import Transport


class FakeTransport(Transport):
    """Records requests and replays a canned body."""

    def __init__(self, body=b"{}", error=None):
        if isinstance(body, dict):
            body = json.dumps(body).encode()
        self.body = body
        self.error = error
        self.calls = []

    def post_form(self, url, data):
        self.calls.append((url, dict(data)))
        if self.error is not None:
            raise self.error
        return self.body


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(API_KEY_ENV, raising=False)
    monkeypatch.delenv(URL_ENV, raising=False)
