import requests

from vigilante_cables.feed import client
from vigilante_cables.feed.client import fetch_nga_warnings


class FakeResponse:
    def __init__(self, data=None, status_code=200, bad_json=False):
        self._data = data
        self.status_code = status_code
        self.ok = 200 <= status_code < 400
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("invalid json")
        return self._data


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, timeout=None, headers=None):
        self.calls.append({"url": url, "timeout": timeout})
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def test_fetch_returns_list_payload():
    session = FakeSession(FakeResponse([{"text": "CABLE"}]))
    assert fetch_nga_warnings(url="http://nga.test", timeout=3.0, session=session) == [{"text": "CABLE"}]
    assert session.calls == [{"url": "http://nga.test", "timeout": 3.0}]


def test_fetch_unwraps_warnings_envelope():
    session = FakeSession(FakeResponse({"warnings": [{"text": "CABLE"}]}))
    assert fetch_nga_warnings(session=session) == [{"text": "CABLE"}]


def test_fetch_non_ok_and_unexpected_shapes_return_empty():
    assert fetch_nga_warnings(session=FakeSession(FakeResponse(status_code=503))) == []
    assert fetch_nga_warnings(session=FakeSession(FakeResponse({"warnings": "nope"}))) == []
    assert fetch_nga_warnings(session=FakeSession(FakeResponse(bad_json=True))) == []


def test_fetch_retries_after_network_error(monkeypatch):
    sleeps = []
    monkeypatch.setattr(client.time, "sleep", lambda s: sleeps.append(s))
    session = FakeSession(requests.ConnectionError("boom"), FakeResponse([{"text": "CABLE"}]))
    assert fetch_nga_warnings(retries=2, session=session) == [{"text": "CABLE"}]
    assert len(session.calls) == 2
    assert sleeps == [1.0]


def test_fetch_gives_up_after_last_attempt(monkeypatch):
    monkeypatch.setattr(client.time, "sleep", lambda s: None)
    session = FakeSession(requests.Timeout("t1"), requests.Timeout("t2"))
    assert fetch_nga_warnings(retries=2, session=session) == []
    assert len(session.calls) == 2
