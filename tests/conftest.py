from __future__ import annotations

import json as jsonlib
import os
from unittest.mock import Mock

import pytest

BASE_URL = "https://api.example.com/creditor/"


def make_response(status_code=200, body=None, headers=None, reason="OK", content=None):
    """Build a Mock shaped like a ``requests.Response``."""
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    response.headers = dict(headers or {})
    response.url = "https://api.example.com/creditor/mock"
    if isinstance(body, str):
        response.text = body
    else:
        response.text = jsonlib.dumps(body) if body is not None else ""
    response.content = content if content is not None else response.text.encode("utf-8")
    response.json.side_effect = lambda: jsonlib.loads(response.text)
    return response


@pytest.fixture
def login_response():
    return make_response(200, body="", headers={"Authorization": "session-token-1"})


@pytest.fixture
def fake_transport(login_response):
    """Transport whose ``perform`` answers logins and records every call."""
    transport = Mock()
    transport.perform.return_value = login_response
    return transport


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear Twikey variables and run from an empty directory (no stray .env)."""
    for key in ["TWIKEY_API_KEY", "TWIKEY_API_URL", "TWIKEY_TIMEOUT"]:
        if key in os.environ:
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def sample_mandate_pages():
    """Mandate feed responses: two pages of messages followed by an empty page."""
    return [
        {
            "Messages": [
                {"Mndt": {"MndtId": "MNDT1"}, "position": "10"},
                {"Mndt": {"MndtId": "MNDT2"}, "position": "A"},
            ]
        },
        {"Messages": [{"Mndt": {"MndtId": "MNDT3"}, "position": "B"}]},
        {"Messages": []},
    ]
