"""
Shared pytest fixtures: settings, client and fake `requests` responses.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from mcp_tools_themeparks.core.config import Settings
from mcp_tools_themeparks.services.client import ThemeParksClient

BASE_URL = "https://api.themeparks.wiki/v1"
ENTITY_ID = "75ea578a-adc8-4116-a54d-dccb60765ef9"


def make_response(status_code=200, body=None, text=None, headers=None):
    """Build a MagicMock shaped like requests.Response."""
    r = MagicMock(spec=requests.Response)
    r.status_code = status_code
    r.ok = status_code < 400
    r.headers = CaseInsensitiveDict(headers or {})
    if body is not None:
        r.text = json.dumps(body)
        r.json.return_value = body
    else:
        r.text = text if text is not None else ""
        r.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", r.text, 0)
    return r


@pytest.fixture
def settings():
    return Settings(base_url=BASE_URL, timeout_s=5.0)


@pytest.fixture
def client(settings):
    return ThemeParksClient(settings)


@pytest.fixture
def mock_get():
    """Patch requests.get as seen by the API client."""
    with patch("mcp_tools_themeparks.services.client.requests.get") as mocked:
        yield mocked


@pytest.fixture
def fake_response():
    return make_response


@pytest.fixture
def entity_id():
    return ENTITY_ID
