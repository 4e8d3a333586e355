"""Shared fixtures: a fake HTTP layer and a clean environment."""

import json
from typing import Any, Optional
from unittest.mock import patch

import pytest
import requests

from ytstate.adapters.config import YamlConfigProvider


HOST = "https://tracker.example"


def build_response(
    status_code: int = 200,
    payload: Any = None,
    text: Optional[str] = None,
) -> requests.Response:
    """Build a requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    if payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
    elif text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = b""
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def http():
    """
    Patch requests.Session.send.

    The mock receives the PreparedRequest, so tests can assert on the final
    URL, headers and body as they would go over the wire.
    """
    with patch.object(requests.Session, "send") as send:
        send.return_value = build_response(200, [])
        yield send


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for env_key in YamlConfigProvider.ENV_MAPPING:
        monkeypatch.delenv(env_key, raising=False)
