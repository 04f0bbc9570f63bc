"""Shared fixtures: every HTTP call goes through a patched requests.request."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest

from featureflow_mcp.core.featureflow_api import FeatureflowAPI


def make_response(status: int = 200, payload=None, text: str | None = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    if payload is not None:
        body = json.dumps(payload)
        resp.json.return_value = payload
    else:
        body = text or ""
        resp.json.side_effect = ValueError("not json")
    resp.text = body
    resp.content = body.encode("utf-8")
    return resp


@pytest.fixture
def http():
    """Patched requests.request; set .return_value / .side_effect per test."""
    with patch("featureflow_mcp.core.featureflow_api.requests.request") as mocked:
        mocked.return_value = make_response(200, {"ok": True})
        yield mocked


@pytest.fixture
def api() -> FeatureflowAPI:
    return FeatureflowAPI("https://flags.example.com/api", "secret-token", timeout=30)


def sent(http_mock) -> dict:
    """Unpack the single request issued through the mock."""
    assert http_mock.call_count == 1
    args, kwargs = http_mock.call_args
    return {
        "method": args[0],
        "url": args[1],
        "params": kwargs.get("params"),
        "json": kwargs.get("json"),
        "headers": kwargs.get("headers"),
        "timeout": kwargs.get("timeout"),
    }
