"""
Shared fixtures for the ClickSend tool tests.

The upstream API is replaced by an `httpx.MockTransport` whose handler records every
request it receives, so tests can assert on the exact URL, headers and body sent and on
whether any request was issued at all.
"""

import asyncio
import logging
from typing import Callable, List, Optional

import httpx
import pytest

from clicksend_mcp.core.config import APIConfig, ConfigLoader

BASE_URL = "https://api.clicksend.test/v3"
CREDENTIAL = "dXNlcm5hbWU6YXBpLWtleQ=="
SUCCESS_BODY = b'{"http_code": 200, "response_code": "SUCCESS", "data": {"id": 1}}'


class FakeUpstream:
    """MockTransport handler that records requests and replies with a canned response."""

    def __init__(
        self,
        status: int = 200,
        body: bytes = SUCCESS_BODY,
        error: Optional[Callable[[httpx.Request], Exception]] = None,
        responder: Optional[Callable[[httpx.Request], httpx.Response]] = None,
    ):
        self.status = status
        self.body = body
        self.error = error
        self.responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        if self.responder is not None:
            return self.responder(request)
        return httpx.Response(self.status, content=self.body)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request reached the upstream"
        return self.requests[-1]


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def config() -> APIConfig:
    return APIConfig(base_url=BASE_URL + "/", basic_auth=CREDENTIAL)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def clean_config(monkeypatch, tmp_path):
    """Fresh ConfigLoader state, no ClickSend env vars, and an empty working directory."""
    for var in ("CLICKSEND_MCP_CONFIG", "CLICKSEND_BASE_URL", "CLICKSEND_BASIC_AUTH", "CLICKSEND_TIMEOUT"):
        # setenv first so teardown also undoes values a .env file loads during the test
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)
    ConfigLoader.reset()
    yield tmp_path
    ConfigLoader.reset()


@pytest.fixture
def restore_root_logging():
    """Run with a bare root logger, then put back the handlers pytest installed."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    for h in handlers:
        root.removeHandler(h)
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
