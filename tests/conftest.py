"""Shared test fixtures."""

import asyncio
from typing import Callable, Optional
from urllib.parse import parse_qsl

import httpx
import pytest

from stripe_sdk.client import Stripe
from stripe_sdk.config import Settings
from stripe_sdk.errors import LaunchError
from stripe_sdk.sca.launcher import RedirectLauncher
from stripe_sdk.sca.links import LinkStream


class FakeLauncher(RedirectLauncher):
    """Records launched URLs; can fail or run a hook (e.g. publish a return link)."""

    def __init__(self, fail: bool = False, on_launch: Optional[Callable[[str], None]] = None):
        self.fail = fail
        self.on_launch = on_launch
        self.launched: list[str] = []

    async def launch(self, url: str) -> None:
        self.launched.append(url)
        if self.fail:
            raise LaunchError(url, "Popup blocked")
        if self.on_launch:
            self.on_launch(url)


class RecordingTransport:
    """``httpx.MockTransport`` handler that records requests and replays canned responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []
        self.handler: Optional[Callable[[httpx.Request], httpx.Response]] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(200, json={})

    @staticmethod
    def form(request: httpx.Request) -> dict[str, str]:
        return dict(parse_qsl(request.content.decode()))


async def wait_until(predicate: Callable[[], bool], rounds: int = 100) -> None:
    """Yield to the event loop until ``predicate`` holds."""
    for _ in range(rounds):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition never became true")


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, max_retries=0, retry_base_delay=0.0, sca_timeout_seconds=None)


@pytest.fixture
def link_stream():
    return LinkStream()


@pytest.fixture
def launcher():
    return FakeLauncher()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def stripe(test_settings, link_stream, launcher, transport):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
    return Stripe(
        "pk_test_123",
        link_stream=link_stream,
        launcher=launcher,
        http_client=http_client,
        settings=test_settings,
    )
