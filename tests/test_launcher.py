"""Tests for redirect launchers."""

import pytest

from stripe_sdk.errors import LaunchError
from stripe_sdk.sca.launcher import CallbackLauncher, SystemBrowserLauncher

URL = "https://hooks.stripe.com/redirect/authenticate/src_1"


class TestSystemBrowser:
    @pytest.mark.asyncio
    async def test_opens_url(self, monkeypatch):
        opened = []
        monkeypatch.setattr("webbrowser.open", lambda url, new=0: opened.append((url, new)) or True)
        await SystemBrowserLauncher().launch(URL)
        assert opened == [(URL, 2)]

    @pytest.mark.asyncio
    async def test_no_browser(self, monkeypatch):
        monkeypatch.setattr("webbrowser.open", lambda url, new=0: False)
        with pytest.raises(LaunchError) as exc_info:
            await SystemBrowserLauncher().launch(URL)
        assert exc_info.value.url == URL


class TestCallbackLauncher:
    @pytest.mark.asyncio
    async def test_sync_opener(self):
        opened = []
        await CallbackLauncher(opened.append).launch(URL)
        assert opened == [URL]

    @pytest.mark.asyncio
    async def test_async_opener(self):
        opened = []

        async def opener(url):
            opened.append(url)

        await CallbackLauncher(opener).launch(URL)
        assert opened == [URL]

    @pytest.mark.asyncio
    async def test_false_means_failure(self):
        with pytest.raises(LaunchError):
            await CallbackLauncher(lambda url: False).launch(URL)

    @pytest.mark.asyncio
    async def test_opener_exception_wrapped(self):
        def blocked(url):
            raise PermissionError("popup blocked")

        with pytest.raises(LaunchError, match="popup blocked"):
            await CallbackLauncher(blocked).launch(URL)
