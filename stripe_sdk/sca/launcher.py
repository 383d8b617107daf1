"""
Launchers hand the authentication page over to the host environment.

The SDK never renders the 3-D Secure page itself. A launcher opens the
processor's redirect URL somewhere the customer can complete it (system
browser, in-app browser, or the current browsing context on a web host) and
returns as soon as the page has been handed off.
"""

import asyncio
import inspect
import logging
import webbrowser
from abc import ABC, abstractmethod
from typing import Any, Callable

from stripe_sdk.errors import LaunchError

logger = logging.getLogger("stripe_sdk.sca.launcher")


class RedirectLauncher(ABC):
    """Abstract base class for redirect launchers."""

    @abstractmethod
    async def launch(self, url: str) -> None:
        """
        Open ``url`` for the customer.

        Raises:
            LaunchError: The host has no handler for the URL, the user
                dismissed it at the OS level, or a popup was blocked.
        """
        ...


class SystemBrowserLauncher(RedirectLauncher):
    """Opens the redirect in the default system browser via ``webbrowser``."""

    def __init__(self, new: int = 2):
        self.new = new  # 0 = same window, 2 = new tab where supported

    async def launch(self, url: str) -> None:
        opened = await asyncio.to_thread(webbrowser.open, url, self.new)
        if not opened:
            raise LaunchError(url, "No browser available to open authentication page")
        logger.info("Opened authentication page in system browser")


class CallbackLauncher(RedirectLauncher):
    """
    Adapts a host-provided opener (sync or async) to ``RedirectLauncher``.

    The opener may return ``False`` or raise to signal failure; both surface
    as ``LaunchError``.
    """

    def __init__(self, opener: Callable[[str], Any]):
        self._opener = opener

    async def launch(self, url: str) -> None:
        try:
            result = self._opener(url)
            if inspect.isawaitable(result):
                result = await result
        except LaunchError:
            raise
        except Exception as e:
            raise LaunchError(url, f"Opener failed ({e})") from e
        if result is False:
            raise LaunchError(url)
