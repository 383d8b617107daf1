"""
Intent action dispatcher: the redirect authentication round trip.

Given the ``next_action`` of an intent that requires customer
authentication, the dispatcher:

  1. Derives the return URL the processor will send the customer back to
  2. Subscribes an ``AuthenticationAttempt`` to the incoming link stream
  3. Launches the processor's authentication page
  4. Waits for the matching return link (optionally bounded)
  5. Calls the caller's continuation with that link, usually to re-fetch
     the intent, and returns its result

On a web host the page replaces the current browsing context, so there is
nothing to wait for: the redirect is launched and the call fails with
``UnsupportedPlatformError`` without ever subscribing.
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Union

from stripe_sdk.errors import LaunchError, UnsupportedActionError, UnsupportedPlatformError
from stripe_sdk.models.enums import HostPlatform
from stripe_sdk.models.intent_action import IntentAction, RedirectToUrl
from stripe_sdk.sca.attempt import AuthenticationAttempt
from stripe_sdk.sca.audit import log_event
from stripe_sdk.sca.launcher import RedirectLauncher
from stripe_sdk.sca.links import LinkStream
from stripe_sdk.sca.return_url import ReturnUrl

logger = logging.getLogger("stripe_sdk.sca.dispatcher")

# Receives the matched return link, returns the final resource state.
IntentProvider = Callable[[str], Union[Awaitable[Any], Any]]


class IntentActionDispatcher:
    """
    Drives redirect authentication for one client.

    Args:
        link_stream: Stream the host publishes incoming return links on.
        launcher: Opens the authentication page.
        platform: ``NATIVE`` waits for a return link, ``WEB`` cannot.
        timeout: Seconds to wait for the return link. ``None`` waits
            until the customer comes back, however long that takes.
    """

    def __init__(
        self,
        link_stream: LinkStream,
        launcher: RedirectLauncher,
        platform: HostPlatform = HostPlatform.NATIVE,
        timeout: Optional[float] = None,
    ):
        self._link_stream = link_stream
        self._launcher = launcher
        self._platform = platform
        self._timeout = timeout

    async def authenticate_intent(self, action: IntentAction, continuation: IntentProvider) -> Any:
        """
        Run the redirect round trip for ``action``.

        Returns:
            Whatever ``continuation`` returns for the matched return link.

        Raises:
            UnsupportedActionError: ``action`` is not a usable redirect.
            UnsupportedPlatformError: Running on a web host.
            LaunchError: The authentication page could not be opened.
            NoMatchTimeout: No matching return link within the timeout.
        """
        if not action.is_redirect:
            raise UnsupportedActionError(f"Cannot authenticate next action of type {action.type!r}")
        redirect = action.redirect_to_url

        if self._platform is HostPlatform.WEB:
            logger.info("Web host: navigating to authentication page without a callback")
            await self._launcher.launch(redirect.url)
            raise UnsupportedPlatformError(
                "Redirect authentication cannot report back on a web host; "
                "the browsing context was sent to the authentication page"
            )

        attempt = AuthenticationAttempt(_expected_return_url(redirect), redirect.url)
        attempt.listen(self._link_stream)
        try:
            try:
                await self._launcher.launch(redirect.url)
            except LaunchError as e:
                attempt.fail(e)
            else:
                log_event(attempt.id, "redirect_launched", {"url": redirect.url})

            uri = await attempt.wait(self._timeout)
        finally:
            attempt.close()

        try:
            result = continuation(uri)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            attempt.fail(e)
            raise

        attempt.complete(result)
        return result


def _expected_return_url(redirect: RedirectToUrl) -> ReturnUrl:
    if not redirect.return_url:
        raise UnsupportedActionError("Redirect action carries no return_url to listen for")
    try:
        return ReturnUrl.parse(redirect.return_url)
    except ValueError as e:
        raise UnsupportedActionError(str(e)) from e
