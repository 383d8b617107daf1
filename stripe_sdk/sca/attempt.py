"""
Authentication attempts: the link listener and the pending-result slot.

An attempt lives for exactly one ``authenticate_intent`` call:

    idle -> subscribed -> matched -> resolved
                 |            |
                 +------------+---> errored

While subscribed it listens on the client's ``LinkStream`` and compares each
incoming URI with its return URL. The first URI whose scheme, host and
``requestId`` all match cancels the subscription and fills the single-slot
future with that URI; later links, matching or not, are never looked at.
Launch failures, timeouts and caller cancellation fill (or cancel) the same
slot instead, and also drop the subscription. Whatever happens first wins,
and the attempt reaches exactly one terminal state.
"""

import asyncio
import logging
import uuid
from typing import Any, Optional
from urllib.parse import parse_qsl, urlsplit

from stripe_sdk.errors import NoMatchTimeout, StripeSdkError
from stripe_sdk.models.enums import AttemptState
from stripe_sdk.sca.audit import log_event
from stripe_sdk.sca.links import LinkStream, LinkSubscription
from stripe_sdk.sca.return_url import REQUEST_ID_PARAM, ReturnUrl

logger = logging.getLogger("stripe_sdk.sca.attempt")


def matches_return_url(uri: str, expected: ReturnUrl) -> bool:
    """True iff ``uri`` has the expected scheme, host and ``requestId`` token."""
    try:
        parts = urlsplit(uri)
        host = parts.hostname or ""
    except ValueError:
        return False

    if parts.scheme.lower() != expected.scheme or host != expected.host:
        return False

    token = dict(parse_qsl(parts.query, keep_blank_values=True)).get(REQUEST_ID_PARAM)
    return token is not None and token == expected.request_id


class AuthenticationAttempt:
    """One redirect authentication round trip. Not reusable."""

    def __init__(self, return_url: ReturnUrl, redirect_url: str):
        self.id = uuid.uuid4().hex
        self.return_url = return_url
        self.redirect_url = redirect_url
        self.state = AttemptState.IDLE
        self.matched_uri: Optional[str] = None
        self.error: Optional[BaseException] = None
        self._subscription: Optional[LinkSubscription] = None
        self._slot: Optional[asyncio.Future[str]] = None

    @property
    def subscribed(self) -> bool:
        return self._subscription is not None and self._subscription.active

    def listen(self, stream: LinkStream) -> None:
        """Subscribe to ``stream``. Must run inside the event loop."""
        if self.state is not AttemptState.IDLE:
            raise StripeSdkError(f"Attempt {self.id[:8]} is {self.state.value}; attempts cannot be reused")

        self._slot = asyncio.get_running_loop().create_future()
        self._subscription = stream.subscribe(self._on_link)
        self.state = AttemptState.SUBSCRIBED
        log_event(self.id, "attempt_started", {
            "return_url": str(self.return_url),
            "redirect_url": self.redirect_url,
        })

    async def wait(self, timeout: Optional[float] = None) -> str:
        """
        Suspend until the attempt's slot is filled.

        Returns:
            The matched return link.

        Raises:
            NoMatchTimeout: ``timeout`` elapsed without a matching link.
            LaunchError: The redirect could not be opened.
        """
        if self._slot is None:
            raise StripeSdkError(f"Attempt {self.id[:8]} is not listening")

        try:
            if timeout is None:
                return await asyncio.shield(self._slot)
            return await asyncio.wait_for(asyncio.shield(self._slot), timeout)
        except asyncio.TimeoutError:
            # A link matched in the same loop turn as the deadline; the match wins.
            if self._slot.done():
                return self._slot.result()
            self.fail(NoMatchTimeout(str(self.return_url), timeout))
            return await self._slot

    def complete(self, result: Any) -> None:
        """Record that the continuation produced the final result."""
        if self.state is not AttemptState.MATCHED:
            raise StripeSdkError(f"Attempt {self.id[:8]} cannot resolve from {self.state.value}")
        self.state = AttemptState.RESOLVED
        log_event(self.id, "attempt_resolved", {"result_type": type(result).__name__})

    def fail(self, exc: BaseException) -> bool:
        """
        Move to ``errored`` unless already terminal.

        Returns:
            True if this call decided the outcome.
        """
        if self.state.is_terminal:
            return False

        self._unsubscribe()
        self.state = AttemptState.ERRORED
        self.error = exc
        if self._slot is not None and not self._slot.done():
            self._slot.set_exception(exc)

        log_event(self.id, "attempt_failed", {
            "error": type(exc).__name__,
            "message": str(exc),
        }, level=logging.WARNING)
        return True

    def close(self) -> None:
        """Tear down whatever is still open; used when the waiter goes away."""
        self._unsubscribe()
        if self.state in (AttemptState.IDLE, AttemptState.SUBSCRIBED):
            self.state = AttemptState.ERRORED
            if self._slot is not None and not self._slot.done():
                self._slot.cancel()
            log_event(self.id, "attempt_abandoned", level=logging.WARNING)

    def _on_link(self, uri: str) -> None:
        if self._slot is None or self._slot.done():
            return

        if not matches_return_url(uri, self.return_url):
            log_event(self.id, "link_ignored", {"uri": uri}, level=logging.DEBUG)
            return

        # Unsubscribe before anything else so a redelivered link is never seen.
        self._unsubscribe()
        self.state = AttemptState.MATCHED
        self.matched_uri = uri
        self._slot.set_result(uri)
        log_event(self.id, "link_matched", {"uri": uri})

    def _unsubscribe(self) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
