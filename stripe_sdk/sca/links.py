"""
Incoming link stream.

The host application feeds every URI it receives through its registered URL
scheme (a mobile deep link, a desktop protocol handler, or the HTTP return
route in ``stripe_sdk.api.return_links``) into a ``LinkStream``. Listeners
subscribe with a plain callback and get each URI in delivery order.

Delivery is synchronous on the caller's thread, which for asyncio hosts is
the event loop. A listener therefore finishes evaluating one link before the
next one is handed out, and a subscription cancelled while a link is being
delivered receives nothing after it.
"""

import asyncio
import logging
from typing import Callable

logger = logging.getLogger("stripe_sdk.sca.links")

LinkCallback = Callable[[str], None]


class LinkSubscription:
    """Handle for one listener on a ``LinkStream``."""

    def __init__(self, stream: "LinkStream", callback: LinkCallback):
        self._stream = stream
        self._callback = callback
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Stop receiving links. Safe to call more than once."""
        if not self._active:
            return
        self._active = False
        self._stream._remove(self)

    def _deliver(self, uri: str) -> None:
        if self._active:
            self._callback(uri)


class LinkStream:
    """Fan-out of incoming URIs to the currently subscribed listeners."""

    def __init__(self) -> None:
        self._subscriptions: list[LinkSubscription] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(self, callback: LinkCallback) -> LinkSubscription:
        subscription = LinkSubscription(self, callback)
        self._subscriptions.append(subscription)
        return subscription

    def publish(self, uri: str) -> int:
        """
        Deliver ``uri`` to every active subscriber.

        Returns:
            The number of subscribers that received the link.
        """
        delivered = 0
        for subscription in list(self._subscriptions):
            if not subscription.active:
                continue
            try:
                subscription._deliver(uri)
            except Exception:
                logger.exception("Link listener failed while handling %s", uri)
            delivered += 1
        logger.debug("Published link %s to %d listener(s)", uri, delivered)
        return delivered

    def publish_threadsafe(self, loop: asyncio.AbstractEventLoop, uri: str) -> None:
        """Hand a link received on another thread over to ``loop``."""
        loop.call_soon_threadsafe(self.publish, uri)

    def _remove(self, subscription: LinkSubscription) -> None:
        try:
            self._subscriptions.remove(subscription)
        except ValueError:
            pass
