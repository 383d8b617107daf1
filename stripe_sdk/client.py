"""
The ``Stripe`` client context.

One object per publishable key, passed explicitly to whatever needs it. It
owns the HTTP handler, the return-URL template used for Strong Customer
Authentication, the incoming link stream and the dispatcher that ties them
together, plus the payment intent, payment method and setup intent
resources built on top.

    async with Stripe("pk_test_...", return_url_for_sca="myapp://3ds.myapp.io") as stripe:
        intent = await stripe.payment_intents.confirm_payment(client_secret, "pm_card_visa")
"""

import logging
from typing import Any, Callable, Optional

import httpx

from stripe_sdk.config import Settings, settings as default_settings
from stripe_sdk.errors import ConfigurationError
from stripe_sdk.models.enums import HostPlatform, RequestMethod, SupportLocale
from stripe_sdk.models.intent_action import IntentAction
from stripe_sdk.resources import PaymentIntents, PaymentMethods, SetupIntents
from stripe_sdk.sca.dispatcher import IntentActionDispatcher, IntentProvider
from stripe_sdk.sca.launcher import RedirectLauncher, SystemBrowserLauncher
from stripe_sdk.sca.links import LinkStream
from stripe_sdk.sca.return_url import ReturnUrlBuilder
from stripe_sdk.transport.handler import StripeApiHandler
from stripe_sdk.transport.params import remove_null_and_empty_params

logger = logging.getLogger("stripe_sdk.client")

ACCOUNT_ID_PREFIX = "acct_"


def validate_key(publishable_key: Optional[str], stripe_account: Optional[str] = None) -> None:
    """
    Raise ``ConfigurationError`` for an unusable key or account id.

    Args:
        publishable_key: Publishable key from the dashboard (``pk_...``).
        stripe_account: Optional connected account id (``acct_...``).
    """
    if not publishable_key:
        raise ConfigurationError(
            "Invalid Publishable Key: You must use a valid publishable key to create a token. "
            "For more info, see https://stripe.com/docs/stripe.js."
        )
    if stripe_account is not None and not stripe_account.startswith(ACCOUNT_ID_PREFIX):
        raise ConfigurationError("Invalid Stripe Account")


class Stripe:
    """
    Client context for the Stripe API.

    Args:
        publishable_key: Publishable key, e.g. ``pk_test_...``.
        api_version: ``Stripe-Version`` header value.
        locale: Language for error messages returned by the API.
        stripe_account: Connected account to act as (``acct_...``).
        return_url_for_sca: Base return URL for redirect authentication.
            Its scheme and host must match the link scheme the host app
            has registered, or no return link will ever arrive.
        platform: ``NATIVE`` listens for return links, ``WEB`` cannot.
        launcher: Opens authentication pages. Defaults to the system browser.
        link_stream: Where the host publishes incoming return links.
        http_client: Shared ``httpx.AsyncClient``; one is created otherwise.
        token_factory: Source of correlation tokens, for deterministic tests.
        settings: Configuration; defaults to the environment.
    """

    def __init__(
        self,
        publishable_key: str,
        *,
        api_version: Optional[str] = None,
        locale: SupportLocale = SupportLocale.AUTO,
        stripe_account: Optional[str] = None,
        return_url_for_sca: Optional[str] = None,
        platform: HostPlatform = HostPlatform.NATIVE,
        launcher: Optional[RedirectLauncher] = None,
        link_stream: Optional[LinkStream] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        token_factory: Optional[Callable[[], int]] = None,
        settings: Optional[Settings] = None,
    ):
        validate_key(publishable_key, stripe_account)

        self._settings = settings or default_settings
        self.publishable_key = publishable_key
        self.api_version = api_version or self._settings.api_version
        self.locale = locale
        self.stripe_account = stripe_account
        self.platform = platform

        self._return_urls = ReturnUrlBuilder(
            return_url_for_sca or self._settings.return_url_for_sca,
            token_factory=token_factory,
        )
        self.link_stream = link_stream or LinkStream()
        self._api_handler = StripeApiHandler(
            publishable_key,
            api_version=self.api_version,
            locale=locale,
            stripe_account=stripe_account,
            http_client=http_client,
            settings=self._settings,
        )
        self._dispatcher = IntentActionDispatcher(
            self.link_stream,
            launcher or _default_launcher(platform),
            platform=platform,
            timeout=self._settings.sca_timeout_seconds,
        )

        self.payment_intents = PaymentIntents(self)
        self.payment_methods = PaymentMethods(self)
        self.setup_intents = SetupIntents(self)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs: Any) -> "Stripe":
        """Build a client from ``STRIPE_SDK_*`` configuration."""
        settings = settings or default_settings
        return cls(
            settings.publishable_key,
            stripe_account=settings.stripe_account,
            settings=settings,
            **kwargs,
        )

    async def request(
        self,
        method: RequestMethod,
        path: str,
        params: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Send a request with ``None`` and empty values stripped from ``params``."""
        return await self._api_handler.request(method, path, remove_null_and_empty_params(params))

    def get_return_url_for_sca(self) -> str:
        """
        Create a return URL for authenticating a single intent.

        Set it as ``return_url`` on the intent before confirming it.
        """
        return str(self._return_urls.build())

    async def authenticate_intent(self, action: IntentAction, continuation: IntentProvider) -> Any:
        """Run redirect authentication for ``action``; see ``IntentActionDispatcher``."""
        return await self._dispatcher.authenticate_intent(action, continuation)

    async def aclose(self) -> None:
        await self._api_handler.aclose()

    async def __aenter__(self) -> "Stripe":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def create_stripe(publishable_key: Optional[str], **kwargs: Any) -> Stripe:
    """
    Validate the configuration and build a client.

    Raises:
        ConfigurationError: Missing key, bad account id or bad return URL.
    """
    return Stripe(publishable_key, **kwargs)


def _default_launcher(platform: HostPlatform) -> RedirectLauncher:
    # Web hosts replace the current browsing context instead of opening a tab.
    return SystemBrowserLauncher(new=0 if platform is HostPlatform.WEB else 2)
