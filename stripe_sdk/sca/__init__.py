from stripe_sdk.sca.attempt import AuthenticationAttempt, matches_return_url
from stripe_sdk.sca.dispatcher import IntentActionDispatcher, IntentProvider
from stripe_sdk.sca.launcher import CallbackLauncher, RedirectLauncher, SystemBrowserLauncher
from stripe_sdk.sca.links import LinkStream, LinkSubscription
from stripe_sdk.sca.return_url import REQUEST_ID_PARAM, ReturnUrl, ReturnUrlBuilder

__all__ = [
    "AuthenticationAttempt",
    "CallbackLauncher",
    "IntentActionDispatcher",
    "IntentProvider",
    "LinkStream",
    "LinkSubscription",
    "REQUEST_ID_PARAM",
    "RedirectLauncher",
    "ReturnUrl",
    "ReturnUrlBuilder",
    "SystemBrowserLauncher",
    "matches_return_url",
]
