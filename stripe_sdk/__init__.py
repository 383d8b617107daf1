"""Client-side Stripe SDK with redirect-based Strong Customer Authentication."""

from stripe_sdk.client import Stripe, create_stripe, validate_key
from stripe_sdk.errors import (
    ApiConnectionError,
    ApiError,
    ConfigurationError,
    LaunchError,
    NoMatchTimeout,
    RateLimitError,
    StripeSdkError,
    UnsupportedActionError,
    UnsupportedPlatformError,
)
from stripe_sdk.models import HostPlatform, IntentAction, RedirectToUrl, RequestMethod, SupportLocale
from stripe_sdk.resources import parse_id_from_client_secret
from stripe_sdk.sca import LinkStream, RedirectLauncher, ReturnUrl

__all__ = [
    "ApiConnectionError",
    "ApiError",
    "ConfigurationError",
    "HostPlatform",
    "IntentAction",
    "LaunchError",
    "LinkStream",
    "NoMatchTimeout",
    "RateLimitError",
    "RedirectLauncher",
    "RedirectToUrl",
    "RequestMethod",
    "ReturnUrl",
    "Stripe",
    "StripeSdkError",
    "SupportLocale",
    "UnsupportedActionError",
    "UnsupportedPlatformError",
    "create_stripe",
    "parse_id_from_client_secret",
    "validate_key",
]
