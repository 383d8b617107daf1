from stripe_sdk.models.enums import (
    AttemptState,
    HostPlatform,
    IntentStatus,
    RequestMethod,
    SupportLocale,
)
from stripe_sdk.models.intent_action import IntentAction, RedirectToUrl

__all__ = [
    "AttemptState",
    "HostPlatform",
    "IntentAction",
    "IntentStatus",
    "RedirectToUrl",
    "RequestMethod",
    "SupportLocale",
]
