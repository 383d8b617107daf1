from stripe_sdk.resources.base import IntentResource, parse_id_from_client_secret
from stripe_sdk.resources.payment_intents import PaymentIntents
from stripe_sdk.resources.payment_methods import PaymentMethods
from stripe_sdk.resources.setup_intents import SetupIntents

__all__ = [
    "IntentResource",
    "PaymentIntents",
    "PaymentMethods",
    "SetupIntents",
    "parse_id_from_client_secret",
]
