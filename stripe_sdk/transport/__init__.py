from stripe_sdk.transport.handler import StripeApiHandler
from stripe_sdk.transport.params import encode_params, remove_null_and_empty_params
from stripe_sdk.transport.retry import with_retry

__all__ = ["StripeApiHandler", "encode_params", "remove_null_and_empty_params", "with_retry"]
