"""Payment method endpoints."""

from typing import TYPE_CHECKING, Any

from stripe_sdk.models.enums import RequestMethod

if TYPE_CHECKING:
    from stripe_sdk.client import Stripe


class PaymentMethods:
    def __init__(self, stripe: "Stripe"):
        self._stripe = stripe

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        """Create a payment method, e.g. ``{"type": "card", "card": {...}}``."""
        return await self._stripe.request(RequestMethod.POST, "/payment_methods", params=data)

    async def retrieve(self, payment_method_id: str) -> dict[str, Any]:
        return await self._stripe.request(RequestMethod.GET, f"/payment_methods/{payment_method_id}")
