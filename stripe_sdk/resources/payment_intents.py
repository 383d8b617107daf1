"""Payment intent endpoints."""

from typing import Any, Optional

from stripe_sdk.resources.base import IntentResource


class PaymentIntents(IntentResource):
    path = "payment_intents"

    async def confirm_payment(
        self,
        client_secret: str,
        payment_method_id: Optional[str] = None,
        data: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        Confirm a payment intent, authenticating the customer if the bank asks for it.

        Returns:
            The payment intent after confirmation, or after authentication
            when confirmation came back as ``requires_action``.
        """
        params = dict(data or {})
        if payment_method_id:
            params["payment_method"] = payment_method_id
        return await self._confirm_and_authenticate(client_secret, params)
