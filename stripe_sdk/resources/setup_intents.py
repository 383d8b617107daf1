"""Setup intent endpoints."""

from typing import Any, Optional

from stripe_sdk.resources.base import IntentResource


class SetupIntents(IntentResource):
    path = "setup_intents"

    async def confirm_setup_intent(
        self,
        client_secret: str,
        payment_method_id: Optional[str] = None,
        data: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Confirm a setup intent and authenticate it when required."""
        params = dict(data or {})
        if payment_method_id:
            params["payment_method"] = payment_method_id
        return await self._confirm_and_authenticate(client_secret, params)
