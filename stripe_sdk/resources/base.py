"""
Shared behaviour for payment and setup intents.

Both intent types are addressed by the id embedded in their client secret,
are confirmed with the client secret, and may come back from confirmation as
``requires_action`` with a redirect ``next_action`` that the customer has to
complete before the intent can move on.
"""

import logging
from typing import TYPE_CHECKING, Any, Optional

from stripe_sdk.errors import UnsupportedActionError
from stripe_sdk.models.enums import IntentStatus, RequestMethod
from stripe_sdk.models.intent_action import IntentAction

if TYPE_CHECKING:
    from stripe_sdk.client import Stripe

logger = logging.getLogger("stripe_sdk.resources")

# Older API versions report this instead of requires_action.
_LEGACY_REQUIRES_ACTION = "requires_source_action"


def parse_id_from_client_secret(client_secret: str) -> str:
    """``pi_123_secret_abc`` -> ``pi_123``."""
    return client_secret.split("_secret")[0]


def requires_action(intent: dict[str, Any]) -> bool:
    return intent.get("status") in (IntentStatus.REQUIRES_ACTION.value, _LEGACY_REQUIRES_ACTION)


class IntentResource:
    """Base class for intent endpoints; subclasses set ``path``."""

    path: str = ""

    def __init__(self, stripe: "Stripe"):
        self._stripe = stripe

    async def retrieve(self, client_secret: str) -> dict[str, Any]:
        intent_id = parse_id_from_client_secret(client_secret)
        return await self._stripe.request(
            RequestMethod.GET,
            f"/{self.path}/{intent_id}",
            params={"client_secret": client_secret},
        )

    async def confirm(self, client_secret: str, data: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        intent_id = parse_id_from_client_secret(client_secret)
        params = dict(data or {})
        params["client_secret"] = client_secret
        return await self._stripe.request(
            RequestMethod.POST,
            f"/{self.path}/{intent_id}/confirm",
            params=params,
        )

    async def authenticate(
        self,
        intent: dict[str, Any],
        client_secret: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Send the customer through the intent's redirect and return the intent
        as it stands once they come back.
        """
        secret = client_secret or intent.get("client_secret")
        if not secret:
            raise UnsupportedActionError("Cannot re-fetch an intent without its client secret")

        action = IntentAction.from_intent(intent)
        if action is None:
            raise UnsupportedActionError(f"Intent {intent.get('id')} has no next action")

        async def refetch(uri: str) -> dict[str, Any]:
            logger.info("Authentication returned via %s, refreshing %s", uri, intent.get("id"))
            return await self.retrieve(secret)

        return await self._stripe.authenticate_intent(action, refetch)

    async def _confirm_and_authenticate(
        self,
        client_secret: str,
        data: dict[str, Any],
    ) -> dict[str, Any]:
        data["return_url"] = self._stripe.get_return_url_for_sca()
        intent = await self.confirm(client_secret, data)
        if requires_action(intent):
            return await self.authenticate(intent, client_secret)
        return intent
