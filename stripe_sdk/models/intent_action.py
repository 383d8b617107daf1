"""
Next-action descriptors returned by the API.

When a payment or setup intent needs the customer to authenticate, the API
answers with ``status: requires_action`` and a ``next_action`` object. The
SDK only handles the redirect variant:

    {
        "type": "redirect_to_url",
        "redirect_to_url": {
            "url": "https://hooks.stripe.com/3d_secure_2/...",
            "return_url": "stripesdk://3ds.stripesdk.io?requestId=42"
        }
    }
"""

from typing import Any, Optional

from pydantic import BaseModel

REDIRECT_TO_URL = "redirect_to_url"


class RedirectToUrl(BaseModel):
    url: str  # where the customer authenticates
    return_url: Optional[str] = None  # echoed back by the processor

    model_config = {"frozen": True, "extra": "ignore"}


class IntentAction(BaseModel):
    type: str = REDIRECT_TO_URL
    redirect_to_url: Optional[RedirectToUrl] = None

    model_config = {"frozen": True, "extra": "ignore"}

    @property
    def is_redirect(self) -> bool:
        return self.type == REDIRECT_TO_URL and self.redirect_to_url is not None

    @classmethod
    def from_intent(cls, intent: dict[str, Any]) -> Optional["IntentAction"]:
        """Extract the ``next_action`` of an intent mapping, if any."""
        next_action = intent.get("next_action")
        if not next_action:
            return None
        return cls.model_validate(next_action)
