"""Integration tests for intent resources driving redirect authentication."""

import httpx
import pytest

from conftest import RecordingTransport
from stripe_sdk.errors import UnsupportedActionError
from stripe_sdk.resources import parse_id_from_client_secret

CLIENT_SECRET = "pi_123_secret_abc"
AUTH_URL = "https://hooks.stripe.com/3d_secure_2/authenticate/pi_123"


def _intent_api(kind="pi", final_status="succeeded"):
    """Fake intent endpoint: confirm asks for a redirect, retrieve reports the outcome."""
    state = {}

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST" and request.url.path.endswith("/confirm"):
            form = RecordingTransport.form(request)
            state["return_url"] = form["return_url"]
            state["confirm_form"] = form
            return httpx.Response(200, json={
                "id": f"{kind}_123",
                "status": "requires_action",
                "client_secret": CLIENT_SECRET,
                "next_action": {
                    "type": "redirect_to_url",
                    "redirect_to_url": {"url": AUTH_URL, "return_url": form["return_url"]},
                },
            })
        return httpx.Response(200, json={"id": f"{kind}_123", "status": final_status})

    return handler, state


class TestPaymentIntents:
    @pytest.mark.asyncio
    async def test_confirm_payment_with_authentication(self, stripe, transport, launcher, link_stream):
        handler, state = _intent_api()
        transport.handler = handler
        launcher.on_launch = lambda url: link_stream.publish(state["return_url"])

        intent = await stripe.payment_intents.confirm_payment(CLIENT_SECRET, "pm_card_threeDSecure2Required")

        assert intent == {"id": "pi_123", "status": "succeeded"}
        assert launcher.launched == [AUTH_URL]
        assert state["confirm_form"]["payment_method"] == "pm_card_threeDSecure2Required"
        assert state["confirm_form"]["client_secret"] == CLIENT_SECRET
        assert state["return_url"].startswith("stripesdk://3ds.stripesdk.io?requestId=")

        retrieve = transport.requests[-1]
        assert retrieve.method == "GET"
        assert retrieve.url.path == "/v1/payment_intents/pi_123"
        assert retrieve.url.params["client_secret"] == CLIENT_SECRET
        assert link_stream.subscriber_count == 0

    @pytest.mark.asyncio
    async def test_confirm_payment_without_action(self, stripe, transport, launcher):
        transport.responses.append(httpx.Response(200, json={"id": "pi_123", "status": "succeeded"}))

        intent = await stripe.payment_intents.confirm_payment(CLIENT_SECRET, "pm_card_visa")

        assert intent["status"] == "succeeded"
        assert launcher.launched == []
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_retrieve(self, stripe, transport):
        transport.responses.append(httpx.Response(200, json={"id": "pi_123"}))
        await stripe.payment_intents.retrieve(CLIENT_SECRET)
        request = transport.requests[0]
        assert request.url.path == "/v1/payment_intents/pi_123"

    @pytest.mark.asyncio
    async def test_authenticate_without_next_action(self, stripe):
        with pytest.raises(UnsupportedActionError):
            await stripe.payment_intents.authenticate({"id": "pi_123", "client_secret": CLIENT_SECRET})


class TestSetupIntents:
    @pytest.mark.asyncio
    async def test_confirm_setup_intent_with_authentication(self, stripe, transport, launcher, link_stream):
        handler, state = _intent_api(kind="seti")
        transport.handler = handler
        launcher.on_launch = lambda url: link_stream.publish(state["return_url"])

        intent = await stripe.setup_intents.confirm_setup_intent("seti_123_secret_abc", "pm_card_visa")

        assert intent == {"id": "seti_123", "status": "succeeded"}
        assert transport.requests[0].url.path == "/v1/setup_intents/seti_123/confirm"
        assert transport.requests[-1].url.path == "/v1/setup_intents/seti_123"


class TestPaymentMethods:
    @pytest.mark.asyncio
    async def test_create(self, stripe, transport):
        transport.responses.append(httpx.Response(200, json={"id": "pm_1", "type": "card"}))
        result = await stripe.payment_methods.create({"type": "card", "card": {"token": "tok_visa"}})
        assert result["id"] == "pm_1"
        assert RecordingTransport.form(transport.requests[0]) == {"type": "card", "card[token]": "tok_visa"}

    @pytest.mark.asyncio
    async def test_retrieve(self, stripe, transport):
        await stripe.payment_methods.retrieve("pm_1")
        assert transport.requests[0].url.path == "/v1/payment_methods/pm_1"


class TestClientSecret:
    def test_parse_id(self):
        assert parse_id_from_client_secret("pi_123_secret_abc") == "pi_123"
        assert parse_id_from_client_secret("seti_9_secret_z") == "seti_9"
