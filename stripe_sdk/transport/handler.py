"""
HTTP handler for the Stripe REST API.

Wraps an ``httpx.AsyncClient`` with the publishable-key credentials, API
version, locale and connected-account headers, encodes parameters the way
the API expects (query string for GET/DELETE, bracketed form body for POST)
and turns error responses into ``ApiError`` subclasses. Transient failures
are retried through ``with_retry``.
"""

import logging
from typing import Any, Optional

import httpx

from stripe_sdk.config import DEFAULT_API_VERSION, Settings, settings as default_settings
from stripe_sdk.errors import ApiConnectionError, ApiError, RateLimitError
from stripe_sdk.models.enums import RequestMethod, SupportLocale
from stripe_sdk.transport.params import encode_params
from stripe_sdk.transport.retry import RETRIABLE_STATUS_CODES, with_retry

logger = logging.getLogger("stripe_sdk.http")


class StripeApiHandler:
    """Sends authenticated requests and returns parsed JSON mappings."""

    def __init__(
        self,
        publishable_key: str,
        api_version: str = DEFAULT_API_VERSION,
        locale: SupportLocale = SupportLocale.AUTO,
        stripe_account: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or default_settings
        self._publishable_key = publishable_key
        self.api_version = api_version
        self.locale = locale
        self.stripe_account = stripe_account
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self._settings.http_timeout_seconds)

    def headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {self._publishable_key}",
            "Stripe-Version": self.api_version,
        }
        if self.locale is not SupportLocale.AUTO:
            headers["Accept-Language"] = self.locale.to_short_string()
        if self.stripe_account:
            headers["Stripe-Account"] = self.stripe_account
        return headers

    async def request(
        self,
        method: RequestMethod,
        path: str,
        params: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        Send ``method path`` and return the decoded JSON body.

        Raises:
            ApiError: Non-2xx response, after retries for transient ones.
        """
        return await with_retry(
            self._send,
            RequestMethod(method),
            path,
            params,
            max_retries=self._settings.max_retries,
            base_delay=self._settings.retry_base_delay,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _send(
        self,
        method: RequestMethod,
        path: str,
        params: Optional[dict[str, Any]],
    ) -> dict[str, Any]:
        url = f"{self._settings.api_base.rstrip('/')}/{path.lstrip('/')}"
        pairs = encode_params(params)

        try:
            if method is RequestMethod.POST:
                response = await self._client.request(
                    method.value, url, data=dict(pairs) if pairs else None, headers=self.headers()
                )
            else:
                response = await self._client.request(
                    method.value, url, params=pairs or None, headers=self.headers()
                )
        except httpx.TransportError as e:
            raise ApiConnectionError(f"Could not reach Stripe API: {e}") from e

        logger.debug("%s %s -> %d", method.value, path, response.status_code)

        if response.is_success:
            return response.json()
        raise _error_from_response(response)


def _error_from_response(response: httpx.Response) -> ApiError:
    try:
        body = response.json().get("error")
    except (ValueError, AttributeError):
        body = None
    if not isinstance(body, dict):
        body = {}

    message = body.get("message") or f"Stripe API returned HTTP {response.status_code}"
    status = response.status_code

    if status == 429:
        return RateLimitError(message, retry_after=_retry_after_seconds(response))

    return ApiError(
        message,
        status_code=status,
        retriable=status in RETRIABLE_STATUS_CODES,
        error_type=body.get("type"),
        code=body.get("code"),
        param=body.get("param"),
    )


def _retry_after_seconds(response: httpx.Response) -> Optional[float]:
    """Delay-seconds form of ``Retry-After``; HTTP-dates and junk give ``None``."""
    value = response.headers.get("Retry-After")
    if not value:
        return None
    try:
        return max(float(value), 0.0)
    except ValueError:
        return None
