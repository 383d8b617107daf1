"""
Return URLs for redirect-based Strong Customer Authentication.

Every authentication attempt gets its own return URL: the client's template
(scheme + host, plus any caller-supplied query parameters) stamped with a
fresh ``requestId`` correlation token. The processor redirects the customer
back to that URL once 3-D Secure (or BankID, etc.) completes, and the token
is what ties the incoming link to the attempt that is waiting for it.

The template belongs to one client and is only ever rewritten under the
builder's lock. ``build()`` hands out an immutable ``ReturnUrl`` snapshot, so
an attempt keeps matching against its own token even if another attempt
stamps a new one a moment later.
"""

import logging
import secrets
import threading
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import parse_qsl, unquote_plus, urlencode, urlsplit, urlunsplit

from stripe_sdk.config import DEFAULT_RETURN_URL_FOR_SCA
from stripe_sdk.errors import ConfigurationError

logger = logging.getLogger("stripe_sdk.sca.return_url")

REQUEST_ID_PARAM = "requestId"
TOKEN_RANGE = 1_000_000_000
_MAX_REDRAWS = 8


def _random_token() -> int:
    return secrets.randbelow(TOKEN_RANGE)


@dataclass(frozen=True)
class ReturnUrl:
    """Immutable return URL snapshot."""

    url: str

    @classmethod
    def parse(cls, url: str) -> "ReturnUrl":
        """Wrap ``url``, rejecting anything without both a scheme and a host."""
        parts = urlsplit(url)
        if not parts.scheme or not parts.hostname:
            raise ValueError(f"Return URL needs a scheme and a host: {url!r}")
        return cls(url)

    @property
    def scheme(self) -> str:
        return urlsplit(self.url).scheme.lower()

    @property
    def host(self) -> str:
        return urlsplit(self.url).hostname or ""

    @property
    def query_params(self) -> dict[str, str]:
        return dict(parse_qsl(urlsplit(self.url).query, keep_blank_values=True))

    @property
    def request_id(self) -> Optional[str]:
        return self.query_params.get(REQUEST_ID_PARAM)

    def with_request_id(self, token: int) -> "ReturnUrl":
        """
        Replace the ``requestId`` parameter with ``token``.

        Other query parameters are kept as written, including their encoding
        and any repeated keys; ``requestId`` goes last.
        """
        parts = urlsplit(self.url)
        kept = [
            pair for pair in parts.query.split("&")
            if pair and unquote_plus(pair.split("=", 1)[0]) != REQUEST_ID_PARAM
        ]
        kept.append(urlencode({REQUEST_ID_PARAM: token}))
        return ReturnUrl(
            urlunsplit((parts.scheme, parts.netloc, parts.path, "&".join(kept), parts.fragment))
        )

    def __str__(self) -> str:
        return self.url


class ReturnUrlBuilder:
    """
    Owns a client's return-URL template and stamps correlation tokens into it.

    Args:
        template: Base return URL. Its scheme and host must match the URL
            scheme the host application registered for incoming links.
        token_factory: Source of non-negative integer tokens. Defaults to
            ``secrets.randbelow(TOKEN_RANGE)``.
    """

    def __init__(
        self,
        template: str = DEFAULT_RETURN_URL_FOR_SCA,
        token_factory: Optional[Callable[[], int]] = None,
    ):
        try:
            self._template = ReturnUrl.parse(template)
        except ValueError as e:
            raise ConfigurationError(f"Invalid return URL for SCA: {template!r}") from e
        self._token_factory = token_factory or _random_token
        self._lock = threading.Lock()
        self._last_token: Optional[int] = None

    @property
    def template(self) -> ReturnUrl:
        return self._template

    def build(self) -> ReturnUrl:
        """
        Stamp a fresh token into the template and return the snapshot.

        The token differs from the one issued by the previous call, so two
        attempts started back to back never share a correlation token.
        """
        with self._lock:
            token = self._draw_token()
            self._template = self._template.with_request_id(token)
            self._last_token = token
            snapshot = self._template

        logger.debug("Issued SCA return URL %s", snapshot)
        return snapshot

    def _draw_token(self) -> int:
        for _ in range(_MAX_REDRAWS):
            token = self._token_factory()
            if token < 0:
                raise ConfigurationError(f"Correlation tokens must be non-negative, got {token}")
            if token != self._last_token:
                return token
        raise ConfigurationError("Token factory keeps repeating the previous correlation token")
