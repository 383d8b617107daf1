"""
Exception hierarchy for the SDK.

Two families live here:
  - Construction and authentication errors (bad keys, redirects that cannot
    be opened, platforms without a deep-link mechanism, abandoned attempts).
  - API errors raised by the HTTP handler. These carry the status code and
    a ``retriable`` flag so the retry helper can decide whether to back off
    and try again (429 and 5xx) or give up immediately (4xx).
"""

from typing import Optional


class StripeSdkError(Exception):
    """Base exception for every error raised by the SDK."""


class ConfigurationError(StripeSdkError):
    """Invalid client configuration (publishable key, account id, return URL)."""


class UnsupportedActionError(StripeSdkError):
    """The intent's next action is not a redirect-based authentication."""


class LaunchError(StripeSdkError):
    """The host could not open the external authentication page."""

    def __init__(self, url: str, message: str = "Could not launch authentication redirect"):
        super().__init__(f"{message}: {url}")
        self.url = url


class UnsupportedPlatformError(StripeSdkError):
    """Redirect authentication was requested on a host with no deep-link callback."""


class NoMatchTimeout(StripeSdkError):
    """No matching return link arrived within the configured wait."""

    def __init__(self, return_url: str, timeout: float):
        super().__init__(
            f"Timed out after {timeout:g}s waiting for authentication callback to {return_url}"
        )
        self.return_url = return_url
        self.timeout = timeout


class ApiError(StripeSdkError):
    """Error response from the Stripe REST API."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        retriable: bool = False,
        error_type: Optional[str] = None,
        code: Optional[str] = None,
        param: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.retriable = retriable
        self.error_type = error_type
        self.code = code
        self.param = param


class RateLimitError(ApiError):
    """429 Too Many Requests from the API."""

    def __init__(self, message: str = "Rate limited", retry_after: Optional[float] = None):
        super().__init__(message, status_code=429, retriable=True, error_type="rate_limit_error")
        self.retry_after = retry_after


class ApiConnectionError(ApiError):
    """The request never got a response (DNS, connect, read timeout)."""

    def __init__(self, message: str):
        super().__init__(message, status_code=0, retriable=True, error_type="api_connection_error")
