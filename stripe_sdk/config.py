"""SDK configuration via environment variables."""

from typing import Optional

from pydantic_settings import BaseSettings

DEFAULT_API_VERSION = "2020-03-02"
DEFAULT_RETURN_URL_FOR_SCA = "stripesdk://3ds.stripesdk.io"


class Settings(BaseSettings):
    publishable_key: Optional[str] = None
    stripe_account: Optional[str] = None
    api_base: str = "https://api.stripe.com/v1"
    api_version: str = DEFAULT_API_VERSION
    return_url_for_sca: str = DEFAULT_RETURN_URL_FOR_SCA
    log_level: str = "INFO"
    http_timeout_seconds: float = 30.0
    max_retries: int = 2
    retry_base_delay: float = 0.5
    sca_timeout_seconds: Optional[float] = None  # None waits for the callback indefinitely

    model_config = {"env_prefix": "STRIPE_SDK_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
