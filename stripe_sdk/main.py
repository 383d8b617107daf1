"""
ASGI app that receives SCA return links for a ``Stripe`` client.

Desktop and server-side hosts have no OS deep-link registration; instead
they point the return URL at this app and run it next to their event loop:

    stripe = Stripe(key, return_url_for_sca="http://127.0.0.1:8000/sca/return")
    app = create_app(stripe)
    # uvicorn.Server(uvicorn.Config(app, port=8000)).serve()
"""

import logging
from typing import Optional

from fastapi import FastAPI

from stripe_sdk.api.return_links import build_return_router
from stripe_sdk.client import Stripe
from stripe_sdk.config import Settings, settings as default_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or default_settings
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(stripe: Stripe, path: str = "/sca/return") -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Stripe SDK return links",
        description="Receives Strong Customer Authentication return redirects.",
        version="0.1.0",
    )
    app.include_router(build_return_router(stripe.link_stream, path=path))
    return app
