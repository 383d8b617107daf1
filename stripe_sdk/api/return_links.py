"""
Return-link endpoint for hosts that receive callbacks over HTTP.

GET /sca/return: the processor redirects the customer here after
authentication. The full request URL is published on the client's link
stream, where the waiting attempt matches it by ``requestId``.

Use it with a return URL such as ``http://127.0.0.1:8000/sca/return``.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from stripe_sdk.sca.links import LinkStream

logger = logging.getLogger("stripe_sdk.api.return_links")

_DONE_PAGE = (
    "<!DOCTYPE html><html><body><h3>Authentication complete.</h3>"
    "<p>You may close this window and return to the app.</p></body></html>"
)


def build_return_router(link_stream: LinkStream, path: str = "/sca/return") -> APIRouter:
    router = APIRouter(tags=["sca"])

    @router.get(path, response_class=HTMLResponse)
    async def receive_return_link(request: Request) -> HTMLResponse:
        """Publish the incoming return link and tell the customer they are done."""
        uri = str(request.url)
        delivered = link_stream.publish(uri)
        if not delivered:
            logger.warning("Return link %s arrived with no attempt listening", uri)
        return HTMLResponse(_DONE_PAGE)

    return router
