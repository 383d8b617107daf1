from stripe_sdk.api.return_links import build_return_router

__all__ = ["build_return_router"]
