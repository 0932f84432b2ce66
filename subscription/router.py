"""Subscription server routes.

All methods are routed identically; there is no query-string handling.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from config.settings import Settings
from services.subscription_service import SubscriptionService

logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_router(settings: Settings) -> APIRouter:
    """Create the router for the configured subscription path.

    SUB_PATH is compared as a literal string, never used as a route
    template, so values containing "{" or "}" match only themselves.

    Args:
        settings: Process settings (fixes the subscription path)

    Returns:
        Router with the greeting route and the path dispatcher
    """
    router = APIRouter()
    service = SubscriptionService(settings)

    @router.api_route("/", methods=ALL_METHODS)
    async def root() -> PlainTextResponse:
        """Greeting endpoint."""
        return PlainTextResponse(content="Hello world!")

    @router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    async def dispatch(path: str, request: Request) -> PlainTextResponse:
        """Serve the subscription on its exact path, 404 elsewhere."""
        if path != settings.sub_path:
            logger.debug(f"No route for /{path}")
            return PlainTextResponse(content="Not Found", status_code=404)

        client_ip = request.client.host if request.client else "unknown"
        user_agent = request.headers.get("user-agent", "unknown")
        logger.info(f"Subscription access: ip={client_ip}, ua={user_agent[:50]}")

        return PlainTextResponse(
            content=service.build(),
            media_type="text/plain; charset=utf-8",
        )

    return router
