"""FastAPI application for subscription server."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from config.settings import Settings, load_settings
from services.notification_service import NotificationService
from subscription.router import create_router
from vpn.server_config import render_server_config

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, notify: bool = True) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Process settings (loaded from the environment if omitted)
        notify: Start the startup notifications when the app starts

    Returns:
        Configured FastAPI app
    """
    if settings is None:
        settings = load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.debug(f"Server config:\n{render_server_config(settings)}")
        if notify:
            NotificationService.start_background_tasks(settings)
        logger.info(f"Subscription available at /{settings.sub_path}")
        yield

    app = FastAPI(
        title="Argo Subscription Server",
        description="Serves VLESS/VMESS/Trojan share links to v2ray clients",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.include_router(create_router(settings))

    logger.info("FastAPI application created")
    return app


def start_subscription_server(settings: Optional[Settings] = None) -> None:
    """Start subscription server (blocking)."""
    if settings is None:
        settings = load_settings()

    logger.info(f"Starting subscription server on port {settings.server_port}...")

    app = create_app(settings)

    # Run server (blocks until shutdown)
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.server_port,
        log_level="info",
        access_log=True,
    )
