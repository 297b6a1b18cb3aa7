"""FastAPI application serving the single-page frontend."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse

from greeting import __version__
from greeting.config import get_settings
from greeting.dependencies import get_backend_client
from greeting.frontend.view import STYLESHEET, WelcomeView
from greeting.logging import configure_logging
from greeting.services.backend_client import BackendClient

PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Greeting</title>
<style>
{stylesheet}</style>
</head>
<body>
{body}
</body>
</html>
"""


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create application resources during startup and clean up on shutdown."""

    async with httpx.AsyncClient() as client:
        app.state.http_client = client
        yield
        del app.state.http_client


def create_frontend_app() -> FastAPI:
    """Application factory."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Greeting Frontend",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/", response_class=HTMLResponse)
    async def index(backend: BackendClient = Depends(get_backend_client)) -> str:
        view = WelcomeView(backend)
        await view.mount()
        return PAGE_TEMPLATE.format(stylesheet=STYLESHEET, body=view.render())

    return app


def run() -> None:
    """Serve the frontend with uvicorn on the configured port."""

    settings = get_settings()
    uvicorn.run(
        create_frontend_app(),
        host=settings.host,
        port=settings.frontend_port,
        log_config=None,
    )
