"""FastAPI backend entrypoint."""

from __future__ import annotations

import logging
import socket

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from greeting import __version__
from greeting.config import Settings, get_settings
from greeting.logging import configure_logging
from greeting.models import DataResponse, ErrorResponse

logger = logging.getLogger(__name__)

BACKEND_MESSAGE = "Hello from the backend!"


class BackendServer(uvicorn.Server):
    """uvicorn server that announces its address once the socket is bound.

    uvicorn exits the process from ``startup()`` when the bind fails, so the
    announcement is never made for a port that is already taken.
    """

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(
                "Backend server is running on http://localhost:%d", self.bound_port
            )

    @property
    def bound_port(self) -> int:
        for server in self.servers:
            for sock in server.sockets:
                return sock.getsockname()[1]
        return self.config.port


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    error = ErrorResponse(error="http_error", detail=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=error.model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled exception",
        extra={"method": request.method, "path": request.url.path},
    )
    error = ErrorResponse(error="server_error", detail="Internal server error.")
    return JSONResponse(status_code=500, content=error.model_dump())


def create_app() -> FastAPI:
    """Application factory."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Greeting Backend",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/api/data", response_model=DataResponse)
    async def get_data() -> DataResponse:
        return DataResponse(message=BACKEND_MESSAGE)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/version")
    async def version(settings: Settings = Depends(get_settings)) -> dict[str, str]:
        return {"version": __version__, "environment": settings.environment}

    return app


def run() -> None:
    """Serve the backend with uvicorn on the configured port."""

    settings = get_settings()
    config = uvicorn.Config(
        create_app(), host=settings.host, port=settings.port, log_config=None
    )
    BackendServer(config).run()


app = create_app()
