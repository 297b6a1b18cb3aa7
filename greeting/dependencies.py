"""Dependency providers for the FastAPI applications."""

import httpx
from fastapi import Depends
from starlette.requests import HTTPConnection

from greeting.config import Settings, get_settings
from greeting.services.backend_client import BackendClient


async def get_http_client(connection: HTTPConnection) -> httpx.AsyncClient:
    """Retrieve the shared AsyncClient from application state."""

    return connection.app.state.http_client  # type: ignore[return-value]


async def get_backend_client(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> BackendClient:
    """Dependency provider for BackendClient."""

    return BackendClient(client=client, settings=settings)
