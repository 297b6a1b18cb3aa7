"""Adapter for the greeting backend's ``/api/data`` endpoint."""

from __future__ import annotations

import logging

import httpx

from greeting.config import Settings
from greeting.exceptions import BackendFetchError
from greeting.models import DataResponse

logger = logging.getLogger(__name__)


class BackendClient:
    """Fetches the greeting message served by the backend.

    The status code does not decide success: any response whose body is a
    JSON object with a string ``message`` is accepted, as a browser ``fetch``
    followed by ``response.json()`` would.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    @property
    def url(self) -> str:
        return self._settings.backend_url

    async def fetch_message(self) -> str:
        """Return the ``message`` field of the backend's JSON payload."""

        try:
            response = await self._client.get(
                self.url,
                headers={"Accept": "application/json"},
                timeout=self._settings.request_timeout,
                follow_redirects=True,
            )
        except httpx.TimeoutException as exc:
            logger.warning("Backend request timed out", extra={"url": self.url})
            raise BackendFetchError("Backend request timed out") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning(
                "Backend request failed", extra={"url": self.url, "error": str(exc)}
            )
            raise BackendFetchError("Backend request failed") from exc

        try:
            payload = DataResponse.model_validate(response.json(), strict=True)
        except ValueError as exc:
            # ValidationError is a ValueError, as is the JSONDecodeError from a non-JSON body.
            logger.warning(
                "Malformed backend response",
                extra={
                    "url": self.url,
                    "status_code": response.status_code,
                    "response_text": response.text,
                },
            )
            raise BackendFetchError(
                "Invalid backend response payload",
                status_code=response.status_code,
            ) from exc

        if response.is_error:
            logger.warning(
                "Backend returned an error status with a usable payload",
                extra={"url": self.url, "status_code": response.status_code},
            )

        return payload.message
