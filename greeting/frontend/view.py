"""The single-page welcome view and its mount lifecycle."""

from __future__ import annotations

import html
import logging

from greeting.exceptions import BackendFetchError
from greeting.services.backend_client import BackendClient

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to Vue.js Frontend!"

STYLESHEET = """\
#app {
  font-family: Arial, sans-serif;
  text-align: center;
  margin-top: 20px;
}
"""


class WelcomeView:
    """Heading plus a paragraph filled from the backend on mount.

    ``backend_message`` starts empty and is written at most once, by the
    first successful :meth:`mount`. A failed fetch is logged and leaves it
    empty; nothing is retried.
    """

    def __init__(self, backend: BackendClient) -> None:
        self._backend = backend
        self.message = WELCOME_MESSAGE
        self.backend_message = ""
        self.mounted = False

    async def mount(self) -> None:
        """Run the one-shot fetch. Later calls do nothing."""

        if self.mounted:
            return
        self.mounted = True

        try:
            self.backend_message = await self._backend.fetch_message()
        except BackendFetchError as exc:
            logger.error(
                "Error fetching data",
                extra={
                    "url": self._backend.url,
                    "error": exc.message,
                    "code": exc.code,
                    "status_code": exc.status_code,
                },
            )

    def render(self) -> str:
        return (
            '<div id="app">'
            f"<h1>{html.escape(self.message)}</h1>"
            f"<p>{html.escape(self.backend_message)}</p>"
            "</div>"
        )

    def render_text(self) -> str:
        return f"{self.message}\n{self.backend_message}"
