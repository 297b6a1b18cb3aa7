"""Terminal rendition of the frontend view for manual testing."""

from __future__ import annotations

import argparse
import asyncio
import logging
import time

import httpx

from greeting.config import Settings
from greeting.frontend.view import WelcomeView
from greeting.services.backend_client import BackendClient

DEFAULT_URL = "http://localhost:3000/api/data"


async def run_client(url: str, timeout: float) -> WelcomeView:
    """Mount the welcome view against the backend at ``url``."""

    logger = logging.getLogger("fetch_client")
    start = time.perf_counter()
    settings = Settings(BACKEND_URL=url, REQUEST_TIMEOUT=timeout)

    async with httpx.AsyncClient() as client:
        view = WelcomeView(BackendClient(client, settings))
        await view.mount()

    elapsed = time.perf_counter() - start
    logger.info("View mounted in %.2fs", elapsed)
    return view


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the greeting frontend in a terminal.")
    parser.add_argument("--url", default=DEFAULT_URL, help="Backend URL (default: %(default)s)")
    parser.add_argument(
        "--timeout", type=float, default=5.0, help="Seconds to wait for the backend."
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    try:
        view = asyncio.run(run_client(args.url, args.timeout))
    except KeyboardInterrupt:  # pragma: no cover - manual usage only
        return
    print(view.render_text())


if __name__ == "__main__":  # pragma: no cover
    main()
