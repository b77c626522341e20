"""Helpers shared by CLI commands."""

import asyncio
import sys
from collections.abc import Awaitable, Callable
from typing import TypeVar

from historian.cli.console import get_console
from historian.config import Config, configure_logging
from historian.domain.content.model.outcome import DecodeResult
from historian.infrastructure.http.client import HistoricalDataClient

T = TypeVar("T")


def load_config() -> Config:
    """Load settings and set up logging."""
    config = Config()
    configure_logging(config.logging)
    return config


def run_with_client(request: Callable[[HistoricalDataClient], Awaitable[T]]) -> T:
    """Open a client, run one request against it, and close it."""
    config = load_config()

    async def _run() -> T:
        async with HistoricalDataClient(config) as client:
            return await request(client)

    return asyncio.run(_run())


def exit_on_failure(result: DecodeResult) -> None:
    """Print the failure message and exit 1 when a decode did not succeed."""
    if not result.success:
        get_console().failure(result)
        sys.exit(1)
