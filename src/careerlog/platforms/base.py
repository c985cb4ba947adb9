"""Shared pieces of the platform fetchers."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol

import httpx

from careerlog.episodes.models import Platform
from careerlog.matching import PlatformCandidate
from careerlog.utils.errors import PlatformAuthError, PlatformError

DEFAULT_TIMEOUT = 30.0


class EpisodeFetcher(Protocol):
    """Produces the full list of a platform's episodes as match candidates."""

    platform: Platform

    async def fetch_candidates(self) -> list[PlatformCandidate]: ...


def raise_for_platform_status(
    response: httpx.Response, platform: Platform, action: str
) -> None:
    """Turn a non-2xx response into a PlatformError carrying the body."""
    if response.is_success:
        return

    message = f"{platform.label} {action} failed: {response.status_code} - {response.text}"
    if response.status_code in (401, 403):
        raise PlatformAuthError(message, platform.value, response.status_code)
    raise PlatformError(message, platform.value, response.status_code)


def parse_json(response: httpx.Response, platform: Platform) -> dict:
    try:
        return response.json()
    except ValueError as e:
        raise PlatformError(
            f"{platform.label} returned malformed JSON: {e}", platform.value
        ) from e


@asynccontextmanager
async def http_client(
    client: httpx.AsyncClient | None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Use the injected client, or open a short-lived one."""
    if client is not None:
        yield client
        return

    async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as owned:
        yield owned
