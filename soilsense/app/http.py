import importlib.util
import logging
import httpx
from typing import Optional

from soilsense.app.config import settings

logger = logging.getLogger(__name__)

# Process-wide client; one per worker, shared by every request
client: Optional[httpx.AsyncClient] = None


def _wants_http2(transport: Optional[httpx.AsyncBaseTransport]) -> bool:
    # a caller-supplied transport decides its own protocol
    return transport is None and importlib.util.find_spec("h2") is not None


def build_http_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """
    AsyncClient configured from settings. No retries: a failed call is
    reported once and the caller decides what to do.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            settings.HTTP_READ_TIMEOUT,
            connect=settings.HTTP_CONNECT_TIMEOUT,
        ),
        http2=_wants_http2(transport),
        limits=httpx.Limits(
            max_connections=settings.HTTP_MAX_CONNECTIONS,
            max_keepalive_connections=settings.HTTP_MAX_CONNECTIONS,
        ),
        headers={"Accept": "application/json", "User-Agent": settings.HTTP_USER_AGENT},
        transport=transport,
    )


async def init_http(transport: Optional[httpx.AsyncBaseTransport] = None):
    """Create the shared client once; later calls are no-ops."""
    global client
    if client is None:
        client = build_http_client(transport)
        logger.info(
            "Outbound HTTP ready (http2=%s, max_connections=%s)",
            _wants_http2(transport), settings.HTTP_MAX_CONNECTIONS,
        )


async def close_http():
    global client
    if client:
        await client.aclose()
        client = None


def get_http_client() -> httpx.AsyncClient:
    if client is None:
        raise RuntimeError("HTTP client not initialized. Call init_http() first.")
    return client
