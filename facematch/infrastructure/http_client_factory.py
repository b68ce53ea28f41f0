"""HTTP client factory for connection pooling."""
import httpx
import logging

logger = logging.getLogger(__name__)


def create_http_client(timeout: float = 30.0, http2: bool = True) -> httpx.AsyncClient:
    """
    Create the async HTTP client shared by the face search and enrichment clients.

    The application lifespan owns the returned client and closes it with
    ``close_http_client`` on shutdown. Reusing one client gives:
    - Connection pooling
    - Keep-alive connections

    Args:
        timeout: Per-request timeout in seconds
        http2: Negotiate HTTP/2 where the remote service supports it

    Returns:
        New AsyncClient instance
    """
    client = httpx.AsyncClient(
        timeout=timeout,
        limits=httpx.Limits(
            max_keepalive_connections=20,
            max_connections=100,
            keepalive_expiry=30.0,
        ),
        http2=http2,
    )
    logger.info(f"Created HTTP client (timeout={timeout}s, http2={http2})")
    return client


async def close_http_client(client: httpx.AsyncClient) -> None:
    """Close a client created by ``create_http_client`` (call on application shutdown)."""
    if not client.is_closed:
        await client.aclose()
        logger.info("Closed HTTP client")
