import logging
from typing import Any, Optional

import httpx

from .config import Config


logger = logging.getLogger(__name__)


def create_http_client(**kwargs: Any) -> httpx.Client:
    kwargs.setdefault('timeout', Config.HTTP_TIMEOUT_SECONDS)
    kwargs.setdefault('follow_redirects', True)
    return httpx.Client(**kwargs)


def download_bytes_from_url(
    url: str,
    timeout_seconds: Optional[float] = None,
    client: Optional[httpx.Client] = None,
) -> bytes:
    owns_client = client is None
    if client is None:
        client = create_http_client()
    try:
        response = client.get(url, timeout=timeout_seconds or Config.HTTP_TIMEOUT_SECONDS)
        response.raise_for_status()
        return response.content
    except httpx.HTTPError as e:
        logger.error(f"Failed to download from URL {url}: {str(e)}")
        raise
    finally:
        if owns_client:
            client.close()
