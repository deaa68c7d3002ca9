import logging

import httpx

from .. import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f"digitalocean_exporter/{__version__}"


def get_http_client(token: str, base_url: str, timeout: float = 5.0) -> httpx.Client:
    """
    Returns a configured httpx.Client with:
    - Bearer authentication for the DigitalOcean API.
    - Standard User-Agent and Accept headers.
    - A default timeout; callers normally pass a tighter per-request one.

    httpx.Client is safe to share between threads, so one instance serves
    every collector and every concurrent scrape.
    """
    headers = {
        "Authorization": f"Bearer {token}",
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }

    return httpx.Client(
        base_url=base_url.rstrip("/") + "/",
        timeout=httpx.Timeout(timeout),
        headers=headers,
        follow_redirects=True,
    )
