# src/digitalocean_exporter/api/app.py
"""
FastAPI application factory for the exporter's HTTP endpoints.

Two routes are served: the scrape path, which runs a fresh collection on
every request, and a static landing page on "/".
"""

import logging

from fastapi import FastAPI, Response
from fastapi.responses import HTMLResponse
from prometheus_client import CONTENT_TYPE_LATEST

from digitalocean_exporter import __version__
from digitalocean_exporter.core.registry import MetricsRegistry

logger = logging.getLogger(__name__)

LANDING_PAGE = """<html>
<head><title>DigitalOcean Exporter</title></head>
<body>
<h1>DigitalOcean Exporter</h1>
<p><a href="{web_path}">Metrics</a></p>
</body>
</html>
"""


def create_app(registry: MetricsRegistry, web_path: str = "/metrics") -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        registry: The frozen registry whose collectors run on every scrape.
        web_path: Path the metrics are exposed on.

    Returns:
        A configured FastAPI application instance.
    """
    app = FastAPI(
        title="DigitalOcean Exporter",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    landing_page = LANDING_PAGE.format(web_path=web_path)

    # Plain `def` so each scrape runs on the threadpool and blocking API
    # calls never stall the event loop.
    @app.get(web_path, include_in_schema=False)
    def metrics() -> Response:
        """Collect every registered resource type and return the exposition text."""
        return Response(content=registry.render(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def index() -> str:
        return landing_page

    return app
