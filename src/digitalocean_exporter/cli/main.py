# src/digitalocean_exporter/cli/main.py
"""
This module is the main entry point of the exporter.

It loads the configuration, wires the collectors into a registry and serves
the metrics over HTTP until interrupted.
"""

import logging
import traceback
from typing import Optional

import typer
import uvicorn
from typing_extensions import Annotated

from .. import __version__
from ..api.app import create_app
from ..core.config import Config, load_environment
from ..core.exceptions import ConfigurationError, RegistrationError
from ..core.factory import create_registry, get_build_info, get_client

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="digitalocean-exporter",
    help="Export DigitalOcean account inventory as Prometheus metrics.",
    add_completion=False,
)


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

# Structured fields passed through `extra=` by the collectors and the registry.
CONTEXT_FIELDS = ("collector", "error")


class ContextFormatter(logging.Formatter):
    """Appends the structured context of a record, if any, to its message."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        message = super().formatMessage(record)
        context = [f"{field}={getattr(record, field)}" for field in CONTEXT_FIELDS if hasattr(record, field)]
        if context:
            return f"{message} [{' '.join(context)}]"
        return message


def setup_logging(debug: bool) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter(LOG_FORMAT))
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO, handlers=[handler])


def version_callback(value: bool):
    """
    Prints the version of the exporter.
    """
    if value:
        typer.echo(f"digitalocean_exporter version: {__version__}")
        raise typer.Exit()


@app.command()
def main(
    token: Annotated[
        Optional[str], typer.Option("--token", help="DigitalOcean API token (env: DIGITALOCEAN_TOKEN).")
    ] = None,
    debug: Annotated[Optional[bool], typer.Option("--debug/--no-debug", help="Enable debug logging (env: DEBUG).")] = None,
    http_timeout: Annotated[
        Optional[int],
        typer.Option("--http-timeout", help="Per-collector API timeout in milliseconds (env: HTTP_TIMEOUT)."),
    ] = None,
    web_addr: Annotated[
        Optional[str], typer.Option("--web-addr", help="Address to listen on, e.g. ':9212' (env: WEB_ADDR).")
    ] = None,
    web_path: Annotated[
        Optional[str], typer.Option("--web-path", help="Path metrics are exposed on (env: WEB_PATH).")
    ] = None,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show the version and exit."),
    ] = None,
) -> None:
    """
    Start the exporter's HTTP server.
    """
    load_environment()

    try:
        config = Config(token=token, debug=debug, http_timeout=http_timeout, web_addr=web_addr, web_path=web_path)
        setup_logging(config.DEBUG)
        config.validate_instance()
        host, port = config.listen_address
    except ConfigurationError as e:
        setup_logging(False)
        logger.error("Invalid configuration: %s", e)
        raise typer.Exit(code=1)

    build_info = get_build_info(config)
    logger.info(
        "Starting digitalocean_exporter version=%s revision=%s build_date=%s python_version=%s",
        build_info.version,
        build_info.revision,
        build_info.build_date,
        build_info.python_version,
    )

    client = get_client(config)
    try:
        registry = create_registry(config, client)
    except RegistrationError as e:
        logger.error("Failed to register collectors: %s", e)
        client.close()
        raise typer.Exit(code=1)

    api = create_app(registry, web_path=config.WEB_PATH)

    logger.info("Listening on %s:%d, metrics at %s", host, port, config.WEB_PATH)
    try:
        uvicorn.run(api, host=host, port=port, log_level="debug" if config.DEBUG else "info")
    except Exception as e:
        logger.error("HTTP server error: %s", e)
        logger.debug("Server failure: %s", traceback.format_exc())
        raise typer.Exit(code=1)
    finally:
        client.close()


if __name__ == "__main__":
    app()
