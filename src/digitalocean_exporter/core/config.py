# src/digitalocean_exporter/core/config.py

import logging
import os
import re
from typing import Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SECRETS_DIR = "/etc/digitalocean_exporter/secrets"

DEFAULT_API_URL = "https://api.digitalocean.com/v2"
DEFAULT_HTTP_TIMEOUT_MS = 5000
DEFAULT_WEB_ADDR = ":9212"
DEFAULT_WEB_PATH = "/metrics"

_TRUTHY = ("true", "1", "t", "y", "yes")

# ":9212", "0.0.0.0:9212", "localhost:9212", "[::1]:9212"
_ADDR_RE = re.compile(r"^(?:\[(?P<ipv6>[0-9a-fA-F:.]+)\]|(?P<host>[^:\[\]]*)):(?P<port>\d{1,5})$")


def load_environment() -> bool:
    """
    Loads a `.env` file from the current working directory (or its parents)
    into the process environment. Variables already set are not overridden.
    """
    dotenv_path = find_dotenv(usecwd=True)
    if not dotenv_path:
        return False
    logger.debug("Loading environment from %s", dotenv_path)
    return load_dotenv(dotenv_path=dotenv_path, override=False)


def _as_bool(value: Optional[str]) -> bool:
    return str(value).lower() in _TRUTHY if value is not None else False


class Config:
    """
    Handles the exporter's configuration by loading values from environment variables.

    Keyword overrides (typically coming from command line options) win over the
    environment when they are not None.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        debug: Optional[bool] = None,
        http_timeout: Optional[int] = None,
        web_addr: Optional[str] = None,
        web_path: Optional[str] = None,
        api_url: Optional[str] = None,
    ):
        self.DIGITALOCEAN_TOKEN = token if token is not None else self._get_secret("DIGITALOCEAN_TOKEN")
        self.DEBUG = debug if debug is not None else _as_bool(os.getenv("DEBUG"))
        self.HTTP_TIMEOUT = (
            http_timeout if http_timeout is not None else self._get_int("HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT_MS)
        )
        self.WEB_ADDR = web_addr if web_addr is not None else os.getenv("WEB_ADDR", DEFAULT_WEB_ADDR)
        self.WEB_PATH = web_path if web_path is not None else os.getenv("WEB_PATH", DEFAULT_WEB_PATH)
        self.DIGITALOCEAN_API_URL = api_url if api_url is not None else os.getenv("DIGITALOCEAN_API_URL", DEFAULT_API_URL)

        # Build metadata, usually baked into the container image.
        self.BUILD_REVISION = os.getenv("BUILD_REVISION", "unknown")
        self.BUILD_DATE = os.getenv("BUILD_DATE", "unknown")

    @staticmethod
    def _get_secret(key: str, default: str = None) -> str:
        """
        Retrieves a secret from a file (Docker secret/volume) or falls back to environment variable.

        Raises:
            ConfigurationError: If the secret file exists but cannot be read.
        """
        secret_file = os.path.join(SECRETS_DIR, key)
        if os.path.exists(secret_file):
            try:
                with open(secret_file, "r") as f:
                    value = f.read().strip()
                    logger.debug("Loaded secret '%s' from %s", key, secret_file)
                    return value
            except OSError as e:
                raise ConfigurationError(f"Secret file '{secret_file}' exists but cannot be read: {e}") from e
        return os.getenv(key, default)

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        raw = os.getenv(key)
        if raw is None or raw == "":
            return default
        try:
            return int(raw)
        except ValueError as e:
            raise ConfigurationError(f"{key} must be an integer, got '{raw}'") from e

    @property
    def timeout_seconds(self) -> float:
        """Per-collector, per-scrape API timeout."""
        return self.HTTP_TIMEOUT / 1000.0

    @property
    def listen_address(self) -> Tuple[str, int]:
        """
        Splits WEB_ADDR into a (host, port) pair suitable for uvicorn.
        An empty host means all interfaces.
        """
        match = _ADDR_RE.match(self.WEB_ADDR or "")
        if not match:
            raise ConfigurationError(
                f"WEB_ADDR '{self.WEB_ADDR}' is invalid. Use ':port', 'host:port' or '[ipv6]:port'."
            )
        port = int(match.group("port"))
        if not 0 < port < 65536:
            raise ConfigurationError(f"WEB_ADDR port {port} is out of range.")
        host = match.group("ipv6") or match.group("host") or "0.0.0.0"
        return host, port

    def validate_instance(self):
        if not self.DIGITALOCEAN_TOKEN:
            raise ConfigurationError("DigitalOcean Token is required (set DIGITALOCEAN_TOKEN).")
        if self.HTTP_TIMEOUT <= 0:
            raise ConfigurationError("HTTP_TIMEOUT must be a positive number of milliseconds.")
        if not self.WEB_PATH.startswith("/") or self.WEB_PATH == "/":
            raise ConfigurationError("WEB_PATH must start with '/' and cannot be the landing page '/'.")
        if not self.DIGITALOCEAN_API_URL.startswith(("http://", "https://")):
            raise ConfigurationError("DIGITALOCEAN_API_URL must be an http(s) URL.")
        # Raises on a malformed address.
        self.listen_address
