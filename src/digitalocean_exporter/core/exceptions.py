from typing import Optional


class ExporterError(Exception):
    """Base exception for the DigitalOcean exporter."""

    pass


class ConfigurationError(ExporterError):
    """Raised when the process configuration is missing or malformed."""

    pass


class RegistrationError(ExporterError):
    """Raised when a collector cannot be added to the metrics registry."""

    pass


class DigitalOceanAPIError(ExporterError):
    """Base exception for failures talking to the DigitalOcean API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class APITimeoutError(DigitalOceanAPIError):
    """Raised when a request does not complete before its deadline."""

    pass


class APITransportError(DigitalOceanAPIError):
    """Raised when the request fails below the HTTP layer (DNS, TLS, connection reset)."""

    pass


class APIResponseError(DigitalOceanAPIError):
    """Raised on a non-2xx response or a body that cannot be decoded."""

    pass
