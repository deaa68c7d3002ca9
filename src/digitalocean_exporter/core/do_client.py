# src/digitalocean_exporter/core/do_client.py
"""
Thin typed adapter over the DigitalOcean v2 REST API.

Every operation takes a Deadline and returns the complete result: paginated
listings are walked to the last page before returning. All failures surface
as DigitalOceanAPIError subclasses so collectors only need one except clause.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..models.resources import (
    Account,
    Domain,
    DomainRecord,
    Droplet,
    FloatingIP,
    Image,
    LoadBalancer,
    Snapshot,
    SSHKey,
    Volume,
)
from ..utils.deadline import Deadline
from ..utils.http_client import get_http_client
from .exceptions import APIResponseError, APITimeoutError, APITransportError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

PER_PAGE = 200


class DigitalOceanClient:
    """Owns the API token and the HTTP transport shared by all collectors."""

    def __init__(self, token: str, base_url: str, http_client: Optional[httpx.Client] = None):
        self._http = http_client or get_http_client(token=token, base_url=base_url)

    def close(self):
        self._http.close()

    def _get(self, path: str, deadline: Deadline, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        timeout = deadline.timeout()
        try:
            with self._http.stream("GET", path, params=params, timeout=timeout) as response:
                body = self._read_body(response, path, deadline)
        except httpx.TimeoutException as e:
            raise APITimeoutError(f"GET {path} timed out: {e}") from e
        except httpx.HTTPError as e:
            raise APITransportError(f"GET {path} failed: {e}") from e

        if response.is_error:
            raise APIResponseError(
                f"GET {path} returned {response.status_code}: {self._error_message(response, body)}",
                status_code=response.status_code,
            )

        try:
            payload = json.loads(body)
        except ValueError as e:
            logger.debug("Raw response content from %s: %s", path, body[:500])
            raise APIResponseError(f"GET {path} returned a non-JSON body", status_code=response.status_code) from e
        if not isinstance(payload, dict):
            raise APIResponseError(f"GET {path} returned an unexpected payload", status_code=response.status_code)
        return payload

    @staticmethod
    def _read_body(response: httpx.Response, path: str, deadline: Deadline) -> bytes:
        """
        Reads the body chunk by chunk, giving up once the deadline passes.

        httpx timeouts apply to each network operation separately; the deadline
        bounds the whole read.
        """
        chunks = []
        for chunk in response.iter_bytes():
            chunks.append(chunk)
            if deadline.expired:
                raise APITimeoutError(f"GET {path} exceeded its {deadline.seconds:.3f}s deadline while reading")
        return b"".join(chunks)

    @staticmethod
    def _error_message(response: httpx.Response, body: bytes) -> str:
        """DigitalOcean errors look like {"id": "unauthorized", "message": "..."}."""
        try:
            error = json.loads(body)
        except ValueError:
            return response.reason_phrase
        if isinstance(error, dict) and error.get("message"):
            return f"{error.get('id', 'error')}: {error['message']}"
        return response.reason_phrase

    @staticmethod
    def _parse(model: Type[T], raw: Any, path: str) -> T:
        try:
            return model.model_validate(raw)
        except ValidationError as e:
            raise APIResponseError(f"GET {path} returned a malformed {model.__name__}: {e}") from e

    def _list(
        self,
        path: str,
        key: str,
        model: Type[T],
        deadline: Deadline,
        params: Optional[Dict[str, Any]] = None,
    ) -> List[T]:
        """Fetches every page of a listing endpoint and validates its items."""
        items: List[T] = []
        page = 1
        while True:
            query = dict(params or {})
            query.update({"page": page, "per_page": PER_PAGE})
            payload = self._get(path, deadline, params=query)

            raw_items = payload.get(key) or []
            if not isinstance(raw_items, list):
                raise APIResponseError(f"GET {path} returned a non-list '{key}' field")
            items.extend(self._parse(model, raw, path) for raw in raw_items)

            pages = (payload.get("links") or {}).get("pages") or {}
            if not pages.get("next") or not raw_items:
                break
            page += 1

        logger.debug("Listed %d %s from %s across %d page(s)", len(items), key, path, page)
        return items

    def get_account(self, deadline: Deadline) -> Account:
        payload = self._get("account", deadline)
        return self._parse(Account, payload.get("account") or {}, "account")

    def list_droplets(self, deadline: Deadline) -> List[Droplet]:
        return self._list("droplets", "droplets", Droplet, deadline)

    def list_volumes(self, deadline: Deadline) -> List[Volume]:
        return self._list("volumes", "volumes", Volume, deadline)

    def list_load_balancers(self, deadline: Deadline) -> List[LoadBalancer]:
        return self._list("load_balancers", "load_balancers", LoadBalancer, deadline)

    def list_domains(self, deadline: Deadline) -> List[Domain]:
        return self._list("domains", "domains", Domain, deadline)

    def list_domain_records(self, domain: str, deadline: Deadline) -> List[DomainRecord]:
        return self._list(f"domains/{domain}/records", "domain_records", DomainRecord, deadline)

    def list_images(self, deadline: Deadline) -> List[Image]:
        """Lists the account's own images (snapshots, backups and custom images)."""
        return self._list("images", "images", Image, deadline, params={"private": "true"})

    def list_keys(self, deadline: Deadline) -> List[SSHKey]:
        return self._list("account/keys", "ssh_keys", SSHKey, deadline)

    def list_snapshots(self, deadline: Deadline) -> List[Snapshot]:
        return self._list("snapshots", "snapshots", Snapshot, deadline)

    def list_floating_ips(self, deadline: Deadline) -> List[FloatingIP]:
        return self._list("floating_ips", "floating_ips", FloatingIP, deadline)
