# tests/conftest.py

from typing import Any, Dict

import pytest
import respx

from digitalocean_exporter.core.do_client import DigitalOceanClient
from digitalocean_exporter.models.resources import (
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

API_URL = "https://api.test/v2"

ENV_VARS = (
    "DIGITALOCEAN_TOKEN",
    "DEBUG",
    "HTTP_TIMEOUT",
    "WEB_ADDR",
    "WEB_PATH",
    "DIGITALOCEAN_API_URL",
    "BUILD_REVISION",
    "BUILD_DATE",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """
    Autouse fixture that removes every variable the exporter reads from the
    environment and points the secrets directory at an empty temporary folder,
    so configuration in tests only comes from what each test sets explicitly.
    """
    for key in ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("digitalocean_exporter.core.config.SECRETS_DIR", str(tmp_path / "secrets"))


@pytest.fixture
def do_api():
    """Mocks the DigitalOcean API transport with respx."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def do_client():
    client = DigitalOceanClient(token="test-token", base_url=API_URL)
    yield client
    client.close()


# --- Sample API payloads ---

DROPLET_PAYLOADS = [
    {
        "id": "d1",
        "name": "web-1",
        "memory": 1024,
        "vcpus": 1,
        "disk": 25,
        "locked": False,
        "status": "active",
        "features": ["backups", "ipv6"],
        "region": {"slug": "nyc1", "name": "New York 1"},
        "size": {"slug": "s-1vcpu-1gb", "price_monthly": 5.0, "price_hourly": 0.00744},
    },
    {
        "id": "d2",
        "name": "db-1",
        "memory": 2048,
        "vcpus": 2,
        "disk": 50,
        "locked": True,
        "status": "off",
        "features": [],
        "region": {"slug": "ams3", "name": "Amsterdam 3"},
        "size": {"slug": "s-2vcpu-2gb", "price_monthly": 10.0, "price_hourly": 0.01488},
    },
]


def sample_inventory() -> Dict[str, Any]:
    """One or two items of every resource type, as the adapter would return them."""
    return {
        "account": Account.model_validate(
            {
                "droplet_limit": 25,
                "floating_ip_limit": 3,
                "volume_limit": 100,
                "email_verified": True,
                "status": "active",
            }
        ),
        "droplets": [Droplet.model_validate(p) for p in DROPLET_PAYLOADS],
        "volumes": [
            Volume.model_validate(
                {"id": "v1", "name": "data", "size_gigabytes": 10, "droplet_ids": [1], "region": {"slug": "nyc1"}}
            )
        ],
        "load_balancers": [
            LoadBalancer.model_validate(
                {"id": "lb1", "name": "front", "ip": "10.0.0.1", "status": "active", "droplet_ids": [1, 2]}
            )
        ],
        "domains": [Domain.model_validate({"name": "example.com", "ttl": 1800})],
        "domain_records": {
            "example.com": [
                DomainRecord.model_validate(
                    {"id": 11, "type": "MX", "name": "@", "data": "mail.example.com", "priority": 10, "ttl": 3600}
                )
            ]
        },
        "images": [
            Image.model_validate(
                {
                    "id": 42,
                    "name": "golden",
                    "type": "snapshot",
                    "distribution": "Ubuntu",
                    "regions": ["nyc1"],
                    "min_disk_size": 20,
                    "size_gigabytes": 2.5,
                }
            )
        ],
        "keys": [SSHKey.model_validate({"id": 7, "name": "laptop", "fingerprint": "aa:bb"})],
        "snapshots": [
            Snapshot.model_validate(
                {
                    "id": "s1",
                    "name": "nightly",
                    "regions": ["nyc1"],
                    "min_disk_size": 25,
                    "size_gigabytes": 1.5,
                    "resource_id": "d1",
                    "resource_type": "droplet",
                }
            )
        ],
        "floating_ips": [
            FloatingIP.model_validate(
                {"ip": "45.55.96.47", "region": {"slug": "nyc1"}, "droplet": {"id": "d1", "name": "web-1"}}
            )
        ],
    }


class FakeDigitalOceanClient:
    """
    Stand-in for DigitalOceanClient backed by an in-memory inventory.
    Setting an entry to an exception instance makes that call raise it.
    """

    def __init__(self, inventory: Dict[str, Any]):
        self.inventory = inventory
        self.calls = []

    def _result(self, key: str):
        self.calls.append(key)
        value = self.inventory[key]
        if isinstance(value, Exception):
            raise value
        return value

    def get_account(self, deadline):
        return self._result("account")

    def list_droplets(self, deadline):
        return self._result("droplets")

    def list_volumes(self, deadline):
        return self._result("volumes")

    def list_load_balancers(self, deadline):
        return self._result("load_balancers")

    def list_domains(self, deadline):
        return self._result("domains")

    def list_domain_records(self, domain, deadline):
        return self._result("domain_records")[domain]

    def list_images(self, deadline):
        return self._result("images")

    def list_keys(self, deadline):
        return self._result("keys")

    def list_snapshots(self, deadline):
        return self._result("snapshots")

    def list_floating_ips(self, deadline):
        return self._result("floating_ips")

    def close(self):
        pass


@pytest.fixture
def inventory():
    return sample_inventory()


@pytest.fixture
def fake_client(inventory):
    return FakeDigitalOceanClient(inventory)
