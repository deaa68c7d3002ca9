# tests/core/test_factory.py

from digitalocean_exporter.collectors import ExporterCollector
from digitalocean_exporter.core.config import Config
from digitalocean_exporter.core.do_client import DigitalOceanClient
from digitalocean_exporter.core.factory import RESOURCE_COLLECTORS, create_registry, get_client, get_collectors


def test_get_collectors_builds_one_of_each(fake_client):
    config = Config(token="t", http_timeout=2500)

    collectors = get_collectors(config, fake_client, start_time=100.0)

    assert isinstance(collectors[0], ExporterCollector)
    assert [type(c) for c in collectors[1:]] == list(RESOURCE_COLLECTORS)
    assert all(c.timeout == 2.5 for c in collectors[1:])


def test_default_collectors_do_not_collide(fake_client):
    registry = create_registry(Config(token="t"), fake_client, start_time=100.0)

    assert registry.frozen
    assert len(registry.collectors) == len(RESOURCE_COLLECTORS) + 1
    names = [f.name for f in registry.describe()]
    assert len(names) == len(set(names))


def test_get_client_uses_configured_url_and_token():
    client = get_client(Config(token="secret", api_url="https://api.test/v2"))
    try:
        assert isinstance(client, DigitalOceanClient)
        assert str(client._http.base_url) == "https://api.test/v2/"
        assert client._http.headers["Authorization"] == "Bearer secret"
    finally:
        client.close()
