# src/digitalocean_exporter/collectors/key_collector.py

from typing import Iterable, Iterator, List

from ..models.metrics import MetricDescriptor, Observation
from ..models.resources import SSHKey
from ..utils.deadline import Deadline
from .base_collector import ResourceCollector


class KeyCollector(ResourceCollector):
    """Exports one constant series per SSH key registered on the account."""

    name = "key"

    def build_descriptors(self) -> Iterable[MetricDescriptor]:
        self.key = MetricDescriptor(
            name="digitalocean_key",
            documentation="Information about keys in your digitalocean account",
            labels=("id", "name", "fingerprint"),
        )
        return [self.key]

    def fetch(self, deadline: Deadline) -> List[SSHKey]:
        return self._client.list_keys(deadline)

    def observations(self, items: List[SSHKey]) -> Iterator[Observation]:
        for key in items:
            yield self.key.observe((key.id, key.name, key.fingerprint), 1.0)
