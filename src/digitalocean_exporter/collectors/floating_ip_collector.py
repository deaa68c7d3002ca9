# src/digitalocean_exporter/collectors/floating_ip_collector.py

from typing import Iterable, Iterator, List

from ..models.metrics import MetricDescriptor, Observation
from ..models.resources import FloatingIP
from ..utils.deadline import Deadline
from .base_collector import ResourceCollector


class FloatingIPCollector(ResourceCollector):
    name = "floating_ip"

    def build_descriptors(self) -> Iterable[MetricDescriptor]:
        self.active = MetricDescriptor(
            name="digitalocean_floating_ipv4_active",
            documentation="If 1 the floating ip used by a droplet, 0 otherwise",
            labels=("ipv4", "region", "droplet_id", "droplet_name"),
        )
        return [self.active]

    def fetch(self, deadline: Deadline) -> List[FloatingIP]:
        return self._client.list_floating_ips(deadline)

    def observations(self, items: List[FloatingIP]) -> Iterator[Observation]:
        for fip in items:
            droplet_id = fip.droplet.id if fip.droplet else ""
            droplet_name = fip.droplet.name if fip.droplet else ""
            value = 1.0 if fip.droplet and fip.droplet.id else 0.0
            yield self.active.observe((fip.ip, fip.region.slug, droplet_id, droplet_name), value)
