# src/digitalocean_exporter/collectors/volume_collector.py

from typing import Iterable, Iterator, List

from ..models.metrics import MetricDescriptor, Observation
from ..models.resources import Volume
from ..utils.deadline import Deadline
from .base_collector import ResourceCollector

_LABELS = ("id", "name", "region")


class VolumeCollector(ResourceCollector):
    """Collects the size and attachment state of block storage volumes."""

    name = "volume"

    def build_descriptors(self) -> Iterable[MetricDescriptor]:
        self.size = MetricDescriptor(
            name="digitalocean_volume_size_bytes",
            documentation="Volume's size in bytes",
            labels=_LABELS,
        )
        self.attached = MetricDescriptor(
            name="digitalocean_volume_attached",
            documentation="If 1 the volume is attached to at least one droplet",
            labels=_LABELS,
        )
        return [self.size, self.attached]

    def fetch(self, deadline: Deadline) -> List[Volume]:
        return self._client.list_volumes(deadline)

    def observations(self, items: List[Volume]) -> Iterator[Observation]:
        for volume in items:
            labels = (volume.id, volume.name, volume.region.slug)
            yield self.size.observe(labels, volume.size_gigabytes * 1024 * 1024 * 1024)
            yield self.attached.observe(labels, 1.0 if volume.droplet_ids else 0.0)
