# src/digitalocean_exporter/collectors/snapshot_collector.py

from typing import Iterable, Iterator, List

from ..models.metrics import MetricDescriptor, Observation
from ..models.resources import Snapshot
from ..utils.deadline import Deadline
from .base_collector import ResourceCollector

_LABELS = ("id", "name", "region", "resource_id", "resource_type")


class SnapshotCollector(ResourceCollector):
    """Collects droplet and volume snapshots, one series per snapshot region."""

    name = "snapshot"

    def build_descriptors(self) -> Iterable[MetricDescriptor]:
        self.min_disk_size = MetricDescriptor(
            name="digitalocean_snapshot_min_disk_size_bytes",
            documentation="Minimum disk size for a droplet/volume to run this snapshot on in bytes",
            labels=_LABELS,
        )
        self.size = MetricDescriptor(
            name="digitalocean_snapshot_size_bytes",
            documentation="Snapshot's size in bytes",
            labels=_LABELS,
        )
        return [self.min_disk_size, self.size]

    def fetch(self, deadline: Deadline) -> List[Snapshot]:
        return self._client.list_snapshots(deadline)

    def observations(self, items: List[Snapshot]) -> Iterator[Observation]:
        for snapshot in items:
            for region in snapshot.regions or [""]:
                labels = (snapshot.id, snapshot.name, region, snapshot.resource_id, snapshot.resource_type)
                yield self.min_disk_size.observe(labels, snapshot.min_disk_size * 1000 * 1000 * 1000)
                yield self.size.observe(labels, snapshot.size_gigabytes * 1000 * 1000 * 1000)
