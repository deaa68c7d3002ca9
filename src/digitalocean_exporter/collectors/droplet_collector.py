# src/digitalocean_exporter/collectors/droplet_collector.py

from typing import Iterable, Iterator, List

from ..models.metrics import MetricDescriptor, Observation
from ..models.resources import Droplet
from ..utils.deadline import Deadline
from .base_collector import ResourceCollector

DROPLET_STATES = ("new", "active", "off", "archive", "unknown")

_LABELS = ("id", "name", "region")


class DropletCollector(ResourceCollector):
    """Collects size, price and state for every droplet in the account."""

    name = "droplet"

    def build_descriptors(self) -> Iterable[MetricDescriptor]:
        self.up = MetricDescriptor(
            name="digitalocean_droplet_up",
            documentation="If 1 the droplet is up and running, 0 otherwise",
            labels=_LABELS,
        )
        self.status = MetricDescriptor(
            name="digitalocean_droplet_status",
            documentation="Current status of the droplet, 1 for the active state and 0 for the others",
            labels=_LABELS,
            states=DROPLET_STATES,
            fallback_state="unknown",
        )
        self.cpus = MetricDescriptor(
            name="digitalocean_droplet_cpus",
            documentation="Droplet's number of CPUs",
            labels=_LABELS,
        )
        self.memory = MetricDescriptor(
            name="digitalocean_droplet_memory_bytes",
            documentation="Droplet's memory in bytes",
            labels=_LABELS,
        )
        self.disk = MetricDescriptor(
            name="digitalocean_droplet_disk_bytes",
            documentation="Droplet's disk in bytes",
            labels=_LABELS,
        )
        self.price_hourly = MetricDescriptor(
            name="digitalocean_droplet_price_hourly",
            documentation="Price of the Droplet billed hourly in dollars",
            labels=_LABELS,
        )
        self.price_monthly = MetricDescriptor(
            name="digitalocean_droplet_price_monthly",
            documentation="Price of the Droplet billed monthly in dollars",
            labels=_LABELS,
        )
        self.locked = MetricDescriptor(
            name="digitalocean_droplet_locked",
            documentation="If 1 the droplet is locked, preventing actions by users",
            labels=_LABELS,
        )
        self.backups = MetricDescriptor(
            name="digitalocean_droplet_backups_enabled",
            documentation="If 1 automated backups are enabled for the droplet",
            labels=_LABELS,
        )
        return [
            self.up,
            self.status,
            self.cpus,
            self.memory,
            self.disk,
            self.price_hourly,
            self.price_monthly,
            self.locked,
            self.backups,
        ]

    def fetch(self, deadline: Deadline) -> List[Droplet]:
        return self._client.list_droplets(deadline)

    def observations(self, items: List[Droplet]) -> Iterator[Observation]:
        for droplet in items:
            labels = (droplet.id, droplet.name, droplet.region.slug)

            yield self.up.observe(labels, 1.0 if droplet.status == "active" else 0.0)
            yield from self.status.observe_state(labels, droplet.status)
            yield self.cpus.observe(labels, droplet.vcpus)
            yield self.memory.observe(labels, droplet.memory * 1024 * 1024)
            yield self.disk.observe(labels, droplet.disk * 1000 * 1000 * 1000)
            yield self.price_hourly.observe(labels, droplet.size.price_hourly)
            yield self.price_monthly.observe(labels, droplet.size.price_monthly)
            yield self.locked.observe(labels, 1.0 if droplet.locked else 0.0)
            yield self.backups.observe(labels, 1.0 if droplet.backups_enabled else 0.0)
