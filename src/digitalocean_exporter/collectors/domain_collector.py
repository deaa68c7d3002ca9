# src/digitalocean_exporter/collectors/domain_collector.py
"""
Collector for DNS domains and their records.

This collector makes one listing call for the domains and one per domain for
its records, all sharing the same deadline. If any of them fails, the whole
pass is dropped so a scrape never exports a half-listed zone.
"""

from typing import Iterable, Iterator, List, Tuple

from ..models.metrics import MetricDescriptor, Observation
from ..models.resources import Domain, DomainRecord
from ..utils.deadline import Deadline
from .base_collector import ResourceCollector

_RECORD_LABELS = ("id", "domain_name", "name", "type", "data")


class DomainCollector(ResourceCollector):
    name = "domain"

    def build_descriptors(self) -> Iterable[MetricDescriptor]:
        self.ttl = MetricDescriptor(
            name="digitalocean_domain_ttl_seconds",
            documentation="Seconds that clients can cache queried information before a refresh should be requested",
            labels=("name",),
        )
        self.record_port = MetricDescriptor(
            name="digitalocean_domain_record_port",
            documentation="The port for SRV records",
            labels=_RECORD_LABELS,
        )
        self.record_priority = MetricDescriptor(
            name="digitalocean_domain_record_priority",
            documentation="The priority for SRV and MX records",
            labels=_RECORD_LABELS,
        )
        self.record_weight = MetricDescriptor(
            name="digitalocean_domain_record_weight",
            documentation="The weight for SRV records",
            labels=_RECORD_LABELS,
        )
        self.record_ttl = MetricDescriptor(
            name="digitalocean_domain_record_ttl_seconds",
            documentation="Seconds that clients can cache this record before a refresh should be requested",
            labels=_RECORD_LABELS,
        )
        return [self.ttl, self.record_port, self.record_priority, self.record_weight, self.record_ttl]

    def fetch(self, deadline: Deadline) -> List[Tuple[Domain, List[DomainRecord]]]:
        domains = self._client.list_domains(deadline)
        return [(domain, self._client.list_domain_records(domain.name, deadline)) for domain in domains]

    def observations(self, items: List[Tuple[Domain, List[DomainRecord]]]) -> Iterator[Observation]:
        for domain, records in items:
            yield self.ttl.observe((domain.name,), domain.ttl)

            for record in records:
                labels = (record.id, domain.name, record.name, record.type, record.data)
                yield self.record_port.observe(labels, record.port)
                yield self.record_priority.observe(labels, record.priority)
                yield self.record_weight.observe(labels, record.weight)
                yield self.record_ttl.observe(labels, record.ttl)
