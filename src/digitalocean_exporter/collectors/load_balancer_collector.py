# src/digitalocean_exporter/collectors/load_balancer_collector.py

from typing import Iterable, Iterator, List

from ..models.metrics import MetricDescriptor, Observation
from ..models.resources import LoadBalancer
from ..utils.deadline import Deadline
from .base_collector import ResourceCollector

_LABELS = ("id", "name", "ip")


class LoadBalancerCollector(ResourceCollector):
    """
    Collects load balancers. Unlike droplets, the status is exported as a
    single numeric gauge rather than one series per state.
    """

    name = "load_balancer"

    def build_descriptors(self) -> Iterable[MetricDescriptor]:
        self.droplets = MetricDescriptor(
            name="digitalocean_loadbalancer_droplets",
            documentation="The number of droplets this load balancer is proxying to",
            labels=_LABELS,
        )
        self.status = MetricDescriptor(
            name="digitalocean_loadbalancer_status",
            documentation="The status of the load balancer, 1 if active and 0 otherwise",
            labels=_LABELS,
        )
        return [self.droplets, self.status]

    def fetch(self, deadline: Deadline) -> List[LoadBalancer]:
        return self._client.list_load_balancers(deadline)

    def observations(self, items: List[LoadBalancer]) -> Iterator[Observation]:
        for lb in items:
            labels = (lb.id, lb.name, lb.ip)
            yield self.droplets.observe(labels, len(lb.droplet_ids))
            yield self.status.observe(labels, 1.0 if lb.status == "active" else 0.0)
