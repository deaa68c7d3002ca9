# src/digitalocean_exporter/core/registry.py
"""
The registry aggregates every collector behind the single `collect()` entry
point prometheus_client's exposition functions expect.

Collectors are registered once at startup and the registry is then frozen,
so serving scrapes needs no locking. Each scrape fans the collectors out to
a short-lived thread pool and merges their families in registration order.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterator, List, Optional, Tuple

from prometheus_client import generate_latest
from prometheus_client.metrics_core import Metric

from ..collectors.base_collector import ResourceCollector
from ..models.metrics import MetricDescriptor
from .exceptions import RegistrationError

logger = logging.getLogger(__name__)


class MetricsRegistry:
    def __init__(self, max_workers: Optional[int] = None):
        self._collectors: List[ResourceCollector] = []
        self._owners: Dict[str, Tuple[ResourceCollector, MetricDescriptor]] = {}
        self._max_workers = max_workers
        self._frozen = False

    @property
    def collectors(self) -> Tuple[ResourceCollector, ...]:
        return tuple(self._collectors)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, collector: ResourceCollector) -> None:
        """
        Adds a collector to the registry.

        Raises:
            RegistrationError: If the registry is frozen, or if one of the
                collector's metric names is already declared by another collector.
        """
        if self._frozen:
            raise RegistrationError(f"Cannot register {collector!r}: the registry is frozen.")

        for descriptor in collector.descriptors:
            owner = self._owners.get(descriptor.name)
            if owner is not None:
                other, other_descriptor = owner
                raise RegistrationError(
                    f"Metric '{descriptor.name}' {list(descriptor.label_names)} declared by "
                    f"{type(collector).__name__} collides with {type(other).__name__} "
                    f"{list(other_descriptor.label_names)}."
                )

        for descriptor in collector.descriptors:
            self._owners[descriptor.name] = (collector, descriptor)
        self._collectors.append(collector)
        logger.debug("Registered %s with %d metrics", type(collector).__name__, len(collector.descriptors))

    def freeze(self) -> None:
        """Prevents further registration. Called before the listener starts."""
        self._frozen = True
        logger.info("Metrics registry frozen with %d collectors.", len(self._collectors))

    def describe(self) -> List[Metric]:
        families: List[Metric] = []
        for collector in self._collectors:
            families.extend(collector.describe())
        return families

    def _collect_one(self, collector: ResourceCollector) -> List[Metric]:
        """Collects from a single collector, containing any unexpected error to it."""
        declared = {family.name for family in collector.describe()}
        try:
            families = list(collector.collect())
        except Exception:
            logger.exception(
                "Collector %s raised unexpectedly; dropping its metrics for this scrape.",
                collector.name,
                extra={"collector": collector.name},
            )
            return []

        accepted = []
        for family in families:
            if family.name in declared:
                accepted.append(family)
            else:
                logger.warning(
                    "Collector %s emitted undeclared metric %s; dropping it.",
                    collector.name,
                    family.name,
                    extra={"collector": collector.name},
                )
        return accepted

    def collect(self) -> Iterator[Metric]:
        """Runs every collector and yields their metric families in registration order."""
        if not self._collectors:
            return

        workers = self._max_workers or len(self._collectors)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="collector") as executor:
            results = list(executor.map(self._collect_one, self._collectors))

        for families in results:
            yield from families

    def gather(self) -> List[Metric]:
        return list(self.collect())

    def render(self) -> bytes:
        """Serializes one fresh collection pass in the Prometheus text format."""
        return generate_latest(self)
