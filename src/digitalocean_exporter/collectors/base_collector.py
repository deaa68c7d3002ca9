# src/digitalocean_exporter/collectors/base_collector.py
"""
This module defines the base class for all resource collectors.

Every collector follows the same shape: a fixed set of metric descriptors
declared at construction, and on every scrape a single bounded fetch from the
DigitalOcean API whose items are mapped to observations. An API failure is
logged and yields no metrics for that scrape; it never reaches the caller.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from prometheus_client.metrics_core import Metric

from ..core.do_client import DigitalOceanClient
from ..core.exceptions import DigitalOceanAPIError
from ..models.metrics import MetricDescriptor, Observation
from ..utils.deadline import Deadline


class ResourceCollector(ABC):
    """
    Base class for the per-resource-type collectors.

    Subclasses implement three hooks:
    - build_descriptors(): the metrics this collector may emit.
    - fetch(deadline): the API call(s) for one scrape.
    - observations(items): maps fetched items to observations.

    A collector holds no resource data between scrapes.
    """

    name: str = "resource"

    def __init__(
        self,
        client: Optional[DigitalOceanClient],
        timeout: float,
        logger: Optional[logging.Logger] = None,
    ):
        self._client = client
        self._timeout = timeout
        self._logger = logger or logging.getLogger(f"{__name__}.{self.name}")
        self._descriptors: Tuple[MetricDescriptor, ...] = tuple(self.build_descriptors())

        names = [d.name for d in self._descriptors]
        if len(set(names)) != len(names):
            raise ValueError(f"{type(self).__name__} declares duplicate metric names: {names}")

    @abstractmethod
    def build_descriptors(self) -> Iterable[MetricDescriptor]:
        """Declares every metric this collector emits."""
        ...

    @abstractmethod
    def fetch(self, deadline: Deadline) -> Any:
        """Queries the API for this collector's resources."""
        ...

    @abstractmethod
    def observations(self, items: Any) -> Iterable[Observation]:
        """Turns the fetched items into observations."""
        ...

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def descriptors(self) -> Tuple[MetricDescriptor, ...]:
        return self._descriptors

    def describe(self) -> List[Metric]:
        """Returns one empty metric family per descriptor. Performs no I/O."""
        return [descriptor.family() for descriptor in self._descriptors]

    def observe(self) -> List[Observation]:
        """
        Runs one collection pass under a fresh deadline.

        Returns:
            The observations for this scrape, or an empty list if the API call failed.
        """
        deadline = Deadline(self._timeout)
        try:
            items = self.fetch(deadline)
        except DigitalOceanAPIError as e:
            self._logger.error(
                "Failed to collect %s metrics",
                self.name,
                extra={"collector": self.name, "error": str(e)},
            )
            return []

        observations = list(self.observations(items))
        self._logger.debug(
            "Collected %d %s observations (%.3fs of budget left)",
            len(observations),
            self.name,
            deadline.remaining(),
        )
        return observations

    def collect(self) -> Iterator[Metric]:
        """Yields the metric families that received at least one sample this scrape."""
        families: Dict[str, Metric] = {}
        for observation in self.observe():
            descriptor = observation.descriptor
            family = families.get(descriptor.name)
            if family is None:
                family = families[descriptor.name] = descriptor.family()
            family.add_metric(list(observation.label_values), observation.value)

        # Keep declaration order regardless of the order items were observed in.
        for descriptor in self._descriptors:
            if descriptor.name in families:
                yield families[descriptor.name]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(timeout={self._timeout})"
