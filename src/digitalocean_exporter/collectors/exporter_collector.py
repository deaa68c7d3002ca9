# src/digitalocean_exporter/collectors/exporter_collector.py
"""
Self-stats of the exporter process: build metadata, start time and uptime.

It never talks to the DigitalOcean API, so it has no timeout and cannot fail.
"""

import time
from typing import Callable, Iterable, Iterator, List, Optional

from ..models.metrics import BuildInfo, MetricDescriptor, Observation
from ..utils.deadline import Deadline
from .base_collector import ResourceCollector


class ExporterCollector(ResourceCollector):
    name = "exporter"

    def __init__(
        self,
        build_info: BuildInfo,
        start_time: float,
        clock: Callable[[], float] = time.time,
        logger=None,
    ):
        self._build_info = build_info
        self._start_time = start_time
        self._clock = clock
        super().__init__(client=None, timeout=0.0, logger=logger)

    def build_descriptors(self) -> Iterable[MetricDescriptor]:
        self.build = MetricDescriptor(
            name="digitalocean_exporter_build_info",
            documentation="A metric with a constant '1' value labeled by version, revision, builddate and pythonversion",
            labels=("version", "revision", "builddate", "pythonversion"),
        )
        self.start = MetricDescriptor(
            name="digitalocean_exporter_start_time",
            documentation="UNIX timestamp of the start time",
        )
        self.uptime = MetricDescriptor(
            name="digitalocean_exporter_uptime_seconds",
            documentation="Seconds since the exporter started",
        )
        return [self.build, self.start, self.uptime]

    def fetch(self, deadline: Optional[Deadline]) -> float:
        return self._clock()

    def observations(self, now: float) -> Iterator[Observation]:
        info = self._build_info
        yield self.build.observe((info.version, info.revision, info.build_date, info.python_version), 1.0)
        yield self.start.observe((), self._start_time)
        yield self.uptime.observe((), now - self._start_time)

    def observe(self) -> List[Observation]:
        # No API call, so no deadline and no error boundary.
        return list(self.observations(self.fetch(None)))
