# src/digitalocean_exporter/core/factory.py
"""
Factory functions wiring the configuration, the API client and the
collectors together.
"""

import logging
import platform
import time
from typing import List, Optional

from .. import __version__
from ..collectors import (
    AccountCollector,
    DomainCollector,
    DropletCollector,
    ExporterCollector,
    FloatingIPCollector,
    ImageCollector,
    KeyCollector,
    LoadBalancerCollector,
    ResourceCollector,
    SnapshotCollector,
    VolumeCollector,
)
from ..models.metrics import BuildInfo
from .config import Config
from .do_client import DigitalOceanClient
from .registry import MetricsRegistry

logger = logging.getLogger(__name__)

# Set once, when the process imports the exporter.
START_TIME = time.time()

RESOURCE_COLLECTORS = (
    AccountCollector,
    DomainCollector,
    DropletCollector,
    FloatingIPCollector,
    ImageCollector,
    KeyCollector,
    LoadBalancerCollector,
    SnapshotCollector,
    VolumeCollector,
)


def get_build_info(config: Config) -> BuildInfo:
    return BuildInfo(
        version=__version__,
        revision=config.BUILD_REVISION,
        build_date=config.BUILD_DATE,
        python_version=platform.python_version(),
    )


def get_client(config: Config) -> DigitalOceanClient:
    return DigitalOceanClient(token=config.DIGITALOCEAN_TOKEN, base_url=config.DIGITALOCEAN_API_URL)


def get_collectors(
    config: Config,
    client: DigitalOceanClient,
    start_time: Optional[float] = None,
) -> List[ResourceCollector]:
    """Instantiates every collector, in the order they are registered."""
    collectors: List[ResourceCollector] = [
        ExporterCollector(get_build_info(config), start_time if start_time is not None else START_TIME)
    ]
    collectors.extend(cls(client, config.timeout_seconds) for cls in RESOURCE_COLLECTORS)
    return collectors


def create_registry(
    config: Config,
    client: DigitalOceanClient,
    start_time: Optional[float] = None,
) -> MetricsRegistry:
    """
    Builds a registry holding every collector and freezes it.

    Raises:
        RegistrationError: If two collectors declare the same metric.
    """
    registry = MetricsRegistry()
    for collector in get_collectors(config, client, start_time=start_time):
        registry.register(collector)
    registry.freeze()
    return registry
