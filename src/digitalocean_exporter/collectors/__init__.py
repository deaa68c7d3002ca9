from .account_collector import AccountCollector
from .base_collector import ResourceCollector
from .domain_collector import DomainCollector
from .droplet_collector import DropletCollector
from .exporter_collector import ExporterCollector
from .floating_ip_collector import FloatingIPCollector
from .image_collector import ImageCollector
from .key_collector import KeyCollector
from .load_balancer_collector import LoadBalancerCollector
from .snapshot_collector import SnapshotCollector
from .volume_collector import VolumeCollector

__all__ = [
    "AccountCollector",
    "DomainCollector",
    "DropletCollector",
    "ExporterCollector",
    "FloatingIPCollector",
    "ImageCollector",
    "KeyCollector",
    "LoadBalancerCollector",
    "ResourceCollector",
    "SnapshotCollector",
    "VolumeCollector",
]
