# src/digitalocean_exporter/collectors/image_collector.py

from typing import Iterable, Iterator, List

from ..models.metrics import MetricDescriptor, Observation
from ..models.resources import Image
from ..utils.deadline import Deadline
from .base_collector import ResourceCollector

_LABELS = ("id", "name", "region", "type", "distribution")


class ImageCollector(ResourceCollector):
    """
    Collects the account's private images. An image available in several
    regions is exported once per region.
    """

    name = "image"

    def build_descriptors(self) -> Iterable[MetricDescriptor]:
        self.min_disk_size = MetricDescriptor(
            name="digitalocean_image_min_disk_size_bytes",
            documentation="Minimum disk size for a droplet to run this image on in bytes",
            labels=_LABELS,
        )
        self.size = MetricDescriptor(
            name="digitalocean_image_size_bytes",
            documentation="Size of the image in bytes",
            labels=_LABELS,
        )
        return [self.min_disk_size, self.size]

    def fetch(self, deadline: Deadline) -> List[Image]:
        return self._client.list_images(deadline)

    def observations(self, items: List[Image]) -> Iterator[Observation]:
        for image in items:
            for region in image.regions or [""]:
                labels = (image.id, image.name, region, image.type, image.distribution)
                yield self.min_disk_size.observe(labels, image.min_disk_size * 1000 * 1000 * 1000)
                yield self.size.observe(labels, image.size_gigabytes * 1000 * 1000 * 1000)
