# src/digitalocean_exporter/collectors/account_collector.py

from typing import Iterable, Iterator

from ..models.metrics import MetricDescriptor, Observation
from ..models.resources import Account
from ..utils.deadline import Deadline
from .base_collector import ResourceCollector


class AccountCollector(ResourceCollector):
    """Collects the account's limits and standing. Emits unlabelled series."""

    name = "account"

    def build_descriptors(self) -> Iterable[MetricDescriptor]:
        self.active = MetricDescriptor(
            name="digitalocean_account_active",
            documentation="The status of your account, 1 if active and 0 otherwise",
        )
        self.droplet_limit = MetricDescriptor(
            name="digitalocean_account_droplet_limit",
            documentation="The maximum number of droplet you can use",
        )
        self.floating_ip_limit = MetricDescriptor(
            name="digitalocean_account_floating_ip_limit",
            documentation="The maximum number of floating ips you can use",
        )
        self.volume_limit = MetricDescriptor(
            name="digitalocean_account_volume_limit",
            documentation="The maximum number of volumes you can use",
        )
        self.verified = MetricDescriptor(
            name="digitalocean_account_verified",
            documentation="1 if your email address was verified",
        )
        return [self.active, self.droplet_limit, self.floating_ip_limit, self.volume_limit, self.verified]

    def fetch(self, deadline: Deadline) -> Account:
        return self._client.get_account(deadline)

    def observations(self, account: Account) -> Iterator[Observation]:
        yield self.active.observe((), 1.0 if account.status == "active" else 0.0)
        yield self.droplet_limit.observe((), account.droplet_limit)
        yield self.floating_ip_limit.observe((), account.floating_ip_limit)
        yield self.volume_limit.observe((), account.volume_limit)
        yield self.verified.observe((), 1.0 if account.email_verified else 0.0)
