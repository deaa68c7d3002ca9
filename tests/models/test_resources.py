# tests/models/test_resources.py
"""
Tests for the API resource models, especially their tolerance of partial payloads.
"""

import pytest
from pydantic import ValidationError

from digitalocean_exporter.models.resources import Account, Droplet, FloatingIP, Volume


def test_numeric_ids_are_coerced_to_strings():
    droplet = Droplet.model_validate({"id": 3164444, "name": "example"})
    assert droplet.id == "3164444"


def test_nulls_fall_back_to_defaults():
    """A null anywhere in an optional field yields the zero value instead of failing."""
    droplet = Droplet.model_validate(
        {"id": "d1", "name": None, "memory": None, "locked": None, "region": None, "size": None, "features": None}
    )
    assert droplet.name == ""
    assert droplet.memory == 0
    assert droplet.locked is False
    assert droplet.region.slug == ""
    assert droplet.size.price_hourly == 0.0
    assert droplet.features == []


def test_missing_fields_use_defaults():
    account = Account.model_validate({})
    assert account.droplet_limit == 0
    assert account.email_verified is False
    assert account.status == ""


def test_unknown_fields_are_ignored():
    volume = Volume.model_validate({"id": "v1", "filesystem_type": "ext4", "tags": ["a"]})
    assert volume.id == "v1"
    assert not hasattr(volume, "filesystem_type")


def test_required_identifier_cannot_be_null():
    with pytest.raises(ValidationError):
        Droplet.model_validate({"id": None})


def test_droplet_ids_are_strings():
    volume = Volume.model_validate({"id": "v1", "droplet_ids": [1, 2]})
    assert volume.droplet_ids == ["1", "2"]


def test_backups_enabled_reflects_features():
    assert Droplet.model_validate({"id": "d1", "features": ["backups"]}).backups_enabled is True
    assert Droplet.model_validate({"id": "d1", "features": ["ipv6"]}).backups_enabled is False


def test_floating_ip_without_droplet():
    fip = FloatingIP.model_validate({"ip": "1.2.3.4", "droplet": None})
    assert fip.droplet is None
