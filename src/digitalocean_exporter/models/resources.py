# src/digitalocean_exporter/models/resources.py
"""
Pydantic models for the resource items returned by the DigitalOcean v2 API.

Only the fields the collectors turn into metrics or labels are declared;
everything else in the payload is ignored. A JSON null is replaced by the
field's default so that incomplete items still map to zero-valued metrics.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class ResourceModel(BaseModel):
    """Common configuration for all API resource items."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        field = cls.model_fields[info.field_name]
        if value is None and not field.is_required():
            return field.get_default(call_default_factory=True)
        return value


class Region(ResourceModel):
    slug: str = ""
    name: str = ""


class Size(ResourceModel):
    slug: str = ""
    price_monthly: float = 0.0
    price_hourly: float = 0.0


class Droplet(ResourceModel):
    """A virtual machine."""

    id: str = Field(..., description="Droplet ID")
    name: str = ""
    memory: int = Field(0, description="Memory in MiB")
    vcpus: int = 0
    disk: int = Field(0, description="Disk size in GB")
    locked: bool = False
    status: str = Field("", description="One of new, active, off, archive")
    region: Region = Field(default_factory=Region)
    size: Size = Field(default_factory=Size)
    features: List[str] = Field(default_factory=list)
    backup_ids: List[str] = Field(default_factory=list)

    @property
    def backups_enabled(self) -> bool:
        return "backups" in self.features


class Volume(ResourceModel):
    """A block storage volume."""

    id: str
    name: str = ""
    description: str = ""
    size_gigabytes: float = 0.0
    droplet_ids: List[str] = Field(default_factory=list)
    region: Region = Field(default_factory=Region)


class LoadBalancer(ResourceModel):
    id: str
    name: str = ""
    ip: str = ""
    status: str = Field("", description="One of new, active, errored")
    droplet_ids: List[str] = Field(default_factory=list)
    region: Region = Field(default_factory=Region)


class Domain(ResourceModel):
    name: str
    ttl: int = 0


class DomainRecord(ResourceModel):
    id: str
    type: str = ""
    name: str = ""
    data: str = ""
    priority: int = 0
    port: int = 0
    ttl: int = 0
    weight: int = 0


class Image(ResourceModel):
    """A custom image, snapshot or backup owned by the account."""

    id: str
    name: str = ""
    type: str = ""
    distribution: str = ""
    slug: str = ""
    public: bool = False
    regions: List[str] = Field(default_factory=list)
    min_disk_size: int = Field(0, description="Minimum disk size in GB")
    size_gigabytes: float = 0.0


class SSHKey(ResourceModel):
    id: str
    name: str = ""
    fingerprint: str = ""


class Snapshot(ResourceModel):
    id: str
    name: str = ""
    regions: List[str] = Field(default_factory=list)
    min_disk_size: int = 0
    size_gigabytes: float = 0.0
    resource_id: str = ""
    resource_type: str = ""


class FloatingIPDroplet(ResourceModel):
    id: str = ""
    name: str = ""


class FloatingIP(ResourceModel):
    ip: str
    region: Region = Field(default_factory=Region)
    droplet: Optional[FloatingIPDroplet] = None


class Account(ResourceModel):
    uuid: str = ""
    email: str = ""
    droplet_limit: int = 0
    floating_ip_limit: int = 0
    volume_limit: int = 0
    email_verified: bool = False
    status: str = Field("", description="One of active, warning, locked")
