"""Pydantic models for cluster definitions (apimodel documents).

Only the properties whose validation failures have dedicated messages are
modelled; unknown keys in the document are ignored. Field aliases match the
camelCase keys of the apimodel JSON. Numeric fields accept only integers
(no strings, floats or booleans); those that default to 0 are treated as
unset.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from akshelper.config.defaults import (
    EPHEMERAL,
    MANAGED_DISKS,
    MAX_AGENT_COUNT,
    MAX_DISK_SIZE_GB,
    MAX_DISKS,
    MAX_IP_ADDRESS_COUNT,
    MAX_PORT,
    MIN_AGENT_COUNT,
    MIN_DISK_SIZE_GB,
    MIN_PORT,
    STORAGE_ACCOUNT,
    VALID_MASTER_COUNTS,
)

MASTER_STORAGE_PROFILES = ("", STORAGE_ACCOUNT, MANAGED_DISKS)
AGENT_STORAGE_PROFILES = ("", STORAGE_ACCOUNT, MANAGED_DISKS, EPHEMERAL)

RequiredStr = Annotated[str, Field(min_length=1)]
Port = Annotated[StrictInt, Field(ge=MIN_PORT, le=MAX_PORT)]
DiskSizeGB = Annotated[StrictInt, Field(ge=MIN_DISK_SIZE_GB, le=MAX_DISK_SIZE_GB)]


class ApiModel(BaseModel):
    """Base class for apimodel sections."""

    model_config = ConfigDict(populate_by_name=True)


class OrchestratorProfile(ApiModel):
    """Orchestrator selection."""

    orchestrator_type: RequiredStr = Field(..., alias="orchestratorType")
    orchestrator_version: str = Field(default="", alias="orchestratorVersion")


class MasterProfile(ApiModel):
    """Control plane node configuration.

    Attributes:
        count: Number of control plane nodes (1, 3 or 5)
        dns_prefix: DNS prefix of the cluster endpoint
        vm_size: VM size of control plane nodes
        os_disk_size_gb: OS disk size, 0 for the platform default
        ip_address_count: IP addresses per NIC, 0 for the default
        storage_profile: StorageAccount, ManagedDisks or empty
    """

    count: StrictInt
    dns_prefix: RequiredStr = Field(..., alias="dnsPrefix")
    vm_size: RequiredStr = Field(..., alias="vmSize")
    os_disk_size_gb: StrictInt = Field(
        default=0, ge=0, le=MAX_DISK_SIZE_GB, alias="osDiskSizeGB"
    )
    ip_address_count: StrictInt = Field(
        default=0, ge=0, le=MAX_IP_ADDRESS_COUNT, alias="ipAddressCount"
    )
    storage_profile: str = Field(default="", alias="storageProfile")

    @field_validator("count")
    @classmethod
    def validate_count(cls, v: int) -> int:
        """Validate the control plane node count."""
        if v not in VALID_MASTER_COUNTS:
            raise ValueError(f"count must be one of {VALID_MASTER_COUNTS}")
        return v

    @field_validator("storage_profile")
    @classmethod
    def validate_storage_profile(cls, v: str) -> str:
        """Validate the storage profile name."""
        if v not in MASTER_STORAGE_PROFILES:
            raise ValueError(f"unknown storage profile: {v}")
        return v


class AgentPoolProfile(ApiModel):
    """Worker node pool configuration."""

    name: RequiredStr
    count: StrictInt = Field(..., ge=MIN_AGENT_COUNT, le=MAX_AGENT_COUNT)
    vm_size: RequiredStr = Field(..., alias="vmSize")
    os_disk_size_gb: StrictInt = Field(
        default=0, ge=0, le=MAX_DISK_SIZE_GB, alias="osDiskSizeGB"
    )
    ports: list[Port] = Field(default_factory=list)
    storage_profile: str = Field(default="", alias="storageProfile")
    disk_sizes_gb: list[DiskSizeGB] = Field(
        default_factory=list, max_length=MAX_DISKS, alias="diskSizesGB"
    )
    ip_address_count: StrictInt = Field(
        default=0, ge=0, le=MAX_IP_ADDRESS_COUNT, alias="ipAddressCount"
    )

    @field_validator("storage_profile")
    @classmethod
    def validate_storage_profile(cls, v: str) -> str:
        """Validate the storage profile name."""
        if v not in AGENT_STORAGE_PROFILES:
            raise ValueError(f"unknown storage profile: {v}")
        return v


class PublicKey(ApiModel):
    key_data: str = Field(default="", alias="keyData")


class SSHConfig(ApiModel):
    public_keys: list[PublicKey] = Field(default_factory=list, alias="publicKeys")


class LinuxProfile(ApiModel):
    """Linux node credentials."""

    admin_username: RequiredStr = Field(..., alias="adminUsername")
    ssh: SSHConfig = Field(default_factory=SSHConfig)


class WindowsProfile(ApiModel):
    """Windows node credentials."""

    admin_username: RequiredStr = Field(..., alias="adminUsername")
    admin_password: RequiredStr = Field(..., alias="adminPassword")


class ServicePrincipalProfile(ApiModel):
    """Service principal used by the cloud provider integration."""

    client_id: RequiredStr = Field(..., alias="clientId")
    secret: str = ""


class Properties(ApiModel):
    """Cluster properties."""

    orchestrator_profile: OrchestratorProfile = Field(
        ..., alias="orchestratorProfile"
    )
    master_profile: MasterProfile = Field(..., alias="masterProfile")
    agent_pool_profiles: list[AgentPoolProfile] = Field(
        default_factory=list, alias="agentPoolProfiles"
    )
    linux_profile: LinuxProfile = Field(..., alias="linuxProfile")
    windows_profile: WindowsProfile | None = Field(
        default=None, alias="windowsProfile"
    )
    service_principal_profile: ServicePrincipalProfile | None = Field(
        default=None, alias="servicePrincipalProfile"
    )


class ClusterDefinition(ApiModel):
    """Top-level cluster definition document."""

    api_version: str = Field(default="", alias="apiVersion")
    location: str = ""
    properties: Properties
