"""
clusterparams/models/cluster.py

Pydantic models describing a cluster as handed to the parameter engine:
 - ClusterSpec: the top-level composite
 - MasterProfile / AgentPoolProfile: the control-plane pool and agent pools
 - LinuxProfile / WindowsProfile: credentials, key vault secrets, images
 - ExtensionProfile: per-extension parameters, literal or key-vault backed

The engine treats every instance as read-only. Validation of business rules
happens before a ClusterSpec reaches this package.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Set

import yaml
from pydantic import BaseModel, Field, SecretStr, field_serializer, model_validator

from clusterparams.models.settings import EngineSettings
from clusterparams.models.validator import validate_type


# ----------------------------------------------------------------------
# 1) Enumerations
# ----------------------------------------------------------------------


class OSType(str, Enum):
    linux = "Linux"
    windows = "Windows"


class AvailabilityProfile(str, Enum):
    availability_set = "AvailabilitySet"
    scale_set = "VirtualMachineScaleSets"


class ScaleSetPriority(str, Enum):
    regular = "Regular"
    spot = "Spot"


class ScaleSetEvictionPolicy(str, Enum):
    delete = "Delete"
    deallocate = "Deallocate"


IPV6_DUAL_STACK_FEATURE = "EnableIPv6DualStack"


# ----------------------------------------------------------------------
# 2) Shared building blocks
# ----------------------------------------------------------------------


class ImageReference(BaseModel):
    """A custom VM image stored in a resource group."""

    name: str = ""
    resource_group: str = ""

    def is_valid(self) -> bool:
        return bool(self.name) and bool(self.resource_group)


class SourceVault(BaseModel):
    id: str


class VaultCertificate(BaseModel):
    """A certificate installed from a key vault.

    Attributes:
        certificate_url: Secret URL of the certificate in the vault.
        certificate_store: Windows certificate store name; unused on Linux.
    """

    certificate_url: str
    certificate_store: str = ""


class KeyVaultSecrets(BaseModel):
    """One source vault and the ordered certificates installed from it."""

    source_vault: SourceVault
    vault_certificates: List[VaultCertificate] = Field(default_factory=list)


class FeatureFlags(BaseModel):
    enabled: Set[str] = Field(default_factory=set)

    @field_serializer("enabled", when_used="json")
    def serialize_enabled(self, value: Set[str]) -> List[str]:
        return sorted(value)

    def is_enabled(self, feature: str) -> bool:
        return feature in self.enabled


class CloudProfile(BaseModel):
    """Cloud the cluster targets.

    Attributes:
        name: Custom cloud name (e.g. 'AzureStackCloud'); empty for public clouds.
        resource_manager_vm_dns_suffix: Overrides the VM DNS suffix that would
            otherwise be chosen from the target environment.
    """

    name: str = ""
    resource_manager_vm_dns_suffix: str = ""


# ----------------------------------------------------------------------
# 3) Pools
# ----------------------------------------------------------------------


class MasterProfile(BaseModel):
    """The single control-plane pool.

    Custom VNET mode is selected by a non-empty `vnet_subnet_id`; otherwise the
    engine uses the managed `subnet` / `agent_subnet` pair.
    """

    dns_prefix: str
    vm_size: str
    distro: str
    first_consecutive_static_ip: str = ""
    subnet: str = ""
    agent_subnet: str = ""
    subnet_ipv6: str = ""
    vnet_subnet_id: str = ""
    agent_vnet_subnet_id: str = ""
    vnet_cidr: str = ""
    image_ref: Optional[ImageReference] = None
    availability_zones: List[str] = Field(default_factory=list)
    availability_profile: AvailabilityProfile = AvailabilityProfile.availability_set

    def is_custom_vnet(self) -> bool:
        return bool(self.vnet_subnet_id)

    def is_virtual_machine_scale_sets(self) -> bool:
        return self.availability_profile == AvailabilityProfile.scale_set

    def has_availability_zones(self) -> bool:
        return len(self.availability_zones) > 0


class AgentPoolProfile(BaseModel):
    """An agent pool. `name` prefixes every parameter derived for the pool."""

    name: str
    count: int
    vm_size: str
    os_type: OSType = OSType.linux
    distro: str = ""
    dns_prefix: str = ""
    subnet: str = ""
    vnet_subnet_id: str = ""
    ports: List[int] = Field(default_factory=list)
    availability_profile: AvailabilityProfile = AvailabilityProfile.scale_set
    scale_set_priority: ScaleSetPriority = ScaleSetPriority.regular
    scale_set_eviction_policy: Optional[ScaleSetEvictionPolicy] = None
    image_ref: Optional[ImageReference] = None
    availability_zones: List[str] = Field(default_factory=list)

    def is_custom_vnet(self) -> bool:
        return bool(self.vnet_subnet_id)

    def is_availability_sets(self) -> bool:
        return self.availability_profile == AvailabilityProfile.availability_set

    def is_spot_scale_set(self) -> bool:
        return (
            self.availability_profile == AvailabilityProfile.scale_set
            and self.scale_set_priority == ScaleSetPriority.spot
        )

    def is_windows(self) -> bool:
        return self.os_type == OSType.windows

    def has_availability_zones(self) -> bool:
        return len(self.availability_zones) > 0


# ----------------------------------------------------------------------
# 4) OS profiles
# ----------------------------------------------------------------------


class PublicKey(BaseModel):
    key_data: str


class SSHConfig(BaseModel):
    public_keys: List[PublicKey] = Field(default_factory=list)


class CustomNodesDNS(BaseModel):
    dns_server: str = ""


class LinuxProfile(BaseModel):
    admin_username: str
    ssh: SSHConfig = Field(default_factory=SSHConfig)
    secrets: List[KeyVaultSecrets] = Field(default_factory=list)
    custom_nodes_dns: Optional[CustomNodesDNS] = None


class WindowsProfile(BaseModel):
    """Windows node credentials and image selection.

    Image source precedence is `windows_image_source_url`, then a valid
    `image_ref`, then the marketplace publisher/offer/sku/version fields.
    """

    admin_username: str
    admin_password: SecretStr = SecretStr("")
    windows_image_source_url: str = ""
    windows_publisher: str = ""
    windows_offer: str = ""
    windows_sku: str = ""
    image_version: str = ""
    image_ref: Optional[ImageReference] = None
    windows_docker_version: str = ""
    containerd_runtime_handler: str = ""
    hyperv_runtime_handlers: List[str] = Field(default_factory=list)
    secrets: List[KeyVaultSecrets] = Field(default_factory=list)

    def has_custom_image(self) -> bool:
        return bool(self.windows_image_source_url)

    def has_image_ref(self) -> bool:
        return self.image_ref is not None and self.image_ref.is_valid()

    def get_windows_sku(self, settings: EngineSettings) -> str:
        return self.windows_sku or settings.default_windows_sku

    def get_windows_docker_version(self, settings: EngineSettings) -> str:
        return self.windows_docker_version or settings.default_windows_docker_version

    def get_default_runtime_handler(self, settings: EngineSettings) -> str:
        return (
            self.containerd_runtime_handler
            or settings.default_containerd_runtime_handler
        )

    def get_hyperv_runtime_handlers(self) -> str:
        return ",".join(self.hyperv_runtime_handlers)


# ----------------------------------------------------------------------
# 5) Extensions
# ----------------------------------------------------------------------


class KeyVaultSecretRef(BaseModel):
    vault_id: str
    secret_name: str
    secret_version: str = ""


class ExtensionProfile(BaseModel):
    """An extension whose parameters are inline or held in a key vault."""

    name: str
    extension_parameters: str = ""
    extension_parameters_key_vault_ref: Optional[KeyVaultSecretRef] = None

    @model_validator(mode="after")
    def check_exclusivity(self) -> ExtensionProfile:
        """
        Ensure inline parameters and a key vault reference are not both set.
        """
        if self.extension_parameters and self.extension_parameters_key_vault_ref:
            raise ValueError(
                "extension_parameters and extension_parameters_key_vault_ref "
                "are mutually exclusive."
            )
        return self


# ----------------------------------------------------------------------
# 6) ClusterSpec
# ----------------------------------------------------------------------


class ClusterSpec(BaseModel):
    """
    The full cluster description consumed by `derive_parameters`.

    Attributes:
        location: Azure region, e.g. 'westus2'.
        cloud_profile: Custom cloud name and endpoint overrides.
        master_profile: Control-plane pool; master parameters are skipped if None.
        agent_pool_profiles: Agent pools, in the order their parameters are emitted.
        linux_profile: Linux admin credentials and key vault secrets.
        windows_profile: Windows admin credentials, image and key vault secrets.
        extension_profiles: Extensions, in declaration order.
        feature_flags: Enabled feature names.
    """

    location: str
    cloud_profile: CloudProfile = Field(default_factory=CloudProfile)
    master_profile: Optional[MasterProfile] = None
    agent_pool_profiles: List[AgentPoolProfile] = Field(default_factory=list)
    linux_profile: Optional[LinuxProfile] = None
    windows_profile: Optional[WindowsProfile] = None
    extension_profiles: List[ExtensionProfile] = Field(default_factory=list)
    feature_flags: FeatureFlags = Field(default_factory=FeatureFlags)

    def has_windows(self) -> bool:
        """True if any agent pool runs Windows."""
        return any(pool.is_windows() for pool in self.agent_pool_profiles)

    def custom_cloud_name(self) -> str:
        return self.cloud_profile.name

    def to_yaml(self, *, sort_keys: bool = False) -> str:
        """
        Serialize to YAML, readable back with `from_yaml`.

        The Windows admin password is written in clear text, so the output is
        as sensitive as the spec itself.
        """
        data = self.model_dump(mode="json")
        if self.windows_profile is not None:
            data["windows_profile"]["admin_password"] = (
                self.windows_profile.admin_password.get_secret_value()
            )
        return yaml.safe_dump(data, sort_keys=sort_keys)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> ClusterSpec:
        """
        Build a ClusterSpec from a YAML string.

        Raises:
            ValueError: If the document does not describe a valid ClusterSpec.
        """
        return validate_type(yaml.safe_load(yaml_str), cls, "cluster spec")


__all__ = [
    "OSType",
    "AvailabilityProfile",
    "ScaleSetPriority",
    "ScaleSetEvictionPolicy",
    "IPV6_DUAL_STACK_FEATURE",
    "ImageReference",
    "SourceVault",
    "VaultCertificate",
    "KeyVaultSecrets",
    "FeatureFlags",
    "CloudProfile",
    "MasterProfile",
    "AgentPoolProfile",
    "PublicKey",
    "SSHConfig",
    "CustomNodesDNS",
    "LinuxProfile",
    "WindowsProfile",
    "KeyVaultSecretRef",
    "ExtensionProfile",
    "ClusterSpec",
]
