"""
clusterparams.models

Unified import point for the cluster description, parameter variants,
image tables and engine settings.
"""

from clusterparams.models.cluster import (
    AgentPoolProfile,
    AvailabilityProfile,
    ClusterSpec,
    CloudProfile,
    CustomNodesDNS,
    ExtensionProfile,
    FeatureFlags,
    ImageReference,
    KeyVaultSecretRef,
    KeyVaultSecrets,
    LinuxProfile,
    MasterProfile,
    OSType,
    PublicKey,
    ScaleSetEvictionPolicy,
    ScaleSetPriority,
    SourceVault,
    SSHConfig,
    VaultCertificate,
    WindowsProfile,
)
from clusterparams.models.environments import TargetEnvironment, get_target_env
from clusterparams.models.images import (
    ImageCatalog,
    ImageTable,
    OSImage,
    default_image_catalog,
)
from clusterparams.models.parameters import (
    LiteralParameter,
    Parameter,
    SecretParameter,
    SecretRefParameter,
)
from clusterparams.models.settings import EngineSettings

__all__ = [
    "AgentPoolProfile",
    "AvailabilityProfile",
    "ClusterSpec",
    "CloudProfile",
    "CustomNodesDNS",
    "ExtensionProfile",
    "FeatureFlags",
    "ImageReference",
    "KeyVaultSecretRef",
    "KeyVaultSecrets",
    "LinuxProfile",
    "MasterProfile",
    "OSType",
    "PublicKey",
    "ScaleSetEvictionPolicy",
    "ScaleSetPriority",
    "SourceVault",
    "SSHConfig",
    "VaultCertificate",
    "WindowsProfile",
    "TargetEnvironment",
    "get_target_env",
    "ImageCatalog",
    "ImageTable",
    "OSImage",
    "default_image_catalog",
    "LiteralParameter",
    "Parameter",
    "SecretParameter",
    "SecretRefParameter",
    "EngineSettings",
]
