"""
clusterparams/engine/credentials.py

Credential and secret parameters for Linux and Windows nodes.

Key vault secret bundles are indexed by position: the i-th bundle becomes
`<os>KeyVaultID{i}` and its j-th certificate `<os>KeyVaultID{i}CertificateURL{j}`.
The template declares parameters by these names, so the indices must follow
input order.
"""

from __future__ import annotations

import logging
from typing import List

from typing_extensions import assert_never

from clusterparams.engine.common import require
from clusterparams.engine.decisions import (
    WindowsImageRef,
    WindowsMarketplace,
    WindowsSourceUrl,
    windows_image_source,
)
from clusterparams.engine.sink import ParameterSink
from clusterparams.models.cluster import KeyVaultSecrets, LinuxProfile, WindowsProfile
from clusterparams.models.settings import EngineSettings

logger = logging.getLogger(__name__)


def add_key_vault_secrets(
    sink: ParameterSink,
    prefix: str,
    secrets: List[KeyVaultSecrets],
    with_store: bool,
) -> None:
    """
    Emit indexed vault IDs and certificate URLs. Windows certificates also
    carry their store name (`with_store`).
    """
    for i, bundle in enumerate(secrets):
        sink.put(f"{prefix}KeyVaultID{i}", bundle.source_vault.id)
        for j, cert in enumerate(bundle.vault_certificates):
            sink.put(f"{prefix}KeyVaultID{i}CertificateURL{j}", cert.certificate_url)
            if with_store:
                sink.put(
                    f"{prefix}KeyVaultID{i}CertificateStore{j}", cert.certificate_store
                )


def add_linux_identity(sink: ParameterSink, profile: LinuxProfile) -> None:
    """`linuxAdminUsername` and, when a custom DNS server is set, `dnsServer`."""
    sink.put("linuxAdminUsername", profile.admin_username)
    if profile.custom_nodes_dns is not None and profile.custom_nodes_dns.dns_server:
        sink.put("dnsServer", profile.custom_nodes_dns.dns_server)


def add_linux_secrets(sink: ParameterSink, profile: LinuxProfile) -> None:
    """`sshRSAPublicKey` (first key only) and the Linux key vault bundles."""
    keys = require(profile.ssh.public_keys, "linux_profile.ssh.public_keys")
    sink.put("sshRSAPublicKey", keys[0].key_data)
    add_key_vault_secrets(sink, "linux", profile.secrets, with_store=False)


def derive_windows_parameters(
    sink: ParameterSink, profile: WindowsProfile, settings: EngineSettings
) -> None:
    """
    Emit Windows admin credentials, image source, container runtime settings
    and key vault bundles.

    `windowsAdminPassword` is always emitted, even when empty, because the
    Windows template declares it without a default.
    """
    sink.put("windowsAdminUsername", profile.admin_username)
    sink.put_secret(
        "windowsAdminPassword",
        profile.admin_password.get_secret_value(),
        always_include_empty=True,
    )

    source = windows_image_source(profile, settings)
    logger.debug("Windows image source: %s", source.kind)
    if isinstance(source, WindowsSourceUrl):
        sink.put("agentWindowsSourceUrl", source.url)
    elif isinstance(source, WindowsImageRef):
        sink.put("agentWindowsImageResourceGroup", source.resource_group)
        sink.put("agentWindowsImageName", source.name)
    elif isinstance(source, WindowsMarketplace):
        sink.put("agentWindowsPublisher", source.publisher)
        sink.put("agentWindowsOffer", source.offer)
        sink.put("agentWindowsSku", source.sku)
        sink.put("agentWindowsVersion", source.version)
    else:
        assert_never(source)

    sink.put("windowsDockerVersion", profile.get_windows_docker_version(settings))
    add_key_vault_secrets(sink, "windows", profile.secrets, with_store=True)
    sink.put(
        "defaultContainerdRuntimeHandler",
        profile.get_default_runtime_handler(settings),
    )
    sink.put("hypervRuntimeHandlers", profile.get_hyperv_runtime_handlers())
