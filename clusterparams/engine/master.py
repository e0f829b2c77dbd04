"""
clusterparams/engine/master.py

Cluster-wide and control-plane parameters: engine version, location, cloud
environment, master pool image / network / sizing, and the Linux profile.
"""

from __future__ import annotations

from typing_extensions import assert_never

from clusterparams.engine.common import image_fields, require
from clusterparams.engine.credentials import add_linux_identity, add_linux_secrets
from clusterparams.engine.decisions import (
    CustomVnet,
    ManagedSubnet,
    master_network_mode,
)
from clusterparams.engine.sink import ParameterSink
from clusterparams.models.cluster import ClusterSpec, MasterProfile
from clusterparams.models.environments import VM_DNS_SUFFIXES, get_target_env
from clusterparams.models.images import ImageTable


def fqdn_endpoint_suffix(spec: ClusterSpec) -> str:
    """
    Cloud profile override, else the suffix of the target environment.

    Raises:
        MissingRequiredFieldError: If neither gives a suffix (Azure Stack
            without `resource_manager_vm_dns_suffix`).
    """
    if spec.cloud_profile.resource_manager_vm_dns_suffix:
        return spec.cloud_profile.resource_manager_vm_dns_suffix
    env = get_target_env(spec.location, spec.custom_cloud_name())
    return require(
        VM_DNS_SUFFIXES[env], "cloud_profile.resource_manager_vm_dns_suffix"
    )


def _add_master_network(
    sink: ParameterSink, master: MasterProfile, spec: ClusterSpec
) -> None:
    mode = master_network_mode(master, spec.feature_flags)
    if isinstance(mode, CustomVnet):
        sink.put("masterVnetSubnetID", mode.vnet_subnet_id)
        if mode.agent_vnet_subnet_id is not None:
            sink.put("agentVnetSubnetID", mode.agent_vnet_subnet_id)
        if mode.vnet_cidr is not None:
            sink.put("vnetCidr", mode.vnet_cidr)
    elif isinstance(mode, ManagedSubnet):
        sink.put("masterSubnet", mode.subnet)
        sink.put("agentSubnet", mode.agent_subnet)
        if mode.subnet_ipv6 is not None:
            sink.put("masterSubnetIPv6", mode.subnet_ipv6)
    else:
        assert_never(mode)


def derive_master_parameters(
    sink: ParameterSink,
    spec: ClusterSpec,
    image_table: ImageTable,
    engine_version: str,
) -> None:
    """
    Emit the cluster-wide and master pool parameters into `sink`.

    Without a master profile only the cluster-wide and Linux profile
    parameters are emitted.

    Raises:
        UnknownImageKeyError: If the master distro is not in `image_table`.
        MissingRequiredFieldError: If the master has no VM size or DNS prefix,
            or the Linux profile has no SSH public key.
    """
    master = spec.master_profile

    sink.put("aksEngineVersion", engine_version)
    sink.put("location", spec.location)

    if master is not None:
        for name, value in image_fields("", image_table.lookup(master.distro)):
            sink.put(name, value)
        # an explicit image reference augments the distro lookup
        if master.image_ref is not None:
            sink.put("osImageName", master.image_ref.name)
            sink.put("osImageResourceGroup", master.image_ref.resource_group)

    sink.put("fqdnEndpointSuffix", fqdn_endpoint_suffix(spec))
    sink.put(
        "targetEnvironment",
        get_target_env(spec.location, spec.custom_cloud_name()).value,
    )

    linux = spec.linux_profile
    if linux is not None:
        add_linux_identity(sink, linux)

    if master is not None:
        # also the basis for storage account names
        sink.put(
            "masterEndpointDNSNamePrefix",
            require(master.dns_prefix, "master_profile.dns_prefix"),
        )
        _add_master_network(sink, master, spec)
        sink.put("firstConsecutiveStaticIP", master.first_consecutive_static_ip)
        sink.put("masterVMSize", require(master.vm_size, "master_profile.vm_size"))
        if master.has_availability_zones():
            sink.put("availabilityZones", list(master.availability_zones))

    if linux is not None:
        add_linux_secrets(sink, linux)
