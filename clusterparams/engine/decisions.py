"""
clusterparams/engine/decisions.py

Small pure functions that pick one branch of a mutually exclusive
configuration axis and return it as a tagged value:
 - NetworkMode: CustomVnet | ManagedSubnet
 - WindowsImageSource: WindowsSourceUrl | WindowsImageRef | WindowsMarketplace
 - SpotScaleSet: present only for spot scale-set pools

The derivers consume these values instead of re-testing the profile fields.
"""

from __future__ import annotations

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

from clusterparams.models.cluster import (
    IPV6_DUAL_STACK_FEATURE,
    AgentPoolProfile,
    FeatureFlags,
    MasterProfile,
    ScaleSetEvictionPolicy,
    WindowsProfile,
)
from clusterparams.models.settings import EngineSettings


class _Decision(BaseModel):
    model_config = ConfigDict(frozen=True)


# ----------------------------------------------------------------------
# 1) Networking
# ----------------------------------------------------------------------


class CustomVnet(_Decision):
    """Pool placed in a caller-provided subnet.

    Optional fields are None when the matching parameter must not be emitted.
    """

    kind: Literal["custom_vnet"] = "custom_vnet"
    vnet_subnet_id: str
    agent_vnet_subnet_id: Optional[str] = None
    vnet_cidr: Optional[str] = None


class ManagedSubnet(_Decision):
    kind: Literal["managed_subnet"] = "managed_subnet"
    subnet: str
    agent_subnet: Optional[str] = None
    subnet_ipv6: Optional[str] = None


NetworkMode = Union[CustomVnet, ManagedSubnet]


def master_network_mode(master: MasterProfile, flags: FeatureFlags) -> NetworkMode:
    if master.is_custom_vnet():
        return CustomVnet(
            vnet_subnet_id=master.vnet_subnet_id,
            agent_vnet_subnet_id=(
                master.agent_vnet_subnet_id
                if master.is_virtual_machine_scale_sets()
                else None
            ),
            vnet_cidr=master.vnet_cidr or None,
        )
    return ManagedSubnet(
        subnet=master.subnet,
        agent_subnet=master.agent_subnet,
        subnet_ipv6=(
            master.subnet_ipv6 if flags.is_enabled(IPV6_DUAL_STACK_FEATURE) else None
        ),
    )


def agent_network_mode(pool: AgentPoolProfile) -> NetworkMode:
    if pool.is_custom_vnet():
        return CustomVnet(vnet_subnet_id=pool.vnet_subnet_id)
    return ManagedSubnet(subnet=pool.subnet)


# ----------------------------------------------------------------------
# 2) Spot scale sets
# ----------------------------------------------------------------------


class SpotScaleSet(_Decision):
    priority: str
    eviction_policy: str


def spot_scale_set(pool: AgentPoolProfile) -> Optional[SpotScaleSet]:
    """
    Spot settings for a scale-set pool with Spot priority; None otherwise.
    Availability-set pools never get spot settings.
    """
    if pool.is_availability_sets() or not pool.is_spot_scale_set():
        return None
    eviction = pool.scale_set_eviction_policy or ScaleSetEvictionPolicy.delete
    return SpotScaleSet(
        priority=pool.scale_set_priority.value, eviction_policy=eviction.value
    )


# ----------------------------------------------------------------------
# 3) Windows image source
# ----------------------------------------------------------------------


class WindowsSourceUrl(_Decision):
    kind: Literal["source_url"] = "source_url"
    url: str


class WindowsImageRef(_Decision):
    kind: Literal["image_ref"] = "image_ref"
    resource_group: str
    name: str


class WindowsMarketplace(_Decision):
    kind: Literal["marketplace"] = "marketplace"
    publisher: str
    offer: str
    sku: str
    version: str


WindowsImageSource = Union[WindowsSourceUrl, WindowsImageRef, WindowsMarketplace]


def windows_image_source(
    profile: WindowsProfile, settings: EngineSettings
) -> WindowsImageSource:
    """Source URL beats image reference, which beats the marketplace image."""
    if profile.has_custom_image():
        return WindowsSourceUrl(url=profile.windows_image_source_url)
    if profile.has_image_ref():
        assert profile.image_ref is not None  # for mypy
        return WindowsImageRef(
            resource_group=profile.image_ref.resource_group,
            name=profile.image_ref.name,
        )
    return WindowsMarketplace(
        publisher=profile.windows_publisher,
        offer=profile.windows_offer,
        sku=profile.get_windows_sku(settings),
        version=profile.image_version,
    )
