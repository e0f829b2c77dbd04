"""
clusterparams/engine/agents.py

Per-pool agent parameters. Every name is prefixed with the pool name, so two
pools sharing a name collide in the sink and abort the derivation.
"""

from __future__ import annotations

import logging
from typing import List, Set

from typing_extensions import assert_never

from clusterparams.engine.common import image_fields, require
from clusterparams.engine.decisions import (
    CustomVnet,
    ManagedSubnet,
    agent_network_mode,
    spot_scale_set,
)
from clusterparams.engine.sink import ParameterSink
from clusterparams.errors import DuplicateKeyError
from clusterparams.models.cluster import AgentPoolProfile
from clusterparams.models.images import ImageTable

logger = logging.getLogger(__name__)


def derive_agent_pool_parameters(
    sink: ParameterSink, pool: AgentPoolProfile, image_table: ImageTable
) -> None:
    """
    Emit the parameters of a single agent pool.

    Windows pools skip the distro image lookup; their image comes from the
    Windows profile.

    Raises:
        DuplicateKeyError: If a parameter of this pool already exists.
        UnknownImageKeyError: If a Linux pool's distro is not in `image_table`.
        MissingRequiredFieldError: If the pool opens ports without a DNS prefix.
    """
    name = pool.name

    sink.put(f"{name}Count", pool.count)
    sink.put(f"{name}VMSize", pool.vm_size)
    if pool.has_availability_zones():
        sink.put(f"{name}AvailabilityZones", list(pool.availability_zones))

    mode = agent_network_mode(pool)
    if isinstance(mode, CustomVnet):
        sink.put(f"{name}VnetSubnetID", mode.vnet_subnet_id)
    elif isinstance(mode, ManagedSubnet):
        sink.put(f"{name}Subnet", mode.subnet)
    else:
        assert_never(mode)

    if len(pool.ports) > 0:
        sink.put(
            f"{name}EndpointDNSNamePrefix",
            require(pool.dns_prefix, f"agent_pool_profiles[{name}].dns_prefix"),
        )

    spot = spot_scale_set(pool)
    if spot is not None:
        sink.put(f"{name}ScaleSetPriority", spot.priority)
        sink.put(f"{name}ScaleSetEvictionPolicy", spot.eviction_policy)

    if pool.image_ref is not None:
        sink.put(f"{name}osImageName", pool.image_ref.name)
        sink.put(f"{name}osImageResourceGroup", pool.image_ref.resource_group)

    if not pool.is_windows():
        for param, value in image_fields(name, image_table.lookup(pool.distro)):
            sink.put(param, value)


def derive_agent_pools_parameters(
    sink: ParameterSink, pools: List[AgentPoolProfile], image_table: ImageTable
) -> None:
    """
    Emit parameters for every pool, in input order.

    Raises:
        DuplicateKeyError: If two pools share a name. Checked before any pool
            is emitted.
    """
    seen: Set[str] = set()
    for pool in pools:
        if pool.name in seen:
            raise DuplicateKeyError(f"{pool.name}Count")
        seen.add(pool.name)

    for pool in pools:
        logger.debug("Deriving parameters for agent pool %r", pool.name)
        derive_agent_pool_parameters(sink, pool, image_table)
