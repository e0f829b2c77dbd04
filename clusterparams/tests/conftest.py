"""
Shared fixtures: a small fake image table, engine settings that ignore the
environment, and a baseline Linux cluster.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping

import pytest

from clusterparams.engine import derive_parameters
from clusterparams.models import (
    AgentPoolProfile,
    ClusterSpec,
    EngineSettings,
    ImageTable,
    LinuxProfile,
    MasterProfile,
    OSImage,
    Parameter,
    PublicKey,
    SSHConfig,
)

UBUNTU_1804 = OSImage(
    offer="UbuntuServer", sku="18.04-LTS", publisher="Canonical", version="18.04.1"
)
FLATCAR = OSImage(
    offer="flatcar-container-linux-free",
    sku="stable",
    publisher="kinvolk",
    version="2905.2.5",
)


@pytest.fixture
def image_table() -> ImageTable:
    return ImageTable(
        name="test", images={"ubuntu-18.04": UBUNTU_1804, "flatcar": FLATCAR}
    )


@pytest.fixture
def settings() -> EngineSettings:
    return EngineSettings(
        default_windows_sku="test-sku",
        default_windows_docker_version="20.10.9",
        default_containerd_runtime_handler="process",
    )


def make_master(**overrides: Any) -> MasterProfile:
    fields: Dict[str, Any] = dict(
        dns_prefix="mycluster",
        vm_size="Standard_D2_v3",
        distro="ubuntu-18.04",
        first_consecutive_static_ip="10.240.255.5",
        subnet="10.240.0.0/16",
        agent_subnet="10.241.0.0/16",
    )
    fields.update(overrides)
    return MasterProfile(**fields)


def make_pool(name: str = "pool1", **overrides: Any) -> AgentPoolProfile:
    fields: Dict[str, Any] = dict(
        name=name,
        count=3,
        vm_size="Standard_D2_v3",
        distro="ubuntu-18.04",
        subnet="10.240.0.0/16",
    )
    fields.update(overrides)
    return AgentPoolProfile(**fields)


def make_linux(**overrides: Any) -> LinuxProfile:
    fields: Dict[str, Any] = dict(
        admin_username="azureuser",
        ssh=SSHConfig(public_keys=[PublicKey(key_data="ssh-rsa AAAA test")]),
    )
    fields.update(overrides)
    return LinuxProfile(**fields)


def make_spec(**overrides: Any) -> ClusterSpec:
    fields: Dict[str, Any] = dict(
        location="westus2",
        master_profile=make_master(),
        agent_pool_profiles=[make_pool()],
        linux_profile=make_linux(),
    )
    fields.update(overrides)
    return ClusterSpec(**fields)


Derive = Callable[[ClusterSpec], Mapping[str, Parameter]]


@pytest.fixture
def derive(image_table: ImageTable, settings: EngineSettings) -> Derive:
    """derive_parameters bound to the fake table and settings."""

    def _derive(spec: ClusterSpec) -> Mapping[str, Parameter]:
        return derive_parameters(
            spec,
            generator_code="aksengine",
            engine_version="v0.70.0",
            image_table=image_table,
            settings=settings,
        )

    return _derive


def value_of(params: Mapping[str, Parameter], name: str) -> Any:
    """The literal value of `name`; fails the test if it is not a literal."""
    param = params[name]
    assert param.kind == "literal", f"{name} is a {param.kind} parameter"
    return param.value
