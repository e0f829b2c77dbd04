from __future__ import annotations

from typing import Any

import pytest
from pydantic import SecretStr

from clusterparams.errors import MissingRequiredFieldError
from clusterparams.models import (
    ClusterSpec,
    ImageReference,
    KeyVaultSecrets,
    OSType,
    SecretParameter,
    SecretRefParameter,
    SourceVault,
    VaultCertificate,
    WindowsProfile,
)

from conftest import Derive, make_pool, make_spec, value_of

WINDOWS_IMAGE_KEYS = (
    "agentWindowsSourceUrl",
    "agentWindowsImageResourceGroup",
    "agentWindowsImageName",
    "agentWindowsPublisher",
    "agentWindowsOffer",
    "agentWindowsSku",
    "agentWindowsVersion",
)


def windows_spec(**profile_fields: Any) -> ClusterSpec:
    fields: dict = dict(admin_username="azureuser")
    fields.update(profile_fields)
    return make_spec(
        agent_pool_profiles=[make_pool("win", os_type=OSType.windows)],
        windows_profile=WindowsProfile(**fields),
    )


def present_image_keys(params: Any) -> list:
    return [key for key in WINDOWS_IMAGE_KEYS if key in params]


def test_source_url_wins_over_image_ref(derive: Derive) -> None:
    spec = windows_spec(
        windows_image_source_url="https://images/win.vhd",
        image_ref=ImageReference(name="img", resource_group="rg"),
    )
    params = derive(spec)

    assert present_image_keys(params) == ["agentWindowsSourceUrl"]
    assert value_of(params, "agentWindowsSourceUrl") == "https://images/win.vhd"


def test_image_ref_wins_over_marketplace(derive: Derive) -> None:
    spec = windows_spec(
        image_ref=ImageReference(name="img", resource_group="rg"),
        windows_publisher="MicrosoftWindowsServer",
    )
    params = derive(spec)

    assert present_image_keys(params) == [
        "agentWindowsImageResourceGroup",
        "agentWindowsImageName",
    ]
    assert value_of(params, "agentWindowsImageName") == "img"


def test_incomplete_image_ref_falls_back_to_marketplace(derive: Derive) -> None:
    params = derive(windows_spec(image_ref=ImageReference(name="img")))
    assert "agentWindowsImageName" not in params
    assert "agentWindowsPublisher" in params


def test_marketplace_image_with_defaults(derive: Derive) -> None:
    spec = windows_spec(
        windows_publisher="MicrosoftWindowsServer",
        windows_offer="WindowsServer",
        image_version="17763.1.1",
    )
    params = derive(spec)

    assert value_of(params, "agentWindowsPublisher") == "MicrosoftWindowsServer"
    assert value_of(params, "agentWindowsOffer") == "WindowsServer"
    assert value_of(params, "agentWindowsSku") == "test-sku"
    assert value_of(params, "agentWindowsVersion") == "17763.1.1"
    assert value_of(params, "windowsDockerVersion") == "20.10.9"
    assert value_of(params, "defaultContainerdRuntimeHandler") == "process"
    assert value_of(params, "hypervRuntimeHandlers") == ""


def test_runtime_overrides(derive: Derive) -> None:
    spec = windows_spec(
        windows_sku="2019-Datacenter",
        windows_docker_version="19.03.11",
        containerd_runtime_handler="hyperv",
        hyperv_runtime_handlers=["17763", "18362"],
    )
    params = derive(spec)

    assert value_of(params, "agentWindowsSku") == "2019-Datacenter"
    assert value_of(params, "windowsDockerVersion") == "19.03.11"
    assert value_of(params, "defaultContainerdRuntimeHandler") == "hyperv"
    assert value_of(params, "hypervRuntimeHandlers") == "17763,18362"


def test_admin_password_always_present(derive: Derive) -> None:
    params = derive(windows_spec())

    assert value_of(params, "windowsAdminUsername") == "azureuser"
    password = params["windowsAdminPassword"]
    assert isinstance(password, SecretParameter)
    assert password.value.get_secret_value() == ""


def test_admin_password_key_vault_path(derive: Derive) -> None:
    vault = "/subscriptions/s/resourceGroups/rg/providers/Microsoft.KeyVault/vaults/kv"
    params = derive(windows_spec(admin_password=SecretStr(f"{vault}/secrets/winpw")))

    assert params["windowsAdminPassword"] == SecretRefParameter(
        vault_id=vault, secret_name="winpw"
    )


def test_windows_key_vault_secrets_carry_store(derive: Derive) -> None:
    spec = windows_spec(
        secrets=[
            KeyVaultSecrets(
                source_vault=SourceVault(id="vault-w"),
                vault_certificates=[
                    VaultCertificate(certificate_url="https://w/c0", certificate_store="My"),
                    VaultCertificate(certificate_url="https://w/c1", certificate_store="Root"),
                ],
            )
        ]
    )
    params = derive(spec)

    assert value_of(params, "windowsKeyVaultID0") == "vault-w"
    assert value_of(params, "windowsKeyVaultID0CertificateURL1") == "https://w/c1"
    assert value_of(params, "windowsKeyVaultID0CertificateStore0") == "My"
    assert value_of(params, "windowsKeyVaultID0CertificateStore1") == "Root"


def test_profile_ignored_without_windows_pools(derive: Derive) -> None:
    spec = make_spec(windows_profile=WindowsProfile(admin_username="azureuser"))
    params = derive(spec)
    assert "windowsAdminUsername" not in params
    assert "windowsAdminPassword" not in params


def test_windows_pool_requires_profile(derive: Derive) -> None:
    spec = make_spec(agent_pool_profiles=[make_pool("win", os_type=OSType.windows)])
    with pytest.raises(MissingRequiredFieldError) as err:
        derive(spec)
    assert err.value.field == "windows_profile"
