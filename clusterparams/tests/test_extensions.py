from __future__ import annotations

import pytest
from pydantic import ValidationError

from clusterparams.models import (
    ExtensionProfile,
    KeyVaultSecretRef,
    LiteralParameter,
    SecretRefParameter,
)

from conftest import Derive, make_spec


def test_literal_and_key_vault_extensions(derive: Derive) -> None:
    extensions = [
        ExtensionProfile(name="hello", extension_parameters="--greeting hi"),
        ExtensionProfile(
            name="secure",
            extension_parameters_key_vault_ref=KeyVaultSecretRef(
                vault_id="/subscriptions/s/vaults/kv",
                secret_name="ext",
                secret_version="v2",
            ),
        ),
    ]
    params = derive(make_spec(extension_profiles=extensions))

    assert params["helloParameters"] == LiteralParameter(value="--greeting hi")
    assert params["secureParameters"] == SecretRefParameter(
        vault_id="/subscriptions/s/vaults/kv", secret_name="ext", secret_version="v2"
    )
    names = list(params)
    assert names.index("helloParameters") < names.index("secureParameters")


def test_extension_without_parameters_is_empty_literal(derive: Derive) -> None:
    params = derive(make_spec(extension_profiles=[ExtensionProfile(name="bare")]))
    assert params["bareParameters"] == LiteralParameter(value="")


def test_inline_and_key_vault_are_exclusive() -> None:
    with pytest.raises(ValidationError):
        ExtensionProfile(
            name="both",
            extension_parameters="x",
            extension_parameters_key_vault_ref=KeyVaultSecretRef(
                vault_id="kv", secret_name="s"
            ),
        )
