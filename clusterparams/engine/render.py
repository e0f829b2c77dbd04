"""
clusterparams/engine/render.py

Pure conversions of a finalized parameter map into the shapes consumed
downstream:
 - to_arm_parameters: ARM deployment parameters ({"value": ...} / {"reference": ...})
 - to_tfvars: a flat dict for a Terraform .auto.tfvars.json file
 - redacted: a flat dict safe for logs, secrets masked
 - dumps: indented JSON text of any of the above
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from typing_extensions import assert_never

from clusterparams.models.parameters import (
    LiteralParameter,
    Parameter,
    SecretParameter,
    SecretRefParameter,
)


def _arm_reference(ref: SecretRefParameter) -> Dict[str, Any]:
    reference: Dict[str, Any] = {
        "keyVault": {"id": ref.vault_id},
        "secretName": ref.secret_name,
    }
    if ref.secret_version:
        reference["secretVersion"] = ref.secret_version
    return {"reference": reference}


def to_arm_parameters(params: Mapping[str, Parameter]) -> Dict[str, Any]:
    """
    Render as the `parameters` object of an ARM deployment. Secret references
    become key vault references that ARM resolves at deployment time.
    """
    rendered: Dict[str, Any] = {}
    for name, param in params.items():
        if isinstance(param, LiteralParameter):
            rendered[name] = {"value": param.value}
        elif isinstance(param, SecretParameter):
            rendered[name] = {"value": param.value.get_secret_value()}
        elif isinstance(param, SecretRefParameter):
            rendered[name] = _arm_reference(param)
        else:
            assert_never(param)
    return rendered


def to_tfvars(params: Mapping[str, Parameter]) -> Dict[str, Any]:
    """
    Render as Terraform variables. Secret references are passed as objects
    for the root module to resolve with a key vault data source.
    """
    rendered: Dict[str, Any] = {}
    for name, param in params.items():
        if isinstance(param, LiteralParameter):
            rendered[name] = param.value
        elif isinstance(param, SecretParameter):
            rendered[name] = param.value.get_secret_value()
        elif isinstance(param, SecretRefParameter):
            rendered[name] = {
                "vault_id": param.vault_id,
                "secret_name": param.secret_name,
                "secret_version": param.secret_version,
            }
        else:
            assert_never(param)
    return rendered


def redacted(params: Mapping[str, Parameter]) -> Dict[str, Any]:
    """Flat view with secret values masked; references keep their vault path."""
    rendered: Dict[str, Any] = {}
    for name, param in params.items():
        if isinstance(param, LiteralParameter):
            rendered[name] = param.value
        elif isinstance(param, SecretParameter):
            rendered[name] = str(param.value)
        elif isinstance(param, SecretRefParameter):
            path = f"{param.vault_id}/secrets/{param.secret_name}"
            if param.secret_version:
                path = f"{path}/{param.secret_version}"
            rendered[name] = path
        else:
            assert_never(param)
    return rendered


def dumps(rendered: Mapping[str, Any]) -> str:
    """Indented JSON, keys in emission order."""
    return json.dumps(dict(rendered), indent=2)


__all__ = ["to_arm_parameters", "to_tfvars", "redacted", "dumps"]
