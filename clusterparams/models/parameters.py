"""
clusterparams/models/parameters.py

Tagged parameter values stored in the sink:
 - LiteralParameter: a plain value passed through to the template
 - SecretParameter: a value rendered as a secure parameter; redacted in repr
 - SecretRefParameter: a key vault secret reference, resolved by the consumer

`Parameter` is the discriminated union of the three, keyed on `kind`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from typing_extensions import Annotated

ParameterValue = Union[str, int, float, bool, None, Dict[str, Any], List[Any]]


class LiteralParameter(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    value: ParameterValue


class SecretParameter(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["secret"] = "secret"
    value: SecretStr


class SecretRefParameter(BaseModel):
    """A pointer to a key vault secret. Never dereferenced by this package.

    Attributes:
        vault_id: Resource ID of the key vault.
        secret_name: Name of the secret in the vault.
        secret_version: Optional version; empty means latest.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["secret_ref"] = "secret_ref"
    vault_id: str
    secret_name: str
    secret_version: str = ""


Parameter = Annotated[
    Union[LiteralParameter, SecretParameter, SecretRefParameter],
    Field(discriminator="kind"),
]


__all__ = [
    "ParameterValue",
    "LiteralParameter",
    "SecretParameter",
    "SecretRefParameter",
    "Parameter",
]
