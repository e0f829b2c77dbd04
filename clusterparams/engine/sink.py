"""
clusterparams/engine/sink.py

ParameterSink: the ordered, append-only parameter map shared by every
derivation step of one `derive_parameters` call.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from pydantic import SecretStr

from clusterparams.errors import DuplicateKeyError, SinkFinalizedError
from clusterparams.models.parameters import (
    LiteralParameter,
    Parameter,
    ParameterValue,
    SecretParameter,
    SecretRefParameter,
)

logger = logging.getLogger(__name__)

# /subscriptions/<sub>/resourceGroups/<rg>/providers/Microsoft.KeyVault/vaults/<vault>/secrets/<name>[/<version>]
KEYVAULT_SECRET_PATH_RE = re.compile(
    r"^(/subscriptions/\S+/resourceGroups/\S+/providers/Microsoft\.KeyVault/vaults/[^/\s]+)"
    r"/secrets/([^/\s]+)(?:/(\S+))?$"
)


class ParameterSink:
    """
    Ordered map of parameter name -> Parameter.

    Names are unique: `put`, `put_secret` and `put_secret_ref` raise
    DuplicateKeyError on a repeated name. Only `override` may replace an
    entry. Once `finalize` has been called the sink rejects every write.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Parameter] = {}
        self._finalized = False

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, name: str) -> Optional[Parameter]:
        return self._entries.get(name)

    def _add(self, name: str, parameter: Parameter) -> None:
        if self._finalized:
            raise SinkFinalizedError(f"Cannot add '{name}': sink is finalized")
        if name in self._entries:
            raise DuplicateKeyError(name)
        self._entries[name] = parameter

    def put(self, name: str, value: ParameterValue) -> None:
        """Add a literal parameter."""
        self._add(name, LiteralParameter(value=value))

    def put_secret(
        self, name: str, value: str, always_include_empty: bool = False
    ) -> None:
        """
        Add a secret parameter.

        An empty value is dropped unless `always_include_empty` is set. A value
        that is itself a key vault secret ID is stored as a secret reference.
        """
        if not value and not always_include_empty:
            return
        match = KEYVAULT_SECRET_PATH_RE.match(value)
        if match:
            vault_id, secret_name, secret_version = match.groups()
            self.put_secret_ref(name, vault_id, secret_name, secret_version or "")
            return
        self._add(name, SecretParameter(value=SecretStr(value)))

    def put_secret_ref(
        self, name: str, vault_id: str, secret_name: str, secret_version: str = ""
    ) -> None:
        """Add a key vault secret reference. The sink never resolves it."""
        self._add(
            name,
            SecretRefParameter(
                vault_id=vault_id,
                secret_name=secret_name,
                secret_version=secret_version,
            ),
        )

    def override(self, name: str, parameter: Parameter) -> None:
        """
        Replace `name` in place, or append it if absent. Entries are never removed.
        """
        if self._finalized:
            raise SinkFinalizedError(f"Cannot override '{name}': sink is finalized")
        if name in self._entries:
            logger.debug("Overriding parameter %r", name)
        self._entries[name] = parameter

    def finalize(self) -> Mapping[str, Parameter]:
        """Freeze the sink and return a read-only view of its entries, in insertion order."""
        self._finalized = True
        return MappingProxyType(dict(self._entries))
