"""
clusterparams/engine/extensions.py

`{name}Parameters` for each extension: a key vault reference when one is
configured, otherwise the inline parameter string.
"""

from __future__ import annotations

from typing import List

from clusterparams.engine.sink import ParameterSink
from clusterparams.models.cluster import ExtensionProfile


def derive_extension_parameters(
    sink: ParameterSink, extensions: List[ExtensionProfile]
) -> None:
    for extension in extensions:
        name = f"{extension.name}Parameters"
        ref = extension.extension_parameters_key_vault_ref
        if ref is not None:
            sink.put_secret_ref(name, ref.vault_id, ref.secret_name, ref.secret_version)
        else:
            sink.put(name, extension.extension_parameters)
