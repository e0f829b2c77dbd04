"""
clusterparams.engine

Exports:
  - derive_parameters: the top-level derivation
  - ParameterSink: the ordered parameter map shared by the derivers
  - OrchestratorDeriver / noop_orchestrator: the orchestrator-specific step
  - Rendering helpers (to_arm_parameters, to_tfvars, redacted, dumps)
"""

from clusterparams.engine.orchestrator import OrchestratorDeriver, noop_orchestrator
from clusterparams.engine.params import derive_parameters, resolve_image_table
from clusterparams.engine.render import dumps, redacted, to_arm_parameters, to_tfvars
from clusterparams.engine.sink import ParameterSink

__all__ = [
    "derive_parameters",
    "resolve_image_table",
    "ParameterSink",
    "OrchestratorDeriver",
    "noop_orchestrator",
    "to_arm_parameters",
    "to_tfvars",
    "redacted",
    "dumps",
]
