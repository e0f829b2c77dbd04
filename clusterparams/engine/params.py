"""
clusterparams/engine/params.py

Top-level derivation: runs every deriver in a fixed order against one fresh
sink and returns the finalized parameter map.

Order:
  1) master pool, cluster-wide and Linux profile parameters
  2) agent pools, in input order
  3) Windows credentials and image (only if a pool runs Windows)
  4) extensions, in input order
  5) orchestrator-specific step, which may override anything above
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from clusterparams.engine.agents import derive_agent_pools_parameters
from clusterparams.engine.common import require
from clusterparams.engine.credentials import derive_windows_parameters
from clusterparams.engine.extensions import derive_extension_parameters
from clusterparams.engine.master import derive_master_parameters
from clusterparams.engine.orchestrator import OrchestratorDeriver, noop_orchestrator
from clusterparams.engine.sink import ParameterSink
from clusterparams.models.cluster import ClusterSpec
from clusterparams.models.environments import get_target_env
from clusterparams.models.images import ImageTable, default_image_catalog
from clusterparams.models.parameters import Parameter
from clusterparams.models.settings import EngineSettings

logger = logging.getLogger(__name__)

# field defaults only, without reading CLUSTERPARAMS_* variables
DEFAULT_SETTINGS = EngineSettings.model_construct()


def resolve_image_table(spec: ClusterSpec) -> ImageTable:
    """The default catalog's table for the spec's target environment."""
    env = get_target_env(spec.location, spec.custom_cloud_name())
    return default_image_catalog().for_environment(env)


def derive_parameters(
    spec: ClusterSpec,
    generator_code: str,
    engine_version: str,
    image_table: Optional[ImageTable] = None,
    orchestrator: Optional[OrchestratorDeriver] = None,
    settings: Optional[EngineSettings] = None,
) -> Mapping[str, Parameter]:
    """
    Derive the ordered deployment parameter map for `spec`.

    The result depends only on the arguments: the same inputs always produce
    the same mapping, in the same order. Nothing is returned on failure.

    Args:
        spec: The validated cluster description. Never mutated.
        generator_code: Identifies the template flavor; passed to the orchestrator step.
        engine_version: Emitted as `aksEngineVersion`.
        image_table: OS image table. Defaults to the built-in catalog entry
            for the spec's target environment.
        orchestrator: Orchestrator-specific step. Defaults to a no-op.
        settings: Defaults for empty Windows fields. When omitted, the
            EngineSettings field defaults are used; the environment is not read.

    Returns:
        A read-only mapping of parameter name to Parameter, in emission order.

    Raises:
        DuplicateKeyError: Two steps emitted the same name (e.g. duplicate pool names).
        UnknownImageKeyError: A distro or cloud is missing from the image table.
        MissingRequiredFieldError: A field the derivation depends on is empty.
    """
    table = image_table if image_table is not None else resolve_image_table(spec)
    step = orchestrator if orchestrator is not None else noop_orchestrator
    cfg = settings if settings is not None else DEFAULT_SETTINGS

    sink = ParameterSink()

    derive_master_parameters(sink, spec, table, engine_version)
    derive_agent_pools_parameters(sink, spec.agent_pool_profiles, table)

    if spec.has_windows():
        windows = require(spec.windows_profile, "windows_profile")
        derive_windows_parameters(sink, windows, cfg)

    derive_extension_parameters(sink, spec.extension_profiles)

    before = len(sink)
    step(spec, sink, table, generator_code)
    logger.debug(
        "Orchestrator step for %r added %d parameter(s)",
        generator_code,
        len(sink) - before,
    )

    params = sink.finalize()
    logger.debug("Derived %d parameters for location %r", len(params), spec.location)
    return params
