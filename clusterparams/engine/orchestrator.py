"""
clusterparams/engine/orchestrator.py

The orchestrator-specific step. It runs once, after every built-in step, and
receives the partially built sink. It may add entries or replace them through
`ParameterSink.override`, but never removes any.
"""

from __future__ import annotations

from typing import Callable

from clusterparams.engine.sink import ParameterSink
from clusterparams.models.cluster import ClusterSpec
from clusterparams.models.images import ImageTable

OrchestratorDeriver = Callable[[ClusterSpec, ParameterSink, ImageTable, str], None]


def noop_orchestrator(
    spec: ClusterSpec, sink: ParameterSink, image_table: ImageTable, generator_code: str
) -> None:
    """Default orchestrator step: adds nothing."""
    return None


__all__ = ["OrchestratorDeriver", "noop_orchestrator"]
