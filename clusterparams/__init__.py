"""
clusterparams

Derives the flat, ordered parameter mapping consumed by the deployment
template engine from an in-memory cluster description.
"""

from clusterparams.engine.params import derive_parameters
from clusterparams.models.cluster import ClusterSpec

__all__ = ["ClusterSpec", "derive_parameters"]
