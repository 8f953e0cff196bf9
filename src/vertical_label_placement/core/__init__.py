"""Core placement primitives: clusters, the cluster stack and input validation."""

from .cluster import Cluster
from .cluster_stack import ClusterStack

__all__ = ["Cluster", "ClusterStack"]
