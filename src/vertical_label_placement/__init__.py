"""vertical-label-placement: place labels near their preferred positions without overlap."""

from ._version import __version__
from .config import PlacementConfig
from .core import Cluster, ClusterStack
from .layout import LabelLayoutEngine, LabelSpec
from .placement import place, place_with_limits

__all__ = [
    "__version__",
    "place",
    "place_with_limits",
    "PlacementConfig",
    "Cluster",
    "ClusterStack",
    "LabelLayoutEngine",
    "LabelSpec",
]
