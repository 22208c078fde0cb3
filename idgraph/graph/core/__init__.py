"""Core graph management APIs."""

from .backend import GraphBackend, NetworkXBackend
from .graph import Graph
from .ids import UNSET, AutoEdgeId

__all__ = [
    "AutoEdgeId",
    "Graph",
    "GraphBackend",
    "NetworkXBackend",
    "UNSET",
]
