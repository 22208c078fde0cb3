"""Public graph API surface."""

from idgraph.graph.core import UNSET, AutoEdgeId, Graph, GraphBackend, NetworkXBackend
from idgraph.graph.errors import (
    DuplicateEdgeError,
    DuplicateNodeError,
    EdgeNotFoundError,
    GraphError,
    InvalidEndpointError,
    InvalidIdError,
    NodeNotFoundError,
    NotFoundError,
)

__all__ = [
    "AutoEdgeId",
    "DuplicateEdgeError",
    "DuplicateNodeError",
    "EdgeNotFoundError",
    "Graph",
    "GraphBackend",
    "GraphError",
    "InvalidEndpointError",
    "InvalidIdError",
    "NetworkXBackend",
    "NodeNotFoundError",
    "NotFoundError",
    "UNSET",
]
