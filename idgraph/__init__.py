"""idgraph - directed multigraph with arbitrary node and edge ids."""

from idgraph.config import GraphConfig
from idgraph.graph import (
    UNSET,
    AutoEdgeId,
    DuplicateEdgeError,
    DuplicateNodeError,
    EdgeNotFoundError,
    Graph,
    GraphBackend,
    GraphError,
    InvalidEndpointError,
    InvalidIdError,
    NetworkXBackend,
    NodeNotFoundError,
    NotFoundError,
)
from idgraph.utils.log_utils import setup_logging

__version__ = "0.1.0"

__all__ = [
    "AutoEdgeId",
    "DuplicateEdgeError",
    "DuplicateNodeError",
    "EdgeNotFoundError",
    "Graph",
    "GraphBackend",
    "GraphConfig",
    "GraphError",
    "InvalidEndpointError",
    "InvalidIdError",
    "NetworkXBackend",
    "NodeNotFoundError",
    "NotFoundError",
    "UNSET",
    "setup_logging",
]
