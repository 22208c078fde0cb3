"""Exception hierarchy for graph operations.

Every error is raised before any store is modified, so a failed call
leaves the graph exactly as it was.
"""

from typing import Hashable


class GraphError(Exception):
    """Base class for all graph errors."""
    pass


class NotFoundError(GraphError, LookupError):
    """A node or edge id is not present in the graph."""
    pass


class NodeNotFoundError(NotFoundError):
    """Raised when a node id does not exist.

    Attributes:
        node_id: The missing node id.
    """

    def __init__(self, node_id: Hashable, message: str = "") -> None:
        self.node_id = node_id
        super().__init__(message or f"Node {node_id!r} not found")


class InvalidEndpointError(NodeNotFoundError):
    """Raised by add_edge when the source or target node does not exist.

    Attributes:
        node_id: The missing endpoint.
        role: Either "source" or "target".
    """

    def __init__(self, node_id: Hashable, role: str) -> None:
        self.role = role
        super().__init__(node_id, f"Edge {role} {node_id!r} is not a node in the graph")


class EdgeNotFoundError(NotFoundError):
    """Raised when an edge id does not exist.

    Attributes:
        edge_id: The missing edge id.
    """

    def __init__(self, edge_id: Hashable) -> None:
        self.edge_id = edge_id
        super().__init__(f"Edge {edge_id!r} not found")


class DuplicateNodeError(GraphError, ValueError):
    """Raised when adding a node whose id is already in use."""

    def __init__(self, node_id: Hashable) -> None:
        self.node_id = node_id
        super().__init__(f"Node {node_id!r} already exists")


class DuplicateEdgeError(GraphError, ValueError):
    """Raised when adding an edge whose id is already in use."""

    def __init__(self, edge_id: Hashable) -> None:
        self.edge_id = edge_id
        super().__init__(f"Edge {edge_id!r} already exists")


class InvalidIdError(GraphError, ValueError):
    """Raised when an id cannot be used, e.g. None as a node id."""
    pass
