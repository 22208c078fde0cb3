"""Graph backend abstraction layer.

Wraps NetworkX for easy backend replacement in the future. A backend
stores node records, edge records keyed by edge id, and the adjacency
between them. It performs no validation: callers check ids first.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Hashable, Iterable, List, Optional

import networkx as nx

logger = logging.getLogger("idgraph.graph.core.backend")


class GraphBackend(ABC):
    """Abstract graph backend protocol.

    This defines the interface that all graph storage backends must implement.
    Edge keys are the graph's edge ids and are unique across the whole
    backend, not only per (source, target) pair.
    """

    @abstractmethod
    def add_node(self, node_id: Hashable, **attributes: Any) -> None:
        """Add node to graph."""
        pass

    @abstractmethod
    def remove_node(self, node_id: Hashable) -> None:
        """Remove node and every edge incident on it."""
        pass

    @abstractmethod
    def add_edge(
        self, source: Hashable, target: Hashable, key: Hashable, **attributes: Any
    ) -> Hashable:
        """Add edge to graph under the given key."""
        pass

    @abstractmethod
    def remove_edge(self, source: Hashable, target: Hashable, key: Hashable) -> None:
        """Remove a single edge."""
        pass

    @abstractmethod
    def has_node(self, node_id: Hashable) -> bool:
        """Check if node exists."""
        pass

    @abstractmethod
    def get_node_data(self, node_id: Hashable) -> Optional[Dict[str, Any]]:
        """Get node attributes."""
        pass

    @abstractmethod
    def get_edge_data(
        self, source: Hashable, target: Hashable, key: Hashable
    ) -> Optional[Dict[str, Any]]:
        """Get edge attributes."""
        pass

    @abstractmethod
    def edge_keys(self, source: Hashable, target: Hashable) -> List[Hashable]:
        """Get keys of all edges from source to target."""
        pass

    @abstractmethod
    def nodes(self, data: bool = False) -> Iterable:
        """Iterate over nodes."""
        pass

    @abstractmethod
    def out_edges(self, node_id: Hashable, data: bool = False, keys: bool = False) -> Iterable:
        """Iterate over outgoing edges of a node."""
        pass

    @abstractmethod
    def in_edges(self, node_id: Hashable, data: bool = False, keys: bool = False) -> Iterable:
        """Iterate over incoming edges of a node."""
        pass

    @abstractmethod
    def node_count(self) -> int:
        """Get number of nodes."""
        pass

    @abstractmethod
    def edge_count(self) -> int:
        """Get number of edges."""
        pass

    @abstractmethod
    def successors(self, node_id: Hashable) -> Iterable[Hashable]:
        """Get successor nodes."""
        pass

    @abstractmethod
    def predecessors(self, node_id: Hashable) -> Iterable[Hashable]:
        """Get predecessor nodes."""
        pass

    @abstractmethod
    def in_degree(self, node_id: Hashable) -> int:
        """Get in-degree of node."""
        pass

    @abstractmethod
    def out_degree(self, node_id: Hashable) -> int:
        """Get out-degree of node."""
        pass


class NetworkXBackend(GraphBackend):
    """NetworkX-based in-memory graph backend.

    This is the default implementation. Successor and predecessor maps of
    the MultiDiGraph form the adjacency index; edge keys are edge ids.
    """

    def __init__(self) -> None:
        """Initialize backend with NetworkX MultiDiGraph."""
        self._graph = nx.MultiDiGraph()
        logger.debug("NetworkXBackend initialized")

    def add_node(self, node_id: Hashable, **attributes: Any) -> None:
        self._graph.add_node(node_id, **attributes)

    def remove_node(self, node_id: Hashable) -> None:
        self._graph.remove_node(node_id)

    def add_edge(
        self, source: Hashable, target: Hashable, key: Hashable, **attributes: Any
    ) -> Hashable:
        return self._graph.add_edge(source, target, key=key, **attributes)

    def remove_edge(self, source: Hashable, target: Hashable, key: Hashable) -> None:
        self._graph.remove_edge(source, target, key=key)

    def has_node(self, node_id: Hashable) -> bool:
        return self._graph.has_node(node_id)

    def get_node_data(self, node_id: Hashable) -> Optional[Dict[str, Any]]:
        return self._graph.nodes.get(node_id)

    def get_edge_data(
        self, source: Hashable, target: Hashable, key: Hashable
    ) -> Optional[Dict[str, Any]]:
        return self._graph.get_edge_data(source, target, key)

    def edge_keys(self, source: Hashable, target: Hashable) -> List[Hashable]:
        return list(self._graph.succ[source].get(target, {}))

    def nodes(self, data: bool = False) -> Iterable:
        return self._graph.nodes(data=data)

    def out_edges(self, node_id: Hashable, data: bool = False, keys: bool = False) -> Iterable:
        return self._graph.out_edges(node_id, data=data, keys=keys)

    def in_edges(self, node_id: Hashable, data: bool = False, keys: bool = False) -> Iterable:
        return self._graph.in_edges(node_id, data=data, keys=keys)

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def successors(self, node_id: Hashable) -> Iterable[Hashable]:
        return self._graph.successors(node_id)

    def predecessors(self, node_id: Hashable) -> Iterable[Hashable]:
        return self._graph.predecessors(node_id)

    def in_degree(self, node_id: Hashable) -> int:
        return self._graph.in_degree(node_id)

    def out_degree(self, node_id: Hashable) -> int:
        return self._graph.out_degree(node_id)
