"""Directed multigraph with caller-chosen node and edge ids.

Graph owns three stores: node records and adjacency live in the backend,
and an edge index maps every edge id to its (source, target) pair so that
edge lookups do not need to scan adjacency. All checks run before any
store is touched.
"""

import logging
from itertools import islice
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
)

import networkx as nx

from idgraph.config import GraphConfig

from .backend import GraphBackend, NetworkXBackend
from .ids import (
    UNSET,
    VALUE_ATTR,
    AutoEdgeId,
    EdgeId,
    NodeId,
    value_attrs,
    value_from_attrs,
    values_equal,
)
from ..errors import (
    DuplicateEdgeError,
    DuplicateNodeError,
    EdgeNotFoundError,
    InvalidEndpointError,
    InvalidIdError,
    NodeNotFoundError,
)

logger = logging.getLogger("idgraph.graph.core.graph")


class Graph:
    """In-memory directed multigraph.

    Nodes and edges carry an optional value. Parallel edges and self-loops
    are allowed. Query methods return new lists; values are returned by
    reference.
    """

    def __init__(
        self,
        graph_id: Optional[str] = None,
        config: Optional[GraphConfig] = None,
        backend: Optional[GraphBackend] = None,
    ) -> None:
        """Initialize an empty graph.

        Args:
            graph_id: Optional graph identifier, overrides config.graph_id.
            config: Optional configuration. Defaults to GraphConfig().
            backend: Optional empty graph backend. Defaults to NetworkXBackend.
        """
        self.config = config or GraphConfig()
        self.graph_id = graph_id or self.config.graph_id
        self._backend: GraphBackend = backend or NetworkXBackend()
        self._edge_index: Dict[EdgeId, Tuple[NodeId, NodeId]] = {}
        self._next_edge_serial = 0
        self._graph_value: Any = UNSET

        logger.debug("Graph initialized with ID: %s", self.graph_id)

    @property
    def backend(self) -> GraphBackend:
        """Return the underlying graph backend."""
        return self._backend

    @property
    def graph_value(self) -> Any:
        """Graph-level value, UNSET until assigned."""
        return self._graph_value

    @graph_value.setter
    def graph_value(self, value: Any) -> None:
        self._graph_value = value

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def add_node(self, node_id: NodeId, value: Any = UNSET) -> None:
        """Add a node to the graph.

        Args:
            node_id: Unique node identifier, any hashable except None.
            value: Optional node value.

        Raises:
            InvalidIdError: If node_id is None.
            DuplicateNodeError: If the node already exists.
        """
        if node_id is None:
            raise InvalidIdError("None cannot be used as a node id")
        if self._backend.has_node(node_id):
            raise DuplicateNodeError(node_id)

        self._backend.add_node(node_id, **value_attrs(value))
        logger.debug("Added node: %r", node_id)

    def has_node(self, node_id: NodeId) -> bool:
        """Check if node exists."""
        return self._backend.has_node(node_id)

    def node(self, node_id: NodeId) -> Any:
        """Get the value of a node (UNSET if none was assigned).

        Raises:
            NodeNotFoundError: If the node does not exist.
        """
        attrs = self._backend.get_node_data(node_id)
        if attrs is None:
            raise NodeNotFoundError(node_id)
        return value_from_attrs(attrs)

    def del_node(self, node_id: NodeId) -> None:
        """Remove a node and every edge incident on it.

        Raises:
            NodeNotFoundError: If the node does not exist.
        """
        self._require_node(node_id)
        incident = self._incident_edge_ids(node_id)

        self._backend.remove_node(node_id)
        for edge_id in incident:
            del self._edge_index[edge_id]
        logger.debug("Removed node: %r (%d incident edges)", node_id, len(incident))

    def nodes(self) -> List[NodeId]:
        """Get all node ids."""
        return list(self._backend.nodes())

    def order(self) -> int:
        """Get number of nodes."""
        return self._backend.node_count()

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(
        self,
        edge_id: Optional[EdgeId],
        source: NodeId,
        target: NodeId,
        value: Any = UNSET,
    ) -> EdgeId:
        """Add a directed edge from source to target.

        Args:
            edge_id: Unique edge identifier, or None to generate one.
            source: Source node id.
            target: Target node id.
            value: Optional edge value.

        Returns:
            EdgeId: The id of the new edge.

        Raises:
            InvalidEndpointError: If source or target is not a node.
            DuplicateEdgeError: If edge_id is already in use.
        """
        if not self._backend.has_node(source):
            raise InvalidEndpointError(source, "source")
        if not self._backend.has_node(target):
            raise InvalidEndpointError(target, "target")
        if edge_id is None:
            edge_id = self._generate_edge_id()
        elif edge_id in self._edge_index:
            raise DuplicateEdgeError(edge_id)

        self._backend.add_edge(source, target, edge_id, **value_attrs(value))
        self._edge_index[edge_id] = (source, target)
        logger.debug("Added edge: %r (%r -> %r)", edge_id, source, target)
        return edge_id

    def has_edge(self, edge_id: EdgeId) -> bool:
        """Check if edge exists."""
        return edge_id in self._edge_index

    def edge(self, edge_id: EdgeId) -> Any:
        """Get the value of an edge (UNSET if none was assigned).

        Raises:
            EdgeNotFoundError: If the edge does not exist.
        """
        source, target = self.incident_nodes(edge_id)
        return value_from_attrs(self._backend.get_edge_data(source, target, edge_id))

    def del_edge(self, edge_id: EdgeId) -> None:
        """Remove an edge.

        Raises:
            EdgeNotFoundError: If the edge does not exist.
        """
        source, target = self.incident_nodes(edge_id)
        self._backend.remove_edge(source, target, edge_id)
        del self._edge_index[edge_id]
        logger.debug("Removed edge: %r (%r -> %r)", edge_id, source, target)

    def incident_nodes(self, edge_id: EdgeId) -> Tuple[NodeId, NodeId]:
        """Get the (source, target) pair of an edge.

        Raises:
            EdgeNotFoundError: If the edge does not exist.
        """
        try:
            return self._edge_index[edge_id]
        except KeyError:
            raise EdgeNotFoundError(edge_id) from None

    def source(self, edge_id: EdgeId) -> NodeId:
        """Get the source node of an edge."""
        return self.incident_nodes(edge_id)[0]

    def target(self, edge_id: EdgeId) -> NodeId:
        """Get the target node of an edge."""
        return self.incident_nodes(edge_id)[1]

    def edges(self, u: Optional[NodeId] = None, v: Optional[NodeId] = None) -> List[EdgeId]:
        """Get edge ids.

        With no arguments returns every edge. With ``u`` returns the edges
        incident on ``u`` in either direction. With ``u`` and ``v`` returns
        the edges from ``u`` to ``v``, which is empty when either node is
        absent.

        Raises:
            NodeNotFoundError: If only ``u`` is given and it does not exist.
            InvalidIdError: If ``v`` is given without ``u``.
        """
        if u is None and v is None:
            return list(self._edge_index)
        if u is None:
            raise InvalidIdError("edges() requires a source node when a target is given")
        if v is None:
            self._require_node(u)
            return self._incident_edge_ids(u)
        if not (self._backend.has_node(u) and self._backend.has_node(v)):
            return []
        return self._backend.edge_keys(u, v)

    def out_edges(self, u: NodeId) -> List[EdgeId]:
        """Get ids of edges whose source is ``u``."""
        self._require_node(u)
        return [key for _, _, key in self._backend.out_edges(u, keys=True)]

    def in_edges(self, u: NodeId) -> List[EdgeId]:
        """Get ids of edges whose target is ``u``."""
        self._require_node(u)
        return [key for _, _, key in self._backend.in_edges(u, keys=True)]

    def size(self) -> int:
        """Get number of edges."""
        return self._backend.edge_count()

    # ------------------------------------------------------------------
    # Derived queries
    # ------------------------------------------------------------------

    def successors(self, u: NodeId) -> List[NodeId]:
        """Get distinct targets of edges leaving ``u``."""
        self._require_node(u)
        return list(self._backend.successors(u))

    def predecessors(self, u: NodeId) -> List[NodeId]:
        """Get distinct sources of edges entering ``u``."""
        self._require_node(u)
        return list(self._backend.predecessors(u))

    def neighbors(self, u: NodeId) -> List[NodeId]:
        """Get successors and predecessors of ``u``, each listed once."""
        merged = dict.fromkeys(self.successors(u))
        merged.update(dict.fromkeys(self._backend.predecessors(u)))
        return list(merged)

    def in_degree(self, u: NodeId) -> int:
        """Get number of edges entering ``u``."""
        self._require_node(u)
        return self._backend.in_degree(u)

    def out_degree(self, u: NodeId) -> int:
        """Get number of edges leaving ``u``."""
        self._require_node(u)
        return self._backend.out_degree(u)

    def sources(self) -> List[NodeId]:
        """Get nodes without incoming edges. A self-loop is an incoming edge."""
        return [n for n in self._backend.nodes() if self._backend.in_degree(n) == 0]

    def sinks(self) -> List[NodeId]:
        """Get nodes without outgoing edges."""
        return [n for n in self._backend.nodes() if self._backend.out_degree(n) == 0]

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def iter_nodes(self) -> Iterator[Tuple[NodeId, Any]]:
        """Yield (node_id, value) pairs over a snapshot of the nodes."""
        for node_id, attrs in list(self._backend.nodes(data=True)):
            yield node_id, value_from_attrs(attrs)

    def iter_edges(self) -> Iterator[Tuple[EdgeId, NodeId, NodeId, Any]]:
        """Yield (edge_id, source, target, value) over a snapshot of the edges."""
        for edge_id, (source, target) in list(self._edge_index.items()):
            attrs = self._backend.get_edge_data(source, target, edge_id)
            yield edge_id, source, target, value_from_attrs(attrs)

    # ------------------------------------------------------------------
    # Subgraphs
    # ------------------------------------------------------------------

    def subgraph(self, node_ids: Iterable[NodeId]) -> "Graph":
        """Build an independent graph from a subset of nodes.

        Requested ids that are not in this graph are skipped. Every edge
        whose endpoints both survive is kept with its id. Values are
        shared, not copied.

        Args:
            node_ids: Node ids to keep.

        Returns:
            Graph: New graph with the same configuration.
        """
        sub = Graph(graph_id=self.graph_id, config=self.config)
        for node_id in node_ids:
            if self._backend.has_node(node_id) and not sub.has_node(node_id):
                sub.add_node(node_id, self.node(node_id))

        for edge_id, source, target, value in self.iter_edges():
            if sub.has_node(source) and sub.has_node(target):
                sub.add_edge(edge_id, source, target, value)

        sub._next_edge_serial = self._next_edge_serial
        sub._graph_value = self._graph_value
        logger.debug(
            "Extracted subgraph of %s: %d nodes, %d edges",
            self.graph_id,
            sub.order(),
            sub.size(),
        )
        return sub

    def copy(self) -> "Graph":
        """Return an independent copy of the whole graph."""
        return self.subgraph(self.nodes())

    def filter_nodes(self, predicate: Callable[[NodeId, Any], Any]) -> "Graph":
        """Return the subgraph of nodes for which predicate(node_id, value) is true."""
        return self.subgraph(
            node_id for node_id, value in self.iter_nodes() if predicate(node_id, value)
        )

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def equals(self, other: Any) -> bool:
        """Compare two graphs structurally.

        Graphs are equal when they have the same node ids with equal
        values, and the same edge ids with the same endpoints and equal
        values. The graph-level value and configuration are ignored.
        """
        if not isinstance(other, Graph):
            return False
        if self.order() != other.order() or self.size() != other.size():
            return False

        for node_id, value in self.iter_nodes():
            if not other.has_node(node_id):
                return False
            if not values_equal(value, other.node(node_id)):
                return False

        for edge_id, source, target, value in self.iter_edges():
            if not other.has_edge(edge_id):
                return False
            if other.incident_nodes(edge_id) != (source, target):
                return False
            if not values_equal(value, other.edge(edge_id)):
                return False

        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.equals(other)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.order()

    def __contains__(self, node_id: object) -> bool:
        return self._backend.has_node(node_id)

    def __repr__(self) -> str:
        return f"<Graph id={self.graph_id!r} order={self.order()} size={self.size()}>"

    def __str__(self) -> str:
        limit = self.config.repr_max_items
        lines = [f"Graph {self.graph_id!r}: {self.order()} nodes, {self.size()} edges"]

        lines.append("nodes:")
        for node_id, value in islice(self.iter_nodes(), limit):
            lines.append(f"  {node_id!r}{_format_value(value)}")
        if self.order() > limit:
            lines.append(f"  ... ({self.order() - limit} more)")

        lines.append("edges:")
        for edge_id, source, target, value in islice(self.iter_edges(), limit):
            lines.append(f"  {edge_id!r}: {source!r} -> {target!r}{_format_value(value)}")
        if self.size() > limit:
            lines.append(f"  ... ({self.size() - limit} more)")

        return "\n".join(lines)

    def summary(self) -> Dict[str, Any]:
        """Get graph summary.

        Returns:
            Dict[str, Any]: Summary containing node/edge counts.
        """
        return {
            "graph_id": self.graph_id,
            "order": self.order(),
            "size": self.size(),
            "sources": len(self.sources()),
            "sinks": len(self.sinks()),
        }

    # ------------------------------------------------------------------
    # NetworkX interop
    # ------------------------------------------------------------------

    def to_networkx(self) -> nx.MultiDiGraph:
        """Return a detached NetworkX MultiDiGraph copy.

        Edge keys are edge ids. The ``value`` attribute is present only on
        nodes and edges whose value is set.
        """
        nx_graph = nx.MultiDiGraph(graph_id=self.graph_id)
        nx_graph.graph.update(value_attrs(self._graph_value))
        for node_id, value in self.iter_nodes():
            nx_graph.add_node(node_id, **value_attrs(value))
        for edge_id, source, target, value in self.iter_edges():
            nx_graph.add_edge(source, target, key=edge_id, **value_attrs(value))
        return nx_graph

    @classmethod
    def from_networkx(
        cls,
        nx_graph: nx.Graph,
        config: Optional[GraphConfig] = None,
        keys_as_ids: bool = True,
    ) -> "Graph":
        """Build a Graph from a NetworkX graph.

        The ``value`` node and edge attribute becomes the value. Multigraph
        edge keys become edge ids when ``keys_as_ids`` is set; otherwise, and
        for simple graphs, edge ids are generated. Undirected edges keep
        their stored orientation.

        Args:
            nx_graph: Any NetworkX graph.
            config: Optional configuration for the new graph.
            keys_as_ids: Whether to reuse multigraph edge keys as edge ids.

        Returns:
            Graph: New graph.

        Raises:
            DuplicateEdgeError: If two edges share a key and keys_as_ids is set.
        """
        graph = cls(graph_id=nx_graph.graph.get("graph_id"), config=config)
        graph._graph_value = nx_graph.graph.get(VALUE_ATTR, UNSET)

        for node_id, attrs in nx_graph.nodes(data=True):
            graph.add_node(node_id, value_from_attrs(attrs))

        if nx_graph.is_multigraph() and keys_as_ids:
            for source, target, key, attrs in nx_graph.edges(keys=True, data=True):
                graph.add_edge(key, source, target, value_from_attrs(attrs))
        else:
            for source, target, attrs in nx_graph.edges(data=True):
                graph.add_edge(None, source, target, value_from_attrs(attrs))

        logger.debug(
            "Graph %s loaded from NetworkX: %d nodes, %d edges",
            graph.graph_id,
            graph.order(),
            graph.size(),
        )
        return graph

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_node(self, node_id: NodeId) -> None:
        if not self._backend.has_node(node_id):
            raise NodeNotFoundError(node_id)

    def _incident_edge_ids(self, node_id: NodeId) -> List[EdgeId]:
        """Edge ids leaving or entering a node, self-loops listed once."""
        incident = dict.fromkeys(key for _, _, key in self._backend.out_edges(node_id, keys=True))
        incident.update(dict.fromkeys(key for _, _, key in self._backend.in_edges(node_id, keys=True)))
        return list(incident)

    def _generate_edge_id(self) -> AutoEdgeId:
        # Skips serials taken by AutoEdgeId values passed in explicitly.
        while True:
            candidate = AutoEdgeId(self._next_edge_serial)
            self._next_edge_serial += 1
            if candidate not in self._edge_index:
                return candidate


def _format_value(value: Any) -> str:
    if value is UNSET:
        return ""
    return f" = {value!r}"
