"""Read-only adjacency access over a NetworkX graph store.

``Adjacency`` is the single place where the adapters touch the wrapped graph.
It resolves text labels to store nodes, walks outgoing edges in the store's
native order, reads edge costs and node attributes, and translates store
lookup failures into ``UnknownNode``.

Store order is NetworkX adjacency order: targets in the order they were first
connected from the source and, for multigraphs, parallel edges in key
insertion order. Undirected stores expose every edge from both endpoints.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterator, List, Mapping, Set, Tuple, Union

import networkx as nx

from graphfinder.contracts import Label
from graphfinder.errors import NoSuchEdge, UnknownNode
from graphfinder.logging import get_logger

NodeID = Hashable
AttrDict = Dict[str, Any]
NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]

logger = get_logger(__name__)


def read_number(attrs: Mapping[str, Any], name: str, default: float) -> float:
    """Return attribute ``name`` as a float; unset or ``None`` reads as ``default``."""
    value = attrs.get(name)
    if value is None:
        value = default
    return float(value)


def _numeric_keys(label: Any) -> Iterator[NodeID]:
    """Yield the int and float nodes a text label could stand for."""
    if not isinstance(label, str):
        return
    for cast in (int, float):
        try:
            yield cast(label)
        except ValueError:
            continue


class Adjacency:
    """Label-based, read-only queries against a NetworkX graph.

    Args:
        graph: Any NetworkX graph. Directed graphs expose successors,
            undirected graphs expose all incident edges.
        cost_attr: Edge attribute holding the movement cost.
        default_cost: Cost of an edge without ``cost_attr``.

    Raises:
        TypeError: If ``graph`` is not a NetworkX graph.
    """

    def __init__(
        self,
        graph: NxGraph,
        *,
        cost_attr: str,
        default_cost: float,
    ) -> None:
        if not isinstance(graph, nx.Graph):
            raise TypeError(
                f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
                f"got {type(graph).__name__}"
            )
        self._graph = graph
        self._multigraph = graph.is_multigraph()
        self.cost_attr = cost_attr
        self.default_cost = default_cost

    @property
    def graph(self) -> NxGraph:
        return self._graph

    def labels(self) -> Set[Label]:
        """Return the label of every node in the store."""
        return {str(node) for node in self._graph.nodes}

    def contains(self, label: Label) -> bool:
        try:
            self._lookup(label)
        except UnknownNode:
            return False
        return True

    def require(self, label: Label) -> NodeID:
        """Return the store node for ``label``.

        Raises:
            UnknownNode: If no node has that label.
        """
        node, _ = self._lookup(label)
        return node

    def out_edges(self, label: Label) -> Iterator[Tuple[Label, AttrDict]]:
        """Return ``(target_label, edge_attributes)`` for each outgoing edge.

        The source is resolved eagerly, so an unknown label raises here
        rather than on first iteration.

        Raises:
            UnknownNode: If no node has label ``label``.
        """
        _, targets = self._lookup(label)
        return self._iter_edges(targets)

    def neighbours(self, label: Label) -> List[Label]:
        """Return the target of every outgoing edge; ``[]`` for an unknown node."""
        try:
            edges = self.out_edges(label)
        except UnknownNode:
            return []
        return [target for target, _ in edges]

    def connects(self, source: Label, target: Label) -> bool:
        """Return True if an edge leads from ``source`` to ``target``.

        An unknown source connects to nothing. An unknown target simply
        matches no edge.
        """
        try:
            edges = self.out_edges(source)
        except UnknownNode:
            return False
        return any(neighbour == target for neighbour, _ in edges)

    def first_cost(self, source: Label, target: Label) -> float:
        """Return the cost of the first edge from ``source`` to ``target``.

        Raises:
            UnknownNode: If ``source`` does not exist.
            NoSuchEdge: If no outgoing edge of ``source`` ends at ``target``.
        """
        for neighbour, attr in self.out_edges(source):
            if neighbour == target:
                return self.cost_of(attr)
        raise NoSuchEdge(source, target)

    def cost_of(self, attr: Mapping[str, Any]) -> float:
        return read_number(attr, self.cost_attr, self.default_cost)

    def has_negative_costs(self) -> bool:
        """Scan every edge of the store for a cost below zero."""
        for _, _, attr in self._graph.edges(data=True):
            if self.cost_of(attr) < 0:
                return True
        return False

    def node_attributes(self, label: Label) -> Mapping[str, Any]:
        """Return the attribute mapping of the node with label ``label``.

        Raises:
            UnknownNode: If no node has that label.
        """
        node, _ = self._lookup(label)
        return self._graph.nodes[node]

    def _lookup(self, label: Label) -> Tuple[NodeID, Mapping[NodeID, Any]]:
        """Resolve ``label`` to its store node and outgoing adjacency.

        An exact key match wins. Otherwise a numeric node whose ``str()``
        equals the label is used, so integer nodes are reachable by their
        text label. Both checks are dictionary lookups; nodes are never
        scanned.
        """
        adjacency = self._graph.adj
        try:
            return label, adjacency[label]
        except (KeyError, TypeError) as exc:
            for node in _numeric_keys(label):
                if node in adjacency and str(node) == label:
                    return node, adjacency[node]
            logger.debug("Node %r not found in %s", label, type(self._graph).__name__)
            raise UnknownNode(label) from exc

    def _iter_edges(
        self, targets: Mapping[NodeID, Any]
    ) -> Iterator[Tuple[Label, AttrDict]]:
        for target, data in targets.items():
            if self._multigraph:
                for attr in data.values():
                    yield str(target), attr
            else:
                yield str(target), data
