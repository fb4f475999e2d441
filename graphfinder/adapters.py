"""NetworkX adapters for the ``Network`` and ``Environment`` contracts.

``GraphAdapter`` exposes topology and cost of a wrapped NetworkX graph.
``SpatialGraphAdapter`` exposes the same plus a position per node, read from
node attributes and memoized per adapter.

Both adapters query the graph on every call (positions excepted) and never
modify it. Their shared adjacency policies:

- An unknown node has no neighbours, and is nobody's neighbour as a source.
- Parallel edges are reported once per edge; nothing is deduplicated.
- The cost between two nodes is the cost of the *first* matching edge in
  store order, not the cheapest. Reduce the graph beforehand if a minimum is
  wanted.

Example:
    >>> import networkx as nx
    >>> from graphfinder import GraphAdapter
    >>> G = nx.MultiDiGraph()
    >>> G.add_edge("A", "B", cost=5)
    0
    >>> network = GraphAdapter(G)
    >>> network.movement_cost_between("A", "B")
    5.0
"""

from __future__ import annotations

import logging as _logging
from typing import List, Optional, Sequence, Set, Tuple

from graphfinder.adjacency import Adjacency, NxGraph, read_number
from graphfinder.config import ADAPTER_CONFIG
from graphfinder.contracts import Label, Position
from graphfinder.logging import get_logger
from graphfinder.position import PositionCache

__all__ = ["GraphAdapter", "SpatialGraphAdapter"]

logger = get_logger(__name__)


def _adjacency_for(
    graph: NxGraph, cost_attr: Optional[str], default_cost: Optional[float]
) -> Adjacency:
    return Adjacency(
        graph,
        cost_attr=ADAPTER_CONFIG.cost_attr if cost_attr is None else cost_attr,
        default_cost=(
            ADAPTER_CONFIG.default_cost if default_cost is None else default_cost
        ),
    )


class GraphAdapter:
    """``Network`` view of a NetworkX graph.

    Args:
        graph: The graph to wrap. It is referenced, not copied.
        cost_attr: Edge attribute holding the cost (default from
            ``ADAPTER_CONFIG``).
        default_cost: Cost of edges lacking ``cost_attr`` (default from
            ``ADAPTER_CONFIG``).
    """

    def __init__(
        self,
        graph: NxGraph,
        *,
        cost_attr: Optional[str] = None,
        default_cost: Optional[float] = None,
    ) -> None:
        self._adjacency = _adjacency_for(graph, cost_attr, default_cost)
        if logger.isEnabledFor(_logging.DEBUG):
            logger.debug(
                "Adapting %s as network: %d nodes, %d edges, cost attribute '%s'",
                type(graph).__name__,
                graph.number_of_nodes(),
                graph.number_of_edges(),
                self._adjacency.cost_attr,
            )

    @classmethod
    def from_graph(cls, graph: NxGraph, **kwargs) -> GraphAdapter:
        """Build an adapter around ``graph``; keyword options as for ``__init__``."""
        return cls(graph, **kwargs)

    @property
    def graph(self) -> NxGraph:
        return self._adjacency.graph

    def all(self) -> Set[Label]:
        return self._adjacency.labels()

    def has(self, node: Label) -> bool:
        return self._adjacency.contains(node)

    def neighbours_of(self, node: Label) -> List[Label]:
        return self._adjacency.neighbours(node)

    def are_neighbours(self, source: Label, neighbour: Label) -> bool:
        return self._adjacency.connects(source, neighbour)

    def movement_cost_between(self, source: Label, neighbour: Label) -> float:
        return self._adjacency.first_cost(source, neighbour)

    def has_negative_edge_costs(self) -> bool:
        return self._adjacency.has_negative_costs()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({type(self.graph).__name__})"


class SpatialGraphAdapter:
    """``Environment`` view of a NetworkX graph with positioned nodes.

    Positions are read from the node attributes named in ``coordinates``, in
    that order; a missing attribute reads as ``default_coordinate``. The
    first lookup of a node stores its position in a ``PositionCache`` and
    later lookups are served from there, so coordinate attributes are assumed
    not to change while the adapter is in use.

    Use ``planar()`` for ``x, y`` and ``spatial()`` for ``x, y, z``.

    Args:
        graph: The graph to wrap. It is referenced, not copied.
        coordinates: Ordered coordinate attribute names. Fixed for the
            adapter's lifetime.
        cost_attr: Edge attribute holding the cost.
        default_cost: Cost of edges lacking ``cost_attr``.
        default_coordinate: Value of an unset coordinate attribute.

    Raises:
        TypeError: If ``coordinates`` is a single string.
        ValueError: If ``coordinates`` is empty.
    """

    def __init__(
        self,
        graph: NxGraph,
        coordinates: Sequence[str] = ADAPTER_CONFIG.planar_coordinates,
        *,
        cost_attr: Optional[str] = None,
        default_cost: Optional[float] = None,
        default_coordinate: Optional[float] = None,
    ) -> None:
        if isinstance(coordinates, str):
            raise TypeError("coordinates must be a sequence of attribute names")
        self._coordinates = tuple(coordinates)
        if not self._coordinates:
            raise ValueError("At least one coordinate attribute is required.")
        self._default_coordinate = (
            ADAPTER_CONFIG.default_coordinate
            if default_coordinate is None
            else default_coordinate
        )
        self._adjacency = _adjacency_for(graph, cost_attr, default_cost)
        self._positions = PositionCache()
        if logger.isEnabledFor(_logging.DEBUG):
            logger.debug(
                "Adapting %s as %dD environment: %d nodes, %d edges, coordinates %s",
                type(graph).__name__,
                len(self._coordinates),
                graph.number_of_nodes(),
                graph.number_of_edges(),
                self._coordinates,
            )

    @classmethod
    def planar(cls, graph: NxGraph, **kwargs) -> SpatialGraphAdapter:
        """Build a 2D adapter reading ``x`` and ``y``."""
        return cls(graph, ADAPTER_CONFIG.coordinates_for(2), **kwargs)

    @classmethod
    def spatial(cls, graph: NxGraph, **kwargs) -> SpatialGraphAdapter:
        """Build a 3D adapter reading ``x``, ``y`` and ``z``."""
        return cls(graph, ADAPTER_CONFIG.coordinates_for(3), **kwargs)

    @property
    def graph(self) -> NxGraph:
        return self._adjacency.graph

    @property
    def coordinates(self) -> Tuple[str, ...]:
        return self._coordinates

    @property
    def positions(self) -> PositionCache:
        return self._positions

    def all(self) -> Set[Label]:
        return self._adjacency.labels()

    def has(self, node: Label) -> bool:
        return self._adjacency.contains(node)

    def neighbours_of(self, node: Label) -> List[Label]:
        return self._adjacency.neighbours(node)

    def are_neighbours(self, source: Label, neighbour: Label) -> bool:
        return self._adjacency.connects(source, neighbour)

    def movement_cost_between(self, source: Label, neighbour: Label) -> float:
        return self._adjacency.first_cost(source, neighbour)

    def has_negative_edge_costs(self) -> bool:
        return self._adjacency.has_negative_costs()

    def position_of(self, node: Label) -> Position:
        """Return the position of ``node``, reading the graph on first use.

        Raises:
            UnknownNode: If ``node`` does not exist. Checked before the cache
                is consulted, so unknown nodes never enter it.
        """
        self._adjacency.require(node)
        cached = self._positions.get(node)
        if cached is not None:
            return cached

        attributes = self._adjacency.node_attributes(node)
        position = tuple(
            read_number(attributes, name, self._default_coordinate)
            for name in self._coordinates
        )
        logger.debug("Cached position of %r: %s", node, position)
        return self._positions.store(node, position)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({type(self.graph).__name__}, "
            f"coordinates={self._coordinates})"
        )
