"""Capability contracts consumed by shortest-path engines.

``Network`` is what a weight-based search (Dijkstra, Bellman-Ford,
Floyd-Warshall) needs. ``Environment`` adds node positions for heuristic
search such as A*. Both are structural protocols: the NetworkX adapters in
``graphfinder.adapters`` satisfy them, and so can any test double.
"""

from __future__ import annotations

from typing import List, Protocol, Set, Tuple, runtime_checkable

Label = str
Position = Tuple[float, ...]

__all__ = ["Label", "Position", "Network", "Environment"]


@runtime_checkable
class Network(Protocol):
    """Topology and movement cost of a directed, weighted graph."""

    def all(self) -> Set[Label]:
        """Return the labels of every node."""
        ...

    def has(self, node: Label) -> bool:
        """Return True if ``node`` exists. Never raises."""
        ...

    def neighbours_of(self, node: Label) -> List[Label]:
        """Return targets of the outgoing edges of ``node``, in store order.

        A target reached by several parallel edges appears once per edge. An
        unknown node has no neighbours.
        """
        ...

    def are_neighbours(self, source: Label, neighbour: Label) -> bool:
        """Return True if an edge leads from ``source`` to ``neighbour``."""
        ...

    def movement_cost_between(self, source: Label, neighbour: Label) -> float:
        """Return the cost of the first edge from ``source`` to ``neighbour``.

        Raises:
            UnknownNode: If ``source`` does not exist.
            NoSuchEdge: If ``source`` has no edge to ``neighbour``.
        """
        ...

    def has_negative_edge_costs(self) -> bool:
        """Return True if any edge in the graph costs less than zero."""
        ...


@runtime_checkable
class Environment(Network, Protocol):
    """A ``Network`` whose nodes also have a position in space."""

    def position_of(self, node: Label) -> Position:
        """Return the coordinates of ``node``.

        Raises:
            UnknownNode: If ``node`` does not exist.
        """
        ...
