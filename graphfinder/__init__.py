"""graphfinder: NetworkX graphs as pathfinding networks and environments.

graphfinder wraps an existing NetworkX graph in a read-only facade that a
shortest-path engine can query for topology, movement cost and node
positions, without copying or modifying the graph.

Primary API:
    GraphAdapter - ``Network`` view (topology and cost)
    SpatialGraphAdapter - ``Environment`` view (``Network`` plus positions)
    Network, Environment - the capability protocols
    UnknownNode, NoSuchEdge - query failures

Example:
    import networkx as nx
    from graphfinder import GraphAdapter, SpatialGraphAdapter

    G = nx.MultiDiGraph()
    G.add_node("A", x=0, y=0)
    G.add_node("B", x=4, y=1)
    G.add_edge("A", "B", cost=5)

    network = GraphAdapter(G)
    network.neighbours_of("A")                 # ['B']
    network.movement_cost_between("A", "B")    # 5.0

    environment = SpatialGraphAdapter.planar(G)
    environment.position_of("B")               # (4.0, 1.0)
"""

from __future__ import annotations

from graphfinder import logging
from graphfinder._version import __version__
from graphfinder.adapters import GraphAdapter, SpatialGraphAdapter
from graphfinder.config import ADAPTER_CONFIG, AdapterConfig
from graphfinder.contracts import Environment, Label, Network, Position
from graphfinder.errors import AdapterError, NoSuchEdge, UnknownNode
from graphfinder.position import PositionCache

__all__ = [
    # Version
    "__version__",
    # Contracts
    "Network",
    "Environment",
    "Label",
    "Position",
    # Adapters
    "GraphAdapter",
    "SpatialGraphAdapter",
    "PositionCache",
    # Errors
    "AdapterError",
    "UnknownNode",
    "NoSuchEdge",
    # Configuration
    "AdapterConfig",
    "ADAPTER_CONFIG",
    # Utilities
    "logging",
]
