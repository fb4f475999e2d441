"""Structural checks of the Network and Environment protocols."""

import networkx as nx

from graphfinder import Environment, GraphAdapter, Network, SpatialGraphAdapter


class StubNetwork:
    """Hand-written Network that satisfies the protocol without any graph."""

    def all(self):
        return {"A", "B"}

    def has(self, node):
        return node in {"A", "B"}

    def neighbours_of(self, node):
        return ["B"] if node == "A" else []

    def are_neighbours(self, source, neighbour):
        return (source, neighbour) == ("A", "B")

    def movement_cost_between(self, source, neighbour):
        return 1.0

    def has_negative_edge_costs(self):
        return False


def test_graph_adapter_is_a_network_but_not_an_environment():
    network = GraphAdapter(nx.MultiDiGraph())
    assert isinstance(network, Network)
    assert not isinstance(network, Environment)


def test_spatial_adapter_is_both():
    environment = SpatialGraphAdapter.planar(nx.MultiDiGraph())
    assert isinstance(environment, Environment)
    assert isinstance(environment, Network)


def test_adapters_do_not_inherit_from_each_other():
    assert not issubclass(SpatialGraphAdapter, GraphAdapter)
    assert not issubclass(GraphAdapter, SpatialGraphAdapter)


def test_test_double_satisfies_network():
    assert isinstance(StubNetwork(), Network)
    assert not isinstance(StubNetwork(), Environment)
