"""Errors raised through the ``Network`` and ``Environment`` contracts.

Store-specific failures (NetworkX ``KeyError`` lookups) are translated into
these types at the adjacency boundary and never reach callers directly.
"""

from __future__ import annotations

from typing import Hashable


class AdapterError(ValueError):
    """Base class for failures of a single adapter query."""


class UnknownNode(AdapterError):
    """The queried label is not present in the graph store.

    Attributes:
        node: The label that could not be resolved.
    """

    def __init__(self, node: Hashable) -> None:
        super().__init__(f"Node '{node}' not found.")
        self.node = node


class NoSuchEdge(AdapterError):
    """The source node exists but has no outgoing edge to the target.

    Attributes:
        source: Label of the source node.
        target: Label of the requested target node.
    """

    def __init__(self, source: Hashable, target: Hashable) -> None:
        super().__init__(f"Nodes '{source}' and '{target}' are not neighbours.")
        self.source = source
        self.target = target
