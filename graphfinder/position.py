"""Per-adapter memo of node positions."""

from __future__ import annotations

import threading
from typing import Dict, Iterator, Optional

from graphfinder.contracts import Label, Position


class PositionCache:
    """Append-only mapping from node label to position.

    Entries are never overwritten or evicted. Concurrent first-time writers
    for the same label resolve to the first stored value, and every writer
    gets that value back from ``store()``. Positions are derived from static
    node attributes, so a losing writer computed the same tuple anyway.
    """

    def __init__(self) -> None:
        self._positions: Dict[Label, Position] = {}
        self._lock = threading.Lock()

    def get(self, label: Label) -> Optional[Position]:
        """Return the cached position of ``label``, or None on a miss."""
        return self._positions.get(label)

    def store(self, label: Label, position: Position) -> Position:
        """Record ``position`` unless ``label`` already has one.

        Returns:
            The position held by the cache after the call.
        """
        with self._lock:
            return self._positions.setdefault(label, position)

    def __contains__(self, label: object) -> bool:
        return label in self._positions

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Label]:
        return iter(list(self._positions))
