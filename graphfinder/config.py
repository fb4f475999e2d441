"""Configuration defaults for the graph adapters."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class AdapterConfig:
    """Attribute names and fallbacks used when reading a graph store."""

    # Edge attribute holding the movement cost
    cost_attr: str = "cost"

    # Cost of an edge that carries no cost attribute
    default_cost: float = 0.0

    # Value of a coordinate attribute that is unset on a node
    default_coordinate: float = 0.0

    planar_coordinates: Tuple[str, ...] = ("x", "y")
    spatial_coordinates: Tuple[str, ...] = ("x", "y", "z")

    def coordinates_for(self, dimensions: int) -> Tuple[str, ...]:
        """Return the standard coordinate attribute names for 2 or 3 dimensions."""
        if dimensions == len(self.planar_coordinates):
            return self.planar_coordinates
        if dimensions == len(self.spatial_coordinates):
            return self.spatial_coordinates
        raise ValueError(
            f"No standard coordinates for {dimensions} dimensions; "
            "pass the attribute names explicitly."
        )


# Global configuration instance
ADAPTER_CONFIG = AdapterConfig()
