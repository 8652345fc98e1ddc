"""
Geometric domain mapping.

map_geometric_locations
    Affine map of an ascending location sequence onto [-1, 1].
"""

from torchbeam.geometry._map_geometric_locations import (
    map_geometric_locations,
)

__all__ = [
    "map_geometric_locations",
]
