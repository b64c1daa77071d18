"""
Terrain Types Module
====================

Defines the terrain classification enumeration, grid coordinates,
and static per-class lookups.
"""

from enum import IntEnum
from typing import Dict, NamedTuple


class Point(NamedTuple):
    """
    Integer grid coordinate.

    Tuple semantics give equality, hashing and the x-then-y total order
    needed for use as a dict/set key.
    """
    x: int
    y: int

    def key(self, width: int) -> int:
        """
        Row-major integer key for a grid of the given width.

        Searches key their dicts and sets on the Point itself (tuple hash);
        this is for callers that want flat array indices.
        """
        return self.y * width + self.x


class TerrainType(IntEnum):
    """
    Terrain classification.

    Values are integers for efficient numpy array storage.
    START and END are cosmetic markers and cost the same as NORMAL.
    """
    NORMAL = 0
    HILL = 1
    OBSTACLE = 2
    WIND_ZONE = 3
    START = 4
    END = 5

    @property
    def name_lower(self) -> str:
        """Get lowercase name"""
        return self.name.lower()

    @property
    def symbol(self) -> str:
        """Map-file character for this terrain type"""
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, char: str) -> 'TerrainType':
        """Parse a map-file character; unknown characters are NORMAL"""
        return _FROM_SYMBOL.get(char, cls.NORMAL)

    def is_traversable(self) -> bool:
        """Check if terrain is traversable"""
        return self != TerrainType.OBSTACLE


_SYMBOLS = {
    TerrainType.NORMAL: '.',
    TerrainType.HILL: '^',
    TerrainType.OBSTACLE: 'O',
    TerrainType.WIND_ZONE: 'W',
    TerrainType.START: 'S',
    TerrainType.END: 'D',
}

_FROM_SYMBOL = {
    '.': TerrainType.NORMAL,
    '^': TerrainType.HILL,
    'O': TerrainType.OBSTACLE, 'o': TerrainType.OBSTACLE,
    'W': TerrainType.WIND_ZONE, 'w': TerrainType.WIND_ZONE,
    'S': TerrainType.START, 's': TerrainType.START,
    'D': TerrainType.END, 'd': TerrainType.END,
}


class TerrainProperties:
    """
    Static terrain properties lookup.

    Maps each class to the key of its base cost in TerrainCostConfig.
    """

    COST_KEY = {
        TerrainType.NORMAL: 'normal',
        TerrainType.HILL: 'hill',
        TerrainType.OBSTACLE: 'obstacle',
        TerrainType.WIND_ZONE: 'wind_zone',
        TerrainType.START: 'normal',
        TerrainType.END: 'normal',
    }

    @classmethod
    def get_cost_key(cls, terrain_type: TerrainType) -> str:
        return cls.COST_KEY.get(terrain_type, 'normal')

    @classmethod
    def get_base_cost(cls, terrain_type: TerrainType, base_costs: Dict[str, float]) -> float:
        """Get base movement cost for terrain type"""
        return base_costs[cls.get_cost_key(terrain_type)]
