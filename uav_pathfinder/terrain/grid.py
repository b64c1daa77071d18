"""
Terrain Grid Module
===================

Fixed-size rectangular grid holding per-cell terrain class, elevation
and wind resistance. Answers the validity, passability, cost, heuristic
and neighbor queries used by the search engine.

A grid is read-only while a search runs over it. Editing operations
(add_obstacle, add_hill, add_wind_zone, generate_random_terrain) must not
be called while any search over the same instance is in flight; there is
no internal locking.
"""

import math
import numpy as np
from scipy.ndimage import label
from typing import Dict, List, Optional, Tuple

from .types import Point, TerrainType, TerrainProperties
from ..config import TerrainCostConfig


# 8-connected neighborhood: NW, W, SW, N, S, NE, E, SE
NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class TerrainGrid:
    """
    Weighted 2D terrain grid.

    Layers are numpy arrays of shape (height, width) indexed as [y, x].
    Dimensions are fixed at construction.
    """

    def __init__(self, width: int, height: int,
                 costs: Optional[TerrainCostConfig] = None):
        """
        Initialize an all-NORMAL grid.

        Args:
            width: Number of columns (x range)
            height: Number of rows (y range)
            costs: Cost constants (defaults reproduce the standard model)
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self._width = int(width)
        self._height = int(height)
        self.costs = costs or TerrainCostConfig()

        self.terrain = np.full((self._height, self._width), TerrainType.NORMAL, dtype=np.int8)
        self.elevation = np.zeros((self._height, self._width), dtype=np.float64)
        self.wind_resistance = np.zeros((self._height, self._width), dtype=np.float64)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def obstacle_cost(self) -> float:
        return self.costs.obstacle_cost

    def __repr__(self) -> str:
        return f"TerrainGrid({self._width}x{self._height})"

    # ==================== Cell Access ====================

    def get_terrain(self, x: int, y: int) -> TerrainType:
        """Get terrain type at cell (OBSTACLE outside the grid)"""
        if not self.is_valid_position((x, y)):
            return TerrainType.OBSTACLE
        return TerrainType(int(self.terrain[y, x]))

    def set_terrain(self, x: int, y: int, terrain_type: TerrainType):
        if self.is_valid_position((x, y)):
            self.terrain[y, x] = terrain_type

    def get_elevation(self, x: int, y: int) -> float:
        if not self.is_valid_position((x, y)):
            return 0.0
        return float(self.elevation[y, x])

    def set_elevation(self, x: int, y: int, elevation: float):
        if self.is_valid_position((x, y)):
            self.elevation[y, x] = elevation

    def get_wind_resistance(self, x: int, y: int) -> float:
        if not self.is_valid_position((x, y)):
            return 0.0
        return float(self.wind_resistance[y, x])

    def set_wind_resistance(self, x: int, y: int, resistance: float):
        if self.is_valid_position((x, y)):
            self.wind_resistance[y, x] = resistance

    # ==================== Cell Queries ====================

    def is_valid_position(self, cell: Tuple[int, int]) -> bool:
        """Check if cell is within grid bounds"""
        x, y = cell
        return 0 <= x < self._width and 0 <= y < self._height

    def is_obstacle(self, cell: Tuple[int, int]) -> bool:
        """Out-of-bounds cells count as obstacles"""
        if not self.is_valid_position(cell):
            return True
        x, y = cell
        return not TerrainType(int(self.terrain[y, x])).is_traversable()

    def is_passable(self, cell: Tuple[int, int]) -> bool:
        return self.is_valid_position(cell) and not self.is_obstacle(cell)

    def movement_cost(self, cell: Tuple[int, int]) -> float:
        """
        Per-cell traversal cost.

        base(terrain) + elevation_factor * elevation + wind_factor * wind.
        Obstacles and out-of-bounds cells cost the obstacle penalty.
        Never raises.
        """
        if not self.is_valid_position(cell):
            return self.obstacle_cost

        x, y = cell
        terrain_type = TerrainType(int(self.terrain[y, x]))
        if terrain_type == TerrainType.OBSTACLE:
            return self.obstacle_cost

        base = TerrainProperties.get_base_cost(terrain_type, self.costs.base_cost)
        return (base
                + float(self.elevation[y, x]) * self.costs.elevation_factor
                + float(self.wind_resistance[y, x]) * self.costs.wind_factor)

    def movement_cost_breakdown(self, cell: Tuple[int, int]) -> Dict[str, float]:
        """Split movement_cost into base / elevation / wind components"""
        if not self.is_passable(cell):
            return {'base': self.obstacle_cost, 'elevation': 0.0, 'wind': 0.0}

        x, y = cell
        terrain_type = TerrainType(int(self.terrain[y, x]))
        return {
            'base': TerrainProperties.get_base_cost(terrain_type, self.costs.base_cost),
            'elevation': float(self.elevation[y, x]) * self.costs.elevation_factor,
            'wind': float(self.wind_resistance[y, x]) * self.costs.wind_factor,
        }

    def heuristic_cost(self, a: Tuple[int, int], b: Tuple[int, int]) -> float:
        """Admissible heuristic (Euclidean distance)"""
        return math.hypot(a[0] - b[0], a[1] - b[1])

    def neighbors(self, cell: Tuple[int, int]) -> List[Point]:
        """Passable 8-connected neighbors in fixed NW..SE order"""
        x, y = cell
        result = []
        for dx, dy in NEIGHBOR_OFFSETS:
            neighbor = Point(x + dx, y + dy)
            if self.is_passable(neighbor):
                result.append(neighbor)
        return result

    # ==================== Editing ====================

    def add_obstacle(self, cell: Tuple[int, int]):
        self.set_terrain(cell[0], cell[1], TerrainType.OBSTACLE)

    def add_hill(self, cell: Tuple[int, int]):
        self.set_terrain(cell[0], cell[1], TerrainType.HILL)
        self.set_elevation(cell[0], cell[1], self.costs.hill_elevation)

    def add_wind_zone(self, cell: Tuple[int, int]):
        self.set_terrain(cell[0], cell[1], TerrainType.WIND_ZONE)
        self.set_wind_resistance(cell[0], cell[1], self.costs.wind_resistance)

    def generate_random_terrain(self, obstacle_prob: float = 0.2,
                                hill_prob: float = 0.1,
                                wind_prob: float = 0.1,
                                seed: Optional[int] = None,
                                rng: Optional[np.random.Generator] = None):
        """
        Re-roll every cell in place.

        See TerrainGenerator.apply for the rolling rules.
        """
        from .generator import TerrainGenerator

        TerrainGenerator(seed=seed, rng=rng).apply(self, obstacle_prob, hill_prob, wind_prob)

    def copy(self) -> 'TerrainGrid':
        clone = TerrainGrid(self._width, self._height, self.costs)
        clone.terrain = self.terrain.copy()
        clone.elevation = self.elevation.copy()
        clone.wind_resistance = self.wind_resistance.copy()
        return clone

    # ==================== Statistics ====================

    def passable_mask(self) -> np.ndarray:
        return self.terrain != TerrainType.OBSTACLE

    def region_labels(self) -> Tuple[np.ndarray, int]:
        """Label 8-connected regions of passable cells"""
        labels, count = label(self.passable_mask(), structure=np.ones((3, 3), dtype=int))
        return labels, int(count)

    def same_region(self, a: Tuple[int, int], b: Tuple[int, int]) -> bool:
        """Check if two passable cells are connected through passable cells"""
        if not self.is_passable(a) or not self.is_passable(b):
            return False
        labels, _ = self.region_labels()
        return labels[a[1], a[0]] == labels[b[1], b[0]]

    def get_stats(self) -> Dict:
        """Summarize terrain distribution and layers"""
        total_cells = self._width * self._height

        terrain_counts = {}
        for t in TerrainType:
            count = int(np.sum(self.terrain == t))
            terrain_counts[t.name_lower] = {
                'count': count,
                'percentage': count / total_cells * 100
            }

        _, regions = self.region_labels()

        return {
            'width': self._width,
            'height': self._height,
            'total_cells': total_cells,
            'terrain_distribution': terrain_counts,
            'elevation': {
                'min': float(self.elevation.min()),
                'max': float(self.elevation.max()),
                'mean': float(self.elevation.mean())
            },
            'wind_resistance': {
                'min': float(self.wind_resistance.min()),
                'max': float(self.wind_resistance.max()),
                'mean': float(self.wind_resistance.mean())
            },
            'passable_regions': regions
        }
