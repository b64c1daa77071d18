"""
Terrain Generator Module
========================

Procedural generation of random terrain grids.
Only rolls terrain classes and their elevation / wind layers.
"""

import numpy as np
from typing import Optional

from .types import TerrainType
from .grid import TerrainGrid
from ..config import GenerationConfig, TerrainCostConfig


class TerrainGenerator:
    """
    Random terrain generator.

    Every cell is rolled independently into exactly one class by
    cumulative thresholds:
    - roll < obstacle_prob: OBSTACLE
    - roll < obstacle_prob + hill_prob: HILL, elevation in [0, hill_elevation_max)
    - roll < obstacle_prob + hill_prob + wind_prob: WIND_ZONE,
      wind resistance in [0, wind_resistance_max)
    - otherwise: NORMAL, elevation in [0, normal_elevation_max)

    Pass a seed (or a numpy Generator) for reproducible maps.
    """

    def __init__(self, config: Optional[GenerationConfig] = None,
                 seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        self.config = config or GenerationConfig()
        self.seed = seed
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def generate(self, width: int, height: int,
                 obstacle_prob: Optional[float] = None,
                 hill_prob: Optional[float] = None,
                 wind_prob: Optional[float] = None,
                 costs: Optional[TerrainCostConfig] = None) -> TerrainGrid:
        """Create a new randomly populated grid"""
        grid = TerrainGrid(width, height, costs)
        self.apply(
            grid,
            self.config.obstacle_prob if obstacle_prob is None else obstacle_prob,
            self.config.hill_prob if hill_prob is None else hill_prob,
            self.config.wind_prob if wind_prob is None else wind_prob,
        )
        return grid

    def apply(self, grid: TerrainGrid, obstacle_prob: float,
              hill_prob: float, wind_prob: float) -> TerrainGrid:
        """Re-roll every cell of an existing grid in place"""
        for name, p in (('obstacle_prob', obstacle_prob),
                        ('hill_prob', hill_prob),
                        ('wind_prob', wind_prob)):
            if p < 0:
                raise ValueError(f"{name} must be non-negative, got {p}")

        shape = (grid.height, grid.width)
        roll = self.rng.random(shape)
        magnitude = self.rng.random(shape)

        obstacle_mask = roll < obstacle_prob
        hill_mask = ~obstacle_mask & (roll < obstacle_prob + hill_prob)
        wind_mask = ~obstacle_mask & ~hill_mask & (roll < obstacle_prob + hill_prob + wind_prob)
        normal_mask = ~(obstacle_mask | hill_mask | wind_mask)

        terrain = np.full(shape, TerrainType.NORMAL, dtype=np.int8)
        terrain[obstacle_mask] = TerrainType.OBSTACLE
        terrain[hill_mask] = TerrainType.HILL
        terrain[wind_mask] = TerrainType.WIND_ZONE

        elevation = np.zeros(shape, dtype=np.float64)
        elevation[hill_mask] = magnitude[hill_mask] * self.config.hill_elevation_max
        elevation[normal_mask] = magnitude[normal_mask] * self.config.normal_elevation_max

        wind = np.zeros(shape, dtype=np.float64)
        wind[wind_mask] = magnitude[wind_mask] * self.config.wind_resistance_max

        grid.terrain = terrain
        grid.elevation = elevation
        grid.wind_resistance = wind
        return grid
