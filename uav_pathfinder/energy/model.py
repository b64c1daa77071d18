"""
Energy Model Module
===================

Energy accounting for UAV flight over terrain.
The energy spent entering a cell equals its movement cost, split into
terrain base, elevation and wind components.
"""

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from ..terrain import TerrainGrid


@dataclass
class EnergyBreakdown:
    """Energy breakdown for a cell or path"""
    base: float = 0.0        # Terrain class base cost
    elevation: float = 0.0   # Climb over elevated cells
    wind: float = 0.0        # Wind resistance

    @property
    def total(self) -> float:
        return self.base + self.elevation + self.wind

    def to_dict(self) -> Dict[str, float]:
        return {
            'base': self.base,
            'elevation': self.elevation,
            'wind': self.wind,
            'total': self.total
        }

    def __add__(self, other: 'EnergyBreakdown') -> 'EnergyBreakdown':
        return EnergyBreakdown(
            base=self.base + other.base,
            elevation=self.elevation + other.elevation,
            wind=self.wind + other.wind
        )


class EnergyModel:
    """
    Per-cell energy model backed by the grid's movement cost.

    Path totals agree with PathPostProcessor.cost for the same path.
    """

    def __init__(self, grid: TerrainGrid):
        self.grid = grid

    def step_energy(self, cell: Tuple[int, int]) -> float:
        """Energy required to enter a cell"""
        return self.grid.movement_cost(cell)

    def step_breakdown(self, cell: Tuple[int, int]) -> EnergyBreakdown:
        return EnergyBreakdown(**self.grid.movement_cost_breakdown(cell))

    def path_energy(self, path: Sequence[Tuple[int, int]]) -> Tuple[float, EnergyBreakdown]:
        """
        Calculate total energy for a complete path.

        Args:
            path: List of (x, y) cells, start and goal included

        Returns:
            Tuple of (total_energy, cumulative_breakdown)
        """
        total_breakdown = EnergyBreakdown()
        for cell in path:
            total_breakdown = total_breakdown + self.step_breakdown(cell)
        return total_breakdown.total, total_breakdown
