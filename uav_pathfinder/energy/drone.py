"""
Drone State Module
==================

Position, energy reserve and visited waypoints of the simulated UAV.
Consumed by the runner; the search engine never touches it.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from .model import EnergyModel
from ..config import DroneConfig


class Drone:
    """Simple energy-tracking vehicle"""

    def __init__(self, start: Tuple[int, int], max_energy: Optional[float] = None,
                 config: Optional[DroneConfig] = None):
        self.config = config or DroneConfig()
        self.max_energy = float(max_energy if max_energy is not None else self.config.max_energy)
        if self.max_energy <= 0:
            raise ValueError(f"max_energy must be positive, got {self.max_energy}")

        self.position = tuple(start)
        self.current_energy = self.max_energy
        self.flight_path: List[Tuple[int, int]] = [self.position]

    def set_position(self, cell: Tuple[int, int]):
        self.position = tuple(cell)

    def consume_energy(self, amount: float):
        self.current_energy = max(0.0, self.current_energy - amount)

    def reset_energy(self):
        self.current_energy = self.max_energy

    def has_energy(self, required: float) -> bool:
        return self.current_energy >= required

    def add_to_path(self, cell: Tuple[int, int]):
        self.flight_path.append(tuple(cell))

    def clear_path(self):
        self.flight_path = []

    @property
    def energy_percentage(self) -> float:
        return self.current_energy / self.max_energy * 100.0

    def is_low_energy(self) -> bool:
        return self.energy_percentage < self.config.low_energy_pct

    def fly(self, path: Sequence[Tuple[int, int]], energy_model: EnergyModel) -> bool:
        """
        Follow a path, paying the energy of every waypoint after the first.

        Stops before the first waypoint the remaining energy cannot cover.

        Returns:
            True if the whole path was flown
        """
        for cell in path[1:]:
            required = energy_model.step_energy(cell)
            if not self.has_energy(required):
                return False
            self.consume_energy(required)
            self.set_position(cell)
            self.add_to_path(cell)
        return True

    def status(self) -> Dict:
        return {
            'position': list(self.position),
            'current_energy': self.current_energy,
            'max_energy': self.max_energy,
            'energy_percentage': self.energy_percentage,
            'waypoints': len(self.flight_path),
            'low_energy': self.is_low_energy()
        }
