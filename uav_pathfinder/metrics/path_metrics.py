"""
Path Metrics Module
===================

Path statistics and run outcome records.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass
class PathStep:
    """One waypoint of a path with its cost contribution"""
    step: int
    x: int
    y: int
    terrain: str
    cost: float
    cumulative_cost: float

    def to_dict(self) -> Dict:
        return {
            'step': self.step,
            'x': self.x,
            'y': self.y,
            'terrain': self.terrain,
            'cost': self.cost,
            'cumulative_cost': self.cumulative_cost
        }


@dataclass
class PathStatistics:
    """
    Derived report for a path.

    Tracks:
    - Step count and Euclidean length
    - Cumulative and average per-cell cost
    - Validity (every cell passable)
    - Terrain crossings and per-step breakdown
    """
    steps: int = 0
    total_distance: float = 0.0
    total_cost: float = 0.0
    average_cost: float = 0.0
    valid: bool = True
    found: bool = False

    wind_zones_crossed: int = 0
    hills_crossed: int = 0

    per_step: List[PathStep] = field(default_factory=list)

    def to_dict(self, include_steps: bool = False) -> Dict:
        """Convert to dictionary for serialization"""
        d = {
            'steps': self.steps,
            'total_distance': self.total_distance,
            'total_cost': self.total_cost,
            'average_cost': self.average_cost,
            'valid': self.valid,
            'found': self.found,
            'wind_zones_crossed': self.wind_zones_crossed,
            'hills_crossed': self.hills_crossed,
        }
        if include_steps:
            d['per_step'] = [s.to_dict() for s in self.per_step]
        return d


class RunStatus:
    """Enumeration of run status types"""
    SUCCESS = 'success'
    UNREACHABLE = 'unreachable'
    PARTIAL = 'partial'
    INVALID_ENDPOINT = 'invalid_endpoint'


@dataclass
class RunResult:
    """Complete result of a planning request"""
    strategy: str
    start: Tuple[int, int]
    goal: Tuple[int, int]
    status: str = RunStatus.UNREACHABLE

    # Path data
    path: List[Tuple[int, int]] = field(default_factory=list)
    simplified_path: Optional[List[Tuple[int, int]]] = None

    # Metrics
    statistics: Optional[PathStatistics] = None

    # Timing / search effort
    computation_time_s: float = 0.0
    nodes_expanded: int = 0

    # Vehicle
    energy_remaining: Optional[float] = None

    warnings: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == RunStatus.SUCCESS

    @property
    def final_path(self) -> List[Tuple[int, int]]:
        """Simplified path when available, else the raw path"""
        if self.simplified_path is not None:
            return self.simplified_path
        return self.path

    def to_dict(self) -> Dict:
        return {
            'strategy': self.strategy,
            'start': list(self.start),
            'goal': list(self.goal),
            'status': self.status,
            'path': [list(p) for p in self.path],
            'simplified_path': ([list(p) for p in self.simplified_path]
                                if self.simplified_path is not None else None),
            'statistics': self.statistics.to_dict() if self.statistics else None,
            'computation_time_s': self.computation_time_s,
            'nodes_expanded': self.nodes_expanded,
            'energy_remaining': self.energy_remaining,
            'warnings': list(self.warnings),
            'error': self.error
        }
