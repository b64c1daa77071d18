"""
Path Post-Processing Module
===========================

Line-of-sight path simplification and path cost / validity / statistics.
"""

import math
from typing import Iterator, List, Sequence, Tuple

from ..metrics import PathStatistics, PathStep
from ..terrain import Point, TerrainGrid, TerrainType


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (b > 0)"""
    q = abs(a) // b
    return q if a >= 0 else -q


def interpolate_line(a: Tuple[int, int], b: Tuple[int, int]) -> Iterator[Point]:
    """
    Integer cells strictly between a and b on the straight segment.

    Uses max(|dx|, |dy|) steps, truncating each coordinate toward zero.
    """
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    steps = max(abs(dx), abs(dy))
    for step in range(1, steps):
        yield Point(a[0] + _trunc_div(dx * step, steps),
                    a[1] + _trunc_div(dy * step, steps))


class PathPostProcessor:
    """
    Post-processing of raw search paths.

    Paths are never modified in place; simplify returns a new list.
    """

    def __init__(self, grid: TerrainGrid):
        self.grid = grid

    def has_line_of_sight(self, a: Tuple[int, int], b: Tuple[int, int]) -> bool:
        """True if no interpolated cell between a and b is an obstacle"""
        for cell in interpolate_line(a, b):
            if self.grid.is_obstacle(cell):
                return False
        return True

    def simplify(self, path: Sequence[Tuple[int, int]]) -> List[Tuple[int, int]]:
        """
        Drop interior waypoints whose neighbors see each other.

        Single forward pass: each interior waypoint is tested against its
        predecessor and successor in the input path, not against the
        already simplified result. Endpoints are always kept.

        Consecutive dropped waypoints join into one segment that is never
        tested as a whole, so that segment may cross an obstacle. Only
        has_line_of_sight on the result tells whether it is flyable.
        """
        if len(path) <= 2:
            return list(path)

        simplified = [path[0]]
        for i in range(1, len(path) - 1):
            if not self.has_line_of_sight(path[i - 1], path[i + 1]):
                simplified.append(path[i])
        simplified.append(path[-1])
        return simplified

    def cost(self, path: Sequence[Tuple[int, int]]) -> float:
        """Sum of per-cell movement costs, start and goal included"""
        return float(sum(self.grid.movement_cost(cell) for cell in path))

    def is_valid(self, path: Sequence[Tuple[int, int]]) -> bool:
        """True if every cell of the path is passable"""
        return all(self.grid.is_passable(cell) for cell in path)

    def statistics(self, path: Sequence[Tuple[int, int]]) -> PathStatistics:
        """Compute derived statistics for a path"""
        stats = PathStatistics(valid=self.is_valid(path), found=len(path) > 0)
        if not path:
            return stats

        cumulative = 0.0
        for i, cell in enumerate(path):
            terrain_type = self.grid.get_terrain(cell[0], cell[1])
            cell_cost = self.grid.movement_cost(cell)
            cumulative += cell_cost

            if terrain_type == TerrainType.WIND_ZONE:
                stats.wind_zones_crossed += 1
            elif terrain_type == TerrainType.HILL:
                stats.hills_crossed += 1

            if i > 0:
                prev = path[i - 1]
                stats.total_distance += math.hypot(cell[0] - prev[0], cell[1] - prev[1])

            stats.per_step.append(PathStep(
                step=i,
                x=int(cell[0]),
                y=int(cell[1]),
                terrain=terrain_type.name_lower,
                cost=cell_cost,
                cumulative_cost=cumulative
            ))

        stats.steps = len(path)
        stats.total_cost = cumulative
        stats.average_cost = cumulative / len(path)
        return stats
