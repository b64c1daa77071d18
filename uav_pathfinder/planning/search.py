"""
Search Engine Module
====================

Grid pathfinding over a TerrainGrid: A*, Dijkstra, energy-weighted A*
and a greedy local walk.
"""

import heapq
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..config import Config
from ..exceptions import InvalidEndpoint
from ..terrain import Point, TerrainGrid


class SearchStrategy:
    """Enumeration of search strategies"""
    ASTAR = 'astar'
    DIJKSTRA = 'dijkstra'
    GREEDY = 'greedy'
    ENERGY = 'energy'

    ALL = (ASTAR, DIJKSTRA, GREEDY, ENERGY)


@dataclass
class PlannerStats:
    """Statistics from a planning run"""
    strategy: str = ''
    iterations: int = 0
    nodes_expanded: int = 0
    path_length: int = 0
    success: bool = False
    reason: str = ''


class PathOptimizer:
    """
    Least-cost path search over a terrain grid.

    Strategies:
    - 'astar': priority g + h, ties prefer the smaller h
    - 'dijkstra': priority g only, always optimal
    - 'energy': A* with every step cost scaled by an energy weight
    - 'greedy': non-backtracking walk to the neighbor closest to the goal

    Each step from cell u to neighbor v costs
    movement_cost(v) * |u - v| (1 for orthogonal, sqrt(2) for diagonal).
    Cells whose movement cost reaches the obstacle penalty are never entered.

    Every call owns its own frontier and cost maps, so concurrent searches
    over the same unmodified grid do not interfere.
    """

    def __init__(self, grid: TerrainGrid, config: Optional[Config] = None):
        """
        Initialize optimizer.

        Args:
            grid: Terrain grid to search (must not be edited during a search)
            config: Configuration object (default strategy, energy weight)
        """
        self.grid = grid
        self.config = config or Config()

        # Last planning stats
        self.last_stats: Optional[PlannerStats] = None

    def find_path(self,
                  start: Tuple[int, int],
                  goal: Tuple[int, int],
                  strategy: Optional[str] = None,
                  energy_weight: Optional[float] = None) -> List[Point]:
        """
        Find a path from start to goal.

        Args:
            start: Start cell (x, y)
            goal: Goal cell (x, y)
            strategy: One of SearchStrategy.ALL (default from config)
            energy_weight: Step cost multiplier for the 'energy' strategy

        Returns:
            Path as list of cells from start to goal inclusive, or an empty
            list if the goal is unreachable. The greedy strategy may return
            a partial path that does not end at the goal.

        Raises:
            InvalidEndpoint: start or goal out of bounds or an obstacle
            ValueError: unknown strategy
        """
        strategy = strategy or self.config.search.default_strategy

        if strategy == SearchStrategy.ASTAR:
            return self.find_path_astar(start, goal)
        elif strategy == SearchStrategy.DIJKSTRA:
            return self.find_path_dijkstra(start, goal)
        elif strategy == SearchStrategy.GREEDY:
            return self.find_path_greedy(start, goal)
        elif strategy == SearchStrategy.ENERGY:
            return self.find_energy_optimal_path(start, goal, energy_weight)
        else:
            raise ValueError(f"Unknown strategy: {strategy}")

    def find_path_astar(self, start: Tuple[int, int], goal: Tuple[int, int]) -> List[Point]:
        start, goal = self._check_endpoints(start, goal)
        return self._best_first_search(start, goal, SearchStrategy.ASTAR,
                                       cost_weight=1.0, heuristic_weight=1.0)

    def find_path_dijkstra(self, start: Tuple[int, int], goal: Tuple[int, int]) -> List[Point]:
        start, goal = self._check_endpoints(start, goal)
        return self._best_first_search(start, goal, SearchStrategy.DIJKSTRA,
                                       cost_weight=1.0, heuristic_weight=0.0)

    def find_energy_optimal_path(self,
                                 start: Tuple[int, int],
                                 goal: Tuple[int, int],
                                 energy_weight: Optional[float] = None) -> List[Point]:
        """
        A* with step costs multiplied by energy_weight.

        The heuristic is scaled by min(energy_weight, 1) so it never
        overestimates the weighted remaining cost.
        """
        if energy_weight is None:
            energy_weight = self.config.search.energy_weight
        if energy_weight <= 0:
            raise ValueError(f"energy_weight must be positive, got {energy_weight}")

        start, goal = self._check_endpoints(start, goal)
        return self._best_first_search(start, goal, SearchStrategy.ENERGY,
                                       cost_weight=energy_weight,
                                       heuristic_weight=min(energy_weight, 1.0))

    def find_path_greedy(self, start: Tuple[int, int], goal: Tuple[int, int]) -> List[Point]:
        """
        Walk to whichever passable neighbor is closest to the goal.

        No frontier and no backtracking: the walk can oscillate in front of
        a concave obstacle. It stops once the path holds more than
        width * height cells, or when the current cell has no passable
        neighbor, and returns the partial path.
        """
        start, goal = self._check_endpoints(start, goal)
        stats = PlannerStats(strategy=SearchStrategy.GREEDY)
        max_cells = self.grid.width * self.grid.height

        path = [start]
        current = start

        while current != goal:
            stats.iterations += 1

            neighbors = self.grid.neighbors(current)
            if not neighbors:
                stats.reason = 'dead_end'
                break

            # min keeps the first of equally close neighbors
            current = min(neighbors, key=lambda n: self.grid.heuristic_cost(n, goal))
            path.append(current)

            if len(path) > max_cells:
                stats.reason = 'max_steps'
                break

        stats.nodes_expanded = stats.iterations
        stats.path_length = len(path)
        stats.success = current == goal
        if stats.success:
            stats.reason = 'success'
        self.last_stats = stats
        return path

    # ==================== Internals ====================

    def _check_endpoints(self, start: Tuple[int, int],
                         goal: Tuple[int, int]) -> Tuple[Point, Point]:
        """Reject endpoints that are out of bounds or obstacles"""
        start = Point(int(start[0]), int(start[1]))
        goal = Point(int(goal[0]), int(goal[1]))

        for role, cell in (('start', start), ('goal', goal)):
            if not self.grid.is_valid_position(cell):
                raise InvalidEndpoint(cell, role, 'out of bounds')
            if self.grid.is_obstacle(cell):
                raise InvalidEndpoint(cell, role, 'an obstacle')

        return start, goal

    def _best_first_search(self,
                           start: Point,
                           goal: Point,
                           strategy: str,
                           cost_weight: float,
                           heuristic_weight: float) -> List[Point]:
        """
        Shared priority-queue search.

        Priority is g + heuristic_weight * h. Heap entries are
        (f, h, counter, cell): equal f prefers smaller h, then insertion
        order. Cells may be pushed several times; stale entries for
        closed cells are skipped when popped.
        """
        stats = PlannerStats(strategy=strategy)
        obstacle_cost = self.grid.obstacle_cost

        h0 = heuristic_weight * self.grid.heuristic_cost(start, goal)
        counter = 0
        open_set = [(h0, h0, counter, start)]
        g_score: Dict[Point, float] = {start: 0.0}
        came_from: Dict[Point, Point] = {}
        closed = set()

        while open_set:
            _, _, _, current = heapq.heappop(open_set)

            if current in closed:
                continue
            stats.iterations += 1

            # Goal check
            if current == goal:
                path = self._reconstruct_path(came_from, current)
                stats.path_length = len(path)
                stats.success = True
                stats.reason = 'success'
                self.last_stats = stats
                return path

            closed.add(current)
            stats.nodes_expanded += 1
            g_current = g_score[current]

            # Expand neighbors
            for neighbor in self.grid.neighbors(current):
                if neighbor in closed:
                    continue

                movement_cost = self.grid.movement_cost(neighbor)
                if movement_cost >= obstacle_cost:
                    continue

                step_cost = movement_cost * cost_weight * _step_distance(current, neighbor)
                tentative_g = g_current + step_cost

                best = g_score.get(neighbor)
                if best is None or tentative_g < best:
                    g_score[neighbor] = tentative_g
                    came_from[neighbor] = current

                    h = heuristic_weight * self.grid.heuristic_cost(neighbor, goal)
                    counter += 1
                    heapq.heappush(open_set, (tentative_g + h, h, counter, neighbor))

        # No path found
        stats.reason = 'no_path_found'
        self.last_stats = stats
        return []

    def _reconstruct_path(self, came_from: Dict, current: Point) -> List[Point]:
        """Reconstruct path from came_from dict"""
        path = [current]
        while current in came_from:
            current = came_from[current]
            path.append(current)
        path.reverse()
        return path


def _step_distance(a: Tuple[int, int], b: Tuple[int, int]) -> float:
    """1.0 for orthogonal moves, sqrt(2) for diagonal ones"""
    return math.hypot(b[0] - a[0], b[1] - a[1])
