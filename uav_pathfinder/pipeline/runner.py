"""
Pipeline Runner Module
======================

Runs timed planning requests against a terrain grid and compares
strategies on the same endpoints.
"""

import time
from typing import Dict, Optional, Sequence, Tuple

from ..config import Config
from ..energy import Drone, EnergyModel
from ..exceptions import InvalidEndpoint
from ..metrics import RunResult, RunStatus
from ..planning import PathOptimizer, PathPostProcessor, SearchStrategy
from ..terrain import TerrainGrid


class MissionRunner:
    """
    Planning request runner.

    For each request:
    - validates endpoints (invalid ones produce an INVALID_ENDPOINT result)
    - times the search with time.perf_counter
    - optionally simplifies the path
    - computes statistics and flies a Drone along the result
    - attaches time / energy threshold warnings
    """

    def __init__(self, grid: TerrainGrid, config: Optional[Config] = None):
        """
        Initialize runner.

        Args:
            grid: Terrain grid (not edited while requests run)
            config: Configuration object (uses default if None)
        """
        self.grid = grid
        self.config = config or Config()
        self.optimizer = PathOptimizer(grid, self.config)
        self.post_processor = PathPostProcessor(grid)
        self.energy_model = EnergyModel(grid)

    def run(self,
            start: Tuple[int, int],
            goal: Tuple[int, int],
            strategy: Optional[str] = None,
            simplify: Optional[bool] = None,
            energy_weight: Optional[float] = None) -> RunResult:
        """
        Plan one path.

        Args:
            start: Start cell
            goal: Goal cell
            strategy: Search strategy (default from config)
            simplify: Apply line-of-sight simplification (default from config)
            energy_weight: Weight for the 'energy' strategy

        Returns:
            RunResult; never raises for invalid endpoints
        """
        strategy = strategy or self.config.search.default_strategy
        if simplify is None:
            simplify = self.config.search.simplify
        verbose = self.config.verbose

        result = RunResult(strategy=strategy, start=tuple(start), goal=tuple(goal))

        if verbose:
            print(f"[{strategy}] Planning {tuple(start)} -> {tuple(goal)} "
                  f"on {self.grid.width}x{self.grid.height} grid...")

        t0 = time.perf_counter()
        try:
            path = self.optimizer.find_path(start, goal, strategy, energy_weight)
        except InvalidEndpoint as e:
            result.computation_time_s = time.perf_counter() - t0
            result.status = RunStatus.INVALID_ENDPOINT
            result.error = str(e)
            if verbose:
                print(f"[{strategy}] ERROR - {e}")
            return result
        result.computation_time_s = time.perf_counter() - t0

        stats = self.optimizer.last_stats
        result.nodes_expanded = stats.nodes_expanded if stats else 0
        result.path = [tuple(p) for p in path]

        if not path:
            result.status = RunStatus.UNREACHABLE
        elif stats is not None and not stats.success:
            result.status = RunStatus.PARTIAL
        else:
            result.status = RunStatus.SUCCESS

        if simplify and path:
            result.simplified_path = [tuple(p) for p in self.post_processor.simplify(path)]

        final_path = result.final_path
        result.statistics = self.post_processor.statistics(final_path)

        if final_path:
            drone = Drone(final_path[0], config=self.config.drone)
            completed = drone.fly(final_path, self.energy_model)
            result.energy_remaining = drone.current_energy
            if not completed:
                result.warnings.append(
                    f"Energy exhausted at {drone.position} before reaching the goal")
            elif drone.is_low_energy():
                result.warnings.append(
                    f"Low energy: {drone.energy_percentage:.1f}% remaining")

        self._check_thresholds(result)

        if verbose:
            print(f"[{strategy}] {result.status} "
                  f"({result.computation_time_s:.4f}s, "
                  f"{result.nodes_expanded} nodes expanded, "
                  f"{len(final_path)} waypoints)")
            for warning in result.warnings:
                print(f"[{strategy}] Warning: {warning}")

        return result

    def _check_thresholds(self, result: RunResult):
        """Warn when computation time or energy use exceed configured limits"""
        drone_cfg = self.config.drone

        if result.computation_time_s > drone_cfg.time_warning_s:
            result.warnings.append(
                f"Computation time exceeded {drone_cfg.time_warning_s:g} seconds threshold")

        if result.statistics is not None:
            limit = drone_cfg.max_energy * drone_cfg.energy_warning_pct / 100.0
            if result.statistics.total_cost > limit:
                result.warnings.append(
                    f"Energy consumption exceeded {drone_cfg.energy_warning_pct:g}% threshold")

    def compare(self,
                start: Tuple[int, int],
                goal: Tuple[int, int],
                strategies: Sequence[str] = SearchStrategy.ALL,
                simplify: Optional[bool] = None) -> Dict[str, RunResult]:
        """Run several strategies on the same endpoints"""
        return {s: self.run(start, goal, s, simplify) for s in strategies}

    @staticmethod
    def print_summary(results: Dict[str, RunResult]):
        """Print comparison table"""
        print("\n" + "=" * 72)
        print("STRATEGY COMPARISON")
        print("=" * 72)
        print(f"{'Strategy':<12} {'Status':>16} {'Steps':>7} {'Cost':>10} "
              f"{'Distance':>10} {'Time(ms)':>10}")
        print("-" * 72)

        for name, result in results.items():
            stats = result.statistics
            steps = stats.steps if stats else 0
            cost_str = f"{stats.total_cost:.2f}" if stats and stats.found else "N/A"
            dist_str = f"{stats.total_distance:.2f}" if stats and stats.found else "N/A"
            print(f"{name:<12} {result.status:>16} {steps:>7} {cost_str:>10} "
                  f"{dist_str:>10} {result.computation_time_s * 1000:>10.3f}")

        print("=" * 72)
