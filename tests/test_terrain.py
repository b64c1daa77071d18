"""
Terrain grid, cost model and random generation tests.
"""

import math

import numpy as np
import pytest

from uav_pathfinder.config import TerrainCostConfig
from uav_pathfinder.terrain import (
    Point,
    TerrainGenerator,
    TerrainGrid,
    TerrainType,
    generate_random_map,
)


def test_grid_dimensions():
    grid = TerrainGrid(7, 3)
    assert grid.width == 7
    assert grid.height == 3
    assert grid.terrain.shape == (3, 7)
    assert np.all(grid.terrain == TerrainType.NORMAL)


@pytest.mark.parametrize('width, height', [(0, 5), (5, 0), (-1, 3)])
def test_grid_rejects_non_positive_dimensions(width, height):
    with pytest.raises(ValueError):
        TerrainGrid(width, height)


def test_movement_cost_formula():
    """Hill with elevation 2.0 and no wind costs 3.0 + 0.5 * 2.0 = 4.0"""
    grid = TerrainGrid(3, 3)
    grid.set_terrain(1, 1, TerrainType.HILL)
    grid.set_elevation(1, 1, 2.0)

    assert grid.movement_cost((1, 1)) == pytest.approx(4.0)
    assert grid.movement_cost((0, 0)) == pytest.approx(1.0)


def test_wind_zone_and_hill_defaults():
    grid = TerrainGrid(3, 3)
    grid.add_wind_zone((0, 1))
    grid.add_hill((2, 1))

    assert grid.get_wind_resistance(0, 1) == 2.0
    assert grid.movement_cost((0, 1)) == pytest.approx(2.0 + 0.3 * 2.0)
    assert grid.get_elevation(2, 1) == 3.0
    assert grid.movement_cost((2, 1)) == pytest.approx(3.0 + 0.5 * 3.0)


def test_start_and_end_markers_cost_like_normal():
    grid = TerrainGrid(2, 1)
    grid.set_terrain(0, 0, TerrainType.START)
    grid.set_terrain(1, 0, TerrainType.END)
    assert grid.movement_cost((0, 0)) == 1.0
    assert grid.movement_cost((1, 0)) == 1.0
    assert grid.is_passable((0, 0))


def test_obstacle_and_out_of_bounds_cost():
    grid = TerrainGrid(3, 3)
    grid.add_obstacle((1, 1))

    assert grid.movement_cost((1, 1)) == 1000.0
    assert grid.movement_cost((-1, 0)) == 1000.0
    assert grid.movement_cost((3, 0)) == 1000.0
    assert grid.is_obstacle((0, 5))
    assert not grid.is_passable((1, 1))
    assert grid.get_terrain(10, 10) == TerrainType.OBSTACLE


def test_obstacle_check_follows_traversability():
    grid = TerrainGrid(len(TerrainType), 1)
    for t in TerrainType:
        grid.set_terrain(int(t), 0, t)

    for t in TerrainType:
        assert grid.is_obstacle((int(t), 0)) == (not t.is_traversable())
    assert [t for t in TerrainType if not t.is_traversable()] == [TerrainType.OBSTACLE]


def test_custom_costs():
    costs = TerrainCostConfig(elevation_factor=1.0)
    costs.base_cost['hill'] = 10.0
    grid = TerrainGrid(2, 2, costs)
    grid.set_terrain(0, 0, TerrainType.HILL)
    grid.set_elevation(0, 0, 2.0)
    assert grid.movement_cost((0, 0)) == pytest.approx(12.0)


def test_movement_cost_breakdown_sums_to_cost():
    grid = TerrainGrid(3, 3)
    grid.add_hill((1, 1))
    grid.set_wind_resistance(1, 1, 1.0)

    parts = grid.movement_cost_breakdown((1, 1))
    assert parts['base'] == 3.0
    assert sum(parts.values()) == pytest.approx(grid.movement_cost((1, 1)))


def test_heuristic_is_euclidean():
    grid = TerrainGrid(10, 10)
    assert grid.heuristic_cost((0, 0), (3, 4)) == pytest.approx(5.0)
    assert grid.heuristic_cost((2, 2), (2, 2)) == 0.0
    assert grid.heuristic_cost((0, 0), (1, 1)) == pytest.approx(math.sqrt(2))


def test_neighbor_order_is_fixed():
    grid = TerrainGrid(3, 3)
    assert grid.neighbors((1, 1)) == [
        (0, 0), (0, 1), (0, 2),
        (1, 0), (1, 2),
        (2, 0), (2, 1), (2, 2),
    ]


def test_neighbors_skip_bounds_and_obstacles():
    grid = TerrainGrid(3, 3)
    assert grid.neighbors((0, 0)) == [(0, 1), (1, 0), (1, 1)]

    grid.add_obstacle((1, 1))
    assert grid.neighbors((0, 0)) == [(0, 1), (1, 0)]
    assert all(isinstance(n, Point) for n in grid.neighbors((0, 0)))


def test_point_key_is_row_major():
    assert Point(3, 2).key(10) == 23
    assert Point(0, 0) < Point(0, 1) < Point(1, 0)


def test_generation_is_reproducible():
    a = generate_random_map(15, 10, seed=3)
    b = generate_random_map(15, 10, seed=3)

    assert np.array_equal(a.terrain, b.terrain)
    assert np.array_equal(a.elevation, b.elevation)
    assert np.array_equal(a.wind_resistance, b.wind_resistance)


def test_generated_layers_stay_in_range():
    grid = generate_random_map(30, 30, 0.2, 0.2, 0.2, seed=11)
    terrain = grid.terrain

    hills = terrain == TerrainType.HILL
    normal = terrain == TerrainType.NORMAL
    wind = terrain == TerrainType.WIND_ZONE
    obstacles = terrain == TerrainType.OBSTACLE

    assert np.all(grid.elevation[hills] < 5.0)
    assert np.all(grid.elevation[normal] < 2.0)
    assert np.all(grid.elevation[obstacles | wind] == 0.0)
    assert np.all(grid.wind_resistance[wind] < 3.0)
    assert np.all(grid.wind_resistance[~wind] == 0.0)
    assert np.all(grid.elevation >= 0.0)


def test_generation_probability_extremes():
    empty = generate_random_map(10, 10, 0.0, 0.0, 0.0, seed=1)
    assert np.all(empty.terrain == TerrainType.NORMAL)

    blocked = generate_random_map(10, 10, 1.0, 0.0, 0.0, seed=1)
    assert np.all(blocked.terrain == TerrainType.OBSTACLE)


def test_generation_rejects_negative_probability():
    with pytest.raises(ValueError):
        TerrainGenerator(seed=0).generate(5, 5, obstacle_prob=-0.1)


def test_generate_random_terrain_in_place():
    grid = TerrainGrid(8, 8)
    grid.add_hill((0, 0))
    grid.generate_random_terrain(0.0, 0.0, 1.0, seed=4)

    assert np.all(grid.terrain == TerrainType.WIND_ZONE)
    assert np.all(grid.elevation == 0.0)


def test_copy_is_independent(open_grid):
    clone = open_grid.copy()
    clone.add_obstacle((2, 2))
    assert open_grid.is_passable((2, 2))
    assert not clone.is_passable((2, 2))


def test_same_region(walled_grid, open_grid):
    assert not walled_grid.same_region((0, 0), (4, 4))
    assert walled_grid.same_region((0, 0), (1, 4))
    assert open_grid.same_region((0, 0), (4, 4))
    assert not walled_grid.same_region((2, 0), (0, 0))


def test_get_stats(sample_grid, walled_grid):
    stats = sample_grid.get_stats()
    dist = stats['terrain_distribution']

    assert stats['total_cells'] == 121
    assert dist['obstacle']['count'] == 10
    assert dist['hill']['count'] == 2
    assert dist['wind_zone']['count'] == 3
    assert stats['elevation']['max'] == 3.0
    assert stats['passable_regions'] == 1

    assert walled_grid.get_stats()['passable_regions'] == 2
