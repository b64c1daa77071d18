"""
Path simplification, cost, validity and statistics tests.
"""

import math

import pytest

from uav_pathfinder.planning import PathOptimizer, PathPostProcessor, interpolate_line
from uav_pathfinder.terrain import TerrainGrid, create_complex_map


def test_interpolate_line():
    assert list(interpolate_line((0, 0), (4, 0))) == [(1, 0), (2, 0), (3, 0)]
    assert list(interpolate_line((0, 0), (3, 1))) == [(1, 0), (2, 0)]
    assert list(interpolate_line((0, 0), (1, 1))) == []
    assert list(interpolate_line((2, 2), (2, 2))) == []


def test_interpolate_line_truncates_toward_zero():
    assert list(interpolate_line((0, 0), (-3, -1))) == [(-1, 0), (-2, 0)]
    assert list(interpolate_line((5, 5), (2, 4))) == [(4, 5), (3, 5)]


def test_line_of_sight():
    grid = TerrainGrid(5, 5)
    post = PathPostProcessor(grid)
    assert post.has_line_of_sight((0, 0), (4, 4))

    grid.add_obstacle((2, 2))
    assert not post.has_line_of_sight((0, 0), (4, 4))
    # Endpoints themselves are not tested
    assert post.has_line_of_sight((0, 0), (2, 2))


def test_simplify_short_paths_unchanged(open_grid):
    post = PathPostProcessor(open_grid)
    assert post.simplify([]) == []
    assert post.simplify([(0, 0)]) == [(0, 0)]

    path = [(0, 0), (1, 1)]
    simplified = post.simplify(path)
    assert simplified == path
    assert simplified is not path


def test_simplify_straight_line(open_grid):
    post = PathPostProcessor(open_grid)
    path = [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert post.simplify(path) == [(0, 0), (3, 0)]
    # Input is not modified
    assert path == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_simplify_keeps_waypoint_without_line_of_sight(open_grid):
    open_grid.add_obstacle((2, 1))
    post = PathPostProcessor(open_grid)

    path = [(1, 1), (2, 0), (3, 1)]
    assert post.simplify(path) == path


def test_simplify_is_single_pass(open_grid):
    """Each waypoint is tested against its neighbors in the input path"""
    open_grid.add_obstacle((2, 1))
    post = PathPostProcessor(open_grid)

    path = [(0, 1), (1, 1), (2, 0), (3, 1), (4, 1)]
    # (1, 1): (0, 1) -> (2, 0) clear; (2, 0): blocked by (2, 1); (3, 1): clear
    assert post.simplify(path) == [(0, 1), (2, 0), (4, 1)]


def test_simplify_joined_segment_is_not_rechecked():
    """Dropping consecutive waypoints can leave a segment through an obstacle"""
    grid = TerrainGrid(3, 3)
    grid.add_obstacle((1, 1))
    post = PathPostProcessor(grid)

    path = [(0, 2), (0, 1), (0, 0), (1, 0), (2, 0)]
    simplified = post.simplify(path)

    assert simplified == [(0, 2), (2, 0)]
    assert not post.has_line_of_sight((0, 2), (2, 0))
    assert post.cost(simplified) <= post.cost(path)


def test_simplify_idempotent_on_reduced_path(open_grid):
    open_grid.add_obstacle((2, 1))
    post = PathPostProcessor(open_grid)

    once = post.simplify([(1, 1), (2, 0), (3, 1)])
    assert post.simplify(once) == once


def test_simplify_never_increases_cost():
    grid = create_complex_map()
    optimizer = PathOptimizer(grid)
    post = PathPostProcessor(grid)

    path = optimizer.find_path((1, 0), (19, 12))
    assert path

    simplified = post.simplify(path)
    assert simplified[0] == path[0]
    assert simplified[-1] == path[-1]
    assert len(simplified) <= len(path)
    assert post.cost(simplified) <= post.cost(path)
    assert post.is_valid(simplified)


def test_cost_sums_every_cell(open_grid):
    open_grid.add_hill((1, 1))
    post = PathPostProcessor(open_grid)
    assert post.cost([(0, 0), (1, 1), (2, 2)]) == pytest.approx(1.0 + 4.5 + 1.0)
    assert post.cost([]) == 0.0


def test_is_valid(open_grid):
    open_grid.add_obstacle((1, 1))
    post = PathPostProcessor(open_grid)
    assert post.is_valid([(0, 0), (1, 0), (2, 1)])
    assert not post.is_valid([(0, 0), (1, 1), (2, 2)])
    assert not post.is_valid([(0, 0), (-1, 0)])


def test_statistics(open_grid):
    open_grid.add_hill((1, 1))
    open_grid.add_wind_zone((2, 1))
    post = PathPostProcessor(open_grid)

    stats = post.statistics([(0, 0), (1, 1), (2, 1)])

    assert stats.found
    assert stats.valid
    assert stats.steps == 3
    assert stats.total_distance == pytest.approx(math.sqrt(2) + 1.0)
    assert stats.total_cost == pytest.approx(1.0 + 4.5 + 2.6)
    assert stats.average_cost == pytest.approx((1.0 + 4.5 + 2.6) / 3)
    assert stats.hills_crossed == 1
    assert stats.wind_zones_crossed == 1

    assert [s.terrain for s in stats.per_step] == ['normal', 'hill', 'wind_zone']
    assert stats.per_step[-1].cumulative_cost == pytest.approx(stats.total_cost)
    assert 'per_step' in stats.to_dict(include_steps=True)


def test_statistics_empty_path(open_grid):
    stats = PathPostProcessor(open_grid).statistics([])
    assert not stats.found
    assert stats.steps == 0
    assert stats.total_cost == 0.0
