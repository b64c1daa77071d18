"""
Shared fixtures for the UAV path optimizer tests.
"""

import matplotlib
matplotlib.use('Agg')

import pytest

from uav_pathfinder.terrain import TerrainGrid, create_sample_map


@pytest.fixture
def open_grid():
    """5x5 grid of NORMAL cells"""
    return TerrainGrid(5, 5)


@pytest.fixture
def walled_grid():
    """5x5 grid split by a solid obstacle column at x=2"""
    grid = TerrainGrid(5, 5)
    for y in range(5):
        grid.add_obstacle((2, y))
    return grid


@pytest.fixture
def trap_grid():
    """7x7 grid with a wall at x=3 (y=1..5) between (1, 3) and (5, 3)"""
    grid = TerrainGrid(7, 7)
    for y in range(1, 6):
        grid.add_obstacle((3, y))
    return grid


@pytest.fixture
def sample_grid():
    return create_sample_map()
