"""
Map text loading, saving and built-in map tests.
"""

import pytest

from uav_pathfinder.exceptions import MapFormatError
from uav_pathfinder.terrain import (
    SAMPLE_MAP,
    TerrainType,
    create_complex_map,
    create_sample_map,
    find_marker,
    load_map,
    load_map_from_string,
    save_map,
    terrain_to_string,
)


def test_character_mapping():
    grid = load_map_from_string(".S\nOD\n^W\nox\nw.\n")

    assert (grid.width, grid.height) == (2, 5)
    assert grid.get_terrain(0, 0) == TerrainType.NORMAL
    assert grid.get_terrain(1, 0) == TerrainType.START
    assert grid.get_terrain(0, 1) == TerrainType.OBSTACLE
    assert grid.get_terrain(1, 1) == TerrainType.END
    assert grid.get_terrain(0, 2) == TerrainType.HILL
    assert grid.get_terrain(1, 2) == TerrainType.WIND_ZONE
    assert grid.get_terrain(0, 3) == TerrainType.OBSTACLE
    # Unknown characters become normal terrain
    assert grid.get_terrain(1, 3) == TerrainType.NORMAL
    assert grid.get_terrain(0, 4) == TerrainType.WIND_ZONE


def test_hill_and_wind_layers_from_text():
    grid = load_map_from_string("^W\n..")
    assert grid.get_elevation(0, 0) == 3.0
    assert grid.get_wind_resistance(1, 0) == 2.0
    assert grid.get_elevation(1, 1) == 0.0


def test_carriage_returns_and_blank_lines():
    grid = load_map_from_string("..\r\n\r\n.O\r\n")
    assert (grid.width, grid.height) == (2, 2)
    assert grid.is_obstacle((1, 1))


@pytest.mark.parametrize('text', ['', '\n\n', '\r\n'])
def test_empty_map_rejected(text):
    with pytest.raises(MapFormatError, match='Empty map data'):
        load_map_from_string(text)


def test_ragged_map_rejected():
    with pytest.raises(MapFormatError, match='same length'):
        load_map_from_string("...\n..\n")

    # MapFormatError is a ValueError
    with pytest.raises(ValueError):
        load_map_from_string("....\n...")


def test_builtin_maps():
    sample = create_sample_map()
    assert (sample.width, sample.height) == (11, 11)

    complex_map = create_complex_map()
    assert (complex_map.width, complex_map.height) == (21, 13)
    assert complex_map.is_obstacle((0, 2))


def test_terrain_to_string_reproduces_text():
    assert terrain_to_string(create_sample_map()) == SAMPLE_MAP


def test_save_and_load(tmp_path, sample_grid):
    filepath = tmp_path / 'sample_map.txt'
    assert save_map(sample_grid, filepath)

    loaded = load_map(filepath)
    assert (loaded.width, loaded.height) == (11, 11)
    assert (loaded.terrain == sample_grid.terrain).all()
    assert (loaded.elevation == sample_grid.elevation).all()


def test_save_map_reports_failure(tmp_path, sample_grid):
    assert not save_map(sample_grid, tmp_path / 'missing' / 'map.txt')


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_map(tmp_path / 'nope.txt')


def test_find_marker():
    grid = load_map_from_string("...\nS..\n..D\n")
    assert find_marker(grid, TerrainType.START) == (0, 1)
    assert find_marker(grid, TerrainType.END) == (2, 2)
    assert find_marker(create_sample_map(), TerrainType.START) is None
