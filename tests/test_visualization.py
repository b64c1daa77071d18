"""
ASCII rendering and matplotlib figure tests.
"""

import matplotlib.pyplot as plt

from uav_pathfinder.config import VisualizationConfig
from uav_pathfinder.terrain import TerrainGrid, load_map_from_string
from uav_pathfinder.visualization import LEGEND, TerrainVisualizer, render_ascii


def test_render_ascii_without_path():
    grid = load_map_from_string(".O\n^W\n")
    assert render_ascii(grid, show_axes=False).splitlines() == [" . O", " ^ W"]


def test_render_ascii_with_path():
    grid = TerrainGrid(4, 1)
    text = render_ascii(grid, [(0, 0), (1, 0), (2, 0)], show_axes=False)
    assert text == " S * D ."


def test_render_ascii_axes():
    lines = render_ascii(TerrainGrid(3, 2)).splitlines()
    assert lines[0] == "   0 1 2"
    assert lines[1] == " 0 . . ."
    assert len(lines) == 3


def test_legend_lists_symbols():
    symbols = {entry.split(' = ')[0] for entry in LEGEND}
    assert symbols == {'S', 'D', 'O', '^', 'W', '*', '.'}


def test_save_figure(tmp_path, sample_grid):
    config = VisualizationConfig(figure_size=(4, 4), dpi=50)
    visualizer = TerrainVisualizer(sample_grid, config)

    filepath = visualizer.save({'path': [(0, 0), (1, 1), (2, 2)]}, tmp_path / 'out' / 'fig.png')

    assert filepath.exists()
    assert filepath.stat().st_size > 0


def test_plot_terrain_returns_axes(sample_grid):
    visualizer = TerrainVisualizer(sample_grid)
    ax = visualizer.plot_terrain(show_elevation=True)
    visualizer.plot_path(ax, [])
    assert ax.get_xlabel() == 'X (cells)'
    plt.close(ax.figure)
