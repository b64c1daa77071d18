"""
Visualization Module
====================

Text rendering of the grid with a path overlay, and matplotlib figures
of terrain and paths.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from matplotlib.patches import Patch
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..config import VisualizationConfig
from ..terrain import TerrainGrid, TerrainType


LEGEND = (
    "S = Start Point",
    "D = Destination",
    "O = Obstacle",
    "^ = Hill (High Cost)",
    "W = Wind Zone",
    "* = Flight Path",
    ". = Normal Terrain",
)


def render_ascii(grid: TerrainGrid,
                 path: Optional[Sequence[Tuple[int, int]]] = None,
                 show_axes: bool = True) -> str:
    """
    Render the grid as map characters.

    Path cells are drawn as '*', with 'S' on the first and 'D' on the
    last waypoint.
    """
    overlay: Dict[Tuple[int, int], str] = {}
    if path:
        for cell in path:
            overlay[(int(cell[0]), int(cell[1]))] = '*'
        overlay[(int(path[0][0]), int(path[0][1]))] = 'S'
        overlay[(int(path[-1][0]), int(path[-1][1]))] = 'D'

    lines = []
    if show_axes:
        lines.append('  ' + ''.join(f"{x:>2}" for x in range(grid.width)))

    for y in range(grid.height):
        chars = [overlay.get((x, y), grid.get_terrain(x, y).symbol) for x in range(grid.width)]
        row = ' ' + ' '.join(chars)
        lines.append((f"{y:>2}" if show_axes else '') + row)

    return '\n'.join(lines)


class TerrainVisualizer:
    """
    Static terrain visualization.

    Draws terrain classes with paths overlaid.
    """

    def __init__(self, grid: TerrainGrid, config: Optional[VisualizationConfig] = None):
        """
        Initialize visualizer.

        Args:
            grid: Terrain grid
            config: Visualization configuration
        """
        self.grid = grid
        self.config = config or VisualizationConfig()
        self.cmap = ListedColormap(self.config.terrain_colors)

    def plot_terrain(self, ax=None, show_elevation: bool = False) -> plt.Axes:
        """
        Plot terrain map.

        Args:
            ax: Matplotlib axes (creates new if None)
            show_elevation: Overlay elevation contours

        Returns:
            Matplotlib axes
        """
        if ax is None:
            fig, ax = plt.subplots(figsize=self.config.figure_size)

        ax.imshow(
            self.grid.terrain,
            cmap=self.cmap,
            vmin=0,
            vmax=len(TerrainType) - 1,
            origin='upper',
            interpolation='nearest'
        )

        if show_elevation and self.grid.elevation.max() > 0:
            ax.contour(self.grid.elevation, levels=5, colors='dimgray',
                       alpha=0.4, linewidths=0.5)

        handles = [Patch(color=self.config.terrain_colors[t], label=t.name_lower)
                   for t in (TerrainType.NORMAL, TerrainType.HILL,
                             TerrainType.OBSTACLE, TerrainType.WIND_ZONE)]
        ax.legend(handles=handles, loc='upper right', fontsize='small')

        ax.set_xlabel('X (cells)')
        ax.set_ylabel('Y (cells)')
        return ax

    def plot_path(self, ax, path: Sequence[Tuple[int, int]],
                  color: Optional[str] = None, label: Optional[str] = None,
                  linewidth: float = 2.0, alpha: float = 0.9):
        """Plot a path with start/goal markers on existing axes"""
        if not path:
            return

        path_arr = np.array(path)
        ax.plot(path_arr[:, 0], path_arr[:, 1],
                color=color or self.config.path_color,
                linewidth=linewidth, alpha=alpha, label=label,
                marker='.', markersize=4)
        ax.plot(path_arr[0, 0], path_arr[0, 1], 'go', markersize=10)
        ax.plot(path_arr[-1, 0], path_arr[-1, 1], 'r*', markersize=14)

    def create_figure(self, paths: Dict[str, List[Tuple[int, int]]],
                      title: str = 'UAV Flight Path') -> plt.Figure:
        """Terrain with one line per named path"""
        fig, ax = plt.subplots(figsize=self.config.figure_size, dpi=self.config.dpi)
        self.plot_terrain(ax)

        colors = plt.rcParams['axes.prop_cycle'].by_key()['color']
        for i, (name, path) in enumerate(paths.items()):
            self.plot_path(ax, path, color=colors[i % len(colors)], label=name)

        ax.set_title(title)
        return fig

    def save(self, paths: Dict[str, List[Tuple[int, int]]],
             filepath: Union[str, Path], title: str = 'UAV Flight Path') -> Path:
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        fig = self.create_figure(paths, title)
        fig.savefig(filepath, dpi=self.config.dpi, bbox_inches='tight')
        plt.close(fig)
        return filepath
