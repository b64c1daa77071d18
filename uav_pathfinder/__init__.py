"""
UAV Flight Path Optimizer
=========================

Grid-based flight path planning for an unmanned aerial vehicle over
weighted terrain.

Key Features:
- Terrain grid with obstacle, hill and wind-zone cells
- A*, Dijkstra, greedy best-first and energy-weighted search
- Line-of-sight path simplification and path statistics
- Drone energy tracking with time / energy warnings
- CSV, JSON, text and binary export
- ASCII and matplotlib rendering

Version: 1.0.0
"""

__version__ = "1.0.0"

from .config import Config
from .exceptions import InvalidEndpoint, MapFormatError
from .terrain import (
    Point,
    TerrainType,
    TerrainGrid,
    TerrainGenerator,
    load_map,
    load_map_from_string,
    save_map,
    generate_random_map,
    create_sample_map,
    create_complex_map,
)
from .energy import EnergyModel, Drone
from .planning import PathOptimizer, PathPostProcessor, SearchStrategy
from .metrics import PathStatistics, RunResult, RunStatus
from .visualization import TerrainVisualizer, render_ascii
from .pipeline import MissionRunner

__all__ = [
    'Config',
    'InvalidEndpoint', 'MapFormatError',
    'Point', 'TerrainType', 'TerrainGrid', 'TerrainGenerator',
    'load_map', 'load_map_from_string', 'save_map',
    'generate_random_map', 'create_sample_map', 'create_complex_map',
    'EnergyModel', 'Drone',
    'PathOptimizer', 'PathPostProcessor', 'SearchStrategy',
    'PathStatistics', 'RunResult', 'RunStatus',
    'TerrainVisualizer', 'render_ascii',
    'MissionRunner',
]
