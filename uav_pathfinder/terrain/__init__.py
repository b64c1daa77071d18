"""
Terrain Module
==============

Terrain types, the terrain grid, random generation and text maps.
"""

from .types import Point, TerrainType, TerrainProperties
from .grid import TerrainGrid, NEIGHBOR_OFFSETS
from .generator import TerrainGenerator
from .parser import (
    SAMPLE_MAP,
    COMPLEX_MAP,
    parse_map_lines,
    validate_map_dimensions,
    load_map,
    load_map_from_string,
    terrain_to_string,
    save_map,
    find_marker,
    generate_random_map,
    create_sample_map,
    create_complex_map,
)

__all__ = [
    'Point',
    'TerrainType',
    'TerrainProperties',
    'TerrainGrid',
    'NEIGHBOR_OFFSETS',
    'TerrainGenerator',
    'SAMPLE_MAP',
    'COMPLEX_MAP',
    'parse_map_lines',
    'validate_map_dimensions',
    'load_map',
    'load_map_from_string',
    'terrain_to_string',
    'save_map',
    'find_marker',
    'generate_random_map',
    'create_sample_map',
    'create_complex_map',
]
