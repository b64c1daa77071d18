"""
Map Parser Module
=================

Text map loading and saving.

Map characters:
    .  normal      ^  hill         O/o  obstacle
    W/w  wind zone S/s  start      D/d  destination

Every row must have the same length.
"""

from pathlib import Path
from typing import List, Optional, Union

from .types import Point, TerrainType
from .grid import TerrainGrid
from .generator import TerrainGenerator
from ..config import GenerationConfig, TerrainCostConfig
from ..exceptions import MapFormatError


SAMPLE_MAP = (
    "...........\n"
    "..O.O.O....\n"
    "...........\n"
    ".O..^..O...\n"
    "...........\n"
    "...W.W.W...\n"
    "...........\n"
    ".O..^..O...\n"
    "...........\n"
    "..O.O.O....\n"
    "...........\n"
)

COMPLEX_MAP = (
    "..O.......O.......O..\n"
    ".O..^^^^^..O.WWW.O...\n"
    "O....^^^....W.W.W...O\n"
    ".....^.^.....W.W.....\n"
    "..O...^...O...W...O..\n"
    "......^..............\n"
    "..OOO.^.OOO.WWW.OOO..\n"
    "......^..............\n"
    "..O...^...O...W...O..\n"
    ".....^.^.....W.W.....\n"
    "O....^^^....W.W.W...O\n"
    ".O..^^^^^..O.WWW.O...\n"
    "..O.......O.......O..\n"
)


def parse_map_lines(content: str) -> List[str]:
    """Split map text into rows, dropping carriage returns and blank lines"""
    lines = []
    for line in content.split('\n'):
        line = line.rstrip('\r')
        if line:
            lines.append(line)
    return lines


def validate_map_dimensions(lines: List[str]) -> bool:
    """Check that there is at least one row and all rows have equal length"""
    if not lines:
        return False
    width = len(lines[0])
    return all(len(line) == width for line in lines)


def load_map_from_string(map_data: str,
                         costs: Optional[TerrainCostConfig] = None) -> TerrainGrid:
    """
    Build a grid from map text.

    Hill cells get the configured hill elevation, wind zones the
    configured wind resistance.

    Raises:
        MapFormatError: empty input or rows of unequal length
    """
    lines = parse_map_lines(map_data)

    if not lines:
        raise MapFormatError("Empty map data")

    if not validate_map_dimensions(lines):
        raise MapFormatError("Invalid map dimensions - all rows must have same length")

    grid = TerrainGrid(len(lines[0]), len(lines), costs)

    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            terrain_type = TerrainType.from_symbol(char)
            if terrain_type == TerrainType.HILL:
                grid.add_hill((x, y))
            elif terrain_type == TerrainType.WIND_ZONE:
                grid.add_wind_zone((x, y))
            else:
                grid.set_terrain(x, y, terrain_type)

    return grid


def load_map(filepath: Union[str, Path],
             costs: Optional[TerrainCostConfig] = None) -> TerrainGrid:
    """
    Load a map file.

    Raises:
        OSError: file cannot be read
        MapFormatError: malformed map text
    """
    with open(filepath) as f:
        content = f.read()
    return load_map_from_string(content, costs)


def terrain_to_string(grid: TerrainGrid) -> str:
    """Render the grid's terrain classes as map text"""
    rows = []
    for y in range(grid.height):
        rows.append(''.join(grid.get_terrain(x, y).symbol for x in range(grid.width)))
    return '\n'.join(rows) + '\n'


def save_map(grid: TerrainGrid, filepath: Union[str, Path]) -> bool:
    """Write map text; returns False if the file cannot be written"""
    try:
        with open(filepath, 'w') as f:
            f.write(terrain_to_string(grid))
    except OSError:
        return False
    return True


def find_marker(grid: TerrainGrid, marker: TerrainType) -> Optional[Point]:
    """First cell (row-major) carrying the given marker, if any"""
    for y in range(grid.height):
        for x in range(grid.width):
            if grid.terrain[y, x] == marker:
                return Point(x, y)
    return None


def generate_random_map(width: int, height: int,
                        obstacle_ratio: float = 0.2,
                        hill_ratio: float = 0.1,
                        wind_ratio: float = 0.1,
                        seed: Optional[int] = None,
                        config: Optional[GenerationConfig] = None,
                        costs: Optional[TerrainCostConfig] = None) -> TerrainGrid:
    generator = TerrainGenerator(config, seed=seed)
    return generator.generate(width, height, obstacle_ratio, hill_ratio, wind_ratio, costs)


def create_sample_map(costs: Optional[TerrainCostConfig] = None) -> TerrainGrid:
    """11x11 demo map"""
    return load_map_from_string(SAMPLE_MAP, costs)


def create_complex_map(costs: Optional[TerrainCostConfig] = None) -> TerrainGrid:
    """21x13 demo map with hill ridges and wind corridors"""
    return load_map_from_string(COMPLEX_MAP, costs)
