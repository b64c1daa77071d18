"""
Visualization Module
====================

Text and matplotlib rendering of terrain and paths.
"""

from .render import (
    LEGEND,
    render_ascii,
    TerrainVisualizer,
)

__all__ = [
    'LEGEND',
    'render_ascii',
    'TerrainVisualizer',
]
