"""
Configuration Module
====================

Centralized configuration management for the UAV path optimizer.
"""

from .settings import (
    Config,
    TerrainCostConfig,
    GenerationConfig,
    SearchConfig,
    DroneConfig,
    ExportConfig,
    VisualizationConfig,
)

__all__ = [
    'Config',
    'TerrainCostConfig',
    'GenerationConfig',
    'SearchConfig',
    'DroneConfig',
    'ExportConfig',
    'VisualizationConfig',
]
