"""
Configuration Settings Module
==============================

Dataclass-based configuration with validation and defaults.
Only handles configuration; no planning logic lives here.
"""

import json
from dataclasses import dataclass, field, fields, is_dataclass, asdict
from pathlib import Path
from typing import Dict, Optional, Any, Union


@dataclass
class TerrainCostConfig:
    """Terrain movement-cost parameters"""
    # Base cost per terrain class
    base_cost: Dict[str, float] = field(default_factory=lambda: {
        'normal': 1.0,
        'hill': 3.0,
        'wind_zone': 2.0,
        'obstacle': 1000.0,  # effectively impassable
    })

    elevation_factor: float = 0.5
    wind_factor: float = 0.3

    # Defaults applied by the editing operations and the map loader
    hill_elevation: float = 3.0
    wind_resistance: float = 2.0

    @property
    def obstacle_cost(self) -> float:
        return self.base_cost['obstacle']


@dataclass
class GenerationConfig:
    """Random terrain generation parameters"""
    obstacle_prob: float = 0.2
    hill_prob: float = 0.1
    wind_prob: float = 0.1

    hill_elevation_max: float = 5.0
    normal_elevation_max: float = 2.0
    wind_resistance_max: float = 3.0


@dataclass
class SearchConfig:
    """Search engine defaults"""
    default_strategy: str = 'astar'
    energy_weight: float = 1.0
    simplify: bool = False


@dataclass
class DroneConfig:
    """Vehicle energy bookkeeping"""
    max_energy: float = 1000.0
    low_energy_pct: float = 20.0

    # Run warnings
    energy_warning_pct: float = 85.0
    time_warning_s: float = 2.0


@dataclass
class ExportConfig:
    """Data export locations"""
    output_dir: str = 'output'
    basename: str = 'uav_simulation_data'
    performance_log: str = 'path_log.csv'


@dataclass
class VisualizationConfig:
    """Plotting configuration"""
    # Ordered by TerrainType value
    terrain_colors: tuple = ('whitesmoke', 'peru', 'black', 'lightskyblue', 'limegreen', 'crimson')
    path_color: str = 'blue'
    simplified_color: str = 'orange'
    figure_size: tuple = (8, 8)
    dpi: int = 100


@dataclass
class Config:
    """
    Master configuration class combining all sub-configurations.

    Usage:
        config = Config()
        config = Config(search=SearchConfig(default_strategy='dijkstra'))
        config = Config.from_json('settings.json')
    """
    terrain: TerrainCostConfig = field(default_factory=TerrainCostConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    drone: DroneConfig = field(default_factory=DroneConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)

    # Global settings
    random_seed: Optional[int] = None
    verbose: bool = False

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'Config':
        """
        Create Config from dictionary.

        Nested dictionaries are merged into the matching sub-configuration;
        unknown keys are ignored.
        """
        config = cls()
        for key, value in d.items():
            if not hasattr(config, key):
                continue
            current = getattr(config, key)
            if is_dataclass(current) and isinstance(value, dict):
                _merge_into(current, value)
            else:
                setattr(config, key, value)
        return config

    @classmethod
    def from_json(cls, filepath: Union[str, Path]) -> 'Config':
        """Load configuration from a JSON file"""
        with open(filepath) as f:
            return cls.from_dict(json.load(f))

    def to_dict(self) -> Dict[str, Any]:
        """Export config to dictionary"""
        return asdict(self)


def _merge_into(target, values: Dict[str, Any]):
    """Overwrite known dataclass fields of target with values"""
    names = {f.name for f in fields(target)}
    for key, value in values.items():
        if key not in names:
            continue
        current = getattr(target, key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged = dict(current)
            merged.update(value)
            setattr(target, key, merged)
        elif isinstance(current, tuple) and isinstance(value, list):
            setattr(target, key, tuple(value))
        else:
            setattr(target, key, value)
