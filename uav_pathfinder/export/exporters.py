"""
Export Module
=============

Serializes run results to CSV, JSON, plain text and compressed numpy
archives, and appends rows to a CSV performance log.
"""

import csv
import json
import numpy as np
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Union

from ..metrics import RunResult
from ..planning import PathPostProcessor
from ..terrain import TerrainGrid


PathLike = Union[str, Path]

FORMATS = ('csv', 'json', 'txt', 'bin')

CSV_HEADER = ['Step', 'X', 'Y', 'Terrain', 'Energy_Cost', 'Cumulative_Energy']
LOG_HEADER = ['timestamp', 'algorithm', 'path_length', 'computation_time', 'energy_used', 'success']


def _prepare(filepath: PathLike) -> Path:
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _statistics(result: RunResult, grid: TerrainGrid):
    if result.statistics is not None:
        return result.statistics
    return PathPostProcessor(grid).statistics(result.final_path)


def export_csv(result: RunResult, grid: TerrainGrid, filepath: PathLike) -> Path:
    """One row per waypoint with its cost and the running total"""
    path = _prepare(filepath)
    stats = _statistics(result, grid)

    with open(path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for step in stats.per_step:
            writer.writerow([step.step, step.x, step.y, step.terrain,
                             step.cost, step.cumulative_cost])
    return path


def export_json(result: RunResult, grid: TerrainGrid, filepath: PathLike) -> Path:
    path = _prepare(filepath)
    stats = _statistics(result, grid)

    data = {
        'simulation': {
            'algorithm': result.strategy,
            'status': result.status,
            'start': {'x': int(result.start[0]), 'y': int(result.start[1])},
            'end': {'x': int(result.goal[0]), 'y': int(result.goal[1])},
            'statistics': {
                **stats.to_dict(),
                'computation_time': result.computation_time_s,
                'nodes_expanded': result.nodes_expanded,
            },
            'path': [{'x': int(p[0]), 'y': int(p[1])} for p in result.final_path],
            'per_step': [s.to_dict() for s in stats.per_step],
        }
    }

    with open(path, 'w') as f:
        json.dump(data, f, indent=2)
    return path


def export_text(result: RunResult, grid: TerrainGrid, filepath: PathLike) -> Path:
    path = _prepare(filepath)
    stats = _statistics(result, grid)

    lines = [
        "UAV Flight Path Optimization Results",
        "=" * 36,
        f"Algorithm: {result.strategy}",
        f"Status: {result.status}",
        f"Start Position: ({result.start[0]}, {result.start[1]})",
        f"End Position: ({result.goal[0]}, {result.goal[1]})",
        "",
        "Statistics:",
        f"  Steps Taken: {stats.steps}",
        f"  Total Distance: {stats.total_distance:.2f} cells",
        f"  Total Energy Cost: {stats.total_cost:.2f} units",
        f"  Average Cost per Step: {stats.average_cost:.2f}",
        f"  Wind Zones Crossed: {stats.wind_zones_crossed}",
        f"  Hills Crossed: {stats.hills_crossed}",
        f"  Path Valid: {'Yes' if stats.valid else 'No'}",
        f"  Computation Time: {result.computation_time_s:.6f} seconds",
        "",
        "Flight Path:",
    ]
    for step in stats.per_step:
        lines.append(f"  Step {step.step}: ({step.x}, {step.y}) - {step.terrain}")

    with open(path, 'w') as f:
        f.write('\n'.join(lines) + '\n')
    return path


def export_binary(result: RunResult, grid: TerrainGrid, filepath: PathLike) -> Path:
    """Save grid layers, endpoints and path to a compressed .npz archive"""
    path = _prepare(filepath)
    route = np.array(result.final_path, dtype=np.int32).reshape(-1, 2)

    np.savez_compressed(
        path,
        terrain=grid.terrain,
        elevation=grid.elevation,
        wind_resistance=grid.wind_resistance,
        start=np.array(result.start, dtype=np.int32),
        goal=np.array(result.goal, dtype=np.int32),
        path=route,
        computation_time=result.computation_time_s,
    )
    # numpy appends .npz when missing
    if path.suffix != '.npz':
        path = path.with_name(path.name + '.npz')
    return path


def append_performance_log(result: RunResult, filepath: PathLike,
                           timestamp: Optional[datetime] = None) -> Path:
    """Append one row to the CSV performance log, writing the header once"""
    path = _prepare(filepath)
    write_header = not path.exists() or path.stat().st_size == 0
    timestamp = timestamp or datetime.now()
    energy = result.statistics.total_cost if result.statistics else 0.0

    with open(path, 'a', newline='') as f:
        writer = csv.writer(f)
        if write_header:
            writer.writerow(LOG_HEADER)
        writer.writerow([
            timestamp.strftime('%Y-%m-%d %H:%M:%S'),
            result.strategy,
            len(result.final_path),
            result.computation_time_s,
            energy,
            'true' if result.is_success else 'false',
        ])
    return path


_EXPORTERS = {
    'csv': (export_csv, '.csv'),
    'json': (export_json, '.json'),
    'txt': (export_text, '.txt'),
    'bin': (export_binary, '.npz'),
}


def export_result(result: RunResult, grid: TerrainGrid, fmt: str,
                  output_dir: PathLike = 'output',
                  basename: str = 'uav_simulation_data') -> Path:
    """
    Export a result in one of FORMATS.

    Returns:
        Path of the written file
    """
    if fmt not in _EXPORTERS:
        raise ValueError(f"Unknown export format: {fmt} (expected one of {FORMATS})")
    exporter, suffix = _EXPORTERS[fmt]
    return exporter(result, grid, Path(output_dir) / f"{basename}{suffix}")


def export_all(result: RunResult, grid: TerrainGrid,
               output_dir: PathLike = 'output',
               basename: str = 'uav_simulation_data') -> Dict[str, Path]:
    return {fmt: export_result(result, grid, fmt, output_dir, basename) for fmt in FORMATS}
