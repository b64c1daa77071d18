#!/usr/bin/env python3
"""
UAV Flight Path Optimizer - Main Entry Point
============================================

Usage:
    # Plan on the built-in sample map with A*
    python -m uav_pathfinder.main plan --start 0 0 --goal 10 10

    # Plan on a map file, simplify and export
    python -m uav_pathfinder.main plan --map maps/sample_map.txt --start 0 0 --goal 9 9 \\
        --strategy dijkstra --simplify --export csv,json

    # Compare all strategies on a random map
    python -m uav_pathfinder.main compare --builtin random --width 30 --height 20 --seed 7

    # Write a random map file
    python -m uav_pathfinder.main generate --width 20 --height 15 --seed 1 --output maps/random.txt
"""

import argparse
import sys
from pathlib import Path

from .config import Config
from .exceptions import InvalidEndpoint, MapFormatError
from .export import FORMATS, append_performance_log, export_result
from .metrics import RunStatus
from .pipeline import MissionRunner
from .planning import SearchStrategy
from .terrain import (
    TerrainType,
    create_complex_map,
    create_sample_map,
    find_marker,
    generate_random_map,
    load_map,
    save_map,
)
from .visualization import LEGEND, TerrainVisualizer, render_ascii


def _load_config(args) -> Config:
    config = Config.from_json(args.config) if getattr(args, 'config', None) else Config()
    if getattr(args, 'verbose', False):
        config.verbose = True
    if getattr(args, 'seed', None) is not None:
        config.random_seed = args.seed
    return config


def _load_grid(args, config: Config):
    """Grid from --map or --builtin"""
    if args.map:
        return load_map(args.map, config.terrain)
    if args.builtin == 'complex':
        return create_complex_map(config.terrain)
    if args.builtin == 'random':
        gen = config.generation
        return generate_random_map(
            args.width, args.height,
            gen.obstacle_prob, gen.hill_prob, gen.wind_prob,
            seed=config.random_seed, config=gen, costs=config.terrain
        )
    return create_sample_map(config.terrain)


def _resolve_endpoints(args, grid):
    """Explicit --start/--goal, else S/D markers, else opposite corners"""
    start = tuple(args.start) if args.start else find_marker(grid, TerrainType.START)
    goal = tuple(args.goal) if args.goal else find_marker(grid, TerrainType.END)
    if start is None:
        start = (0, 0)
    if goal is None:
        goal = (grid.width - 1, grid.height - 1)
    return tuple(start), tuple(goal)


def run_plan(args) -> int:
    """Plan a single path"""
    config = _load_config(args)
    grid = _load_grid(args, config)
    start, goal = _resolve_endpoints(args, grid)

    print("=== UAV Flight Path Optimizer ===")
    print(f"Grid size: {grid.width}x{grid.height}")
    print(f"Start: {start}  End: {goal}")
    print(f"Algorithm: {args.strategy}\n")

    runner = MissionRunner(grid, config)
    result = runner.run(start, goal, args.strategy,
                        simplify=args.simplify or None,
                        energy_weight=args.energy_weight)

    if result.status == RunStatus.INVALID_ENDPOINT:
        print(f"Error: {result.error}")
        return 1

    stats = result.statistics
    print(f"Computation Time: {result.computation_time_s:.3f} seconds")
    print(f"Nodes Expanded: {result.nodes_expanded}")

    if not stats.found:
        print("No path found! Target may be unreachable.")
    else:
        print(f"Path Length: {stats.steps} steps")
        print(f"Total Distance: {stats.total_distance:.2f} units")
        print(f"Total Cost: {stats.total_cost:.2f} energy units")
        print(f"Average Cost per Step: {stats.average_cost:.2f}")
        print(f"Path Valid: {'Yes' if stats.valid else 'No'}")
        if result.status == RunStatus.PARTIAL:
            print("Goal not reached: greedy walk stopped early.")
        print()
        print(render_ascii(grid, result.final_path))
        print()
        print('\n'.join(LEGEND))

    for warning in result.warnings:
        print(f"Warning: {warning}")

    output_dir = args.output or config.export.output_dir
    if args.export:
        for fmt in args.export.split(','):
            written = export_result(result, grid, fmt.strip(), output_dir, config.export.basename)
            print(f"Data exported to {written}")

    if args.log:
        log_path = append_performance_log(result, Path(output_dir) / config.export.performance_log)
        print(f"Performance log saved to: {log_path}")

    if args.plot and stats.found:
        paths = {'path': result.path}
        if result.simplified_path is not None:
            paths['simplified'] = result.simplified_path
        plot_path = TerrainVisualizer(grid, config.visualization).save(paths, args.plot)
        print(f"Figure saved to: {plot_path}")

    return 0 if result.is_success else 1


def run_compare(args) -> int:
    """Compare all strategies on one map"""
    config = _load_config(args)
    grid = _load_grid(args, config)
    start, goal = _resolve_endpoints(args, grid)

    runner = MissionRunner(grid, config)
    results = runner.compare(start, goal, simplify=args.simplify or None)

    invalid = [r for r in results.values() if r.status == RunStatus.INVALID_ENDPOINT]
    if invalid:
        print(f"Error: {invalid[0].error}")
        return 1

    MissionRunner.print_summary(results)

    if args.plot:
        paths = {name: r.final_path for name, r in results.items() if r.final_path}
        plot_path = TerrainVisualizer(grid, config.visualization).save(
            paths, args.plot, title='Strategy Comparison')
        print(f"Figure saved to: {plot_path}")

    return 0 if any(r.is_success for r in results.values()) else 1


def run_generate(args) -> int:
    """Write a random map file"""
    config = _load_config(args)
    grid = generate_random_map(
        args.width, args.height,
        args.obstacle_prob, args.hill_prob, args.wind_prob,
        seed=config.random_seed, config=config.generation, costs=config.terrain
    )

    if not save_map(grid, args.output):
        print(f"Error: could not write map file {args.output}")
        return 1

    print(f"Map saved to: {args.output}")
    if args.verbose:
        print(render_ascii(grid))
    return 0


def _add_map_arguments(parser):
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--map', type=str, help='Map text file')
    source.add_argument('--builtin', choices=['sample', 'complex', 'random'],
                        default='sample', help='Built-in map')
    parser.add_argument('--width', type=int, default=20, help='Random map width')
    parser.add_argument('--height', type=int, default=20, help='Random map height')
    parser.add_argument('--seed', type=int, help='Random seed')
    parser.add_argument('--start', type=int, nargs=2, metavar=('X', 'Y'), help='Start cell')
    parser.add_argument('--goal', type=int, nargs=2, metavar=('X', 'Y'), help='Goal cell')
    parser.add_argument('--simplify', action='store_true', help='Line-of-sight simplification')
    parser.add_argument('--plot', type=str, help='Save a figure to this file')
    parser.add_argument('--config', type=str, help='JSON configuration file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='UAV Flight Path Optimizer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Plan command
    plan_parser = subparsers.add_parser('plan', help='Plan a single path')
    _add_map_arguments(plan_parser)
    plan_parser.add_argument('--strategy', choices=SearchStrategy.ALL,
                             default=SearchStrategy.ASTAR, help='Search strategy')
    plan_parser.add_argument('--energy-weight', type=float, help='Energy strategy weight')
    plan_parser.add_argument('--export', type=str,
                             help=f"Comma-separated formats: {','.join(FORMATS)}")
    plan_parser.add_argument('--output', type=str, help='Output directory')
    plan_parser.add_argument('--log', action='store_true', help='Append to the performance log')

    # Compare command
    compare_parser = subparsers.add_parser('compare', help='Compare all strategies')
    _add_map_arguments(compare_parser)

    # Generate command
    gen_parser = subparsers.add_parser('generate', help='Write a random map file')
    gen_parser.add_argument('--width', type=int, default=20, help='Map width')
    gen_parser.add_argument('--height', type=int, default=20, help='Map height')
    gen_parser.add_argument('--obstacle-prob', type=float, default=0.2)
    gen_parser.add_argument('--hill-prob', type=float, default=0.1)
    gen_parser.add_argument('--wind-prob', type=float, default=0.1)
    gen_parser.add_argument('--seed', type=int, help='Random seed')
    gen_parser.add_argument('--output', type=str, required=True, help='Map file to write')
    gen_parser.add_argument('--config', type=str, help='JSON configuration file')
    gen_parser.add_argument('--verbose', '-v', action='store_true', help='Print the map')

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    commands = {
        'plan': run_plan,
        'compare': run_compare,
        'generate': run_generate,
    }

    try:
        return commands[args.command](args)
    except (OSError, MapFormatError, InvalidEndpoint, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
