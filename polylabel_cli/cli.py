"""
polylabel CLI - Main entry point.

Runs pole searches from a YAML job file or from vertices given inline, and
prints results as JSON (one object per line).
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from polylabel_core.config import LabelJobConfig, SearchConfig
from polylabel_core.geometry import Polygon, point_to_polygon_distance
from polylabel_core.logging import LogEvent, create_logger
from polylabel_core.placement import LabelPlacement
from polylabel_core.search import PoleSearch


def parse_point(text: str) -> Tuple[float, float]:
    """
    Parse an "X,Y" pair.

    Raises:
        argparse.ArgumentTypeError: If the text is not two numbers
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected X,Y but got '{text}'")
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected numeric X,Y but got '{text}'")


def solve_job(config: LabelJobConfig) -> List[dict]:
    """
    Run the search for every polygon in a job.

    Returns:
        One dict per polygon with the result and label placement
    """
    logger = create_logger("search", level=config.logging_level)
    results = []

    for polygon_config in config.polygons:
        search = PoleSearch(config.search_config_for(polygon_config), logger=logger)
        result = search.find(polygon_config.coordinates)
        placement = LabelPlacement.from_result(result, label_id=polygon_config.polygon_id)

        entry = {'polygon_id': polygon_config.polygon_id}
        entry.update(result.to_dict())
        entry['placement'] = placement.to_dict()
        results.append(entry)

    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polylabel-cli",
        description="polylabel CLI - Find label positions (poles of inaccessibility) in polygons",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve every polygon in a job file
  polylabel-cli solve config/polygons_example.yaml

  # Solve one polygon given inline
  polylabel-cli pole --vertex 0,0 --vertex 10,0 --vertex 10,10 --vertex 0,10 --precision 0.001

  # Signed distance of a point to a polygon boundary
  polylabel-cli distance --point 2,2 --vertex 0,0 --vertex 10,0 --vertex 10,10
"""
    )

    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for search events (default: WARNING, or the job file's log_level)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # solve command
    solve = subparsers.add_parser('solve', help='Solve all polygons in a YAML job file')
    solve.add_argument('config', help='Path to job config YAML')

    # pole command
    pole = subparsers.add_parser('pole', help='Solve one polygon given as --vertex X,Y ...')
    pole.add_argument('--vertex', dest='vertices', action='append', type=parse_point,
                      required=True, help='Polygon vertex X,Y (repeat, at least 3)')
    pole.add_argument('--precision', type=float, default=1.0,
                      help='Radius tolerance in coordinate units (default: 1.0)')
    pole.add_argument('--max-probes', type=int, default=None,
                      help='Stop refining after this many evaluated cells')
    pole.add_argument('--validate-simple', action='store_true',
                      help='Reject self-intersecting polygons')

    # distance command
    distance = subparsers.add_parser('distance', help='Signed distance from a point to a polygon')
    distance.add_argument('--point', type=parse_point, required=True, help='Query point X,Y')
    distance.add_argument('--vertex', dest='vertices', action='append', type=parse_point,
                          required=True, help='Polygon vertex X,Y (repeat, at least 3)')

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli_logger = create_logger("cli", level=getattr(logging, args.log_level or "WARNING"))

    try:
        if args.command == 'solve':
            config = LabelJobConfig.from_yaml(args.config)
            if args.log_level:
                config = LabelJobConfig(
                    polygons=config.polygons,
                    search_config=config.search_config,
                    log_level=args.log_level,
                )
            cli_logger.info(
                event=LogEvent.CONFIG_LOADED,
                message="Loaded label job",
                metadata={'config': args.config, 'polygons': len(config.polygons)}
            )
            for entry in solve_job(config):
                print(json.dumps(entry))

        elif args.command == 'pole':
            search_config = SearchConfig(
                precision=args.precision,
                max_probes=args.max_probes,
                validate_simple=args.validate_simple,
            )
            logger = create_logger("search", level=getattr(logging, args.log_level or "WARNING"))
            result = PoleSearch(search_config, logger=logger).find(args.vertices)
            entry = result.to_dict()
            entry['placement'] = LabelPlacement.from_result(result).to_dict()
            print(json.dumps(entry))

        elif args.command == 'distance':
            polygon = Polygon.from_points(args.vertices)
            value = point_to_polygon_distance(args.point, polygon.vertices)
            print(json.dumps({
                'point': {'x': args.point[0], 'y': args.point[1]},
                'distance': value,
                'inside': value > 0,
            }))

    except (FileNotFoundError, ValueError) as e:
        cli_logger.error(
            event=LogEvent.CONFIG_ERROR if args.command == 'solve' else LogEvent.INVALID_POLYGON_ERROR,
            message=f"{args.command} failed",
            exc_info=e,
        )
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
