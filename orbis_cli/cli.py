"""
Orbis CLI - Main entry point.

Inspect spatial contexts, compute distances and check legacy shape text
from the command line.
"""

import argparse
import sys
from typing import List, Optional

from orbis_io.legacy import format_number
from orbis_spatial.context import SpatialContext
from orbis_spatial.distance.utils import norm_lon_deg
from orbis_spatial.exceptions import SpatialError
from orbis_spatial.factory import SpatialContextFactory


def build_context(args: argparse.Namespace) -> SpatialContext:
    """
    Resolve the context described by the global options.

    A --config file is read first; --cartesian and --wrap-longitude then
    override it.
    """
    if args.config:
        factory = SpatialContextFactory.from_yaml(args.config)
    else:
        factory = SpatialContextFactory()

    if args.cartesian:
        factory.with_geo(False)
    if args.wrap_longitude:
        factory.with_norm_wrap_longitude(True)

    return factory.new_spatial_context()


def describe_context(ctx: SpatialContext) -> str:
    """Human-readable multi-line summary of a context."""
    return "\n".join([
        f"context:             {ctx!r}",
        f"geo:                 {ctx.geo}",
        f"calculator:          {ctx.dist_calc}",
        f"world bounds:        {ctx.world_bounds}",
        f"norm wrap longitude: {ctx.norm_wrap_longitude}",
    ])


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="orbis",
        description="Orbis CLI - Spatial context and shape utilities",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the default geodetic context
  orbis context

  # Context from a YAML config file
  orbis --config config/context.yaml context

  # Great-circle distance in degrees (x=longitude, y=latitude)
  orbis distance -- -73.99 40.73 2.35 48.85

  # Planar distance
  orbis --cartesian distance 0 0 3 4

  # Wrap a longitude into [-180, 180)
  orbis normalize 181

  # Validate legacy shape text
  orbis shape "Circle(0 0 d=200)"
"""
    )

    # Global arguments
    parser.add_argument(
        "--config",
        help="YAML file with spatial context settings"
    )
    parser.add_argument(
        "--cartesian",
        action="store_true",
        help="Use a planar (Euclidean) context instead of geodetic"
    )
    parser.add_argument(
        "--wrap-longitude",
        action="store_true",
        help="Wrap out-of-range longitudes (geodetic only)"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('context', help='Print the resolved spatial context')

    distance = subparsers.add_parser('distance', help='Distance between two points')
    for name in ('x1', 'y1', 'x2', 'y2'):
        distance.add_argument(name, type=float)

    normalize = subparsers.add_parser('normalize', help='Wrap a longitude into [-180, 180)')
    normalize.add_argument('x', type=float)

    shape = subparsers.add_parser('shape', help='Parse legacy shape text and echo it')
    shape.add_argument('text', help='Shape text, e.g. "-10 -10 10 10"')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == 'context':
            print(describe_context(build_context(args)))

        elif args.command == 'distance':
            ctx = build_context(args)
            p1 = ctx.make_point(args.x1, args.y1)
            p2 = ctx.make_point(args.x2, args.y2)
            print(format_number(ctx.calc_distance(p1, p2)))

        elif args.command == 'normalize':
            print(format_number(norm_lon_deg(args.x)))

        elif args.command == 'shape':
            ctx = build_context(args)
            parsed = ctx.shape_read_writer.read_shape(args.text)
            print(f"{type(parsed).__name__}: {ctx.shape_read_writer.write_shape(parsed)}")

    except (SpatialError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
