#!/usr/bin/env python3
"""
Render a Voronoi map with a squiggly edge from a CSV file.

Usage:
    python render_voronoi.py points.csv [-o map.svg] [--seed SEED]

Use "-" as the input to read from stdin. Output ending in .png is rasterised
with matplotlib, anything else is written as SVG.
"""

import sys
from pathlib import Path

from py_vmap.config import settings
from py_vmap.core.exceptions import InvalidInput
from py_vmap.core.parsing import parse_points
from py_vmap.core.pipeline import create_voronoi
from py_vmap.utils.logging import configure_logging


def main(argv=None):
    """Main function."""
    import argparse

    parser = argparse.ArgumentParser(description="Render a Voronoi map from x,y points")
    parser.add_argument("input", help="CSV file with x and y columns, or - for stdin")
    parser.add_argument("-o", "--output", default="voronoi.svg",
                        help="Output file (.svg or .png)")
    parser.add_argument("--seed", help="Seed for the squiggly layer")
    parser.add_argument("--track-cell-identity", action="store_true",
                        help="Attribute cells by point instead of by position")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level, settings.log_format)

    if args.input == "-":
        text = sys.stdin.read()
    else:
        text = Path(args.input).read_text()

    try:
        voronoi_map = create_voronoi(
            parse_points(text),
            seed=args.seed,
            track_cell_identity=args.track_cell_identity or None,
        )
    except InvalidInput as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    output = Path(args.output)
    if output.suffix.lower() == ".png":
        from py_vmap.core.plotting import save_scene_png
        save_scene_png(voronoi_map.scene, output)
    else:
        output.write_text(voronoi_map.to_svg())

    bounds = voronoi_map.bounds
    print(f"Bounds: x {bounds.min_x}..{bounds.max_x}, y {bounds.min_y}..{bounds.max_y}")
    print(f"Points: {len(voronoi_map.points)}, squiggly points: {len(voronoi_map.squiggly_points)}")
    print(f"Cells: {len(voronoi_map.cells)}, seed: {voronoi_map.seed}")
    print(f"Saved: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
