#!/usr/bin/env python3
"""
Command line front end for the Delaunay triangulator.

Usage:
    py-delaunay points.json [--seed SEED] [--output out.json] [--plot out.png] [--verify]

The input is either a JSON list of [x, y] pairs or a text file that
numpy.loadtxt can read (comma or whitespace separated, two columns).
"""

import argparse
import json
import math
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np
import structlog

from .config import settings
from .core.alea_prng import AleaPRNG
from .core.exceptions import TriangulationError
from .core.point_set import PointSet
from .core.triangulation_analysis import (
    convex_hull_area, find_delaunay_violations, total_area, triangles_to_indices
)
from .core.triangulator import DelaunayTriangulator, TriangulationOptions
from .utils.log_setup import configure_logging

logger = structlog.get_logger()


def load_coordinates(path: Path) -> np.ndarray:
    """Read an (n, 2) coordinate array from a JSON or delimited text file."""
    text = path.read_text()
    if path.suffix.lower() == ".json" or text.lstrip().startswith("["):
        coordinates = np.asarray(json.loads(text), dtype=np.float64)
    else:
        delimiter = "," if "," in text else None
        coordinates = np.loadtxt(path, delimiter=delimiter, dtype=np.float64, ndmin=2)

    if coordinates.ndim != 2 or coordinates.shape[1] != 2:
        raise ValueError(f"{path}: expected rows of two coordinates, got shape {coordinates.shape}")
    return coordinates


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="py-delaunay",
        description="Compute the Delaunay triangulation of a 2D point set.",
    )
    parser.add_argument("input", type=Path, help="JSON or CSV file of x,y coordinates")
    parser.add_argument("--seed", default=settings.shuffle_seed,
                        help="Shuffle the insertion order with this seed")
    parser.add_argument("--output", "-o", type=Path, help="Write triangle JSON here instead of stdout")
    parser.add_argument("--plot", type=Path, help="Render the triangulation to this image file")
    parser.add_argument("--verify", action="store_true",
                        help="Check the empty-circumcircle property of the result")
    parser.add_argument("--mode", choices=["max_coordinate", "bounding_box"],
                        default=settings.super_triangle_mode, help="Super-triangle sizing")
    parser.add_argument("--scale", type=float, default=settings.super_triangle_scale,
                        help="Super-triangle scale factor")
    parser.add_argument("--log-level", default=settings.log_level)
    parser.add_argument("--log-format", choices=["json", "console"], default=settings.log_format)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_format)

    try:
        coordinates = load_coordinates(args.input)
        options = TriangulationOptions(super_triangle_scale=args.scale, super_triangle_mode=args.mode)

        point_set = PointSet.from_array(coordinates)
        original_order = list(point_set)

        triangulator = DelaunayTriangulator(point_set, options)
        if args.seed is not None:
            triangulator.shuffle(AleaPRNG(args.seed))
        triangles = triangulator.triangulate()
    except (TriangulationError, ValueError, OSError) as e:
        logger.error("Triangulation failed", input=str(args.input), error=str(e))
        return 2

    simplices = triangles_to_indices(triangles, original_order)
    payload = {"points": len(original_order), "triangles": simplices.tolist()}

    if args.output:
        args.output.write_text(json.dumps(payload))
        logger.info("Triangles written", path=str(args.output), triangles=len(simplices))
    else:
        json.dump(payload, sys.stdout)
        sys.stdout.write("\n")

    if args.plot:
        from .visualize import plot_triangulation
        plot_triangulation(coordinates, simplices, args.plot)

    if args.verify:
        violations = find_delaunay_violations(triangles, original_order)
        if violations:
            logger.error("Delaunay property violated", violations=len(violations))
            return 1

        covered = total_area(triangles)
        hull_area = convex_hull_area(coordinates)
        if not math.isclose(covered, hull_area, rel_tol=1e-7, abs_tol=1e-9):
            logger.error("Triangles do not cover the convex hull", covered=covered, hull_area=hull_area)
            return 1
        logger.info("Delaunay property verified", triangles=len(triangles), area=covered)

    return 0


if __name__ == "__main__":
    sys.exit(main())
