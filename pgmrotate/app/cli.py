from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..errors import RasterError
from ..rotate_job import DEFAULT_INPUT, RotateSettings, RotationJob, default_output_path
from .diagnostics import print_backend_info


def parse_args(argv: Optional[List[str]] = None, settings: Optional[RotateSettings] = None) -> argparse.Namespace:
    settings = settings or RotateSettings()
    parser = argparse.ArgumentParser(
        description="Rotate an 8-bit grayscale PGM image onto a canvas that fits the whole result."
    )
    parser.add_argument("--input", metavar="PATH", default=DEFAULT_INPUT, help="Source .pgm image (default: bundled sample)")
    parser.add_argument("--output", metavar="PATH", help="Destination .pgm (default: <input>_rotate.pgm)")
    parser.add_argument("--angle", type=float, default=settings.angle, help=f"Rotation angle in degrees (default: {settings.angle})")
    parser.add_argument("--workers", type=int, default=settings.workers, help="Threads used for resampling (default: %(default)s)")
    parser.add_argument("--no-diagnostics", action="store_true", help="Skip the fixed-angle diagnostic bounding box")
    parser.add_argument("--info", action="store_true", help="Print library and CPU information and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each pipeline stage")
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def rotate_file(args: argparse.Namespace, settings: RotateSettings) -> int:
    settings.angle = args.angle
    settings.workers = args.workers
    if args.no_diagnostics:
        settings.diagnostic_angle = None
    output = args.output or default_output_path(args.input)
    report = RotationJob(settings).run(args.input, output)
    placement = report.placement
    print(
        f"Rotated {report.source_size[0]}x{report.source_size[1]} by {settings.angle} degrees "
        f"-> {placement.dest_width}x{placement.dest_height}"
    )
    if report.diagnostic_bounds is not None:
        box = report.diagnostic_bounds
        print(
            f"Offset at {settings.diagnostic_angle} degrees: "
            f"({-box.min_corner[0]:.3f}, {-box.min_corner[1]:.3f})"
        )
    print(f"Saved image: {report.output_path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = RotateSettings.from_env()
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    args = parse_args(argv, settings)
    configure_logging(args.verbose)
    if args.info:
        print_backend_info()
        return 0
    if args.workers < 1:
        print("--workers must be at least 1. Use --help for usage.", file=sys.stderr)
        return 2
    try:
        return rotate_file(args, settings)
    except (RasterError, OSError, ValueError) as exc:
        print(f"Program error! {exc}", file=sys.stderr)
        print("Aborting.", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
