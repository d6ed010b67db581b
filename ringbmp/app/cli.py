from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from ..bitmap.reader import verify_bitmap
from ..errors import RingBitmapError
from ..rendering.renderer import DEFAULT_HEIGHT, DEFAULT_WIDTH, render_concentric_circles
from ..transport.file import FileSink

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "myBitmap.bmp"
OUTPUT_ENV_VAR = "RINGBMP_OUTPUT"


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero: {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="ringbmp: render concentric colored rings into a 24-bit BMP file."
    )
    parser.add_argument("--width", type=positive_int, default=DEFAULT_WIDTH, help="Image width in pixels")
    parser.add_argument("--height", type=positive_int, default=DEFAULT_HEIGHT, help="Image height in pixels")
    parser.add_argument(
        "--output",
        "-o",
        metavar="PATH",
        help=f"Output file (default: ${OUTPUT_ENV_VAR} or {DEFAULT_OUTPUT})",
    )
    parser.add_argument("--verify", action="store_true", help="Read the written file back and check it")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug details to stderr")
    return parser.parse_args(argv)


def resolve_output(args: argparse.Namespace) -> str:
    if args.output:
        return args.output
    return os.environ.get(OUTPUT_ENV_VAR) or DEFAULT_OUTPUT


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def render(args: argparse.Namespace) -> int:
    path = resolve_output(args)
    written = render_concentric_circles(args.width, args.height, FileSink(path))
    logger.info("Wrote %s (%d bytes)", path, written)
    if args.verify:
        verify_bitmap(path, args.width, args.height)
        logger.info("Verified %s", path)
    print(path)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    try:
        return render(args)
    except RingBitmapError as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
