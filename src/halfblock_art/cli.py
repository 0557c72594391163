#!/usr/bin/env python3
import argparse
import logging
import math
import sys
import time
from typing import Optional, Sequence

from . import __version__
from .batch import render_batch, report_errors
from .padding import padding_arg

LOG = logging.getLogger("halfblock_art")

STDERR_FORMAT = "halfblock-art: %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def setup_logging(debug: bool, log_path: str | None = None) -> None:
    """
    Route the package logger to stderr (WARNING, or DEBUG with --debug) and,
    when `log_path` is given, to a file that always records DEBUG.

    stdout stays reserved for the rendered art and the error report.
    """
    level = logging.DEBUG if debug else logging.WARNING
    handlers = [_handler(logging.StreamHandler(sys.stderr), level, STDERR_FORMAT)]
    if log_path:
        handlers.append(
            _handler(logging.FileHandler(log_path, encoding="utf-8"), logging.DEBUG, FILE_FORMAT)
        )

    LOG.setLevel(logging.DEBUG if log_path else level)
    LOG.handlers[:] = handlers
    # handlers live on the package logger only
    LOG.propagate = False


def positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text}") from None
    if not (math.isfinite(value) and value > 0):
        raise argparse.ArgumentTypeError(f"must be a finite number greater than 0: {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="halfblock-art",
        description="Print images to the terminal using half-block characters",
    )
    ap.add_argument("images", nargs="*", help="Input image paths")
    ap.add_argument(
        "-s",
        "--scale",
        type=positive_float,
        default=None,
        help="Scale image by value, values below 1.0 shrink the image",
    )
    ap.add_argument(
        "-p",
        "--padding",
        type=padding_arg,
        default=None,
        help="Add padding around the image: one value for all sides or up to "
        "4 values following CSS padding rules (e.g. '1 2')",
    )
    ap.add_argument(
        "-o", "--output", default=None, help="Output text file (default: stdout)"
    )
    ap.add_argument("--debug", action="store_true", help="Enable debug logging")
    ap.add_argument("--log", default=None, help="Also write the debug log to FILE")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def run(args: argparse.Namespace) -> int:
    t0 = time.perf_counter()
    LOG.debug("Args: images=%d scale=%s padding=%s", len(args.images), args.scale, args.padding)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as out:
            errors = render_batch(args.images, args.scale, args.padding, out)
            report_errors(errors, out)
    else:
        errors = render_batch(args.images, args.scale, args.padding, sys.stdout)
        report_errors(errors, sys.stdout)

    LOG.debug("Done in %.3fs (%d failed)", time.perf_counter() - t0, len(errors))
    # per-image failures are reported, not turned into an exit status
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(list(argv))
    setup_logging(args.debug, args.log)
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
