#!/usr/bin/env python3
"""Command-line entry point for ndotter."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from ndotter import __version__
from ndotter.config_manager import ConfigManager
from ndotter.errors import NdotterError
from ndotter.image_processing import DotProcessor
from ndotter.models import (
    CONFIG_FILE,
    DEFAULT_DOT_SIZE,
    ConversionConfig,
    ConversionJob,
)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def non_negative_int(value: str) -> int:
    """argparse type for --dot-size. 0 is let through so the core rejects it."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def setup_logging(args: argparse.Namespace) -> None:
    """Configure logging from the global options."""
    level = logging.DEBUG if (args.debug or args.verbose) else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def print_banner(job: ConversionJob) -> None:
    """Print the run parameters."""
    config = job.config
    print("======== NDOTTER ========")
    print(f"dot size:    {config.dot_size}")
    print(f"destination: {job.resolved_destination()}")
    print(f"inversed:    {'yes' if config.inverted else 'no'}")
    print(f"open:        {'yes' if job.open_after else 'no'}")
    print("=========================")


def print_progress(percent: int) -> None:
    print(f"\rProcessing image: {percent}%", end="", flush=True)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog='ndotter',
        description='Convert bitmaps to N-dot SVG art'
    )

    parser.add_argument('-s', '--source', type=Path, required=True,
                        help='Source image path. All major raster image formats are supported')
    parser.add_argument('-d', '--destination', type=Path,
                        help='Destination image path. Default value is <source-image-path>.svg')
    parser.add_argument('-i', '--inverted', '--inversed', dest='inverted',
                        action='store_true', default=None,
                        help='Use black pixels of the image to create N-dot art; '
                             'otherwise white will be used')
    parser.add_argument('--dot-size', type=non_negative_int,
                        help='Size of each N-dot (changes viewport size proportionally). '
                             'Minimal is 1, default is 10')
    parser.add_argument('--open', action='store_true', default=None,
                        help='Open SVG image after finishing')
    parser.add_argument('--config', type=Path, default=CONFIG_FILE,
                        help='JSON file with default options')

    # Global options
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser


def build_job(args: argparse.Namespace) -> ConversionJob:
    """Merge parsed flags over config file defaults.

    Raises:
        ZeroDotSize: If the resulting dot size is 0
    """
    defaults = ConfigManager(args.config).load()

    dot_size = args.dot_size
    if dot_size is None:
        dot_size = defaults.dot_size if defaults.dot_size is not None else DEFAULT_DOT_SIZE
    inverted = args.inverted if args.inverted is not None else defaults.inverted
    open_after = args.open if args.open is not None else defaults.open_after

    return ConversionJob(
        source=args.source,
        destination=args.destination,
        open_after=open_after,
        config=ConversionConfig(dot_size=dot_size, inverted=inverted),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args)

    try:
        job = build_job(args)
        print_banner(job)

        result = DotProcessor(job.config).process(job, progress=print_progress)
    except NdotterError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    print("\nFinished.")

    if result.open_error:
        print(f"Warning: {result.open_error}", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
