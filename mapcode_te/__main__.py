# -*- coding: utf-8 -*-
"""
CLI entry point for the mapcode test-set generator.

Run with::

    python -m mapcode_te decode NLD 49.4V          # decode codes
    python -m mapcode_te encode 52.376514 4.908543  # encode a lat/lon
    python -m mapcode_te grid 10000 > grid.txt      # grid test set
    python -m mapcode_te random 1000 2 1234         # random, seed 1234
    python -m mapcode_te boundaries --catalog boundaries.txt

Records are written to stdout; progress, statistics and errors to
stderr.  Exit status is 0 on success, 1 on an input error and 2 on an
internal (self-check) error.

Author
------
Ava Courtney

License
-------
MIT License
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
import argparse
import logging
import math
import sys
from pathlib import Path
from typing import List, Optional

# Internal
from mapcode_te import __version__
from mapcode_te.logging_config import setup_logging
from mapcode_te.testset.base import Codec
from mapcode_te.testset.boundaries import BoundaryCaseGenerator
from mapcode_te.testset.catalog import ArrayBoundaryCatalog
from mapcode_te.testset.codec import MapcodeCodec
from mapcode_te.testset.config import (
    DEFAULT_PRECISION,
    SHOW_PROGRESS,
    RunConfig,
)
from mapcode_te.testset.errors import (
    EXIT_INPUT_ERROR,
    EXIT_INTERNAL_ERROR,
    EXIT_OK,
    InputError,
    MapcodeTEError,
    VerificationError,
)
from mapcode_te.testset.formatter import RecordFormatter
from mapcode_te.testset.models import MAX_PRECISION, MIN_PRECISION
from mapcode_te.testset.runner import CorpusRunner
from mapcode_te.testset.sampler import SphereSampler

_EPILOG = """
Output format of the test-set commands (stdout):
  <number-of-aliases> <lat-deg> <lon-deg> [<x> <y> <z>]
  <territory> <mapcode>      (repeated 'number-of-aliases' times)
                             (empty line, then the next record)
Ranges:
  number-of-aliases : >= 0
  lat-deg, lon-deg  : [-90..90], [-180..180]
  x, y, z           : [-1..1]

The lat/lon pairs are distributed over the surface of the Earth; the
(x, y, z) coordinates lie on a sphere with radius 1 and are meant for
visualization of the data set.

Progress and statistics are written to stderr, so stdout can be
redirected to a file.

Examples:
  python -m mapcode_te grid 100           # grid of 100 points
  python -m mapcode_te grid 100 --xyz     # same, with (x, y, z)
  python -m mapcode_te random 100 0 42    # reproducible random set
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with the input-error status."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(EXIT_INPUT_ERROR, f"{self.prog}: error: {message}\n")


def _precision(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"extra digits must be an integer, got {text!r}"
        )
    if not MIN_PRECISION <= value <= MAX_PRECISION:
        raise argparse.ArgumentTypeError(
            f"parameter extraDigits must be in "
            f"[{MIN_PRECISION}..{MAX_PRECISION}], got {value}"
        )
    return value


def _count(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"number of points must be an integer, got {text!r}"
        )
    if value < 1:
        raise argparse.ArgumentTypeError(
            "total number of points to generate must be >= 1"
        )
    return value


def _coordinate(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"latitude and longitude must be numeric, got {text!r}"
        )
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(
            f"latitude and longitude must be finite, got {text!r}"
        )
    return value


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    common = _ArgumentParser(add_help=False)
    common.add_argument(
        "--self-check", action="store_true",
        help="Verify every round trip and stop at the first mismatch",
    )
    common.add_argument(
        "--verify", action="store_true",
        help="Verify every round trip, report mismatches as warnings",
    )
    common.add_argument(
        "--microdegrees", action="store_true",
        help="Truncate coordinates to microdegrees before encoding",
    )
    common.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="More log output (-v info, -vv debug)",
    )
    common.add_argument(
        "--log-file", default=None,
        help="Also write log messages to this file",
    )

    corpus = _ArgumentParser(add_help=False)
    corpus.add_argument(
        "--xyz", action="store_true",
        help="Add unit-sphere (x, y, z) coordinates to every record",
    )
    corpus.add_argument(
        "--strict", action="store_true",
        help="Stop at the first coordinate that cannot be encoded",
    )
    corpus.add_argument(
        "--no-progress", action="store_true",
        help="Do not report progress on stderr",
    )

    parser = _ArgumentParser(
        prog="python -m mapcode_te",
        description="Mapcode test-set generator and codec self-check",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_EPILOG,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command", metavar="command")
    commands.required = True

    decode = commands.add_parser(
        "decode", parents=[common],
        help="Decode mapcodes to lat/lon",
        description="Decode mapcodes to lat/lon. The default territory is "
                    "used when a mapcode is a shorthand local code.",
    )
    decode.add_argument("territory", help="Default territory, e.g. NLD")
    decode.add_argument("codes", nargs="+", metavar="mapcode")

    encode = commands.add_parser(
        "encode", parents=[common],
        help="Encode a lat/lon to all of its mapcodes",
        description="Encode a lat/lon. With a territory, encoding only "
                    "succeeds if the lat/lon lies in that territory.",
    )
    encode.add_argument("lat", type=_coordinate, help="Latitude -90..90")
    encode.add_argument("lon", type=_coordinate, help="Longitude -180..180")
    encode.add_argument("territory", nargs="?", default=None)
    encode.add_argument(
        "-p", "--precision", type=_precision, default=DEFAULT_PRECISION,
        help=f"Extra digits {MIN_PRECISION}-{MAX_PRECISION} "
             f"(default: {DEFAULT_PRECISION})",
    )

    boundaries = commands.add_parser(
        "boundaries", parents=[common, corpus],
        help="Test set from the territory boundary catalog",
    )
    boundaries.add_argument(
        "precision", nargs="?", type=_precision, default=DEFAULT_PRECISION,
    )
    boundaries.add_argument(
        "--catalog", type=Path, required=True,
        help="Boundary records, one 'min_lon min_lat max_lon max_lat' "
             "line per record in microdegrees",
    )

    grid = commands.add_parser(
        "grid", parents=[common, corpus],
        help="Test set of grid-distributed points on the sphere",
    )
    grid.add_argument("count", type=_count, help="Number of points")
    grid.add_argument(
        "precision", nargs="?", type=_precision, default=DEFAULT_PRECISION,
    )

    random = commands.add_parser(
        "random", parents=[common, corpus],
        help="Test set of uniformly random points on the sphere",
    )
    random.add_argument("count", type=_count, help="Number of points")
    random.add_argument(
        "precision", nargs="?", type=_precision, default=DEFAULT_PRECISION,
    )
    random.add_argument(
        "seed", nargs="?", type=int, default=0,
        help="Random seed, 0 for arbitrary (default: 0)",
    )
    return parser


def _config_from_args(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        precision=getattr(args, "precision", DEFAULT_PRECISION),
        use_xyz=getattr(args, "xyz", False),
        verify=args.verify,
        self_check=args.self_check,
        strict=getattr(args, "strict", False),
        limit_to_microdegrees=args.microdegrees,
        show_progress=0 if getattr(args, "no_progress", False)
        else SHOW_PROGRESS,
    )


def main(argv: Optional[List[str]] = None,
         codec: Optional[Codec] = None) -> int:
    """Parse arguments and run one command.

    Parameters
    ----------
    argv : List[str], optional
        Arguments without the program name.  Default ``sys.argv[1:]``.
    codec : Codec, optional
        Codec under test.  Default ``MapcodeCodec()``.

    Returns
    -------
    int
        Process exit status.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose,
                                                       logging.DEBUG)
    setup_logging(level, args.log_file)
    config = _config_from_args(args)
    if config.self_check:
        print("(self-check mode: self checking enabled)", file=sys.stderr)

    if codec is None:
        try:
            codec = MapcodeCodec()
        except ImportError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return EXIT_INTERNAL_ERROR

    runner = CorpusRunner(codec, config, RecordFormatter(sys.stdout, sys.stderr))

    try:
        if args.command == "decode":
            runner.decode(args.territory, args.codes)
        elif args.command == "encode":
            runner.encode(args.lat, args.lon, args.territory)
        elif args.command == "boundaries":
            try:
                catalog = ArrayBoundaryCatalog.from_file(args.catalog)
            except (OSError, ValueError) as exc:
                raise InputError(str(exc)) from exc
            source = BoundaryCaseGenerator(catalog, with_xyz=config.use_xyz)
            runner.generate(source, len(source))
        else:
            seed = args.seed if args.command == "random" else None
            source = SphereSampler(args.command, args.count, seed=seed,
                                   with_xyz=config.use_xyz)
            runner.generate(source, len(source))
    except VerificationError as exc:
        # already logged by the runner
        return exc.exit_code
    except MapcodeTEError as exc:
        if isinstance(exc, InputError):
            parser.print_usage(sys.stderr)
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
