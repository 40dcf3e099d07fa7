"""
Randomly sample lines from a file or stdin in one pass.

Usage:
    cat data.txt | samp -n 20          # 20 lines via reservoir sampling
    samp -r 0.01 --seed 7 data.txt     # keep each line with probability 1%
    samp -n 100 data.csv -p            # keep the CSV header line
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TextIO

from dotenv import find_dotenv, load_dotenv
from tqdm import tqdm

from sample_lines import __version__
from sample_lines.config import FixedCount, Rate, SamplerConfig
from sample_lines.pipeline import SamplingRun
from sample_lines.streams import ERRORS, iter_lines, open_input, silence_stdout, write_lines

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "SAMP_SEED"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="samp",
        description="Randomly sample lines from a file or stdin using reservoir sampling",
        epilog="Example usage:\n    cat data.txt | samp -n 20   # Sample 20 lines from data.txt",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "-n",
        dest="sample_size",
        type=int,
        metavar="NUM",
        help="Number of lines to sample",
    )
    mode.add_argument(
        "-r",
        "--rate",
        type=float,
        metavar="RATE",
        help="Keep each line independently with this probability (0 to 1)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        default=None,
        help=f"Seed for reproducible sampling (default: ${SEED_ENV_VAR} if set)",
    )
    parser.add_argument(
        "-p",
        "--preserve-headers",
        type=int,
        nargs="?",
        const=1,
        default=0,
        metavar="NUM",
        help="Number of header lines to preserve (default: 1 if specified without a value)",
    )
    parser.add_argument(
        "--keep-order",
        action="store_true",
        help="Emit sampled lines in their original input order",
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a line counter on stderr"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        metavar="FILE",
        help="Input file (reads from stdin if not provided)",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _default_seed(parser: argparse.ArgumentParser) -> int | None:
    """Read the seed from the environment (after loading ``.env``)."""
    raw = os.environ.get(SEED_ENV_VAR)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        parser.error(f"{SEED_ENV_VAR} must be an integer, got {raw!r}")


def config_from_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> SamplerConfig:
    """Build a validated :class:`SamplerConfig`, exiting via ``parser.error`` if invalid."""
    seed = args.seed if args.seed is not None else _default_seed(parser)
    try:
        if args.sample_size is not None:
            mode: FixedCount | Rate = FixedCount(count=args.sample_size)
        else:
            mode = Rate(probability=args.rate)
        return SamplerConfig(
            mode=mode,
            seed=seed,
            header_count=args.preserve_headers,
            preserve_order=args.keep_order,
        )
    except ValueError as exc:
        parser.error(str(exc))


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Entry point for ``samp``; returns the process exit code.

    *stdin* and *stdout* replace the standard streams when given.
    """
    load_dotenv(find_dotenv(usecwd=True))
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    config = config_from_args(args, parser)

    if stdout is None:
        sys.stdout.reconfigure(errors=ERRORS)
        stdout = sys.stdout

    if stdin is not None and args.file in (None, "-"):
        source = stdin
    else:
        try:
            source = open_input(args.file)
        except OSError as exc:
            print(f"Error: cannot open input file: {exc}", file=sys.stderr)
            return 1

    lines = iter_lines(source)
    if args.progress:
        lines = tqdm(lines, desc="lines", unit=" lines", file=sys.stderr)

    run = SamplingRun(config)
    try:
        result = run.run(lines)
    finally:
        if source is not stdin and source is not sys.stdin:
            source.close()

    try:
        write_lines(result.output, stdout)
    except BrokenPipeError:
        logger.debug("Output closed early; stopping")
        if stdout is sys.stdout:
            silence_stdout()
    return 0


if __name__ == "__main__":
    sys.exit(main())
