"""
cli.py

Command line entry point.

  modring 17 12            # 17 mod 12, reduction diagram
  modring -c 3 8           # i -> i + 3 inside Z/8
  modring 7 3 --log-level DEBUG --log-file modring.log
"""

import argparse
import logging
from typing import List, Optional

from modring import __version__
from modring.config import U32_MAX
from modring.configuration import ActiveConfiguration, Mode
from modring.errors import InvalidConfiguration
from modring.logging_config import setup_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def validate_number(s: str) -> int:
    """argparse type: a non-negative integer that fits in 32 bits."""
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{s}' must be a 0+ number") from None
    if n < 0 or n > U32_MAX:
        raise argparse.ArgumentTypeError(f"'{s}' must be a 0+ number")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modring",
        description="Animated ring diagram of natural mod modulus.",
    )
    parser.add_argument("-c", "--cycle", action="store_true",
                        help="Enable cycle mode (repeatedly add NATURAL inside Z/MODULUS)")
    parser.add_argument("natural", type=validate_number,
                        help="Operand (reduction or cycle addition)")
    parser.add_argument("modulus", type=validate_number,
                        help="The modulus value (1 or more)")
    parser.add_argument("--log-level", default="INFO", choices=LOG_LEVELS,
                        help="Logging verbosity (default: INFO)")
    parser.add_argument("--log-file", default=None,
                        help="Also write the log to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[List[str]] = None):
    """Parse argv into (namespace, ActiveConfiguration). Exits on bad input."""
    parser = build_parser()
    args = parser.parse_args(argv)
    mode = Mode.CYCLE if args.cycle else Mode.REDUCTION
    try:
        config = ActiveConfiguration(args.natural, args.modulus, mode)
    except InvalidConfiguration as e:
        parser.error(str(e))
    return args, config


def main(argv: Optional[List[str]] = None) -> None:
    args, config = parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)
    logger.info(f"Starting with {config.describe()} [{config.mode.value}]")

    # pygame prints a banner and opens a window; keep it out of argument parsing.
    from modring.app import run
    run(config)
