#!/usr/bin/env python3
"""
Count the primes in [START, START+LENGTH).

Examples:
  segprimes 0 1000000
  python -m segprimes 1000000000000 100000000 --max-sieve-length 10000000 -v
"""

import argparse
import logging
import sys

from .config import load_config
from .count_primes import count_primes_in_interval
from .errors import SieveAllocationError, SieveInvariantError
from .sieve import BACKENDS

logger = logging.getLogger("segprimes")


def setup_logging(verbose: bool = False):
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()],
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="segprimes", description="Count primes in [START, START+LENGTH) with a segmented sieve.")
    ap.add_argument("start", type=int, help="Low endpoint of the interval (inclusive).")
    ap.add_argument("length", type=int, help="Number of integers in the interval.")
    ap.add_argument("--max-sieve-length", type=int, default=None,
                    help="Largest segment sieved at once (default: 2**30).")
    ap.add_argument("--small-primes-bound", type=int, default=None,
                    help="Fixed length of the small primes sieve (default: sqrt of the interval end).")
    ap.add_argument("--backend", choices=BACKENDS, default=None,
                    help="Flag storage for the sieves (default: numpy).")
    ap.add_argument("--validate", action="store_true", default=None,
                    help="Cross-check every sieve entry by trial division (slow).")
    ap.add_argument("--config", default=None,
                    help="TOML file with a [tool.segprimes] table (default: pyproject.toml).")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress for every segment.")
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(
            args.config,
            max_sieve_length=args.max_sieve_length,
            small_primes_bound=args.small_primes_bound,
            backend=args.backend,
            validate=args.validate,
        )
    except ValueError as e:
        ap.error(str(e))

    try:
        num_primes = count_primes_in_interval(args.start, args.length, config)
    except ValueError as e:
        ap.error(str(e))
    except SieveAllocationError as e:
        logger.error(f"{e}\nAborting.")
        return 1
    except SieveInvariantError as e:
        logger.error(str(e))
        return 1

    print(num_primes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
