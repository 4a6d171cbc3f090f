"""
count_primes_in_interval() with a segmented Sieve of Eratosthenes.

The small-primes sieve holds every prime up to sqrt of the interval's high
end, so every composite in [start, start + length) has a factor in it. The
interval is then cut into segments of at most max_sieve_length integers; each
segment gets its own short-lived sieve, struck with the small primes and
counted. The primes are read out of the small-primes sieve once per query.
Peak memory is the small-primes sieve, the int64 array of its primes and one
segment sieve, however long the interval is.
"""

import logging
from typing import Iterator, Optional, Tuple

from .config import SieveConfig
from .segment import count_segment
from .small_primes import find_small_primes, small_primes_bound

logger = logging.getLogger(__name__)

# Integers are signed 64-bit: the interval must lie below 2**63.
INTERVAL_END_LIMIT = 1 << 63


def iter_segments(start: int, length: int, max_sieve_length: int) -> Iterator[Tuple[int, int]]:
    """Yield (start, length) for consecutive segments covering [start, start + length)."""
    while length > max_sieve_length:
        yield start, max_sieve_length
        start += max_sieve_length
        length -= max_sieve_length
    if length > 0:
        yield start, length


def count_primes_in_interval(start: int, length: int, config: Optional[SieveConfig] = None) -> int:
    """Return the number of primes in [start, start + length)."""
    if config is None:
        config = SieveConfig()

    # Nonpositive-length intervals are empty.
    if length <= 0:
        return 0
    # Nothing below 2 is prime.
    if start + length <= 2:
        return 0
    if start + length > INTERVAL_END_LIMIT:
        raise ValueError(f"interval [{start}, {start + length}) does not lie below 2**63")

    if start < 2:
        length -= 2 - start
        start = 2

    end = start + length
    upper_bound = config.small_primes_bound or small_primes_bound(end)
    logger.info(
        "Counting primes in [%d, %d) with small primes below %d, segments of at most %d",
        start, end, upper_bound, config.max_sieve_length,
    )

    num_primes = 0
    small_primes = find_small_primes(upper_bound, backend=config.backend, validate=config.validate)
    with small_primes:
        primes = small_primes.prime_indices()
        for seg_start, seg_length in iter_segments(start, length, config.max_sieve_length):
            num_primes += count_segment(
                seg_start, seg_length, small_primes,
                backend=config.backend, validate=config.validate, primes=primes,
            )

    logger.info("Found %d primes in [%d, %d)", num_primes, start, end)
    return num_primes


def count_primes_below(n: int, config: Optional[SieveConfig] = None) -> int:
    """Return the number of primes in [0, n)."""
    return count_primes_in_interval(0, n, config)
