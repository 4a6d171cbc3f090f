"""Count the primes in one bounded segment [start, start + length)."""

import logging
import math
from typing import Optional

import numpy as np

from .sieve import RangeSieve
from .trialdiv import verify_sieve

logger = logging.getLogger(__name__)

# Primes struck per vectorized offset computation; bounds the temporaries.
STRIKE_BATCH = 1 << 16


def first_multiple_offsets(start: int, primes: np.ndarray) -> np.ndarray:
    """
    Offset from `start` of the first multiple of each prime that should be struck.

    That is the smallest multiple >= start, except when the multiple is the
    prime itself (start <= p), in which case it is the next one, 2p.
    """
    primes = primes.astype(np.int64, copy=False)
    offsets = (primes - np.int64(start) % primes) % primes
    # start + offset == p  <=>  start <= p, given start >= 2
    offsets[primes >= start] += primes[primes >= start]
    return offsets


def count_segment(start: int, length: int, small_primes: RangeSieve,
                  backend: str = "numpy", validate: bool = False,
                  primes: Optional[np.ndarray] = None) -> int:
    """
    Return the number of primes in [start, start + length), 2 <= start, 0 < length.

    `primes` is small_primes.prime_indices(); callers sieving many segments
    should extract it once and pass it in.
    """
    if start < 2:
        raise ValueError(f"segment start must be at least 2, got {start}")
    end = start + length
    if length > 0 and math.isqrt(end - 1) >= small_primes.length:
        raise ValueError(
            f"small primes sieve of length {small_primes.length} cannot cover segment ending at {end}"
        )

    with RangeSieve(length, base=start, backend=backend, name="segment") as segment:
        segment.init()

        if primes is None:
            primes = small_primes.prime_indices()
        # Primes with p*p >= end are never the smallest factor of a composite below end.
        primes = primes[:np.searchsorted(primes, math.isqrt(end - 1), side="right")]

        for lo in range(0, len(primes), STRIKE_BATCH):
            batch = primes[lo:lo + STRIKE_BATCH]
            offsets = first_multiple_offsets(start, batch)
            for p, kp in zip(batch.tolist(), offsets.tolist()):
                segment.mark_multiples(kp, p)

        if validate:
            verify_sieve(segment)

        num_primes = segment.count()

    logger.debug("Segment [%d, %d): %d primes", start, end, num_primes)
    return num_primes
