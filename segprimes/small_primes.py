"""
Small-primes sieve: a plain (unsegmented) Sieve of Eratosthenes over
[0, upper_bound), shared read-only by every segment of a query.
"""

import logging
import math

from .sieve import RangeSieve
from .trialdiv import verify_sieve

logger = logging.getLogger(__name__)

# Every composite below 2**63 has a prime factor <= isqrt(2**63 - 1), so a
# sieve over [0, isqrt(2**63 - 1) + 1) covers any interval in the domain.
SMALL_PRIMES_LIMIT = math.isqrt(2**63 - 1) + 1

# The empirical 1.42 * 2**31 bound; larger than SMALL_PRIMES_LIMIT.
LEGACY_SMALL_PRIMES_LIMIT = int(1.42 * (1 << 31))


def small_primes_bound(end: int) -> int:
    """Sieve length sufficient for intervals whose exclusive end is `end`."""
    bound = math.isqrt(max(end - 1, 0)) + 1
    return min(max(bound, 2), SMALL_PRIMES_LIMIT)


def find_small_primes(upper_bound: int, backend: str = "numpy", validate: bool = False) -> RangeSieve:
    """Return a sieve over [0, upper_bound) whose entries are True exactly at the primes."""
    sieve = RangeSieve(upper_bound, base=0, backend=backend, name="small_primes").init()

    sieve.mark_composite(0)
    if upper_bound > 1:
        sieve.mark_composite(1)

    # Past isqrt(upper_bound - 1) every multiple i*j (j >= 2) is already struck.
    r = math.isqrt(upper_bound - 1)
    for i in range(2, r + 1):
        if not sieve.is_prime(i):
            continue
        sieve.mark_multiples(2 * i, i)

    if validate:
        verify_sieve(sieve)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Small primes sieve ready: %d primes below %d", sieve.count(), upper_bound)
    return sieve
