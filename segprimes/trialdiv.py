"""Trial-division primality oracle, used to cross-check sieves when validation is on."""

import logging
import math

from .errors import SieveInvariantError

logger = logging.getLogger(__name__)


def is_prime(n: int) -> bool:
    """Return True if n is prime, by trial division."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    r = math.isqrt(n)
    k = 5
    while k <= r:
        if n % k == 0 or n % (k + 2) == 0:
            return False
        k += 6
    return True


def verify_sieve(sieve) -> None:
    """Check every entry of a sieve against trial division.

    Raises SieveInvariantError on the first entry whose recorded primality
    differs from is_prime(base + i).
    """
    logger.debug("Verifying %r against trial division", sieve)
    for i, recorded in enumerate(sieve.flags.tolist()):
        value = sieve.base + i
        expected = is_prime(value)
        if expected != recorded:
            raise SieveInvariantError(sieve.name, value, recorded, expected)
