"""
segprimes: count the primes in [start, start + length) below 2**63 with a
segmented Sieve of Eratosthenes in bounded memory.
"""

__version__ = "0.1.0"

from .config import DEFAULT_MAX_SIEVE_LENGTH, SieveConfig, load_config
from .count_primes import count_primes_below, count_primes_in_interval, iter_segments
from .errors import SegprimesError, SieveAllocationError, SieveInvariantError
from .segment import count_segment
from .sieve import RangeSieve
from .small_primes import SMALL_PRIMES_LIMIT, find_small_primes, small_primes_bound

__all__ = [
    'count_primes_in_interval', 'count_primes_below', 'iter_segments', 'count_segment',
    'find_small_primes', 'small_primes_bound', 'SMALL_PRIMES_LIMIT', 'RangeSieve',
    'SieveConfig', 'load_config', 'DEFAULT_MAX_SIEVE_LENGTH',
    'SegprimesError', 'SieveAllocationError', 'SieveInvariantError',
]
