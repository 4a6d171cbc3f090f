import pytest

from segprimes import trialdiv


@pytest.fixture(scope="session")
def prime_prefix():
    """prime_prefix[n] is the number of primes in [0, n), by trial division."""
    prefix = [0]
    for n in range(100_001):
        prefix.append(prefix[-1] + trialdiv.is_prime(n))
    return prefix
