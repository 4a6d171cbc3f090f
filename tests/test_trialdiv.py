import pytest

from segprimes import trialdiv
from segprimes.errors import SieveInvariantError
from segprimes.sieve import RangeSieve


def test_small_values():
    primes = [n for n in range(-10, 50) if trialdiv.is_prime(n)]
    assert primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]


@pytest.mark.parametrize("n,expected", [
    (25, False),
    (49, False),
    (7919, True),
    (1_000_003, True),
    (1_000_001, False),
    (2_147_483_647, True),
    (1_000_003 * 1_000_033, False),
])
def test_larger_values(n, expected):
    assert trialdiv.is_prime(n) is expected


def test_verify_sieve_detects_mismatch():
    s = RangeSieve(10, base=10, name="segment").init()
    with pytest.raises(SieveInvariantError) as excinfo:
        trialdiv.verify_sieve(s)
    assert excinfo.value.value == 10
    assert excinfo.value.recorded is True
    assert excinfo.value.expected is False
    assert isinstance(excinfo.value, AssertionError)


def test_verify_sieve_accepts_correct_flags():
    s = RangeSieve(6, base=10).init()
    for i in (0, 2, 4, 5):  # 10, 12, 14, 15
        s.mark_composite(i)
    trialdiv.verify_sieve(s)
