import numpy as np
import pytest

from segprimes import segment as segment_module
from segprimes import trialdiv
from segprimes.errors import SieveAllocationError
from segprimes.segment import count_segment, first_multiple_offsets
from segprimes.small_primes import find_small_primes


@pytest.fixture(scope="module")
def small_primes():
    return find_small_primes(1_000_001)


def brute_count(start, length):
    return sum(trialdiv.is_prime(n) for n in range(start, start + length))


def test_offsets_skip_the_prime_itself():
    primes = np.array([2, 3, 5, 7, 11], dtype=np.int64)
    # Segment starting at 7: 8, 9, 10, 14, 22 are the first multiples struck.
    assert first_multiple_offsets(7, primes).tolist() == [1, 2, 3, 7, 15]


def test_offsets_when_start_is_a_multiple():
    primes = np.array([2, 3, 5], dtype=np.int64)
    assert first_multiple_offsets(30, primes).tolist() == [0, 0, 0]


@pytest.mark.parametrize("start,length", [
    (2, 1), (2, 2), (3, 1), (7, 1), (7, 4), (2, 100), (90, 7), (1000, 1000), (10**9, 300),
])
def test_matches_trial_division(small_primes, start, length):
    assert count_segment(start, length, small_primes) == brute_count(start, length)


def test_prime_at_segment_start_is_counted(small_primes):
    for p in (2, 3, 5, 7, 11, 997):
        assert count_segment(p, 1, small_primes) == 1


def test_validate_passes(small_primes):
    assert count_segment(10**6, 2000, small_primes, validate=True) == brute_count(10**6, 2000)


def test_large_start(small_primes):
    start = 10**12
    assert count_segment(start, 200, small_primes) == brute_count(start, 200)


def test_small_primes_too_short():
    with pytest.raises(ValueError):
        count_segment(1000, 10, find_small_primes(10))


def test_start_below_two(small_primes):
    with pytest.raises(ValueError):
        count_segment(1, 10, small_primes)


def test_nonpositive_length(small_primes):
    with pytest.raises(SieveAllocationError):
        count_segment(10, 0, small_primes)


def test_torch_backend(small_primes):
    pytest.importorskip("torch")
    assert count_segment(1000, 1000, small_primes, backend="torch") == brute_count(1000, 1000)


def test_precomputed_primes(small_primes):
    primes = small_primes.prime_indices()
    for start, length in [(2, 100), (1000, 1000), (10**12, 200)]:
        assert count_segment(start, length, small_primes, primes=primes) == brute_count(start, length)


def test_strikes_in_small_batches(small_primes, monkeypatch):
    monkeypatch.setattr(segment_module, "STRIKE_BATCH", 3)
    assert count_segment(10**6, 2000, small_primes) == brute_count(10**6, 2000)
