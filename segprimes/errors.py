"""Exceptions raised by segprimes."""


class SegprimesError(Exception):
    """Base class for segprimes errors."""


class SieveAllocationError(SegprimesError, MemoryError):
    """A sieve could not obtain storage for the requested number of flags."""

    def __init__(self, name: str, length: int):
        self.name = name
        self.length = length
        super().__init__(
            f"Failed to create {name} sieve of length {length:,}. "
            "This can happen if there is insufficient physical memory on the system."
        )


class SieveInvariantError(SegprimesError, AssertionError):
    """A sieve entry disagrees with trial division."""

    def __init__(self, name: str, value: int, recorded: bool, expected: bool):
        self.name = name
        self.value = value
        self.recorded = recorded
        self.expected = expected
        super().__init__(
            f"Incorrect primality recorded for {value} in {name} "
            f"({int(expected)} vs {int(recorded)})"
        )
