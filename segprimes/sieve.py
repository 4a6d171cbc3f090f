"""
Boolean range sieve: one candidate-primality flag per integer in
[base, base + length).

Local index i stands for the integer base + i. Flags start out True
("possibly prime") after init() and are only ever cleared. The flag store
is a 1-byte bool buffer, a NumPy array by default or a CPU torch tensor
with backend="torch".
"""

import logging

import numpy as np

from .errors import SieveAllocationError

logger = logging.getLogger(__name__)

BACKENDS = ("numpy", "torch")


def _allocate(length: int, backend: str):
    if backend == "numpy":
        return np.empty(length, dtype=bool)
    if backend == "torch":
        import torch
        return torch.empty(length, dtype=torch.bool)
    raise ValueError(f"Unknown sieve backend {backend!r}; expected one of {BACKENDS}")


class RangeSieve:
    """Flags for the integers in [base, base + length)."""

    def __init__(self, length: int, base: int = 0, backend: str = "numpy", name: str = "sieve"):
        self.base = base
        self.length = length
        self.backend = backend
        self.name = name

        if length <= 0:
            raise SieveAllocationError(name, length)
        try:
            self._flags = _allocate(length, backend)
        except MemoryError as exc:
            raise SieveAllocationError(name, length) from exc
        except RuntimeError as exc:
            # torch reports allocator failures as RuntimeError
            raise SieveAllocationError(name, length) from exc
        logger.debug("Allocated %s sieve of length %d at base %d (%s)", name, length, base, backend)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.destroy()

    def __len__(self):
        return self.length

    def __repr__(self):
        state = "destroyed" if self._flags is None else self.backend
        return f"RangeSieve(name={self.name!r}, base={self.base}, length={self.length}, {state})"

    @property
    def flags(self):
        if self._flags is None:
            raise RuntimeError(f"{self.name} sieve has been destroyed")
        return self._flags

    def _check_index(self, i: int) -> int:
        if not 0 <= i < self.length:
            raise IndexError(f"index {i} out of range for {self.name} sieve of length {self.length}")
        return i

    def init(self) -> "RangeSieve":
        """Mark every entry as possibly prime."""
        if self.backend == "numpy":
            self.flags.fill(True)
        else:
            self.flags.fill_(True)
        return self

    def mark_composite(self, i: int) -> None:
        self.flags[self._check_index(i)] = False

    def mark_multiples(self, offset: int, step: int) -> None:
        """Clear offset, offset + step, ... up to the end of the sieve."""
        if offset < 0 or step <= 0:
            raise ValueError(f"invalid stride offset={offset} step={step}")
        if offset < self.length:
            self.flags[offset::step] = False

    def is_prime(self, i: int) -> bool:
        return bool(self.flags[self._check_index(i)])

    def count(self) -> int:
        """Number of entries still flagged possibly prime."""
        if self.backend == "numpy":
            return int(np.count_nonzero(self.flags))
        return int(self.flags.count_nonzero().item())

    def prime_indices(self) -> np.ndarray:
        """Local indices still flagged, as an int64 array."""
        if self.backend == "numpy":
            return np.flatnonzero(self.flags).astype(np.int64)
        return self.flags.nonzero().squeeze(1).numpy().astype(np.int64)

    def destroy(self) -> None:
        self._flags = None
