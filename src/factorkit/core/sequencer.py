"""Prime generation by memoized trial division.

PrimeSequencer hands out primes one at a time in ascending order and keeps
every prime it has emitted, so later candidates are only tested against
known primes. The module-level helpers wrap a fresh sequencer for the
common one-shot cases.
"""

from __future__ import annotations

import itertools
import logging

import numpy as np

logger = logging.getLogger(__name__)


class PrimeSequencer:
    """Restartable, infinite source of primes starting at 2.

    Each instance owns its state: the ascending list of primes emitted so far
    and the next candidate to test. A new instance always starts over at 2.
    Also usable as an iterator::

        seq = PrimeSequencer()
        next(seq)  # 2
        next(seq)  # 3
    """

    def __init__(self) -> None:
        self._primes: list[int] = []
        self._cursor = 2

    def __iter__(self) -> PrimeSequencer:
        return self

    def __next__(self) -> int:
        return self.next_prime()

    def __len__(self) -> int:
        return len(self._primes)

    def __repr__(self) -> str:
        return f"PrimeSequencer(emitted={len(self._primes)}, cursor={self._cursor})"

    @property
    def discovered(self) -> tuple[int, ...]:
        """Primes emitted so far, ascending."""
        return tuple(self._primes)

    @property
    def cursor(self) -> int:
        """Next integer candidate to be tested."""
        return self._cursor

    def next_prime(self) -> int:
        """Return the next prime in ascending order.

        Scans upward from the cursor. A candidate is prime when none of the
        discovered primes divides it.

        Returns:
            The smallest prime greater than every prime emitted so far.
        """
        candidate = self._cursor
        while not self._has_no_known_divisor(candidate):
            candidate += 1

        self._primes.append(candidate)
        self._cursor = candidate + 1

        count = len(self._primes)
        if count & (count - 1) == 0:
            logger.debug("Discovered %d primes, largest %d", count, candidate)

        return candidate

    def _has_no_known_divisor(self, candidate: int) -> bool:
        # Every prime below candidate is already discovered, so stopping at
        # sqrt(candidate) gives the same answer as scanning the whole list.
        for p in self._primes:
            if p * p > candidate:
                return True
            if candidate % p == 0:
                return False
        return True


def is_prime(n: int) -> bool:
    """Check if a single number is prime.

    Uses 6k +/- 1 trial division.

    Args:
        n: Number to check.

    Returns:
        True if n is prime, False otherwise.
    """
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6

    return True


def first_primes(count: int) -> np.ndarray:
    """Return the first count primes.

    Args:
        count: Number of primes to produce.

    Returns:
        uint64 array of the first count primes.

    Raises:
        ValueError: If count is negative.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    return np.fromiter(
        itertools.islice(PrimeSequencer(), count),
        dtype=np.uint64,
        count=count,
    )


def nth_prime(n: int) -> int:
    """Return the nth prime number (1-indexed).

    Args:
        n: Which prime to return (1 = first prime = 2).

    Returns:
        The nth prime number.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    sequencer = PrimeSequencer()
    for _ in range(n - 1):
        sequencer.next_prime()
    return sequencer.next_prime()
