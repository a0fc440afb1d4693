"""Tests for prime sequencer functionality."""

import itertools
import logging

import numpy as np
import pytest

from factorkit.core.sequencer import (
    PrimeSequencer,
    first_primes,
    is_prime,
    nth_prime,
)


class TestPrimeSequencer:
    """Tests for PrimeSequencer class."""

    def test_first_eight_primes(self):
        """Test the first values produced."""
        seq = PrimeSequencer()
        values = [seq.next_prime() for _ in range(8)]
        assert values == [2, 3, 5, 7, 11, 13, 17, 19]

    def test_fresh_instance_restarts(self):
        """Test that a new instance starts again at 2."""
        first = PrimeSequencer()
        for _ in range(20):
            first.next_prime()

        second = PrimeSequencer()
        assert second.next_prime() == 2
        assert first.next_prime() == 73

    def test_initial_state(self):
        """Test state of an unused sequencer."""
        seq = PrimeSequencer()
        assert seq.discovered == ()
        assert seq.cursor == 2
        assert len(seq) == 0

    def test_discovered_tracks_emitted(self):
        """Test memoized list matches emitted values."""
        seq = PrimeSequencer()
        emitted = [seq.next_prime() for _ in range(25)]

        assert list(seq.discovered) == emitted
        assert len(seq) == 25
        assert emitted[-1] == 97
        assert seq.cursor == 98

    def test_no_gaps_or_duplicates(self):
        """Test emitted primes are exactly the primes up to the last one."""
        seq = PrimeSequencer()
        emitted = [seq.next_prime() for _ in range(200)]

        expected = [n for n in range(2, emitted[-1] + 1) if is_prime(n)]
        assert emitted == expected

    def test_strictly_increasing(self):
        """Test values never repeat or reorder."""
        seq = PrimeSequencer()
        values = list(itertools.islice(seq, 500))
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_iterator_protocol(self):
        """Test that the sequencer works with iter/next."""
        seq = PrimeSequencer()
        assert iter(seq) is seq
        assert next(seq) == 2
        assert next(seq) == 3
        assert seq.next_prime() == 5

    def test_discovered_is_snapshot(self):
        """Test that discovered cannot mutate internal state."""
        seq = PrimeSequencer()
        seq.next_prime()
        snapshot = seq.discovered
        seq.next_prime()
        assert snapshot == (2,)
        assert seq.discovered == (2, 3)

    def test_logs_at_power_of_two_counts(self, caplog):
        """Test a debug record is emitted when the list size is a power of two."""
        seq = PrimeSequencer()
        with caplog.at_level(logging.DEBUG, logger="factorkit.core.sequencer"):
            for _ in range(10):
                seq.next_prime()

        messages = [r.getMessage() for r in caplog.records if r.name == "factorkit.core.sequencer"]
        assert messages == [
            "Discovered 1 primes, largest 2",
            "Discovered 2 primes, largest 3",
            "Discovered 4 primes, largest 7",
            "Discovered 8 primes, largest 19",
        ]

    def test_matches_primesieve(self):
        """Cross-check against an independent prime generator."""
        primesieve = pytest.importorskip("primesieve")
        values = list(itertools.islice(PrimeSequencer(), 1000))
        assert values == list(primesieve.n_primes(1000))


class TestIsPrime:
    """Tests for is_prime function."""

    def test_small_primes(self):
        """Test known small primes."""
        for p in [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31]:
            assert is_prime(p), f"{p} should be prime"

    def test_small_composites(self):
        """Test known small composites."""
        for c in [4, 6, 8, 9, 10, 12, 14, 15, 16, 18, 20, 25, 49]:
            assert not is_prime(c), f"{c} should not be prime"

    def test_edge_cases(self):
        """Test edge cases."""
        assert not is_prime(0)
        assert not is_prime(1)
        assert not is_prime(-7)

    def test_larger_values(self):
        assert is_prime(52579)
        assert is_prime(6700417)
        assert not is_prime(1000000001)


class TestFirstPrimes:
    """Tests for first_primes function."""

    def test_first_ten(self):
        primes = first_primes(10)
        expected = np.array([2, 3, 5, 7, 11, 13, 17, 19, 23, 29], dtype=np.uint64)
        np.testing.assert_array_equal(primes, expected)

    def test_returns_uint64_array(self):
        primes = first_primes(5)
        assert isinstance(primes, np.ndarray)
        assert primes.dtype == np.uint64

    def test_zero_count(self):
        assert len(first_primes(0)) == 0

    def test_invalid_count(self):
        with pytest.raises(ValueError):
            first_primes(-1)


class TestNthPrime:
    """Tests for nth_prime function."""

    def test_first_primes(self):
        assert nth_prime(1) == 2
        assert nth_prime(2) == 3
        assert nth_prime(5) == 11

    def test_100th_prime(self):
        assert nth_prime(100) == 541

    def test_invalid_index(self):
        with pytest.raises(ValueError):
            nth_prime(0)
