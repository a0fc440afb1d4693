"""Factorization utilities.

Responsibility: prime-factor multisets and the counts derived from them.
This file must not know about GCDs or fractions.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional

from factorkit.core.domain import check_u64
from factorkit.core.sequencer import PrimeSequencer

logger = logging.getLogger(__name__)


def factorize(n: int, primes: Optional[Iterable[int]] = None) -> List[int]:
    """Decompose n into its prime factors, with multiplicity.

    If a finite prime source runs out before n is fully divided, the
    remaining quotient is appended as the last factor. With the default
    sequencer this cannot happen.

    Args:
        n: Integer to factor, 1 <= n <= 2**64 - 1.
        primes: Ascending prime source. Defaults to a fresh PrimeSequencer.

    Returns:
        Factors whose product is n, non-decreasing for the default source.
        Empty for n = 1, [n] for prime n.
    """
    remaining = check_u64(n, "n", minimum=1)
    complete_source = primes is None
    source = iter(PrimeSequencer() if complete_source else primes)

    factors: List[int] = []
    while remaining > 1:
        p = next(source, None)
        if p is None:
            logger.debug("Prime source exhausted, keeping residue %d", remaining)
            factors.append(remaining)
            break
        if complete_source and p * p > remaining:
            # every prime below p has been tried, so remaining is prime
            factors.append(remaining)
            break
        while remaining % p == 0:
            factors.append(p)
            remaining //= p

    logger.debug("factorize(%d) -> %s", n, factors)
    return factors


def factor_exponents(n: int) -> Dict[int, int]:
    """Map each distinct prime factor of n to its multiplicity.

    Keys are in ascending order. factor_exponents(360) == {2: 3, 3: 2, 5: 1}.
    """
    return dict(Counter(factorize(n)))


def distinct_prime_factors(n: int) -> List[int]:
    """Return the distinct prime factors of n, ascending."""
    return list(factor_exponents(n))


def omega(n: int) -> int:
    """Count distinct prime factors of n (little omega).

    Args:
        n: Integer to factor.

    Returns:
        Number of distinct prime factors; 0 for n = 1.
    """
    return len(factor_exponents(n))


def big_omega(n: int) -> int:
    """Count prime factors of n with multiplicity (big Omega).

    Args:
        n: Integer to factor.

    Returns:
        Total count of prime factors with multiplicity.
    """
    return len(factorize(n))


def multiset_product(values: Iterable[int]) -> int:
    """Multiply out a factor multiset. The empty product is 1."""
    result = 1
    for v in values:
        result *= v
    return result
