"""Core prime generation and factorization utilities."""

from factorkit.core.domain import U64_MAX, check_u64
from factorkit.core.sequencer import PrimeSequencer, first_primes, is_prime, nth_prime
from factorkit.core.factorization import (
    big_omega,
    distinct_prime_factors,
    factor_exponents,
    factorize,
    multiset_product,
    omega,
)

__all__ = [
    "U64_MAX",
    "check_u64",
    "PrimeSequencer",
    "first_primes",
    "is_prime",
    "nth_prime",
    "big_omega",
    "distinct_prime_factors",
    "factor_exponents",
    "factorize",
    "multiset_product",
    "omega",
]
