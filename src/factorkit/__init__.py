"""factorkit - prime sequencing, factorization and fraction reduction."""

__version__ = "0.1.0"

from factorkit.core.domain import U64_MAX
from factorkit.core.sequencer import PrimeSequencer, first_primes, is_prime, nth_prime
from factorkit.core.factorization import (
    big_omega,
    distinct_prime_factors,
    factor_exponents,
    factorize,
    multiset_product,
    omega,
)
from factorkit.rational.reducer import gcd, lcm, multiset_intersection, reduce_fraction

__all__ = [
    "U64_MAX",
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
    "gcd",
    "lcm",
    "multiset_intersection",
    "reduce_fraction",
]
