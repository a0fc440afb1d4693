"""GCD and fraction reduction built on factorization."""

from factorkit.rational.reducer import gcd, lcm, multiset_intersection, reduce_fraction

__all__ = [
    "gcd",
    "lcm",
    "multiset_intersection",
    "reduce_fraction",
]
