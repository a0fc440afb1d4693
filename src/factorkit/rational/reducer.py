"""GCD and fraction reduction through prime-factor multisets.

The greatest common divisor of a and b is the product of the primes the two
factorizations share, counted with the smaller multiplicity:

    24 = 2 * 2 * 2 * 3
    36 = 2 * 2 * 3 * 3
    common = 2 * 2 * 3 = 12

Zero follows the usual convention: gcd(0, x) == x and gcd(0, 0) == 0.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from factorkit.core.domain import check_u64
from factorkit.core.factorization import factorize, multiset_product


def multiset_intersection(left: Sequence[int], right: Sequence[int]) -> List[int]:
    """Intersect two ascending multisets, keeping the smaller multiplicity.

    Walks both sequences once, advancing whichever side holds the smaller
    value and emitting a value when both sides agree.

    Args:
        left: Non-decreasing sequence.
        right: Non-decreasing sequence.

    Returns:
        Non-decreasing list of the common values.
    """
    common: List[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            i += 1
        elif left[i] > right[j]:
            j += 1
        else:
            common.append(left[i])
            i += 1
            j += 1
    return common


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of a and b.

    Args:
        a: First operand in [0, 2**64 - 1].
        b: Second operand in [0, 2**64 - 1].

    Returns:
        Product of the shared prime factors; 1 for coprime operands.
    """
    a = check_u64(a, "a")
    b = check_u64(b, "b")

    if a == 0:
        return b
    if b == 0:
        return a

    return multiset_product(multiset_intersection(factorize(a), factorize(b)))


def lcm(a: int, b: int) -> int:
    """Least common multiple of a and b; 0 if either is 0.

    Raises:
        ValueError: If the result does not fit in 64 bits.
    """
    a = check_u64(a, "a")
    b = check_u64(b, "b")

    if a == 0 or b == 0:
        return 0

    return check_u64(a // gcd(a, b) * b, "lcm(a, b)")


def reduce_fraction(numerator: int, denominator: int) -> Tuple[int, int]:
    """Reduce numerator/denominator to lowest terms.

    Args:
        numerator: Value in [0, 2**64 - 1].
        denominator: Value in [1, 2**64 - 1].

    Returns:
        (numerator, denominator) divided by their gcd. A zero numerator
        reduces to (0, 1).

    Raises:
        ZeroDivisionError: If denominator is 0.
    """
    numerator = check_u64(numerator, "numerator")
    denominator = check_u64(denominator, "denominator")

    if denominator == 0:
        raise ZeroDivisionError(f"fraction {numerator}/0 has a zero denominator")

    divisor = gcd(numerator, denominator)
    return numerator // divisor, denominator // divisor
