"""Integer domain checks shared by the public entry points.

All values handled by factorkit live in the unsigned 64-bit range.
"""

from __future__ import annotations

import numpy as np

U64_MAX = int(np.iinfo(np.uint64).max)


def check_u64(value: int, name: str = "n", minimum: int = 0) -> int:
    """Validate that value is an integer in [minimum, U64_MAX].

    NumPy integer scalars are accepted and converted to plain int.

    Args:
        value: Value to check.
        name: Argument name used in error messages.
        minimum: Smallest accepted value.

    Returns:
        The value as a Python int.

    Raises:
        TypeError: If value is not an integer (bool is rejected too).
        ValueError: If value is outside [minimum, U64_MAX].
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")

    value = int(value)
    if value < minimum or value > U64_MAX:
        raise ValueError(f"{name} must be in [{minimum}, {U64_MAX}], got {value}")

    return value
