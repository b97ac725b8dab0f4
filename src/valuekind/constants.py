"""
Numeric boundary constants.

Integers beyond these bounds cannot be represented exactly by an IEEE-754
double, so they are not considered "safe" even though Python ints are
unbounded.
"""

MAX_SAFE_INTEGER: int = 2**53 - 1
MIN_SAFE_INTEGER: int = -(2**53 - 1)
