"""
Numeric Checks

NaN, finiteness and integrality for every numeric kind ``type_of`` reports
as "number": ``int``, ``float``, ``Fraction``, ``Decimal`` and numpy scalars.
Callers must pass values already classified as numbers.

Rationals are answered exactly; other reals that cannot be converted to a
float count as not matching.
"""

import logging
import math
from decimal import Decimal
from numbers import Integral, Rational, Real
from typing import Union

logger = logging.getLogger(__name__)

Number = Union[Real, Decimal]

_FLOAT_ERRORS = (OverflowError, TypeError, ValueError)


def number_is_nan(value: Number) -> bool:
    """True for float/numpy NaN and quiet or signalling Decimal NaN."""
    if isinstance(value, Rational):
        return False
    if isinstance(value, Decimal):
        return value.is_nan()
    try:
        return bool(math.isnan(value))
    except _FLOAT_ERRORS as exc:
        logger.debug("NaN check failed for %s: %s", type(value).__name__, exc)
        return False


def number_is_finite(value: Number) -> bool:
    if isinstance(value, Rational):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    try:
        return bool(math.isfinite(value))
    except _FLOAT_ERRORS as exc:
        logger.debug("Finite check failed for %s: %s", type(value).__name__, exc)
        return False


def number_is_integral(value: Number) -> bool:
    """True when a finite number has no fractional component."""
    if isinstance(value, Integral):
        return True
    if isinstance(value, Rational):
        return bool(value.denominator == 1)
    if not number_is_finite(value):
        return False
    if isinstance(value, Decimal):
        return bool(value == value.to_integral_value())
    try:
        return bool(value % 1 == 0)
    except _FLOAT_ERRORS as exc:
        logger.debug("Integral check failed for %s: %s", type(value).__name__, exc)
        return False
