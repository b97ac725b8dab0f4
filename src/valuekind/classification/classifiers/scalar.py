"""
Scalar Classifiers

Symbols, booleans, numbers and strings.
"""

from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any

import numpy as np

from ...tags import TypeTag
from ..base import TagClassifier


class SymbolClassifier(TagClassifier):
    """Identifies enum members, Python's named unique constants."""

    tag = TypeTag.SYMBOL

    def can_classify(self, value: Any) -> bool:
        return isinstance(value, Enum)


class BooleanClassifier(TagClassifier):
    tag = TypeTag.BOOLEAN

    def can_classify(self, value: Any) -> bool:
        return isinstance(value, (bool, np.bool_))


class NumberClassifier(TagClassifier):
    """Identifies real numbers, numpy scalars and Decimals. Complex is not a number here."""

    tag = TypeTag.NUMBER

    def can_classify(self, value: Any) -> bool:
        if isinstance(value, (bool, np.bool_)):
            return False
        return isinstance(value, (Real, Decimal))


class StringClassifier(TagClassifier):
    tag = TypeTag.STRING

    def can_classify(self, value: Any) -> bool:
        return isinstance(value, str)
