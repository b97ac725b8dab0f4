"""
Sequence Classifier
"""

from collections.abc import Sequence
from typing import Any

import numpy as np
import pandas as pd

from ...tags import TypeTag
from ..base import TagClassifier

ARRAY_TYPES: tuple[type, ...] = (np.ndarray, pd.Series, pd.Index)


class ArrayClassifier(TagClassifier):
    """Identifies ordered sequences other than strings."""

    tag = TypeTag.ARRAY

    def can_classify(self, value: Any) -> bool:
        if isinstance(value, ARRAY_TYPES):
            return True
        return isinstance(value, Sequence) and not isinstance(value, str)
