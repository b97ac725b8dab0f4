"""
Missing Value Classifiers
"""

import dataclasses
import inspect
from typing import Any

import pandas as pd

from ...sentinels import UNDEFINED
from ...tags import TypeTag
from ..base import TagClassifier

UNDEFINED_MARKERS: tuple[Any, ...] = (UNDEFINED, inspect.Parameter.empty, dataclasses.MISSING)
NULL_MARKERS: tuple[Any, ...] = (None, pd.NA, pd.NaT)


class UndefinedClassifier(TagClassifier):
    """Identifies "no value supplied" markers."""

    tag = TypeTag.UNDEFINED

    def can_classify(self, value: Any) -> bool:
        return any(value is marker for marker in UNDEFINED_MARKERS)


class NullClassifier(TagClassifier):
    """Identifies None and the pandas missing-value scalars."""

    tag = TypeTag.NULL

    def can_classify(self, value: Any) -> bool:
        # Identity only: pd.NaT subclasses datetime and pd.NA refuses bool()
        return any(value is marker for marker in NULL_MARKERS)
