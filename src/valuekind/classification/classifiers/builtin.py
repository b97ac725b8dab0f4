"""
Built-in Object Classifiers

Errors, compiled patterns and dates.
"""

import datetime
import re
from typing import Any

import numpy as np

from ...tags import TypeTag
from ..base import TagClassifier


class ErrorClassifier(TagClassifier):
    """Identifies exception instances (not exception classes)."""

    tag = TypeTag.ERROR

    def can_classify(self, value: Any) -> bool:
        return isinstance(value, BaseException)


class RegExpClassifier(TagClassifier):
    tag = TypeTag.REGEXP

    def can_classify(self, value: Any) -> bool:
        return isinstance(value, re.Pattern)


class DateClassifier(TagClassifier):
    """Identifies dates and datetimes, including pd.Timestamp and np.datetime64."""

    tag = TypeTag.DATE

    def can_classify(self, value: Any) -> bool:
        return isinstance(value, (datetime.date, np.datetime64))
