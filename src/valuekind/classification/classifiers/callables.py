"""
Callable Classifiers

Functions and bound call arguments.
"""

import functools
import inspect
from typing import Any

from ...tags import TypeTag
from ..base import TagClassifier


class ArgumentsClassifier(TagClassifier):
    """Identifies the arguments of a call as bound by ``inspect.Signature.bind``."""

    tag = TypeTag.ARGUMENTS

    def can_classify(self, value: Any) -> bool:
        return isinstance(value, inspect.BoundArguments)


class FunctionClassifier(TagClassifier):
    """
    Identifies functions, methods, builtins, partials and classes.

    Instances that merely define ``__call__`` stay objects.
    """

    tag = TypeTag.FUNCTION

    def can_classify(self, value: Any) -> bool:
        return (
            inspect.isroutine(value)
            or isinstance(value, type)
            or isinstance(value, functools.partial)
        )
