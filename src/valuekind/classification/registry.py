"""
Classifier Registry

Manages the explicit chain of tag classifiers.
"""

import logging
from collections.abc import Iterable
from typing import Any, Optional, Union

from ..tags import TypeTag
from .base import TagClassifier
from .classifiers.builtin import DateClassifier, ErrorClassifier, RegExpClassifier
from .classifiers.callables import ArgumentsClassifier, FunctionClassifier
from .classifiers.element import ElementClassifier
from .classifiers.missing import NullClassifier, UndefinedClassifier
from .classifiers.scalar import (
    BooleanClassifier,
    NumberClassifier,
    StringClassifier,
    SymbolClassifier,
)
from .classifiers.sequence import ArrayClassifier

logger = logging.getLogger(__name__)


class ClassifierChain:
    """Executes classifiers in explicit priority order."""

    def __init__(self, element_types: Optional[Iterable[type]] = None):
        # Explicit priority order: markers, then scalars, then containers.
        # Symbol precedes number so IntEnum members stay symbols; null precedes
        # date because pd.NaT is a datetime subclass.
        self._chain: list[TagClassifier] = [
            UndefinedClassifier(),
            NullClassifier(),
            SymbolClassifier(),
            BooleanClassifier(),
            NumberClassifier(),
            StringClassifier(),
            ErrorClassifier(),
            RegExpClassifier(),
            DateClassifier(),
            ElementClassifier(element_types),
            ArgumentsClassifier(),
            FunctionClassifier(),
            ArrayClassifier(),
        ]
        self._registry: dict[type, TypeTag] = {}

    @property
    def classifiers(self) -> tuple[TagClassifier, ...]:
        return tuple(self._chain)

    def register(self, cls: type, tag: Union[TypeTag, str]) -> None:
        """Maps ``cls`` and its subclasses to ``tag`` ahead of the built-in chain."""
        if not isinstance(cls, type):
            raise TypeError(f"Expected a class, got {type(cls).__name__}")
        resolved = TypeTag(tag)
        self._registry[cls] = resolved
        logger.debug("Registered %s.%s as %s", cls.__module__, cls.__qualname__, resolved.value)

    def unregister(self, cls: type) -> None:
        self._registry.pop(cls, None)

    def registered_tag(self, cls: type) -> Optional[TypeTag]:
        """Returns the tag registered for the nearest class in ``cls``'s MRO."""
        if not self._registry:
            return None
        for base in cls.__mro__:
            tag = self._registry.get(base)
            if tag is not None:
                return tag
        return None

    def classify(self, value: Any) -> TypeTag:
        """
        Classifies a value using the chain. First match wins.
        """
        tag = self.registered_tag(type(value))
        if tag is not None:
            return tag

        for classifier in self._chain:
            try:
                matched = classifier.can_classify(value)
            except Exception:
                # A hostile __instancecheck__ or __class__ must not escape
                logger.debug("%r failed on %s value", classifier, type(value).__name__, exc_info=True)
                continue
            if matched:
                return classifier.classify(value)

        return TypeTag.OBJECT
