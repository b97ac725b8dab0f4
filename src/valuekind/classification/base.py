"""
Classification Base

Defines the base class for tag classifiers.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..tags import TypeTag


class TagClassifier(ABC):
    """Abstract base class for all canonical tag identifiers."""

    tag: TypeTag

    @abstractmethod
    def can_classify(self, value: Any) -> bool:
        """Returns True if the value belongs to this classifier's tag."""
        pass

    def classify(self, value: Any) -> TypeTag:
        return self.tag

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tag={self.tag.value!r})"
