"""
Classification Submodule

Exports the ordered canonical-tag classification engine.
"""

from .base import TagClassifier
from .registry import ClassifierChain

__all__ = ["ClassifierChain", "TagClassifier"]
