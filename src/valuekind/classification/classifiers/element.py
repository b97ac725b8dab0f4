"""
Element Classifier

Document elements are whatever classes the caller declares; there is no
ambient DOM to consult.
"""

import xml.dom.minidom
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from typing import Any, Optional

from ...tags import TypeTag
from ..base import TagClassifier

DEFAULT_ELEMENT_TYPES: tuple[type, ...] = (ET.Element, xml.dom.minidom.Element)


class ElementClassifier(TagClassifier):
    """Identifies instances of the configured element classes."""

    tag = TypeTag.ELEMENT

    def __init__(self, element_types: Optional[Iterable[type]] = None):
        self.element_types: tuple[type, ...] = (
            DEFAULT_ELEMENT_TYPES if element_types is None else tuple(element_types)
        )

    def can_classify(self, value: Any) -> bool:
        if not self.element_types:
            return False
        return isinstance(value, self.element_types)
