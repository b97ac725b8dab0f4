"""
valuekind: runtime value classification
"""

from .classification import ClassifierChain, TagClassifier
from .constants import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER
from .sentinels import UNDEFINED, Undefined
from .tags import TypeTag
from .validation import (
    PREDICATE_NAMES,
    Validation,
    canonical_type_name,
    is_arguments,
    is_array,
    is_array_like,
    is_array_like_object,
    is_boolean,
    is_date,
    is_element,
    is_empty,
    is_error,
    is_finite,
    is_function,
    is_integer,
    is_length,
    is_nan,
    is_nil,
    is_null,
    is_number,
    is_object,
    is_object_like,
    is_plain_object,
    is_regexp,
    is_safe_integer,
    is_string,
    is_symbol,
    is_undefined,
    type_of,
    validation,
)

__version__ = "0.1.0"

__all__ = [
    "ClassifierChain",
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    "PREDICATE_NAMES",
    "TagClassifier",
    "TypeTag",
    "UNDEFINED",
    "Undefined",
    "Validation",
    "validation",
    "canonical_type_name",
    "type_of",
    *[name for name in PREDICATE_NAMES if name != "type_of"],
]
