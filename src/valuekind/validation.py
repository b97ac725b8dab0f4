"""
Validation Namespace

Named predicates over the canonical type tag of a value.

Every predicate takes one value, returns a bool, never raises and never
mutates its argument. Composite predicates call their siblings through
``self`` so a subclass overriding a simple predicate changes every
composite built on it.
"""

import inspect
import logging
from collections.abc import Iterator, Mapping, Sized
from typing import Any, Callable, Optional, Union

import numpy as np

from .classification import ClassifierChain
from .constants import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER
from .numeric import number_is_finite, number_is_integral, number_is_nan
from .sentinels import UNDEFINED
from .tags import PRIMITIVE_TAGS, TypeTag

logger = logging.getLogger(__name__)

PREDICATE_NAMES: tuple[str, ...] = (
    "type_of",
    "is_undefined",
    "is_null",
    "is_nil",
    "is_boolean",
    "is_number",
    "is_nan",
    "is_integer",
    "is_safe_integer",
    "is_finite",
    "is_length",
    "is_string",
    "is_array",
    "is_array_like_object",
    "is_array_like",
    "is_object",
    "is_object_like",
    "is_plain_object",
    "is_empty",
    "is_arguments",
    "is_function",
    "is_element",
    "is_symbol",
    "is_error",
    "is_regexp",
    "is_date",
)


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


class Validation(Mapping[str, Callable[[Any], Union[bool, str]]]):
    """
    Runtime value classifier.

    The instance doubles as a read-only mapping from predicate name to bound
    predicate, e.g. ``validation["is_array"]([])``.
    """

    def __init__(
        self,
        chain: Optional[ClassifierChain] = None,
        *,
        max_safe_integer: int = MAX_SAFE_INTEGER,
        min_safe_integer: int = MIN_SAFE_INTEGER,
    ):
        if max_safe_integer <= 0 or min_safe_integer >= 0:
            raise ValueError(
                f"Safe integer bounds must straddle zero; got "
                f"[{min_safe_integer}, {max_safe_integer}]"
            )
        self.chain = chain if chain is not None else ClassifierChain()
        self.max_safe_integer = max_safe_integer
        self.min_safe_integer = min_safe_integer

    # Mapping protocol

    def __getitem__(self, name: str) -> Callable[[Any], Union[bool, str]]:
        if name not in PREDICATE_NAMES:
            raise KeyError(name)
        return getattr(self, name)

    def __iter__(self) -> Iterator[str]:
        return iter(PREDICATE_NAMES)

    def __len__(self) -> int:
        return len(PREDICATE_NAMES)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(predicates={len(self)}, "
            f"max_safe_integer={self.max_safe_integer})"
        )

    # Mapping defines __eq__, which would otherwise drop hashing
    __hash__ = object.__hash__

    def register(self, cls: type, tag: Union[TypeTag, str]) -> None:
        """Shortcut for ``self.chain.register``."""
        self.chain.register(cls, tag)

    # Primitive

    def tag_of(self, value: Any) -> TypeTag:
        return self.chain.classify(value)

    def type_of(self, value: Any) -> str:
        """Returns the lowercase canonical type name of ``value``."""
        return self.tag_of(value).value

    def canonical_type_name(self, value: Any) -> str:
        return self.type_of(value)

    # Tag predicates

    def is_undefined(self, value: Any) -> bool:
        return self.tag_of(value) is TypeTag.UNDEFINED

    def is_null(self, value: Any) -> bool:
        return self.tag_of(value) is TypeTag.NULL

    def is_nil(self, value: Any) -> bool:
        return self.is_undefined(value) or self.is_null(value)

    def is_boolean(self, value: Any) -> bool:
        return self.tag_of(value) is TypeTag.BOOLEAN

    def is_number(self, value: Any) -> bool:
        """True for every real number, NaN and infinities included."""
        return self.tag_of(value) is TypeTag.NUMBER

    def is_string(self, value: Any) -> bool:
        return self.tag_of(value) is TypeTag.STRING

    def is_array(self, value: Any) -> bool:
        return self.tag_of(value) is TypeTag.ARRAY

    def is_arguments(self, value: Any) -> bool:
        return self.tag_of(value) is TypeTag.ARGUMENTS

    def is_function(self, value: Any) -> bool:
        return self.tag_of(value) is TypeTag.FUNCTION

    def is_element(self, value: Any) -> bool:
        return self.tag_of(value) is TypeTag.ELEMENT

    def is_symbol(self, value: Any) -> bool:
        return self.tag_of(value) is TypeTag.SYMBOL

    def is_error(self, value: Any) -> bool:
        return self.tag_of(value) is TypeTag.ERROR

    def is_regexp(self, value: Any) -> bool:
        return self.tag_of(value) is TypeTag.REGEXP

    def is_date(self, value: Any) -> bool:
        return self.tag_of(value) is TypeTag.DATE

    # Numeric predicates

    def is_nan(self, value: Any) -> bool:
        return self.is_number(value) and number_is_nan(value)

    def is_finite(self, value: Any) -> bool:
        return self.is_number(value) and number_is_finite(value)

    def is_integer(self, value: Any) -> bool:
        """True for numbers without a fractional component, e.g. ``3`` or ``3.0``."""
        return self.is_number(value) and number_is_integral(value)

    def is_safe_integer(self, value: Any) -> bool:
        return self.is_integer(value) and bool(
            self.min_safe_integer <= value <= self.max_safe_integer
        )

    def is_length(self, value: Any) -> bool:
        """True for a valid sequence length: an integer in ``[0, max_safe_integer]``."""
        return (
            self.is_integer(value)
            and self.is_finite(value)
            and bool(0 <= value <= self.max_safe_integer)
        )

    # Object predicates

    def is_object(self, value: Any) -> bool:
        """
        True for values with identity of their own: containers, functions,
        patterns, dates, errors and instances. False for undefined, null,
        booleans, numbers, strings and symbols.
        """
        return self.tag_of(value) not in PRIMITIVE_TAGS

    def is_object_like(self, value: Any) -> bool:
        return self.is_object(value) and self.tag_of(value) is TypeTag.OBJECT

    def is_plain_object(self, value: Any) -> bool:
        """True only for exact ``dict`` instances."""
        return self.is_object(value) and type(value) is dict

    def is_array_like_object(self, value: Any) -> bool:
        return self.is_array(value) or (
            self.is_object(value) and self.is_length(self.length_of(value))
        )

    def is_array_like(self, value: Any) -> bool:
        return self.is_array_like_object(value) or self.is_string(value)

    def is_empty(self, value: Any) -> bool:
        """
        True unless ``value`` is a non-empty string, a non-empty array or an
        object with at least one own key. Scalars and nil are always empty.
        """
        if self.is_string(value) or self.is_array(value):
            return self._size(value) == 0
        if self.is_object(value):
            return not self._has_own_keys(value)
        return True

    # Helpers

    def length_of(self, value: Any) -> Any:
        """
        Returns the ``length`` of a value: its ``"length"`` key for mappings,
        its ``length`` attribute otherwise, ``UNDEFINED`` when absent. Bound
        arguments report how many arguments they hold.
        """
        try:
            if isinstance(value, inspect.BoundArguments):
                return len(value.arguments)
            if isinstance(value, Mapping):
                return value.get("length", UNDEFINED)
            return getattr(value, "length", UNDEFINED)
        except Exception:
            logger.debug("Could not read length of %s", type(value).__name__, exc_info=True)
            return UNDEFINED

    @staticmethod
    def _size(value: Any) -> int:
        if isinstance(value, np.ndarray):
            return int(value.size)
        try:
            return len(value)
        except Exception:
            logger.debug("len() failed for %s", type(value).__name__, exc_info=True)
            return 0

    @staticmethod
    def _has_own_keys(value: Any) -> bool:
        try:
            if isinstance(value, inspect.BoundArguments):
                return len(value.arguments) > 0
            if isinstance(value, Sized):
                return len(value) > 0
            attrs = getattr(value, "__dict__", None)
            if attrs and any(not _is_dunder(name) for name in attrs):
                return True
            for cls in type(value).__mro__:
                slots = cls.__dict__.get("__slots__", ())
                if isinstance(slots, str):
                    slots = (slots,)
                for name in slots:
                    if not _is_dunder(name) and hasattr(value, name):
                        return True
        except Exception:
            logger.debug("Could not list keys of %s", type(value).__name__, exc_info=True)
        return False


validation = Validation()

type_of = validation.type_of
canonical_type_name = validation.canonical_type_name
is_undefined = validation.is_undefined
is_null = validation.is_null
is_nil = validation.is_nil
is_boolean = validation.is_boolean
is_number = validation.is_number
is_nan = validation.is_nan
is_integer = validation.is_integer
is_safe_integer = validation.is_safe_integer
is_finite = validation.is_finite
is_length = validation.is_length
is_string = validation.is_string
is_array = validation.is_array
is_array_like_object = validation.is_array_like_object
is_array_like = validation.is_array_like
is_object = validation.is_object
is_object_like = validation.is_object_like
is_plain_object = validation.is_plain_object
is_empty = validation.is_empty
is_arguments = validation.is_arguments
is_function = validation.is_function
is_element = validation.is_element
is_symbol = validation.is_symbol
is_error = validation.is_error
is_regexp = validation.is_regexp
is_date = validation.is_date
