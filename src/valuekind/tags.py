"""
Canonical Type Tags

The closed set of lowercase names returned by ``type_of``.
"""

from enum import Enum


class TypeTag(str, Enum):
    """Fundamental runtime category of a value."""

    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    FUNCTION = "function"
    OBJECT = "object"
    ERROR = "error"
    REGEXP = "regexp"
    DATE = "date"
    SYMBOL = "symbol"
    ARGUMENTS = "arguments"
    ELEMENT = "element"

    def __str__(self) -> str:
        return self.value


# Tags whose values have no object identity of their own
PRIMITIVE_TAGS: frozenset[TypeTag] = frozenset(
    {
        TypeTag.UNDEFINED,
        TypeTag.NULL,
        TypeTag.BOOLEAN,
        TypeTag.NUMBER,
        TypeTag.STRING,
        TypeTag.SYMBOL,
    }
)

ALL_TAGS: frozenset[str] = frozenset(tag.value for tag in TypeTag)
