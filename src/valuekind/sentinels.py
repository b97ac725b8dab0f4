"""
Undefined marker.

Python has no ``undefined``; ``UNDEFINED`` stands for "no value supplied".
"""


class Undefined:
    """Singleton marker for a missing value."""

    _instance: "Undefined | None" = None

    def __new__(cls) -> "Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = Undefined()
