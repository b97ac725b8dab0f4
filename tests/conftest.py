"""
Shared pytest fixtures for test suite.
"""

import dataclasses
import datetime
import enum
import functools
import inspect
import logging
import math
import re
import xml.dom.minidom
import xml.etree.ElementTree as ET
from collections import OrderedDict, deque
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pandas as pd
import pytest

from valuekind import UNDEFINED, Validation


class Color(enum.Enum):
    RED = "red"


class Level(enum.IntEnum):
    LOW = 1


class Point:
    def __init__(self, x: int = 0):
        self.x = x

    def norm(self) -> int:
        return abs(self.x)


class Adder:
    def __call__(self, a: int, b: int) -> int:
        return a + b


def sample_function(a, b=2):
    return a + b


# (label, value, expected tag)
VALUE_CATALOG = [
    ("UNDEFINED", UNDEFINED, "undefined"),
    ("Parameter.empty", inspect.Parameter.empty, "undefined"),
    ("dataclasses.MISSING", dataclasses.MISSING, "undefined"),
    ("None", None, "null"),
    ("pd.NA", pd.NA, "null"),
    ("pd.NaT", pd.NaT, "null"),
    ("Enum member", Color.RED, "symbol"),
    ("IntEnum member", Level.LOW, "symbol"),
    ("True", True, "boolean"),
    ("np.bool_", np.bool_(False), "boolean"),
    ("int", 42, "number"),
    ("negative int", -1, "number"),
    ("float", 1.5, "number"),
    ("nan", math.nan, "number"),
    ("inf", math.inf, "number"),
    ("Fraction", Fraction(1, 3), "number"),
    ("huge Fraction", Fraction(10**400, 3), "number"),
    ("huge integral Fraction", Fraction(10**400), "number"),
    ("Decimal", Decimal("2.50"), "number"),
    ("np.int64", np.int64(3), "number"),
    ("np.float32", np.float32(2.5), "number"),
    ("complex", complex(1, 2), "object"),
    ("empty str", "", "string"),
    ("str", "abc", "string"),
    ("np.str_", np.str_("x"), "string"),
    ("ValueError", ValueError("boom"), "error"),
    ("KeyboardInterrupt", KeyboardInterrupt(), "error"),
    ("pattern", re.compile(r"\d+"), "regexp"),
    ("date", datetime.date(2024, 1, 1), "date"),
    ("datetime", datetime.datetime(2024, 1, 1, 12, 30), "date"),
    ("pd.Timestamp", pd.Timestamp("2024-01-01"), "date"),
    ("np.datetime64", np.datetime64("2024-01-01"), "date"),
    ("ET.Element", ET.Element("div"), "element"),
    ("minidom Element", xml.dom.minidom.parseString("<a/>").documentElement, "element"),
    ("BoundArguments", inspect.signature(sample_function).bind(1), "arguments"),
    ("function", sample_function, "function"),
    ("lambda", lambda: None, "function"),
    ("builtin", len, "function"),
    ("builtin method", [].append, "function"),
    ("bound method", Point().norm, "function"),
    ("partial", functools.partial(int, base=2), "function"),
    ("class", Point, "function"),
    ("exception class", ValueError, "function"),
    ("empty list", [], "array"),
    ("list", [1, 2], "array"),
    ("tuple", (1,), "array"),
    ("range", range(3), "array"),
    ("deque", deque([1]), "array"),
    ("bytes", b"ab", "array"),
    ("ndarray", np.array([1, 2]), "array"),
    ("pd.Series", pd.Series([1.0]), "array"),
    ("pd.Index", pd.Index([1]), "array"),
    ("empty dict", {}, "object"),
    ("dict", {"a": 1}, "object"),
    ("length dict", {"length": 3}, "object"),
    ("OrderedDict", OrderedDict(a=1), "object"),
    ("set", {1}, "object"),
    ("frozenset", frozenset(), "object"),
    ("object()", object(), "object"),
    ("instance", Point(3), "object"),
    ("callable instance", Adder(), "object"),
    ("module", math, "object"),
    ("DataFrame", pd.DataFrame({"a": [1]}), "object"),
]

CATALOG_IDS = [label for label, _, _ in VALUE_CATALOG]


@pytest.fixture
def validation():
    """Fresh Validation so registrations never leak between tests."""
    return Validation()


@pytest.fixture(params=VALUE_CATALOG, ids=CATALOG_IDS)
def catalog_entry(request):
    """Yields (label, value, expected tag) for every catalog value."""
    return request.param


@pytest.fixture(autouse=True)
def restore_package_logger():
    """setup_logging() reconfigures the package logger; undo it after each test."""
    package_logger = logging.getLogger("valuekind")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
