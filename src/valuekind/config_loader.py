"""
Centralized configuration loading for valuekind.
"""

import copy
import importlib
import json
import os
import sys
from pathlib import Path
from typing import Any, Optional, TypedDict

from .classification import ClassifierChain
from .constants import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER
from .tags import ALL_TAGS
from .validation import Validation

CONFIG_DIR_ENV = "VALUEKIND_CONFIG_DIR"
STRICT_ENV = "VALUEKIND_STRICT_CONFIG"
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"
CLASSIFIER_CONFIG_FILE = "classifier_config.json"


class LimitsConfig(TypedDict):
    max_safe_integer: int
    min_safe_integer: int


class ClassifierConfig(TypedDict):
    limits: LimitsConfig
    element_types: Optional[list[str]]
    type_tags: dict[str, str]


DEFAULT_CONFIG: ClassifierConfig = {
    "limits": {
        "max_safe_integer": MAX_SAFE_INTEGER,
        "min_safe_integer": MIN_SAFE_INTEGER,
    },
    # None keeps the built-in element classes
    "element_types": None,
    "type_tags": {},
}

_CONFIG_CACHE: dict[tuple[str, bool], ClassifierConfig] = {}


def _resolve_config_dir(config_dir: Optional[str]) -> Path:
    if config_dir:
        return Path(config_dir)
    env_dir = os.getenv(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return DEFAULT_CONFIG_DIR


def _resolve_strict(strict: Optional[bool]) -> bool:
    if strict is not None:
        return strict
    env = os.getenv(STRICT_ENV, "")
    return env.lower() in {"1", "true", "yes", "on"}


def _warn_or_raise(msg: str, *, strict: bool) -> None:
    if strict:
        raise ValueError(msg)
    print(f"Warning: {msg}", file=sys.stderr)


def _load_json(path: Path, *, strict: bool) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as exc:
        if strict:
            raise FileNotFoundError(f"Missing config file: {path}") from exc
        print(f"Warning: {path} not found.", file=sys.stderr)
        return {}
    except json.JSONDecodeError as exc:
        if strict:
            raise ValueError(f"Malformed config file: {path} ({exc})") from exc
        print(f"Warning: {path} is malformed ({exc}).", file=sys.stderr)
        return {}


def _ensure_dict(payload: Any, *, name: str, strict: bool) -> dict[str, Any]:
    if isinstance(payload, dict):
        return payload
    _warn_or_raise(f"Expected {name} to be an object.", strict=strict)
    return {}


def import_class(path: str) -> type:
    """Resolves a dotted ``module.Class`` path to the class object."""
    module_name, _, attr = path.rpartition(".")
    if not module_name:
        raise ValueError(f"Expected a dotted class path, got '{path}'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ValueError(f"Cannot import module '{module_name}' for '{path}'") from exc
    obj = getattr(module, attr, None)
    if not isinstance(obj, type):
        raise ValueError(f"'{path}' does not name a class")
    return obj


def _normalize_limits(raw: Any, *, strict: bool) -> LimitsConfig:
    limits: LimitsConfig = copy.deepcopy(DEFAULT_CONFIG["limits"])
    section = _ensure_dict(raw if raw is not None else {}, name="limits", strict=strict)
    for key in ("max_safe_integer", "min_safe_integer"):
        if key not in section:
            continue
        value = section[key]
        if isinstance(value, int) and not isinstance(value, bool):
            limits[key] = value  # type: ignore[literal-required]
        else:
            _warn_or_raise(f"limits.{key} must be an integer, got {value!r}.", strict=strict)
    return limits


def _normalize_element_types(raw: Any, *, strict: bool) -> Optional[list[str]]:
    if raw is None:
        return None
    if not isinstance(raw, list) or not all(isinstance(p, str) for p in raw):
        _warn_or_raise("element_types must be a list of dotted class paths.", strict=strict)
        return None
    return list(raw)


def _normalize_type_tags(raw: Any, *, strict: bool) -> dict[str, str]:
    section = _ensure_dict(raw if raw is not None else {}, name="type_tags", strict=strict)
    type_tags: dict[str, str] = {}
    for path, tag in section.items():
        if tag not in ALL_TAGS:
            _warn_or_raise(f"Unknown tag '{tag}' for '{path}'.", strict=strict)
            continue
        type_tags[path] = tag
    return type_tags


def load_classifier_config(
    *, config_dir: Optional[str] = None, strict: Optional[bool] = None
) -> ClassifierConfig:
    """
    Loads ``classifier_config.json`` merged over the defaults.

    Results are cached per (directory, strictness); callers get a copy.
    """
    strict_flag = _resolve_strict(strict)
    config_path = _resolve_config_dir(config_dir) / CLASSIFIER_CONFIG_FILE
    cache_key = (str(config_path), strict_flag)
    cached = _CONFIG_CACHE.get(cache_key)
    if cached is not None:
        return copy.deepcopy(cached)

    payload = _load_json(config_path, strict=strict_flag)
    raw = _ensure_dict(payload, name=CLASSIFIER_CONFIG_FILE, strict=strict_flag)

    config: ClassifierConfig = {
        "limits": _normalize_limits(raw.get("limits"), strict=strict_flag),
        "element_types": _normalize_element_types(raw.get("element_types"), strict=strict_flag),
        "type_tags": _normalize_type_tags(raw.get("type_tags"), strict=strict_flag),
    }
    _CONFIG_CACHE[cache_key] = config
    return copy.deepcopy(config)


def clear_config_cache() -> None:
    _CONFIG_CACHE.clear()


def build_validation(
    config: Optional[ClassifierConfig] = None,
    *,
    config_dir: Optional[str] = None,
    strict: Optional[bool] = None,
) -> Validation:
    """
    Builds a ``Validation`` from a loaded config (or loads one).

    Unresolvable class paths are skipped with a warning unless strict.
    """
    strict_flag = _resolve_strict(strict)
    if config is None:
        config = load_classifier_config(config_dir=config_dir, strict=strict_flag)

    element_types: Optional[list[type]] = None
    if config["element_types"] is not None:
        element_types = []
        for path in config["element_types"]:
            try:
                element_types.append(import_class(path))
            except ValueError as exc:
                _warn_or_raise(str(exc), strict=strict_flag)

    chain = ClassifierChain(element_types)
    for path, tag in config["type_tags"].items():
        try:
            chain.register(import_class(path), tag)
        except ValueError as exc:
            _warn_or_raise(str(exc), strict=strict_flag)

    limits = config["limits"]
    return Validation(
        chain,
        max_safe_integer=limits["max_safe_integer"],
        min_safe_integer=limits["min_safe_integer"],
    )
