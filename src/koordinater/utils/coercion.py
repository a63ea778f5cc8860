"""
Value coercion helpers for untrusted configuration input.

All functions are total: invalid input yields ``None``, an empty list, or
the supplied fallback instead of raising.
"""

import math
from collections.abc import Mapping
from typing import Any, List, Optional


def to_number(value: Any) -> Optional[float]:
    """
    Coerce a number or numeric string to a finite float.

    Args:
        value: Candidate value

    Returns:
        Finite float, or None for booleans, blanks and non-numeric input
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
        return number if math.isfinite(number) else None
    if isinstance(value, str) and value.strip():
        try:
            number = float(value.strip())
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def to_int(value: Any) -> Optional[int]:
    """Coerce to an integer when the value is numeric and integral."""
    number = to_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def to_array(value: Any) -> List[Any]:
    """
    Materialize an array-like value.

    Lists and tuples are copied; objects exposing ``to_array``/``tolist``
    are converted; anything else yields an empty list.
    """
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    for method_name in ("to_array", "tolist"):
        method = getattr(value, method_name, None)
        if callable(method):
            try:
                materialized = method()
            except Exception:
                return []
            return list(materialized) if isinstance(materialized, (list, tuple)) else []
    return []


def read_config_value(candidate: Any, key: str, *aliases: str) -> Any:
    """
    Read a key from a mapping or ``get``-style object.

    Args:
        candidate: Mapping or object with a ``get(key)`` method
        key: Primary key
        *aliases: Alternative keys tried in order

    Returns:
        The first value found, or None
    """
    if candidate is None:
        return None
    for name in (key, *aliases):
        if isinstance(candidate, Mapping):
            if name in candidate:
                return candidate[name]
            continue
        getter = getattr(candidate, "get", None)
        if callable(getter):
            try:
                value = getter(name)
            except Exception:
                continue
            if value is not None:
                return value
    return None


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Clamp value into [min_value, max_value]."""
    return min(max_value, max(min_value, value))


def coerce_string(value: Any, fallback: str) -> str:
    """Return strings as-is, finite numbers as text, otherwise the fallback."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            # Exceeds the interpreter's integer string conversion limit
            return fallback
    if isinstance(value, float) and math.isfinite(value):
        return str(value)
    return fallback


def coerce_boolean(value: Any, fallback: bool) -> bool:
    """
    Coerce common boolean encodings.

    Accepts booleans, "true"/"false" strings (case-insensitive) and 1/0.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    if isinstance(value, (int, float)):
        if value == 1:
            return True
        if value == 0:
            return False
    return fallback

