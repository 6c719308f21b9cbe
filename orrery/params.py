"""
Presence checks and parsing for raw body parameter records.

A field is present only if the key exists, the value is not None and, for
strings, the value is non-empty after stripping whitespace. Absent fields come
back as None so callers choose the default.
"""
import math
from collections.abc import Mapping
from typing import Any, Optional

from .errors import ParameterFormatError


def has_data(params: Mapping, key: str) -> bool:
    """Check if the field is present in the record"""
    value = params.get(key)
    if value is None:
        return False
    if isinstance(value, str):
        return len(value.strip()) > 0
    return True


def parse_str(params: Mapping, key: str) -> Optional[str]:
    if not has_data(params, key):
        return None
    return str(params[key]).strip()


def parse_float(params: Mapping, key: str) -> Optional[float]:
    """
    Parse a numeric field.

    Returns:
        The value as float, or None if the field is absent

    Raises:
        ParameterFormatError: if the field is present but not a finite number
    """
    if not has_data(params, key):
        return None
    value: Any = params[key]
    if isinstance(value, bool):
        raise ParameterFormatError(key, value)
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise ParameterFormatError(key, value) from None
    if not math.isfinite(number):
        raise ParameterFormatError(key, value)
    return number


def parse_angle(params: Mapping, key: str, to_rad: float) -> Optional[float]:
    """Parse an angular field given in degrees and return it in radians (None if absent)"""
    degrees = parse_float(params, key)
    if degrees is None:
        return None
    return degrees * to_rad
