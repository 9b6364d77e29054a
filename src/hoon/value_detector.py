"""Value kind detection for the codec value domain."""

import math
import re
from datetime import datetime
from typing import Any, Optional
from .types import Undefined, ValueKind


def detect_kind(value: Any) -> Optional[ValueKind]:
    """
    Detect the kind of a single value.

    Args:
        value: Value to classify

    Returns:
        ValueKind of the value, or None if it lies outside the domain
    """
    if isinstance(value, Undefined):
        return ValueKind.UNDEFINED
    elif value is None:
        return ValueKind.NULL
    elif isinstance(value, bool):
        return ValueKind.BOOL
    elif isinstance(value, float) and math.isnan(value):
        return ValueKind.NAN
    elif isinstance(value, (int, float)):
        return ValueKind.NUMBER
    elif isinstance(value, str):
        return ValueKind.STRING
    elif isinstance(value, re.Pattern):
        return ValueKind.PATTERN
    elif isinstance(value, datetime):
        return ValueKind.DATE
    elif isinstance(value, list):
        return ValueKind.LIST
    elif isinstance(value, dict):
        return ValueKind.MAPPING
    return None

