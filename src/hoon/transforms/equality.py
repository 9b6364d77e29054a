"""Structural equality over the value domain."""

from typing import Any
from ..types import ValueKind
from ..value_detector import detect_kind


def is_equal(a: Any, b: Any) -> bool:
    """
    Compare two values structurally.

    NaN equals NaN, patterns compare by source and flags, lists compare
    element-wise and dicts key-wise regardless of insertion order.
    ``True`` and ``1`` are different kinds and never equal.
    """
    kind_a = detect_kind(a)
    kind_b = detect_kind(b)

    if kind_a is None or kind_b is None:
        return a == b
    if kind_a != kind_b:
        return False

    if kind_a == ValueKind.NAN:
        return True
    elif kind_a == ValueKind.PATTERN:
        return a.pattern == b.pattern and a.flags == b.flags
    elif kind_a == ValueKind.LIST:
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    elif kind_a == ValueKind.MAPPING:
        if a.keys() != b.keys():
            return False
        return all(is_equal(a[key], b[key]) for key in a)

    return a == b
