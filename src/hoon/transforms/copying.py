"""Deep copy and constructor helpers."""

import re
from typing import Any, Callable, Sequence
from ..types import ContractError, ValueKind
from ..utils.validation import ValidationUtils
from ..value_detector import detect_kind


_IMMUTABLE_KINDS = (
    ValueKind.UNDEFINED,
    ValueKind.NAN,
    ValueKind.NULL,
    ValueKind.BOOL,
    ValueKind.NUMBER,
    ValueKind.STRING,
)


def clone(value: Any) -> Any:
    """
    Deep-copy a value.

    Scalars are returned as they are. Datetimes are copied into new equal
    instances and patterns are recompiled from their source and flags
    (the ``re`` module interns compiled patterns, so the result may be the
    same object). Lists and dicts are copied recursively, so mutating the
    copy at any depth never affects the original.

    Raises:
        ContractError: If value (or anything inside it) is outside the
            supported value kinds
    """
    kind = detect_kind(value)

    if kind in _IMMUTABLE_KINDS:
        return value
    elif kind == ValueKind.PATTERN:
        return re.compile(value.pattern, value.flags)
    elif kind == ValueKind.DATE:
        return type(value)(value.year, value.month, value.day, value.hour,
                           value.minute, value.second, value.microsecond,
                           value.tzinfo, fold=value.fold)
    elif kind == ValueKind.LIST:
        return [clone(item) for item in value]
    elif kind == ValueKind.MAPPING:
        return {key: clone(item) for key, item in value.items()}

    raise ContractError(f"Cannot clone value of type {type(value).__name__}")


def apply_constructor(constructor: Callable[..., Any], args: Sequence[Any]) -> Any:
    """
    Call ``constructor`` with ``args`` spread positionally.

    The instance is identical in type to ``constructor(*args)``.
    """
    ValidationUtils.require_callable(constructor, "constructor")
    if not isinstance(args, (list, tuple)):
        raise ContractError(f"args must be a list, got {type(args).__name__}")
    return constructor(*args)
