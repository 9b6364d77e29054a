"""Mapping transforms: filter, filter-map, merge and construction."""

from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union
from ..types import ContractError
from ..utils.validation import ValidationUtils


def extract(obj: Mapping, predicate: Callable[[Any, Any], Any]) -> Dict:
    """
    Return a new dict with the entries of ``obj`` for which
    ``predicate(value, key)`` is truthy.

    Example:
        >>> extract({0: 0, 1: 1, 2: 2, 3: 3}, lambda val, key: key % 2 == 0)
        {0: 0, 2: 2}
    """
    ValidationUtils.require_mapping(obj, "obj")
    ValidationUtils.require_callable(predicate, "predicate")

    result = {}
    for key, val in obj.items():
        if predicate(val, key):
            result[key] = val
    return result


def fmap(obj: Mapping, selector: Callable[[Any, Any], Optional[Sequence]]) -> Dict:
    """
    Filter and map ``obj`` in one pass.

    ``selector(value, key)`` returns a ``(new_key, new_value)`` pair to keep
    an entry; any other return value drops it.

    Example:
        >>> fmap({0: 0, 1: 1, 2: 2, 3: 3},
        ...      lambda val, key: (key, key * val) if key % 2 == 1 else None)
        {1: 1, 3: 9}
    """
    ValidationUtils.require_mapping(obj, "obj")
    ValidationUtils.require_callable(selector, "selector")

    result = {}
    for key, val in obj.items():
        item = selector(val, key)
        if isinstance(item, (list, tuple)) and len(item) == 2:
            result[item[0]] = item[1]
    return result


def extend(*sources: Mapping) -> Dict:
    """
    Shallow-merge mappings left to right into a new dict.

    Later sources overwrite earlier keys; no source is modified.
    """
    result = {}
    for index, source in enumerate(sources):
        ValidationUtils.require_mapping(source, f"sources[{index}]")
        result.update(source)
    return result


def make_object(keys: Union[str, Sequence], values: Any = None) -> Dict:
    """
    Build a dict from keys and values.

    - list keys, list values: paired like ``zip`` (stops at the shorter)
    - list keys, any other values: every key maps to ``values``
    - str key: a single entry

    Raises:
        ContractError: If keys is neither a str nor a list/tuple
    """
    if isinstance(keys, (list, tuple)):
        if isinstance(values, (list, tuple)):
            return dict(zip(keys, values))
        return {key: values for key in keys}
    elif isinstance(keys, str):
        return {keys: values}
    raise ContractError(f"keys must be str or list, got {type(keys).__name__}")
