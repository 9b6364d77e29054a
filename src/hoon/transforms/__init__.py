"""Pure value transforms over mappings, lists and strings."""

from .mappings import extract, fmap, extend, make_object
from .strings import padding, templates
from .copying import clone, apply_constructor
from .equality import is_equal

__all__ = [
    "extract",
    "fmap",
    "extend",
    "make_object",
    "padding",
    "templates",
    "clone",
    "apply_constructor",
    "is_equal",
]
