"""
hoon - small value utilities.

Mapping transforms, string padding and templates, deep clone, and a
symmetric JSON codec that round-trips undefined, NaN, patterns and
datetimes, with codec-wrapped key-value storage on top.
"""

from .types import (
    UNDEFINED,
    Undefined,
    ValueKind,
    HoonError,
    ParseError,
    EncodeError,
    ContractError,
    StorageError,
)
from .transforms import (
    extract,
    fmap,
    extend,
    make_object,
    padding,
    templates,
    clone,
    apply_constructor,
    is_equal,
)
from .codec import JSONCodec, encode, decode
from .storage import MemoryStore, FileStore, WebStorage, StorageScopes, create_storages

__version__ = "1.0.0"
__all__ = [
    "UNDEFINED",
    "Undefined",
    "ValueKind",
    "HoonError",
    "ParseError",
    "EncodeError",
    "ContractError",
    "StorageError",
    "extract",
    "fmap",
    "extend",
    "make_object",
    "padding",
    "templates",
    "clone",
    "apply_constructor",
    "is_equal",
    "JSONCodec",
    "encode",
    "decode",
    "MemoryStore",
    "FileStore",
    "WebStorage",
    "StorageScopes",
    "create_storages",
]
