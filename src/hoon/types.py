"""Core type definitions for hoon."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


class ValueKind(Enum):
    """Enumeration of the variants of the codec value domain."""
    UNDEFINED = "undefined"
    NAN = "nan"
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    PATTERN = "pattern"
    DATE = "date"
    LIST = "list"
    MAPPING = "mapping"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    DOMAIN = "domain"
    CONTRACT = "contract"
    STORAGE = "storage"


class Undefined:
    """
    The "absent" value.

    Distinct from ``None`` (null) and from the string ``"undefined"``.
    There is exactly one instance, exported as ``UNDEFINED``.
    """

    _instance: Optional['Undefined'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "undefined"

    def __copy__(self) -> 'Undefined':
        return self

    def __deepcopy__(self, memo) -> 'Undefined':
        return self

    def __reduce__(self):
        return (Undefined, ())


UNDEFINED = Undefined()


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]
    # parsed JSON tree, set by transport text validation when the text is valid
    parsed: Any = None


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


class HoonError(Exception):
    """Base exception for hoon errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class ParseError(HoonError, ValueError):
    """Transport text could not be decoded."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.SYNTAX, context)


class EncodeError(HoonError, ValueError):
    """Value lies outside the encodable domain."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.DOMAIN, context)


class ContractError(HoonError, TypeError):
    """A transform was called with an input of the wrong shape."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.CONTRACT, context)


class StorageError(HoonError):
    """Backing store could not be read or written."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.STORAGE, context)


# Abstract base classes for interfaces

class CodecInterface(ABC):
    """Abstract interface for a value codec."""

    @abstractmethod
    def encode(self, value: Any) -> str:
        """Serialize a value to transport text."""
        pass

    @abstractmethod
    def decode(self, text: str) -> Any:
        """Reconstruct a value from transport text."""
        pass


class KeyValueStoreInterface(ABC):
    """
    Abstract interface for a string key-value store.

    Mirrors the host storage API: values are plain strings and
    ``key(index)`` enumerates keys in store order.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored string, or None if the key is missing."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a string under key."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key; missing keys are ignored."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry."""
        pass

    @abstractmethod
    def key(self, index: int) -> Optional[str]:
        """Return the key at index, or None if out of range."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Number of entries."""
        pass
