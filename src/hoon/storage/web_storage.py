"""Codec-wrapped accessors over a string key-value store."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from ..codec import JSONCodec
from ..types import CodecInterface, ContractError, KeyValueStoreInterface
from ..utils.validation import ValidationUtils


_OMITTED = object()


class WebStorage:
    """
    Key-value storage that keeps any encodable value.

    Every value goes through the codec on the way in and out, so
    ``UNDEFINED``, NaN, patterns and datetimes survive storage. Values
    written to the underlying store directly skip the codec and will
    not decode; always go through these accessors.
    """

    def __init__(self, store: KeyValueStoreInterface,
                 codec: Optional[CodecInterface] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the storage adapter.

        Args:
            store: Underlying string store
            codec: Optional codec (defaults to JSONCodec)
            logger: Optional logger instance
        """
        self.store = store
        self.logger = logger or logging.getLogger(__name__)
        self.codec = codec or JSONCodec(self.logger)

    def get_item(self, key: str) -> Any:
        """Return the decoded value under key, or None if the key is missing."""
        text = self.store.get_item(key)
        if text is None:
            return None
        return self.codec.decode(text)

    def set_item(self, key: str, value: Any) -> None:
        """Encode value and store it under key."""
        ValidationUtils.require_str(key, "key")
        self.store.set_item(key, self.codec.encode(value))
        self.logger.debug(f"Stored key {key!r}")

    def remove_item(self, key: str) -> None:
        self.store.remove_item(key)

    def clear(self) -> None:
        self.store.clear()

    def key(self, index: int) -> Optional[str]:
        return self.store.key(index)

    def __len__(self) -> int:
        return len(self.store)

    def keys(self) -> List[str]:
        """Return every key in store order."""
        return [self.store.key(i) for i in range(len(self.store))]

    def set(self, key: Any, value: Any = _OMITTED) -> None:
        """
        Store one value, or every entry of a mapping.

        ``set("a", 1)`` stores a single value; ``set({"a": 1, "b": 2})``
        stores each entry. Every entry is encoded before any is written,
        so a mapping with an unencodable entry stores nothing.
        """
        if value is _OMITTED:
            entries = ValidationUtils.require_mapping(key, "entries")
            encoded: Dict[str, str] = {}
            for entry_key, entry_value in entries.items():
                ValidationUtils.require_str(entry_key, "key")
                encoded[entry_key] = self.codec.encode(entry_value)
            for entry_key, text in encoded.items():
                self.store.set_item(entry_key, text)
            self.logger.debug(f"Stored {len(encoded)} keys")
        else:
            self.set_item(key, value)

    def get(self, keys: Any = None) -> Any:
        """
        Read values.

        Args:
            keys: None for every entry, a list of keys, or a single key

        Returns:
            A dict of key to value for None or a list, else the single value
        """
        if keys is None:
            return {key: self.get_item(key) for key in self.keys()}
        elif isinstance(keys, (list, tuple)):
            result: Dict[str, Any] = {}
            for key in keys:
                result[key] = self.get_item(key)
            return result
        elif isinstance(keys, str):
            return self.get_item(keys)
        raise ContractError(f"keys must be None, str or list, got {type(keys).__name__}")

    def remove(self, keys: Any = None) -> None:
        """
        Remove entries.

        Args:
            keys: None to clear everything, a list of keys, or a single key
        """
        if keys is None:
            self.clear()
        elif isinstance(keys, (list, tuple)):
            for key in keys:
                self.remove_item(key)
        elif isinstance(keys, str):
            self.remove_item(keys)
        else:
            raise ContractError(f"keys must be None, str or list, got {type(keys).__name__}")


@dataclass
class StorageScopes:
    """The two storage scopes: persistent and per-session."""
    local: WebStorage
    session: WebStorage


def create_storages(local_store: KeyValueStoreInterface,
                    session_store: KeyValueStoreInterface,
                    codec: Optional[CodecInterface] = None,
                    logger: Optional[logging.Logger] = None) -> StorageScopes:
    """Build one WebStorage per scope around the given stores."""
    return StorageScopes(
        local=WebStorage(local_store, codec, logger),
        session=WebStorage(session_store, codec, logger),
    )
