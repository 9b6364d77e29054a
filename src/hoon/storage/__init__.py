"""Codec-wrapped key-value storage."""

from .stores import MemoryStore, FileStore
from .web_storage import WebStorage, StorageScopes, create_storages

__all__ = ["MemoryStore", "FileStore", "WebStorage", "StorageScopes", "create_storages"]
