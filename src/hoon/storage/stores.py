"""Concrete string key-value stores."""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union
from ..types import KeyValueStoreInterface, StorageError


class MemoryStore(KeyValueStoreInterface):
    """In-process store; keys enumerate in insertion order."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def key(self, index: int) -> Optional[str]:
        if 0 <= index < len(self._data):
            return list(self._data)[index]
        return None

    def __len__(self) -> int:
        return len(self._data)


class FileStore(KeyValueStoreInterface):
    """
    Store persisted as a JSON object of strings in a single file.

    The file is read on first access and rewritten after every mutation.
    A missing file is an empty store; its parent directory is created on
    the first write.
    """

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8",
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the file store.

        Args:
            path: Path of the backing JSON file
            encoding: Text encoding of the backing file
            logger: Optional logger instance
        """
        self.path = Path(path)
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)
        self._data: Optional[Dict[str, str]] = None

    @property
    def data(self) -> Dict[str, str]:
        if self._data is None:
            self._data = self._load()
        return self._data

    def get_item(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set_item(self, key: str, value: str) -> None:
        previous = dict(self.data)
        self.data[key] = value
        self._flush(previous)

    def remove_item(self, key: str) -> None:
        if key in self.data:
            previous = dict(self.data)
            del self.data[key]
            self._flush(previous)

    def clear(self) -> None:
        previous = dict(self.data)
        self.data.clear()
        self._flush(previous)
        self.logger.info(f"Cleared store {self.path}")

    def key(self, index: int) -> Optional[str]:
        if 0 <= index < len(self.data):
            return list(self.data)[index]
        return None

    def __len__(self) -> int:
        return len(self.data)

    def _load(self) -> Dict[str, str]:
        """
        Read the backing file.

        Raises:
            StorageError: If the file cannot be read or is not an object of strings
        """
        if not self.path.exists():
            self.logger.debug(f"Store file {self.path} does not exist, starting empty")
            return {}

        try:
            with open(self.path, 'r', encoding=self.encoding) as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise StorageError(
                f"Store file {self.path} is corrupt: {e.msg} at line {e.lineno}, column {e.colno}",
                context={"path": str(self.path)}
            ) from e
        except OSError as e:
            raise StorageError(
                f"Failed to read store file {self.path}: {str(e)}",
                context={"path": str(self.path)}
            ) from e

        if not isinstance(content, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in content.items()
        ):
            raise StorageError(
                f"Store file {self.path} must contain a JSON object of strings",
                context={"path": str(self.path)}
            )

        self.logger.info(f"Loaded {len(content)} entries from {self.path}")
        return content

    def _flush(self, previous: Dict[str, str]) -> None:
        """
        Rewrite the backing file.

        The text is written to a sibling temporary file which then replaces
        the store file, so a failed write leaves the old file intact. On
        failure the in-memory entries are reset to ``previous``.

        Raises:
            StorageError: If the file cannot be written
        """
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            text = json.dumps(self._data, indent=2, ensure_ascii=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'w', encoding=self.encoding) as f:
                f.write(text)
            tmp_path.replace(self.path)
        except (OSError, UnicodeError) as e:
            self._data = previous
            if tmp_path.exists():
                tmp_path.unlink()
            raise StorageError(
                f"Failed to write store file {self.path}: {str(e)}",
                context={"path": str(self.path)}
            ) from e

        self.logger.debug(f"Wrote {len(self._data)} entries to {self.path}")
