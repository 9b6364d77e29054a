"""Tests for stores and the WebStorage adapter."""

import json
import math
import re
from datetime import datetime

import pytest

from hoon import UNDEFINED, is_equal
from hoon.storage import FileStore, MemoryStore, WebStorage, create_storages
from hoon.types import ContractError, EncodeError, ParseError, StorageError


class TestMemoryStore:
    """Tests for MemoryStore."""

    def test_basic_operations(self, memory_store):
        """Test set, get, key, remove and clear."""
        memory_store.set_item("a", "1")
        memory_store.set_item("b", "2")

        assert memory_store.get_item("a") == "1"
        assert memory_store.get_item("missing") is None
        assert len(memory_store) == 2
        assert memory_store.key(0) == "a"
        assert memory_store.key(1) == "b"
        assert memory_store.key(2) is None
        assert memory_store.key(-1) is None

        memory_store.remove_item("a")
        memory_store.remove_item("missing")
        assert len(memory_store) == 1

        memory_store.clear()
        assert len(memory_store) == 0

    def test_initial_entries_are_copied(self):
        """Test that the initial dict is not shared."""
        initial = {"a": "1"}
        store = MemoryStore(initial)
        store.set_item("b", "2")

        assert initial == {"a": "1"}


class TestFileStore:
    """Tests for FileStore."""

    def test_missing_file_is_empty(self, temp_dir):
        """Test that a missing file reads as an empty store."""
        store = FileStore(temp_dir / "store.json")

        assert len(store) == 0
        assert store.get_item("a") is None
        assert not (temp_dir / "store.json").exists()

    def test_persists_between_instances(self, temp_dir):
        """Test that entries survive a new store on the same file."""
        path = temp_dir / "nested" / "store.json"
        FileStore(path).set_item("a", '"\\"x\\""')

        store = FileStore(str(path))

        assert store.get_item("a") == '"\\"x\\""'
        assert json.loads(path.read_text(encoding="utf-8")) == {"a": '"\\"x\\""'}

    def test_remove_and_clear_persist(self, temp_dir):
        """Test that removals are written through."""
        path = temp_dir / "store.json"
        store = FileStore(path)
        store.set_item("a", "1")
        store.set_item("b", "2")
        store.remove_item("a")

        assert FileStore(path).key(0) == "b"

        store.clear()
        assert len(FileStore(path)) == 0

    def test_corrupt_file(self, temp_dir):
        """Test that a corrupt file raises StorageError."""
        path = temp_dir / "store.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageError, match="corrupt"):
            FileStore(path).get_item("a")

    def test_wrong_shape_file(self, temp_dir):
        """Test that a file not holding an object of strings is rejected."""
        path = temp_dir / "store.json"
        path.write_text('{"a": 1}', encoding="utf-8")

        with pytest.raises(StorageError, match="object of strings"):
            len(FileStore(path))

    def test_unwritable_path(self, temp_dir):
        """Test that write failures raise StorageError."""
        blocker = temp_dir / "file"
        blocker.write_text("", encoding="utf-8")
        store = FileStore(blocker / "store.json")

        with pytest.raises(StorageError, match="Failed to write"):
            store.set_item("a", "1")

        assert len(store) == 0

    def test_failed_write_keeps_existing_file(self, temp_dir):
        """Test that an unwritable value leaves the file and entries intact."""
        path = temp_dir / "store.json"
        store = FileStore(path)
        store.set_item("keep", "precious")

        with pytest.raises(StorageError, match="Failed to write"):
            store.set_item("bad", "\ud800")

        assert store.get_item("bad") is None
        assert store.get_item("keep") == "precious"
        assert FileStore(path).get_item("keep") == "precious"
        assert json.loads(path.read_text(encoding="utf-8")) == {"keep": "precious"}
        assert list(temp_dir.iterdir()) == [path]

    def test_failed_clear_restores_entries(self, temp_dir):
        """Test that entries come back when a flush fails."""
        blocker = temp_dir / "file"
        blocker.write_text("", encoding="utf-8")
        store = FileStore(blocker / "store.json")
        store._data = {"a": "1"}

        with pytest.raises(StorageError):
            store.clear()

        assert store.get_item("a") == "1"


class TestWebStorage:
    """Tests for WebStorage."""

    def setup_method(self):
        """Set up test fixtures."""
        self.store = MemoryStore()
        self.storage = WebStorage(self.store)

    def test_special_values_survive(self, special_values):
        """Test storing every special value."""
        for key, value in special_values.items():
            self.storage.set_item(key, value)

        for key, value in special_values.items():
            assert is_equal(self.storage.get_item(key), value), key

    def test_values_are_encoded_in_store(self):
        """Test that the raw store holds transport text."""
        self.storage.set_item("a", "undefined")
        self.storage.set_item("b", UNDEFINED)

        assert self.store.get_item("a") == '"\\"undefined\\""'
        assert self.store.get_item("b") == '"undefined"'

    def test_missing_key_is_none(self):
        """Test that reading a missing key gives None."""
        assert self.storage.get_item("missing") is None
        assert self.storage.get("missing") is None

    def test_set_single_and_mapping(self):
        """Test both forms of set."""
        self.storage.set("a", 1)
        self.storage.set({"b": [UNDEFINED], "c": float("nan")})

        assert self.storage.get("a") == 1
        assert self.storage.get("b") == [UNDEFINED]
        assert math.isnan(self.storage.get("c"))

    def test_set_undefined_value_explicitly(self):
        """Test that set(key, UNDEFINED) stores rather than treating it as omitted."""
        self.storage.set("a", UNDEFINED)

        assert self.storage.keys() == ["a"]
        assert self.storage.get("a") is UNDEFINED

    def test_set_single_argument_requires_mapping(self):
        """Test that set with one non-mapping argument is rejected."""
        with pytest.raises(ContractError):
            self.storage.set("a")

    def test_set_mapping_is_all_or_nothing(self):
        """Test that a mapping with an unencodable entry stores nothing."""
        with pytest.raises(EncodeError):
            self.storage.set({"a": 1, "b": object()})

        with pytest.raises(ContractError):
            self.storage.set({"c": 1, 2: "int key"})

        assert len(self.store) == 0

    def test_set_mapping_through_file_store(self, temp_dir):
        """Test that a rejected mapping leaves the backing file unchanged."""
        path = temp_dir / "store.json"
        storage = WebStorage(FileStore(path))
        storage.set("keep", 1)

        with pytest.raises(EncodeError):
            storage.set({"a": 2, "b": float("inf")})

        assert WebStorage(FileStore(path)).get() == {"keep": 1}

    def test_get_forms(self):
        """Test get with no argument, a list and a single key."""
        self.storage.set({"a": 1, "b": re.compile("x"), "c": datetime(2024, 1, 1)})

        everything = self.storage.get()
        assert list(everything) == ["a", "b", "c"]
        assert is_equal(everything, {"a": 1, "b": re.compile("x"), "c": datetime(2024, 1, 1)})

        assert self.storage.get(["a", "c", "missing"]) == {
            "a": 1, "c": datetime(2024, 1, 1), "missing": None
        }
        assert self.storage.get("a") == 1

    def test_get_rejects_other_keys(self):
        """Test that a numeric key argument is rejected."""
        with pytest.raises(ContractError):
            self.storage.get(1)

    def test_remove_forms(self):
        """Test remove with a single key, a list and no argument."""
        self.storage.set({"a": 1, "b": 2, "c": 3, "d": 4})

        self.storage.remove("a")
        assert self.storage.keys() == ["b", "c", "d"]

        self.storage.remove(["b", "c"])
        assert self.storage.keys() == ["d"]

        self.storage.remove()
        assert len(self.storage) == 0

    def test_remove_rejects_other_keys(self):
        """Test that a numeric key argument is rejected."""
        with pytest.raises(ContractError):
            self.storage.remove(3)

    def test_pass_through_operations(self):
        """Test key, len, remove_item and clear."""
        self.storage.set({"a": 1, "b": 2})

        assert self.storage.key(1) == "b"
        assert len(self.storage) == 2

        self.storage.remove_item("a")
        assert self.storage.keys() == ["b"]

        self.storage.clear()
        assert self.storage.keys() == []

    def test_raw_writes_break_decoding(self):
        """Test that bypassing the codec yields a ParseError on read."""
        self.store.set_item("raw", "hello")

        with pytest.raises(ParseError):
            self.storage.get_item("raw")

    def test_set_item_rejects_non_str_key(self):
        """Test that keys must be strings."""
        with pytest.raises(ContractError):
            self.storage.set_item(1, "x")

    def test_file_backed_round_trip(self, temp_dir, nested_value):
        """Test a nested value through a file store and a fresh adapter."""
        path = temp_dir / "local.json"
        WebStorage(FileStore(path)).set_item("state", nested_value)

        assert is_equal(WebStorage(FileStore(path)).get_item("state"), nested_value)


class TestCreateStorages:
    """Tests for create_storages."""

    def test_scopes_are_independent(self):
        """Test that local and session scopes do not share entries."""
        local_store = MemoryStore()
        session_store = MemoryStore()

        scopes = create_storages(local_store, session_store)
        scopes.local.set("a", UNDEFINED)
        scopes.session.set("b", float("nan"))

        assert scopes.local.keys() == ["a"]
        assert scopes.session.keys() == ["b"]
        assert scopes.local.store is local_store
        assert scopes.session.store is session_store

    def test_shared_codec(self):
        """Test that a supplied codec is used by both scopes."""
        from hoon import JSONCodec

        codec = JSONCodec(ensure_ascii=True)
        scopes = create_storages(MemoryStore(), MemoryStore(), codec=codec)

        assert scopes.local.codec is codec
        assert scopes.session.codec is codec
