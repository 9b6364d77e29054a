#!/usr/bin/env python3
"""
Example usage of hoon.

This script stores a settings object holding values plain JSON would
lose, reads it back from a file-backed store, and shows the transforms.
"""

import re
import tempfile
from datetime import datetime
from pathlib import Path

from hoon import (
    UNDEFINED,
    FileStore,
    MemoryStore,
    create_storages,
    encode,
    extend,
    extract,
    fmap,
    is_equal,
    padding,
    templates,
)


def main():
    """Main example function."""
    print("hoon Example")
    print("=" * 50)

    defaults = {
        "theme": "dark",
        "last_login": datetime(2024, 1, 2, 14, 30),
        "username_filter": re.compile(r"^[a-z_]+$"),
        "score": float("nan"),
        "token": UNDEFINED,
        "note": "undefined",
    }
    overrides = {"theme": "light", "score": 42}
    settings = extend(defaults, overrides)

    print(f"Transport text:\n{encode(settings)}\n")

    with tempfile.TemporaryDirectory() as temp_dir:
        store_path = Path(temp_dir) / "local.json"
        scopes = create_storages(FileStore(store_path), MemoryStore())
        scopes.local.set(settings)

        print(f"Store file {store_path.name}:")
        print(store_path.read_text(encoding="utf-8"))

        restored = create_storages(FileStore(store_path), MemoryStore()).local.get()
        print(f"Restored: {restored}")
        print(f"✅ Round trip equal: {is_equal(restored, settings)}\n")

    public = extract(settings, lambda val, key: key != "token")
    print(f"Public keys: {list(public)}")

    labels = fmap(settings, lambda val, key: (key, padding(key, 16, ".", True)) if isinstance(val, str) else None)
    for label in labels.values():
        print(f"   {label}")

    render = templates({"greeting": "Hello, <%= name %>. Theme: <%= theme %>."})
    print(render["greeting"](name="Alice", theme=settings["theme"]))


if __name__ == "__main__":
    main()
