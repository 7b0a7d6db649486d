"""Open-addressing hash table that resolves collisions by linear probing."""

from __future__ import annotations

import sys

from dstructs.double_hashing import _MenuText, _run_table_menu, _session
from dstructs.errors import KeyNotFoundError, TableFullError

DEFAULT_SIZE = 10


class LinearProbingTable:
    """Fixed-size table of integer keys probed one slot at a time.

    Deleting a key empties its slot outright; no tombstone is left.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._slots: list[int | None] = [None] * size
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _home(self, key: int) -> int:
        return key % self.size

    def insert(self, key: int) -> int:
        """Store ``key`` and return the slot it went into."""
        if self._count == self.size:
            raise TableFullError(f"Hash table is full! Unable to insert {key}.")
        index = self._home(key)
        while self._slots[index] is not None:
            index = (index + 1) % self.size
        self._slots[index] = key
        self._count += 1
        return index

    def search(self, key: int) -> int | None:
        """Return the slot holding ``key``, or None if it is absent."""
        start = index = self._home(key)
        while self._slots[index] is not None:
            if self._slots[index] == key:
                return index
            index = (index + 1) % self.size
            if index == start:
                break
        return None

    def delete(self, key: int) -> int:
        """Remove ``key`` and return the slot it occupied."""
        index = self.search(key)
        if index is None:
            raise KeyNotFoundError(f"Key {key} not found in the hash table.")
        self._slots[index] = None
        self._count -= 1
        return index

    def render(self) -> str:
        """Return one line per slot describing its contents."""
        return "\n".join(
            f"Index {index}: {'~' if slot is None else slot}"
            for index, slot in enumerate(self._slots)
        )


def main(argv: list[str] | None = None) -> int:
    """Run the interactive linear-probing menu on standard input."""
    tokens = _session(argv, "linear-probing", "Interactive linear-probing table.")
    text = _MenuText(
        title="Hash Table Menu",
        found="Key {key} found at index {index}.",
        missing="Key {key} not found in the hash table.",
        deleted="Key {key} deleted from index {index}.",
        inserted="Key {key} inserted at index {index}.",
    )
    return _run_table_menu(tokens, LinearProbingTable(), text)


if __name__ == "__main__":
    sys.exit(main())