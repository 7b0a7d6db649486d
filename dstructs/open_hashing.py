"""Hash table that resolves collisions by separate chaining."""

from __future__ import annotations

import sys

from dstructs.double_hashing import _MenuText, _run_table_menu, _session
from dstructs.errors import KeyNotFoundError

DEFAULT_SIZE = 10


class ChainedHashTable:
    """Table of integer keys where each bucket holds a chain, newest first."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def _index(self, key: int) -> int:
        return key % self.size

    def insert(self, key: int) -> int:
        """Put ``key`` at the head of its chain and return the bucket index."""
        index = self._index(key)
        self._buckets[index].insert(0, key)
        return index

    def search(self, key: int) -> int | None:
        """Return the bucket holding ``key``, or None if it is absent."""
        index = self._index(key)
        return index if key in self._buckets[index] else None

    def delete(self, key: int) -> int:
        """Remove the first occurrence of ``key`` in its chain."""
        index = self._index(key)
        try:
            self._buckets[index].remove(key)
        except ValueError:
            raise KeyNotFoundError(f"Key {key} not found!") from None
        return index

    def chain(self, index: int) -> list[int]:
        """Return a copy of the chain at ``index``, head first."""
        return list(self._buckets[index])

    def render(self) -> str:
        """Return one line per bucket showing its chain."""
        return "\n".join(
            f"Index {index}: "
            + ("".join(f"{key} -> " for key in bucket) + "NULL" if bucket else "~")
            for index, bucket in enumerate(self._buckets)
        )


def main(argv: list[str] | None = None) -> int:
    """Run the interactive separate-chaining menu on standard input."""
    tokens = _session(argv, "open-hashing", "Interactive chained hash table.")
    text = _MenuText(
        title="Open Hashing Menu",
        found="Key {key} found at index {index}",
        missing="Key {key} not found!",
        deleted="Key {key} deleted successfully.",
    )
    return _run_table_menu(tokens, ChainedHashTable(), text)


if __name__ == "__main__":
    sys.exit(main())