"""Open-addressing hash table that resolves collisions by double hashing."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Protocol

from dstructs.errors import KeyNotFoundError, TableFullError

DEFAULT_SIZE = 10
DEFAULT_PRIME = 7


class _Slot(Enum):
    EMPTY = "empty"
    DELETED = "deleted"


class DoubleHashTable:
    """Fixed-size table of integer keys probed with a key-dependent step.

    Removed keys leave a tombstone, so searches keep probing past them
    while insertions may reuse the slot.
    """

    def __init__(self, size: int = DEFAULT_SIZE, prime: int = DEFAULT_PRIME) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        if prime <= 0:
            raise ValueError("prime must be positive")
        self.size = size
        self.prime = prime
        self._slots: list[int | _Slot] = [_Slot.EMPTY] * size

    def primary_hash(self, key: int) -> int:
        """Return the home slot of ``key``."""
        return key % self.size

    def step(self, key: int) -> int:
        """Return the probe step of ``key``; it is never zero."""
        return self.prime - key % self.prime

    def _probe(self, key: int) -> Iterator[int]:
        home = self.primary_hash(key)
        step = self.step(key)
        for attempt in range(self.size):
            yield (home + attempt * step) % self.size

    def insert(self, key: int) -> int:
        """Store ``key`` and return the slot it went into."""
        for index in self._probe(key):
            if isinstance(self._slots[index], _Slot):
                self._slots[index] = key
                return index
        raise TableFullError(f"Hash table is full! Unable to insert key {key}")

    def search(self, key: int) -> int | None:
        """Return the slot holding ``key``, or None if it is absent."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is _Slot.EMPTY:
                return None
            if slot == key:
                return index
        return None

    def delete(self, key: int) -> int:
        """Remove ``key``, leaving a tombstone, and return its former slot."""
        index = self.search(key)
        if index is None:
            raise KeyNotFoundError(f"Key {key} not found!")
        self._slots[index] = _Slot.DELETED
        return index

    def render(self) -> str:
        """Return one line per slot describing its contents."""
        labels = {_Slot.EMPTY: "~", _Slot.DELETED: "(Deleted)"}
        return "\n".join(
            f"Index {index}: {labels.get(slot, slot)}"
            for index, slot in enumerate(self._slots)
        )


class _Table(Protocol):
    def insert(self, key: int) -> int: ...

    def search(self, key: int) -> int | None: ...

    def delete(self, key: int) -> int: ...

    def render(self) -> str: ...


@dataclass(frozen=True)
class _MenuText:
    """Messages of an interactive table menu; templates take ``key`` and ``index``."""

    title: str
    found: str
    missing: str
    deleted: str
    inserted: str | None = None


_INVALID = "Invalid choice! Please try again."
_VERBS = {1: "insert", 2: "search", 3: "delete"}


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return int(token)


def _session(argv: list[str] | None, prog: str, description: str) -> Iterator[str]:
    argparse.ArgumentParser(prog=prog, description=description).parse_args(argv)
    return _tokens(sys.stdin)


def _apply(table: _Table, text: _MenuText, verb: str, key: int) -> str | None:
    index: int | None
    if verb == "search":
        index = table.search(key)
        template: str | None = text.missing if index is None else text.found
    elif verb == "insert":
        try:
            index = table.insert(key)
        except TableFullError as exc:
            return exc.args[0]
        template = text.inserted
    else:
        try:
            index = table.delete(key)
        except KeyNotFoundError:
            index, template = None, text.missing
        else:
            template = text.deleted
    return None if template is None else template.format(key=key, index=index)


def _run_table_menu(tokens: Iterator[str], table: _Table, text: _MenuText) -> int:
    menu = (
        f"\n{text.title}:\n1. Insert\n2. Search\n3. Delete\n4. Display\n5. Exit\n"
        "Enter your choice: "
    )
    while True:
        try:
            choice = _read_int(tokens, menu)
            if choice in _VERBS:
                verb = _VERBS[choice]
                key = _read_int(tokens, f"Enter key to {verb}: ")
                message = _apply(table, text, verb, key)
                if message is not None:
                    print(message)
            elif choice == 4:
                print(table.render())
            elif choice == 5:
                return 0
            else:
                print(_INVALID)
        except ValueError:
            print(_INVALID)
        except EOFError:
            return 0


def main(argv: list[str] | None = None) -> int:
    """Run the interactive double-hashing menu on standard input."""
    tokens = _session(argv, "double-hashing", "Interactive double-hashing table.")
    text = _MenuText(
        title="Double Hashing Menu",
        found="Key {key} found at index {index}",
        missing="Key {key} not found!",
        deleted="Key {key} deleted successfully.",
    )
    return _run_table_menu(tokens, DoubleHashTable(), text)


if __name__ == "__main__":
    sys.exit(main())