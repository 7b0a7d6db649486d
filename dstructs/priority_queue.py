"""Max-heap priority queue rebuilt bottom-up after every extraction."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, TypeVar

T = TypeVar("T")


def build_max_heap(values: Iterable[T]) -> list[T]:
    """Return the values arranged as a max-heap."""
    items = list(values)
    size = len(items)
    for start in range(size // 2 - 1, -1, -1):
        hole = start
        value = items[hole]
        while 2 * hole + 1 < size:
            child = 2 * hole + 1
            if child + 1 < size and items[child] < items[child + 1]:
                child += 1
            if value >= items[child]:
                break
            items[hole] = items[child]
            hole = child
        items[hole] = value
    return items


class MaxHeap:
    """Priority queue that always yields its largest element first."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items = build_max_heap(values)

    def __len__(self) -> int:
        return len(self._items)

    def extract_max(self) -> T:
        """Remove and return the largest element."""
        if not self._items:
            raise IndexError("No element to delete")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._items = build_max_heap(self._items)
        return top

    def to_list(self) -> list[T]:
        """Return the heap's array layout, root first."""
        return list(self._items)


_MENU = "\n 1. Create Heap\n 2. Extractmax\n 3. Exit\n Read Choice :"


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return int(token)


def _show(heap: MaxHeap) -> None:
    print("".join(f"{value}\t" for value in heap.to_list()), end="", flush=True)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive priority-queue menu on standard input."""
    argparse.ArgumentParser(
        prog="priority-queue", description="Interactive max-heap priority queue."
    ).parse_args(argv)
    heap: MaxHeap = MaxHeap()
    tokens = _tokens(sys.stdin)
    while True:
        print(_MENU, end="", flush=True)
        try:
            choice = _read_int(tokens)
            if choice == 1:
                print("\n Read no of elements :", end="", flush=True)
                count = _read_int(tokens)
                print("\n Read Elements")
                heap = MaxHeap(_read_int(tokens) for _ in range(count))
                print("\n Elements after heap")
                _show(heap)
            elif choice == 2:
                try:
                    top = heap.extract_max()
                except IndexError:
                    print("\n No element to delete", end="")
                    continue
                print(f"\n Element deleted is {top}")
                if heap:
                    print("\n Elements after reconstructing heap")
                    _show(heap)
            else:
                return 0
        except (EOFError, ValueError):
            return 0


if __name__ == "__main__":
    sys.exit(main())