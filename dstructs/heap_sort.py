"""Heap sort built on an explicit max-heap."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, MutableSequence, TypeVar

T = TypeVar("T")


def sift_down(heap: MutableSequence[T], size: int, root: int) -> None:
    """Restore the max-heap property below ``root`` within the first ``size`` items."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Return the values in ascending order."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        sift_down(items, end, 0)
    return items


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many integers from standard input, print them sorted."""
    argparse.ArgumentParser(
        prog="heap-sort", description="Sort integers read from standard input."
    ).parse_args(argv)
    tokens = sys.stdin.read().split()
    print("Enter the number of elements: ", end="")
    try:
        count = int(tokens[0])
        print("Enter the elements:")
        values = [int(token) for token in tokens[1 : 1 + count]]
    except (IndexError, ValueError):
        print("error: expected a count followed by integers", file=sys.stderr)
        return 1
    if count < 0 or len(values) < count:
        print(f"error: expected {count} elements", file=sys.stderr)
        return 1
    print("Sorted elements:")
    print("".join(f"{value}\t" for value in heap_sort(values)))
    return 0


if __name__ == "__main__":
    sys.exit(main())