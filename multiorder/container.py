"""A container that can be traversed in several different orders."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class MyContainer(Generic[T]):
    """Holds elements in insertion order and offers several traversals.

    Every traversal method returns a fresh iterator over a snapshot of the
    elements taken when the method is called.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._elements: list[T] = list(items) if items is not None else []

    def add_element(self, value: T) -> None:
        """Append ``value`` to the end of the container."""
        self._elements.append(value)

    def remove_element(self, value: T) -> None:
        """Remove every occurrence of ``value``.

        Raises ValueError if the value is not present.
        """
        remaining = [item for item in self._elements if item != value]
        if len(remaining) == len(self._elements):
            raise ValueError("Element not found.")
        self._elements = remaining

    def __len__(self) -> int:
        return len(self._elements)

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._elements) + "]"

    def __iter__(self) -> Iterator[T]:
        return self.order()

    def order(self) -> Iterator[T]:
        """Iterate in insertion order."""
        return iter(list(self._elements))

    def ascending_order(self) -> Iterator[T]:
        """Iterate from smallest to largest."""
        return iter(sorted(self._elements))

    def descending_order(self) -> Iterator[T]:
        """Iterate from largest to smallest."""
        return iter(sorted(self._elements, reverse=True))

    def reverse_order(self) -> Iterator[T]:
        """Iterate from the last added element to the first."""
        return iter(self._elements[::-1])

    def side_cross_order(self) -> Iterator[T]:
        """Iterate smallest, largest, second smallest, second largest, and so on."""
        ordered = sorted(self._elements)
        return self._side_cross(ordered)

    @staticmethod
    def _side_cross(ordered: list[T]) -> Iterator[T]:
        low, high = 0, len(ordered) - 1
        while low < high:
            yield ordered[low]
            yield ordered[high]
            low += 1
            high -= 1
        if low == high:
            yield ordered[low]

    def middle_out_order(self) -> Iterator[T]:
        """Iterate from the middle element outwards, alternating left and right.

        The traversal works on insertion order; the middle is at index
        ``len // 2``.
        """
        return self._middle_out(list(self._elements))

    @staticmethod
    def _middle_out(items: list[T]) -> Iterator[T]:
        if not items:
            return
        mid = len(items) // 2
        yield items[mid]
        left = reversed(items[:mid])
        right = iter(items[mid + 1:])
        for left_item in left:
            yield left_item
            right_item = next(right, _MISSING)
            if right_item is _MISSING:
                yield from left
                return
            yield right_item  # type: ignore[misc]
        yield from right


_MISSING = object()