"""An ordered collection of items."""

from __future__ import annotations

from typing import Iterable, Iterator

from .items import Item


class Inventory:
    """A list of items that shares the items it holds with other holders."""

    def __init__(self, items: Iterable[Item] | None = None) -> None:
        self._items: list[Item] = list(items) if items is not None else []

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"inventory index {index} out of bounds")

    def add(self, item: Item) -> None:
        self._items.append(item)

    def remove(self, index: int) -> Item:
        """Remove and return the item at index."""
        self._check(index)
        return self._items.pop(index)

    def clear(self) -> None:
        self._items.clear()

    def index_at(self, x: int, y: int) -> int | None:
        """Index of the last item lying at (x, y), or None if there is none."""
        found = None
        for index, item in enumerate(self._items):
            if item.x == x and item.y == y:
                found = index
        return found

    def replace(self, index: int, item: Item | None) -> Item:
        """Put item at index and return the old one; with None the slot is removed."""
        self._check(index)
        old = self._items[index]
        if item is not None:
            self._items[index] = item
        else:
            del self._items[index]
        return old

    def copy(self) -> "Inventory":
        return Inventory(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Item:
        self._check(index)
        return self._items[index]

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __str__(self) -> str:
        return "".join(f"{index}: {item} \n" for index, item in enumerate(self._items))