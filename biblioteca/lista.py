"""An ordered collection with front and back insertion."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Lista(Generic[T]):
    """A sequence of items that can grow at either end."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def insertar_inicio(self, dato: T) -> None:
        """Insert an item at the front."""
        self._items.appendleft(dato)

    def insertar_final(self, dato: T) -> None:
        """Insert an item at the end."""
        self._items.append(dato)

    def mostrar(self) -> str:
        """Return every item's detailed text, one after another."""
        parts = []
        for dato in self._items:
            to_string = getattr(dato, "to_string", None)
            parts.append((to_string() if callable(to_string) else str(dato)) + "\n")
        return "".join(parts)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        if not self._items:
            return "Lista vacia!\n"
        return "".join(f"{dato}\n" for dato in self._items)