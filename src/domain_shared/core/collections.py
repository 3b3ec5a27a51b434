"""Read-only sequence view handed out for owned collections.

Aggregates and pages keep their elements in private storage and expose
them through ``ReadOnlySequence``.  The view holds its own tuple copy, so
later changes to the owner never show through an already-returned view,
and every list-style mutator raises ``UnsupportedMutationError``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, NoReturn, TypeVar, overload

from .errors import UnsupportedMutationError

T = TypeVar("T")


class ReadOnlySequence(Sequence[T], Generic[T]):
    """Immutable, ordered snapshot of a collection."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: tuple[T, ...] = tuple(items)

    # -- Sequence protocol -------------------------------------------------

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> ReadOnlySequence[T]: ...

    def __getitem__(self, index: int | slice) -> T | ReadOnlySequence[T]:
        if isinstance(index, slice):
            return ReadOnlySequence(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlySequence):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"ReadOnlySequence({list(self._items)!r})"

    def to_list(self) -> list[T]:
        """Return a mutable list copy for callers that need one."""
        return list(self._items)

    # -- Rejected mutators -------------------------------------------------

    def _reject(self, operation: str) -> NoReturn:
        raise UnsupportedMutationError(
            f"{operation}() is not supported on a read-only sequence"
        )

    def append(self, item: Any) -> NoReturn:
        self._reject("append")

    def extend(self, items: Iterable[Any]) -> NoReturn:
        self._reject("extend")

    def insert(self, index: int, item: Any) -> NoReturn:
        self._reject("insert")

    def remove(self, item: Any) -> NoReturn:
        self._reject("remove")

    def pop(self, index: int = -1) -> NoReturn:
        self._reject("pop")

    def clear(self) -> NoReturn:
        self._reject("clear")

    def sort(self, *args: Any, **kwargs: Any) -> NoReturn:
        self._reject("sort")

    def reverse(self) -> NoReturn:
        self._reject("reverse")

    def __setitem__(self, index: Any, value: Any) -> NoReturn:
        self._reject("__setitem__")

    def __delitem__(self, index: Any) -> NoReturn:
        self._reject("__delitem__")

    def __iadd__(self, other: Any) -> NoReturn:
        self._reject("__iadd__")
