"""Immutable page of results.

``Page`` is the public contract used in annotations.  The only
implementation, ``_PageImpl``, is private: pages are built exclusively by
the factories in ``domain_shared.pagination.utils``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, runtime_checkable

from domain_shared.core.collections import ReadOnlySequence

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
U = TypeVar("U")


@runtime_checkable
class Page(Protocol[T_co]):
    """A bounded slice of a larger result set plus its position metadata."""

    @property
    def content(self) -> ReadOnlySequence[T_co]: ...

    @property
    def total_elements(self) -> int: ...

    @property
    def total_pages(self) -> int: ...

    @property
    def number(self) -> int: ...

    @property
    def size(self) -> int: ...

    @property
    def has_content(self) -> bool: ...

    @property
    def is_first(self) -> bool: ...

    @property
    def is_last(self) -> bool: ...

    @property
    def has_next(self) -> bool: ...

    @property
    def has_previous(self) -> bool: ...

    def map(self, converter: Callable[[T_co], U]) -> Page[U]: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[T_co]: ...


def count_pages(total_elements: int, size: int) -> int:
    """Number of pages needed for *total_elements* at *size* per page.

    A non-positive size or an empty result set still counts as one page.
    """
    if size <= 0 or total_elements <= 0:
        return 1
    return -(-total_elements // size)


@dataclass(frozen=True)
class _PageImpl(Generic[T]):
    elements: tuple[T, ...]
    total_elements: int
    number: int
    size: int

    @classmethod
    def _build(
        cls,
        content: Iterable[T] | None,
        total_elements: int,
        number: int,
        size: int,
    ) -> _PageImpl[T]:
        items = tuple(content) if content is not None else ()
        return cls(items, total_elements, number, size)

    @property
    def content(self) -> ReadOnlySequence[T]:
        return ReadOnlySequence(self.elements)

    @property
    def total_pages(self) -> int:
        return count_pages(self.total_elements, self.size)

    @property
    def has_content(self) -> bool:
        return bool(self.elements)

    @property
    def is_first(self) -> bool:
        return self.number == 0

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    def map(self, converter: Callable[[T], U]) -> _PageImpl[U]:
        """Return a new page with *converter* applied to every element.

        The conversion is eager: *converter* runs exactly once per element,
        in order, before this call returns.
        """
        converted = tuple([converter(item) for item in self.elements])
        return _PageImpl(converted, self.total_elements, self.number, self.size)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self.elements)

    def __repr__(self) -> str:
        return (
            f"Page(content={list(self.elements)!r}, "
            f"total_elements={self.total_elements}, number={self.number}, "
            f"size={self.size}, total_pages={self.total_pages})"
        )
