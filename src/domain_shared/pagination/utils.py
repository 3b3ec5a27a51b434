"""Factories and helpers that produce ``Page`` instances.

A stateless module of free functions; these are the only public way to
build a page.  No input makes them raise: absent sequences, non-positive
page sizes and out-of-range page numbers each map to a defined page.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from domain_shared.pagination.page import Page, _PageImpl

if TYPE_CHECKING:
    from domain_shared.core.config import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


def empty() -> Page[T]:
    """Page with no content, ``total_elements=0``, ``number=0``, ``size=0``."""
    return _PageImpl._build((), 0, 0, 0)


def of(
    content: Iterable[T] | None,
    total_elements: int,
    number: int,
    size: int,
) -> Page[T]:
    """Wrap an already fetched slice and its metadata as a page.

    Nothing is recomputed: the caller vouches that *content* and
    *total_elements* agree.  ``None`` content is an empty page body.
    """
    return _PageImpl._build(content, total_elements, number, size)


def paginate(
    sequence: Sequence[T] | None,
    page_number: int,
    page_size: int,
) -> Page[T]:
    """Cut page *page_number* of *page_size* elements out of *sequence*.

    - empty or ``None`` sequence: ``empty()``
    - ``page_size <= 0``: the whole sequence as page 0, ``size=len(sequence)``
    - start past the end (or a negative page number): empty content,
      requested ``number`` and ``size``
    """
    if sequence is None or len(sequence) == 0:
        return empty()

    total_elements = len(sequence)

    if page_size <= 0:
        if page_number != 0:
            logger.debug(
                "page_size=%d disables pagination; page_number=%d reset to 0",
                page_size,
                page_number,
            )
        return of(sequence, total_elements, 0, total_elements)

    start = page_number * page_size
    if start < 0 or start >= total_elements:
        return of((), total_elements, page_number, page_size)

    end = min(start + page_size, total_elements)
    return of(sequence[start:end], total_elements, page_number, page_size)


def map_page(page: Page[T] | None, converter: Callable[[T], U]) -> Page[U]:
    """Convert every element of *page*; ``None`` yields ``empty()``."""
    if page is None:
        return empty()
    return page.map(converter)


# ---------------------------------------------------------------------------
# Page requests
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PageRequest:
    """Value object naming a page to fetch: zero-based ``number`` and ``size``."""

    number: int = 0
    size: int = 20

    @classmethod
    def from_settings(cls, settings: Settings) -> PageRequest:
        """First page at the configured default page size."""
        return cls(0, settings.pagination.default_page_size)

    @property
    def offset(self) -> int:
        """Index of the first element of this page in the full result set."""
        return self.number * max(self.size, 0)

    def first(self) -> PageRequest:
        return PageRequest(0, self.size)

    def next(self) -> PageRequest:
        return PageRequest(self.number + 1, self.size)

    def previous_or_first(self) -> PageRequest:
        if self.number <= 0:
            return self.first()
        return PageRequest(self.number - 1, self.size)


def paginate_request(sequence: Sequence[T] | None, request: PageRequest) -> Page[T]:
    """``paginate`` driven by a ``PageRequest``."""
    return paginate(sequence, request.number, request.size)
