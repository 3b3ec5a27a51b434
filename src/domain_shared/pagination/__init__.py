"""Pagination: immutable pages and the factories that build them."""

from domain_shared.pagination.page import Page, count_pages
from domain_shared.pagination.utils import (
    PageRequest,
    empty,
    map_page,
    of,
    paginate,
    paginate_request,
)

__all__ = [
    "Page",
    "PageRequest",
    "count_pages",
    "empty",
    "map_page",
    "of",
    "paginate",
    "paginate_request",
]
