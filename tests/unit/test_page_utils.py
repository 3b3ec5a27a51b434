"""Tests for the pagination factories (``pagination/utils.py``)."""

from __future__ import annotations

import logging

import pytest

from domain_shared.pagination import (
    PageRequest,
    empty,
    map_page,
    of,
    paginate,
    paginate_request,
)


class TestEmpty:
    def test_empty_page(self):
        page = empty()
        assert page.content == []
        assert page.total_elements == 0
        assert page.number == 0
        assert page.size == 0
        assert page.total_pages == 1
        assert page.has_content is False
        assert page.is_first is True
        assert page.is_last is True

    def test_empty_pages_are_equal(self):
        assert empty() == empty()


class TestOf:
    def test_wraps_as_is(self):
        page = of(["x", "y"], 100, 7, 2)
        assert page.content == ["x", "y"]
        assert page.total_elements == 100
        assert page.number == 7
        assert page.size == 2
        assert page.total_pages == 50

    def test_no_recomputation_from_content(self):
        page = of(["x"], 42, 0, 10)
        assert page.total_elements == 42

    def test_accepts_any_iterable(self):
        page = of((n for n in range(3)), 3, 0, 3)
        assert page.content == [0, 1, 2]


class TestPaginate:
    def test_empty_list(self):
        assert paginate([], 0, 10) == empty()

    def test_none_sequence(self):
        assert paginate(None, 3, 10) == empty()

    def test_middle_page(self, letters):
        page = paginate(letters, 1, 2)
        assert page.content == ["c", "d"]
        assert page.total_elements == 5
        assert page.number == 1
        assert page.size == 2
        assert page.total_pages == 3
        assert page.has_next is True
        assert page.has_previous is True

    def test_first_page(self, letters):
        page = paginate(letters, 0, 2)
        assert page.content == ["a", "b"]
        assert page.is_first is True

    def test_partial_last_page(self, letters):
        page = paginate(letters, 2, 2)
        assert page.content == ["e"]
        assert page.is_last is True
        assert page.has_next is False

    def test_zero_size_returns_everything(self):
        page = paginate(["a", "b", "c"], 0, 0)
        assert page.content == ["a", "b", "c"]
        assert page.number == 0
        assert page.size == 3
        assert page.total_pages == 1

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size_forces_page_zero(self, letters, size):
        page = paginate(letters, 4, size)
        assert page.number == 0
        assert page.size == 5
        assert page.content == letters
        assert page.total_pages == 1

    def test_non_positive_size_logs_reset(self, letters, caplog):
        with caplog.at_level(logging.DEBUG, logger="domain_shared.pagination.utils"):
            paginate(letters, 4, 0)
        assert "page_number=4 reset to 0" in caplog.text

    def test_beyond_end(self):
        page = paginate(["a", "b", "c"], 2, 2)
        assert page.content == []
        assert page.total_elements == 3
        assert page.number == 2
        assert page.size == 2
        assert page.total_pages == 2

    def test_start_exactly_at_end(self, letters):
        page = paginate(letters, 5, 1)
        assert page.content == []
        assert page.number == 5

    def test_content_is_copied(self, letters):
        page = paginate(letters, 0, 2)
        letters[0] = "z"
        assert page.content == ["a", "b"]

    def test_works_on_tuples_and_strings(self):
        assert paginate((1, 2, 3), 1, 2).content == [3]
        assert paginate("abcde", 1, 2).content == ["c", "d"]


class TestMapPage:
    def test_map_none(self):
        assert map_page(None, str) == empty()

    def test_map_delegates(self):
        page = map_page(of(["1", "2", "3"], 3, 0, 3), int)
        assert page.content == [1, 2, 3]
        assert page.total_elements == 3
        assert page.number == 0
        assert page.size == 3

    def test_map_paginated_slice(self, letters):
        page = map_page(paginate(letters, 1, 2), str.upper)
        assert page.content == ["C", "D"]
        assert page.total_pages == 3


class TestPageRequest:
    def test_defaults(self):
        request = PageRequest()
        assert request.number == 0
        assert request.size == 20
        assert request.offset == 0

    def test_navigation(self):
        request = PageRequest(2, 10)
        assert request.next() == PageRequest(3, 10)
        assert request.previous_or_first() == PageRequest(1, 10)
        assert request.first() == PageRequest(0, 10)
        assert request.offset == 20

    def test_previous_of_first_is_first(self):
        assert PageRequest(0, 5).previous_or_first() == PageRequest(0, 5)

    def test_offset_for_non_positive_size(self):
        assert PageRequest(3, 0).offset == 0

    def test_paginate_request(self, letters):
        page = paginate_request(letters, PageRequest(1, 2))
        assert page == paginate(letters, 1, 2)

    def test_walk_all_pages(self, letters):
        request = PageRequest(0, 2)
        seen: list[str] = []
        while True:
            page = paginate_request(letters, request)
            seen.extend(page)
            if not page.has_next:
                break
            request = request.next()
        assert seen == letters


class TestNegativePageNumber:
    def test_negative_number_yields_empty_content(self, letters):
        page = paginate(letters, -1, 2)
        assert page.content == []
        assert page.number == -1
        assert page.total_elements == 5
