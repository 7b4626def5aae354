"""
Tests for pagination math.
"""

import pytest

from pricewatch.models import PageInfo
from pricewatch.pagination import (
    clamp_page,
    next_page,
    page_window,
    paginate,
    previous_page,
    server_total_pages,
    showing_range,
    total_pages,
)


class TestPaginate:
    def test_slices_requested_page(self):
        page_slice = paginate(list(range(23)), 2, 10)
        assert page_slice.items == [20, 21, 22]
        assert page_slice.total_pages == 3
        assert page_slice.total_items == 23
        assert (page_slice.start, page_slice.end) == (21, 23)
        assert page_slice.has_previous
        assert not page_slice.has_next

    def test_out_of_range_page_is_empty(self):
        assert paginate([1, 2, 3], 5, 2).items == []
        assert paginate([1, 2, 3], -1, 2).items == []

    def test_empty_list(self):
        page_slice = paginate([], 0, 5)
        assert page_slice.items == []
        assert page_slice.total_pages == 0
        assert (page_slice.start, page_slice.end) == (0, 0)

    def test_invalid_size_raises(self):
        with pytest.raises(ValueError):
            paginate([1], 0, 0)


class TestPageNavigation:
    def test_total_pages(self):
        assert total_pages(0, 10) == 0
        assert total_pages(10, 10) == 1
        assert total_pages(11, 10) == 2

    def test_clamp_and_step(self):
        assert clamp_page(9, 3) == 2
        assert clamp_page(-4, 3) == 0
        assert clamp_page(3, 0) == 0
        assert next_page(2, 3) == 2
        assert next_page(0, 3) == 1
        assert previous_page(0) == 0

    @pytest.mark.parametrize(
        "page,pages,expected",
        [
            (0, 3, [0, 1, 2]),
            (0, 20, [0, 1, 2, 3, 4]),
            (6, 20, [4, 5, 6, 7, 8]),
            (19, 20, [15, 16, 17, 18, 19]),
            (0, 0, []),
        ],
    )
    def test_page_window(self, page, pages, expected):
        assert page_window(page, pages) == expected

    def test_showing_range(self):
        assert showing_range(0, 10, 25) == (1, 10)
        assert showing_range(2, 10, 25) == (21, 25)
        assert showing_range(3, 10, 25) == (0, 0)


def test_server_total_pages_defaults_to_one():
    assert server_total_pages(None) == 1
    assert server_total_pages(PageInfo(total_pages=0)) == 1
    assert server_total_pages(PageInfo(total_pages=4)) == 4
