"""
tests/test_pagination.py
─────────────────────────
Tests for page arithmetic and the entries caption.
"""
import pytest

from pdmonitor.analytics.pagination import entries_caption, page_window, total_pages


class TestPageWindow:
    def test_first_page(self):
        w = page_window(1, 8)
        assert (w.skip, w.limit) == (0, 8)

    def test_third_page(self):
        w = page_window(3, 8)
        assert (w.skip, w.limit) == (16, 8)

    def test_page_clamped(self):
        assert page_window(0, 8).skip == 0
        assert page_window(None, 8).skip == 0

    def test_bad_page_size(self):
        with pytest.raises(ValueError):
            page_window(1, 0)


class TestTotalPages:
    def test_from_total(self):
        assert total_pages(1, 8, 16, True) == 2
        assert total_pages(1, 8, 17, True) == 3

    def test_empty_total_keeps_one_page(self):
        assert total_pages(1, 8, 0, False) == 1

    def test_unknown_total_full_page(self):
        assert total_pages(2, 8, None, True) == 3

    def test_unknown_total_short_page(self):
        assert total_pages(2, 8, None, False) == 2


class TestEntriesCaption:
    def test_with_total(self):
        assert entries_caption(1, 8, 8, 16) == "显示第 1 到 8 条，共 16 条"

    def test_last_partial_page(self):
        assert entries_caption(3, 8, 4, 20) == "显示第 17 到 20 条，共 20 条"

    def test_without_total(self):
        assert entries_caption(2, 8, 8, None) == "显示第 9 到 16 条"

    def test_nothing_shown(self):
        assert entries_caption(1, 8, 0, None) == "暂无数据"
        assert entries_caption(1, 8, 0, 0) == "暂无数据"
