"""
pdmonitor/analytics/pagination.py
──────────────────────────────────
Page arithmetic for the skip/limit list endpoints.

Total page count comes from the server-reported total; when the server
does not report one, the pager only ever offers the next page while the
current one came back full.
"""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PageWindow:
    skip: int
    limit: int


def page_window(page: int | None, page_size: int) -> PageWindow:
    """1-based page number → (skip, limit)."""
    if page_size < 1:
        raise ValueError("page_size must be positive")
    page = max(1, int(page or 1))
    return PageWindow(skip=(page - 1) * page_size, limit=page_size)


def total_pages(
    page: int,
    page_size: int,
    total: int | None,
    has_more: bool,
) -> int:
    """Number of pages the pager should offer."""
    if total is not None:
        return max(1, math.ceil(total / page_size))
    return page + 1 if has_more else max(1, page)


def entries_caption(page: int, page_size: int, shown: int, total: int | None) -> str:
    """Caption such as ``显示第 1 到 8 条，共 16 条``."""
    if shown == 0:
        return "暂无数据" if total in (None, 0) else f"共 {total} 条"
    first = (page - 1) * page_size + 1
    last = first + shown - 1
    if total is None:
        return f"显示第 {first} 到 {last} 条"
    return f"显示第 {first} 到 {min(last, total)} 条，共 {total} 条"
