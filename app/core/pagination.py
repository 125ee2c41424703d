"""
Offset pagination shared by every list endpoint.

This module provides one pagination primitive and a DRF adapter around it:
- paginate: Compute the record window and page count for a total
- paginate_queryset: Apply a window to a Django queryset
- PageIndexPagination: DRF pagination class reading the page index from the URL

Rules:
    - Page indices are zero-based
    - pages == ceil(total / page_size)
    - A negative index, or an index >= pages, yields an empty window
      (callers treat an empty list as "no more pages", never as an error)
    - A zero total yields pages == 0 and an empty window for every index

Usage:
    from core.pagination import paginate_queryset

    items, window = paginate_queryset(User.objects.order_by("id"), page_index=2)
    return Response({"users": serialize(items), "pages": window.pages})
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from rest_framework.pagination import BasePagination
from rest_framework.response import Response

if TYPE_CHECKING:
    from typing import Any

    from django.db.models import QuerySet

DEFAULT_PAGE_SIZE: Final[int] = 20


@dataclass(frozen=True)
class PageWindow:
    """
    Slice of a result set selected by a page index.

    Attributes:
        page_index: Requested zero-based page index
        page_size: Records per page
        pages: Total number of pages for the result set
        offset: Index of the first record in the window
        limit: Number of records in the window (0 when out of range)
    """

    page_index: int
    page_size: int
    pages: int
    offset: int
    limit: int

    @property
    def is_empty(self) -> bool:
        return self.limit == 0

    @property
    def stop(self) -> int:
        return self.offset + self.limit


def paginate(
    total_count: int, page_index: int, page_size: int = DEFAULT_PAGE_SIZE
) -> PageWindow:
    """
    Compute the window [page_index * page_size, page_index * page_size + page_size).

    Args:
        total_count: Number of records in the full result set
        page_index: Zero-based page index (may be out of range)
        page_size: Records per page (must be positive)

    Returns:
        PageWindow; empty when page_index is negative or >= pages

    Raises:
        ValueError: If page_size is not positive or total_count is negative
    """
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    if total_count < 0:
        raise ValueError("total_count cannot be negative")

    pages = math.ceil(total_count / page_size)
    if page_index < 0 or page_index >= pages:
        return PageWindow(page_index, page_size, pages, offset=0, limit=0)

    offset = page_index * page_size
    limit = min(page_size, total_count - offset)
    return PageWindow(page_index, page_size, pages, offset=offset, limit=limit)


def paginate_queryset(
    queryset: QuerySet, page_index: int, page_size: int = DEFAULT_PAGE_SIZE
) -> tuple[list[Any], PageWindow]:
    """
    Run the count query, then fetch only the records inside the window.

    The queryset must already be ordered; page boundaries follow its ordering.
    """
    window = paginate(queryset.count(), page_index, page_size)
    if window.is_empty:
        return [], window
    return list(queryset[window.offset : window.stop]), window


class PageIndexPagination(BasePagination):
    """
    DRF pagination driven by a page index captured in the URL path.

    Subclasses name the response key for the records:

        class ChatPagination(PageIndexPagination):
            results_key = "chats"
            page_index_kwarg = "page_index"

    Response shape:
        {"<results_key>": [...], "pages": <int>}
    """

    page_size = DEFAULT_PAGE_SIZE
    page_index_kwarg = "page"
    results_key = "results"

    def paginate_queryset(self, queryset, request, view=None):
        page_index = 0
        if view is not None:
            page_index = int(view.kwargs.get(self.page_index_kwarg, 0))
        items, self.window = paginate_queryset(queryset, page_index, self.page_size)
        return items

    def get_paginated_response(self, data):
        return Response({self.results_key: data, "pages": self.window.pages})

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "required": [self.results_key, "pages"],
            "properties": {
                self.results_key: schema,
                "pages": {"type": "integer", "example": 3},
            },
        }
