"""Page arithmetic shared by the store and the listing route."""

import math

from common.models.page import PageInfo

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 20


def normalize_page_params(
    page_number: int, page_size: int, max_page_size: int = MAX_PAGE_SIZE
) -> tuple[int, int]:
    """Clamp raw query values into a usable page request.

    Args:
        page_number: Requested page number, any integer
        page_size: Requested page size, any integer
        max_page_size: Upper bound for the page size

    Returns:
        Tuple of (page_number >= 1, 1 <= page_size <= max_page_size)
    """
    return max(1, page_number), min(max(1, page_size), max_page_size)


def calculate_page(
    page_number: int, page_size: int, total_count: int, max_page_size: int = MAX_PAGE_SIZE
) -> PageInfo:
    """Compute where a page sits within a collection of ``total_count`` items.

    A page past the end is not an error: it reports no next page and points
    back at the page before it.
    """
    page_number, page_size = normalize_page_params(page_number, page_size, max_page_size)
    total_count = max(0, total_count)

    total_pages = math.ceil(total_count / page_size)
    has_previous = page_number > 1
    has_next = page_number * page_size < total_count

    return PageInfo(
        page_number=page_number,
        page_size=page_size,
        total_count=total_count,
        total_pages=total_pages,
        has_previous=has_previous,
        has_next=has_next,
        previous_page_number=page_number - 1 if has_previous else None,
        next_page_number=page_number + 1 if has_next else None,
    )
