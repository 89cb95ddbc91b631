from typing import Optional, Tuple

MAX_PAGINATION_LIMIT = 50
DEFAULT_PAGINATION_LIMIT = 5


def normalize_page(limit: Optional[int], offset: Optional[int]) -> Tuple[int, int]:
    """0 or missing limit means the default page size; anything above the max is clamped."""
    if not limit or limit < 0:
        limit = DEFAULT_PAGINATION_LIMIT
    limit = min(limit, MAX_PAGINATION_LIMIT)
    if not offset or offset < 0:
        offset = 0
    return limit, offset
