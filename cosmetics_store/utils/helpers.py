# ==============================================================================
# HELPER UTILITIES
# ==============================================================================
# Common utility functions used across the application
# ==============================================================================

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple, TypeVar
import math
import re
import unicodedata

T = TypeVar("T")


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def slugify(value: str) -> str:
    """
    Build a URL slug from a display name.

    Accents are stripped by NFKD decomposition, anything outside
    ``[a-z0-9 -]`` is dropped, whitespace becomes ``-`` and dash runs
    collapse.

    Example:
        >>> slugify("Son Kem Lì Mịn Môi")
        'son-kem-li-min-moi'
    """
    if not value:
        return ""
    normalized = unicodedata.normalize("NFKD", str(value))
    stripped = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    slug = stripped.strip().lower()
    slug = re.sub(r"[^a-z0-9 -]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug


def month_window(year: int, month: int) -> Tuple[datetime, datetime]:
    """Half-open UTC interval [first of month, first of next month)."""
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    if month == 12:
        end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
    else:
        end = datetime(year, month + 1, 1, tzinfo=timezone.utc)
    return start, end


def year_window(year: int) -> Tuple[datetime, datetime]:
    """Half-open UTC interval covering a calendar year."""
    return (
        datetime(year, 1, 1, tzinfo=timezone.utc),
        datetime(year + 1, 1, 1, tzinfo=timezone.utc),
    )


def paginate_results(
    items: List[T],
    page: int,
    page_size: int,
    total: int,
) -> Dict[str, Any]:
    """
    Create a pagination response dict.

    Args:
        items: List of items for current page
        page: Current page number (1-indexed)
        page_size: Items per page
        total: Total item count

    Returns:
        Pagination metadata dict
    """
    pages = math.ceil(total / page_size) if total > 0 else 0

    return {
        "items": items,
        "total": total,
        "page": page,
        "page_size": page_size,
        "pages": pages,
        "has_next": page < pages,
        "has_prev": page > 1,
    }


def calculate_offset(page: int, page_size: int) -> int:
    """Calculate database offset from page number."""
    return (page - 1) * page_size
