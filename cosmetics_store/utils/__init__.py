# ==============================================================================
# UTILS PACKAGE INITIALIZATION
# ==============================================================================

"""
Utilities Module
================

Helper functions and utilities:
- Slug generation
- Pagination helpers
- Date/time utilities
"""

from cosmetics_store.utils.helpers import (
    calculate_offset,
    month_window,
    paginate_results,
    slugify,
    utc_now,
    year_window,
)

__all__ = [
    "calculate_offset",
    "month_window",
    "paginate_results",
    "slugify",
    "utc_now",
    "year_window",
]
