# ==============================================================================
# HELPER UTILITY TESTS
# ==============================================================================

from datetime import datetime, timezone

import pytest

from cosmetics_store.services.cart_service import summarize_items
from cosmetics_store.schemas.cart import CartLine
from cosmetics_store.utils.helpers import (
    calculate_offset,
    month_window,
    paginate_results,
    slugify,
    year_window,
)


class TestSlugify:

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Kem Dưỡng Ẩm", "kem-duong-am"),
            ("  Serum   Vitamin C  ", "serum-vitamin-c"),
            ("Lip & Cheek Tint!", "lip-cheek-tint"),
            ("Toner -- Rose", "toner-rose"),
            ("", ""),
        ],
    )
    def test_slugify(self, name, expected):
        assert slugify(name) == expected


class TestWindows:

    def test_month_window(self):
        start, end = month_window(2024, 2)

        assert start == datetime(2024, 2, 1, tzinfo=timezone.utc)
        assert end == datetime(2024, 3, 1, tzinfo=timezone.utc)

    def test_december_rolls_over(self):
        _, end = month_window(2023, 12)

        assert end == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_year_window(self):
        assert year_window(2025) == (
            datetime(2025, 1, 1, tzinfo=timezone.utc),
            datetime(2026, 1, 1, tzinfo=timezone.utc),
        )


class TestPagination:

    def test_paginate_results(self):
        page = paginate_results(["a", "b"], page=2, page_size=2, total=5)

        assert page["pages"] == 3
        assert page["has_next"] is True
        assert page["has_prev"] is True

    def test_empty(self):
        page = paginate_results([], page=1, page_size=10, total=0)

        assert page["pages"] == 0
        assert page["has_next"] is False

    def test_offset(self):
        assert calculate_offset(3, 20) == 40


def test_summarize_items():
    lines = [
        CartLine(product_id="a", quantity=2, price=10.0, subtotal=20.0),
        CartLine(product_id="b", quantity=1, price=5.5, subtotal=5.5),
    ]

    assert summarize_items(lines) == (25.5, 3)
    assert summarize_items([]) == (0.0, 0)
