"""Template filters."""

from __future__ import annotations

import pytest
from apps.ui.templatetags.ui_extras import cents


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (10000, "$100.00"),
        (123456, "$1,234.56"),
        (5, "$0.05"),
        (0, "$0.00"),
        ("250", "$2.50"),
        (None, ""),
        ("", ""),
        ("abc", ""),
    ],
)
def test_cents(value, expected) -> None:
    assert cents(value) == expected


def test_cents_with_explicit_symbol() -> None:
    assert cents(199, "€") == "€1.99"


def test_cents_uses_configured_symbol(settings) -> None:
    settings.INVENTORY_CURRENCY_SYMBOL = "£"
    assert cents(1000) == "£10.00"
