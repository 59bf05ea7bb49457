"""Shared fixtures for the inventory tests."""

from __future__ import annotations

import pytest
from apps.catalogs.models import Category, Item, fold_name
from apps.catalogs.store import InventoryStore


@pytest.fixture
def store() -> InventoryStore:
    return InventoryStore()


@pytest.fixture
def make_category(db):
    def _make(name: str = "Hat", description: str = "Headwear") -> Category:
        return Category.objects.create(name=name, description=description)

    return _make


@pytest.fixture
def make_item(db):
    def _make(
        name: str = "Cap",
        category: Category | None = None,
        price_in_cents: int = 500,
        quantity: int = 10,
    ) -> Item:
        if category is None:
            category, _ = Category.objects.get_or_create(
                name_key=fold_name("Hat"), defaults={"name": "Hat", "description": "Headwear"}
            )
        return Item.objects.create(
            name=name, category=category, price_in_cents=price_in_cents, quantity=quantity
        )

    return _make
