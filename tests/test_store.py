"""InventoryStore queries."""

from __future__ import annotations

import pytest


@pytest.mark.django_db
def test_counts_and_sorted_listings(store, make_category, make_item) -> None:
    tshirt = make_category("T-Shirt", "Short sleeve t-shirts")
    hat = make_category("Hat", "Headwear")
    make_item("Zip Cap", category=hat)
    make_item("Plain Tee", category=tshirt)
    make_item("Bucket Hat", category=hat)

    assert store.counts() == {"items": 3, "categories": 2}
    assert [c.name for c in store.list_categories()] == ["Hat", "T-Shirt"]
    assert [i.name for i in store.list_items()] == ["Bucket Hat", "Plain Tee", "Zip Cap"]
    assert [i.name for i in store.items_in_category(hat.pk)] == ["Bucket Hat", "Zip Cap"]


@pytest.mark.django_db
def test_find_category_named(store, make_category) -> None:
    hat = make_category("Hat")
    assert store.find_category_named("hat") == hat
    assert store.find_category_named(" HAT ") == hat
    assert store.find_category_named("hat", exclude_pk=hat.pk) is None
    assert store.find_category_named("Cap") is None


@pytest.mark.django_db
def test_lookups_and_deletes(store, make_item) -> None:
    item = make_item()
    assert store.get_item(item.pk) == item
    assert store.get_item(item.pk + 100) is None
    assert store.get_category(item.category_id) == item.category
    assert store.delete_item(item.pk) == 1
    assert store.delete_item(item.pk) == 0
    assert store.delete_category(item.category_id) == 1
    assert store.counts() == {"items": 0, "categories": 0}
