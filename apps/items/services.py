# apps/items/services.py
"""Workflows articles : création validée, suppression, mise à jour non prise en charge."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from apps.catalogs.models import Category, Item
from apps.catalogs.outcomes import Outcome, Status, form_errors, submitted
from apps.catalogs.store import InventoryStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemInput:
    name: str
    category: Category
    price_in_cents: int
    quantity: int

    @classmethod
    def from_cleaned(cls, cleaned: dict) -> "ItemInput":
        return cls(
            name=cleaned["name"],
            category=cleaned["category"],
            price_in_cents=cleaned["price_in_cents"],
            quantity=cleaned["quantity"],
        )


@dataclass(frozen=True)
class CategoryChoice:
    category: Category
    selected: bool


def category_choices(store: InventoryStore, selected=None) -> list[CategoryChoice]:
    """Toutes les catégories triées par nom, celle choisie marquée."""
    selected = "" if selected in (None, "") else str(getattr(selected, "pk", selected))
    return [CategoryChoice(c, str(c.pk) == selected) for c in store.list_categories()]


def _candidate(form) -> Item:
    cleaned = getattr(form, "cleaned_data", {}) or {}
    candidate = Item(name=submitted(form, "name"))
    if "category" in cleaned:
        candidate.category = cleaned["category"]
    for name in ("price_in_cents", "quantity"):
        if name in cleaned:
            setattr(candidate, name, cleaned[name])
    return candidate


def item_detail(store: InventoryStore, pk) -> Outcome:
    item = store.get_item(pk)
    if item is None:
        return Outcome(Status.NOT_FOUND)
    return Outcome(Status.FOUND, record=item)


def create_item(store: InventoryStore, form) -> Outcome:
    valid = form.is_valid()
    candidate = _candidate(form)
    if not valid:
        return Outcome(
            Status.INVALID,
            record=candidate,
            errors=form_errors(form),
            categories=category_choices(store, submitted(form, "category")),
        )

    data = ItemInput.from_cleaned(form.cleaned_data)
    item = Item(
        name=data.name,
        category=data.category,
        price_in_cents=data.price_in_cents,
        quantity=data.quantity,
    )
    store.save(item)
    logger.info("Created item #%s %r in category #%s", item.pk, item.name, item.category_id)
    return Outcome(Status.CREATED, record=item)


def delete_item(store: InventoryStore, pk) -> Outcome:
    item = store.get_item(pk)
    if store.delete_item(pk):
        logger.info("Deleted item #%s", pk)
    return Outcome(Status.DELETED, record=item)


def update_item(store: InventoryStore, pk) -> Outcome:
    return Outcome(Status.NOT_SUPPORTED)
