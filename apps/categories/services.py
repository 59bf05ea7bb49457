# apps/categories/services.py
"""
Workflows de création / mise à jour / suppression des catégories.

Un même contrôle de doublon (``find_category_named``) donne deux résultats
distincts : à la création le doublon renvoie la catégorie existante
(``EXISTING``), à la mise à jour il produit une erreur (``CONFLICT``).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import IntegrityError
from django.db.models import ProtectedError

from apps.catalogs.models import Category
from apps.catalogs.outcomes import FieldError, Outcome, Status, form_errors, submitted
from apps.catalogs.store import InventoryStore

from .forms import DUPLICATE_ERROR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryInput:
    name: str
    description: str = ""

    @classmethod
    def from_cleaned(cls, cleaned: dict) -> "CategoryInput":
        return cls(name=cleaned["name"], description=cleaned.get("description", ""))


def _candidate(form, pk=None) -> Category:
    """Catégorie non enregistrée construite depuis la saisie, pour réaffichage."""
    return Category(pk=pk, name=submitted(form, "name"), description=submitted(form, "description"))


def category_with_items(store: InventoryStore, pk) -> Outcome:
    category = store.get_category(pk)
    items = store.items_in_category(pk)
    if category is None:
        return Outcome(Status.NOT_FOUND, items=items)
    return Outcome(Status.FOUND, record=category, items=items)


def create_category(store: InventoryStore, form) -> Outcome:
    valid = form.is_valid()
    candidate = _candidate(form)
    if not valid:
        return Outcome(Status.INVALID, record=candidate, errors=form_errors(form))

    data = CategoryInput.from_cleaned(form.cleaned_data)
    existing = store.find_category_named(data.name)
    if existing is not None:
        logger.info("Category %r already exists as #%s", data.name, existing.pk)
        return Outcome(Status.EXISTING, record=existing)

    category = Category(name=data.name, description=data.description)
    try:
        with store.atomic():
            store.save(category)
    except IntegrityError:
        # création concurrente du même nom : la contrainte unique a tranché
        existing = store.find_category_named(data.name)
        if existing is None:
            raise
        logger.info("Category %r created concurrently as #%s", data.name, existing.pk)
        return Outcome(Status.EXISTING, record=existing)

    logger.info("Created category #%s %r", category.pk, category.name)
    return Outcome(Status.CREATED, record=category)


def update_category(store: InventoryStore, pk, form) -> Outcome:
    category = store.get_category(pk)
    if category is None:
        return Outcome(Status.NOT_FOUND)

    valid = form.is_valid()
    candidate = _candidate(form, pk=category.pk)
    candidate.description = category.description
    if not valid:
        return Outcome(Status.INVALID, record=candidate, errors=form_errors(form))

    data = CategoryInput.from_cleaned(form.cleaned_data)
    conflict = store.find_category_named(data.name, exclude_pk=category.pk)
    if conflict is not None:
        logger.info("Rename of category #%s to %r conflicts with #%s", category.pk, data.name, conflict.pk)
        return Outcome(Status.CONFLICT, record=candidate, errors=[FieldError("name", DUPLICATE_ERROR)])

    category.name = data.name
    try:
        with store.atomic():
            store.save(category, update_fields=["name"])
    except IntegrityError:
        logger.info("Rename of category #%s to %r lost a concurrent race", category.pk, data.name)
        return Outcome(Status.CONFLICT, record=candidate, errors=[FieldError("name", DUPLICATE_ERROR)])

    logger.info("Updated category #%s to %r", category.pk, category.name)
    return Outcome(Status.UPDATED, record=category)


def delete_category(store: InventoryStore, pk) -> Outcome:
    category = store.get_category(pk)
    items = store.items_in_category(pk)
    if items:
        logger.warning("Delete of category #%s blocked by %d item(s)", pk, len(items))
        return Outcome(Status.BLOCKED, record=category, items=items)

    try:
        with store.atomic():
            deleted = store.delete_category(pk)
    except ProtectedError as e:
        # un article a été ajouté entre la lecture et la suppression
        items = sorted(e.protected_objects, key=lambda i: (i.name, i.pk))
        logger.warning("Delete of category #%s blocked by %d new item(s)", pk, len(items))
        return Outcome(Status.BLOCKED, record=category, items=items)

    if deleted:
        logger.info("Deleted category #%s", pk)
    return Outcome(Status.DELETED, record=category)
