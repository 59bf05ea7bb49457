# apps/catalogs/store.py
"""
Accès aux catégories et articles pour un alias de base donné.

Les workflows reçoivent explicitement une instance de ``InventoryStore`` au lieu
d'utiliser ``Category.objects`` / ``Item.objects`` directement : la vue choisit
la base, les services ne font que des requêtes.
"""
from __future__ import annotations

from django.db import DEFAULT_DB_ALIAS, transaction

from .models import Category, Item, fold_name


class InventoryStore:
    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    # ------- Querysets de base -------

    @property
    def categories(self):
        return Category.objects.using(self.using)

    @property
    def items(self):
        return Item.objects.using(self.using)

    def atomic(self):
        return transaction.atomic(using=self.using)

    # ------- Lecture -------

    def counts(self) -> dict:
        return {"items": self.items.count(), "categories": self.categories.count()}

    def list_categories(self):
        return self.categories.order_by("name", "id")

    def list_items(self):
        return self.items.select_related("category").order_by("name", "id")

    def get_category(self, pk) -> Category | None:
        return self.categories.filter(pk=pk).first()

    def get_item(self, pk) -> Item | None:
        return self.items.select_related("category").filter(pk=pk).first()

    def items_in_category(self, pk) -> list[Item]:
        return list(self.items.filter(category_id=pk).only("id", "name", "quantity").order_by("name", "id"))

    def find_category_named(self, name: str, *, exclude_pk=None) -> Category | None:
        """Catégorie portant le même nom (comparaison repliée), hors ``exclude_pk``."""
        qs = self.categories.filter(name_key=fold_name(name))
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        return qs.first()

    # ------- Écriture -------

    def save(self, obj, **kwargs):
        obj.save(using=self.using, **kwargs)
        return obj

    def delete_category(self, pk) -> int:
        deleted, _ = self.categories.filter(pk=pk).delete()
        return deleted

    def delete_item(self, pk) -> int:
        deleted, _ = self.items.filter(pk=pk).delete()
        return deleted
