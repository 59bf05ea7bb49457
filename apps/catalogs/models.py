import unicodedata

from django.db import models
from django.urls import reverse


def fold_name(name: str) -> str:
    """Clé de comparaison : insensible à la casse et aux formes Unicode équivalentes."""
    return unicodedata.normalize("NFKC", (name or "").strip()).casefold()


class Category(models.Model):
    name = models.CharField(max_length=100)
    # unique sur la forme repliée : "Hat" et "hat" sont le même nom
    name_key = models.CharField(max_length=255, unique=True, editable=False)
    description = models.TextField()

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def save(self, *args, **kwargs):
        self.name_key = fold_name(self.name)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "name" in update_fields:
            kwargs["update_fields"] = {*update_fields, "name_key"}
        super().save(*args, **kwargs)

    def get_absolute_url(self):
        return reverse("categories:detail", args=[self.pk])

    @property
    def url(self) -> str:
        return self.get_absolute_url()

    def __str__(self): return self.name


class Item(models.Model):
    name = models.CharField(max_length=100)
    category = models.ForeignKey(
        Category, null=True, blank=True, related_name="items", on_delete=models.PROTECT
    )
    price_in_cents = models.PositiveIntegerField()
    quantity = models.PositiveIntegerField()

    class Meta:
        ordering = ["name", "id"]

    def get_absolute_url(self):
        return reverse("items:detail", args=[self.pk])

    @property
    def url(self) -> str:
        return self.get_absolute_url()

    def __str__(self): return self.name
