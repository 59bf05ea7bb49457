# apps/ui/views.py
from django.shortcuts import render

from apps.catalogs.store import InventoryStore


def home(request):
    counts = InventoryStore().counts()
    return render(request, "index.html", {
        "title": "Inventory Tracker",
        "item_count": counts["items"],
        "category_count": counts["categories"],
    })
