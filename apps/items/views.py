# apps/items/views.py
from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect, render

from apps.catalogs.outcomes import Status
from apps.catalogs.store import InventoryStore

from . import services
from .forms import ItemForm


def _item_or_404(store, pk):
    outcome = services.item_detail(store, pk)
    if outcome.status is Status.NOT_FOUND:
        raise Http404("Item not found")
    return outcome.record


def item_list(request):
    items = InventoryStore().list_items()
    return render(request, "items/item_list.html", {"title": "Item List", "item_list": items})


def item_detail(request, pk):
    item = _item_or_404(InventoryStore(), pk)
    return render(request, "items/item_detail.html", {"title": item.name, "item": item})


def item_create(request):
    store = InventoryStore()
    if request.method == "POST":
        form = ItemForm(request.POST, using=store.using)
        outcome = services.create_item(store, form)
        if outcome.status is Status.CREATED:
            messages.success(request, f"Item « {outcome.record.name} » created.")
            return redirect(outcome.record.url)
        messages.error(request, "Please correct the errors below.")
        return render(request, "items/item_form.html", {
            "title": "Create Item",
            "form": form,
            "item": outcome.record,
            "categories": outcome.categories,
            "errors": outcome.errors,
        })

    form = ItemForm(using=store.using)
    return render(request, "items/item_form.html", {
        "title": "Create Item",
        "form": form,
        "categories": services.category_choices(store),
    })


def item_delete(request, pk):
    store = InventoryStore()
    if request.method == "POST":
        outcome = services.delete_item(store, pk)
        if outcome.record is not None:
            messages.success(request, f"Item « {outcome.record.name} » deleted.")
        return redirect("items:list")

    item = _item_or_404(store, pk)
    return render(request, "items/item_delete.html", {"title": "Delete Item", "item": item})


def item_update(request, pk):
    outcome = services.update_item(InventoryStore(), pk)
    return render(request, "items/item_update.html", {
        "title": "Update Item",
        "status": outcome.status,
        "method": request.method,
    })
