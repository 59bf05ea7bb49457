# apps/categories/views.py
from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect, render

from apps.catalogs.outcomes import Status
from apps.catalogs.store import InventoryStore

from . import services
from .forms import CategoryForm, CategoryNameForm


def _found_or_404(outcome):
    if outcome.status is Status.NOT_FOUND:
        raise Http404("Category not found")
    return outcome


def category_list(request):
    categories = InventoryStore().list_categories()
    return render(request, "categories/category_list.html", {
        "title": "Category List",
        "category_list": categories,
    })


def category_detail(request, pk):
    outcome = _found_or_404(services.category_with_items(InventoryStore(), pk))
    return render(request, "categories/category_detail.html", {
        "title": "Category Detail",
        "category": outcome.record,
        "category_items": outcome.items,
    })


def category_create(request):
    if request.method == "POST":
        form = CategoryForm(request.POST)
        outcome = services.create_category(InventoryStore(), form)
        if outcome.status is Status.CREATED:
            messages.success(request, f"Category « {outcome.record.name} » created.")
            return redirect(outcome.record.url)
        if outcome.status is Status.EXISTING:
            return redirect(outcome.record.url)
        messages.error(request, "Please correct the errors below.")
        return render(request, "categories/category_form.html", {
            "title": "Create Category",
            "form": form,
            "category": outcome.record,
            "errors": outcome.errors,
        })

    form = CategoryForm()
    return render(request, "categories/category_form.html", {"title": "Create Category", "form": form})


def category_update(request, pk):
    store = InventoryStore()
    if request.method == "POST":
        form = CategoryNameForm(request.POST)
        outcome = _found_or_404(services.update_category(store, pk, form))
        if outcome.status is Status.UPDATED:
            messages.success(request, f"Category « {outcome.record.name} » updated.")
            return redirect(outcome.record.url)
        if outcome.status is Status.CONFLICT:
            for error in outcome.errors:
                form.add_error(error.field, error.message)
        messages.error(request, "Please correct the errors below.")
        return render(request, "categories/category_form.html", {
            "title": "Update Category",
            "form": form,
            "category": outcome.record,
            "errors": outcome.errors,
        })

    category = store.get_category(pk)
    if category is None:
        raise Http404("Category not found")
    form = CategoryNameForm(instance=category)
    return render(request, "categories/category_form.html", {
        "title": "Update Category",
        "form": form,
        "category": category,
    })


def category_delete(request, pk):
    store = InventoryStore()
    if request.method == "POST":
        outcome = services.delete_category(store, pk)
        if outcome.status is Status.BLOCKED:
            return render(request, "categories/category_delete.html", {
                "title": "Delete Category",
                "category": outcome.record,
                "category_items": outcome.items,
            })
        if outcome.record is not None:
            messages.success(request, f"Category « {outcome.record.name} » deleted.")
        return redirect("categories:list")

    outcome = _found_or_404(services.category_with_items(store, pk))
    return render(request, "categories/category_delete.html", {
        "title": "Delete Category",
        "category": outcome.record,
        "category_items": outcome.items,
    })
