"""HTTP surface for categories."""

from __future__ import annotations

import pytest
from apps.catalogs.models import Category
from apps.categories.forms import DUPLICATE_ERROR, NAME_ERROR

pytestmark = pytest.mark.django_db


def test_list_sorted_by_name(client, make_category) -> None:
    make_category("T-Shirt", "Tees")
    make_category("Hat")

    response = client.get("/categories")

    assert response.status_code == 200
    assert [c.name for c in response.context["category_list"]] == ["Hat", "T-Shirt"]


def test_detail_shows_items(client, make_category, make_item) -> None:
    hat = make_category("Hat")
    make_item("Cap", category=hat, quantity=7)

    response = client.get(f"/category/{hat.pk}")

    assert response.status_code == 200
    assert response.context["category"] == hat
    assert [i.name for i in response.context["category_items"]] == ["Cap"]
    assert b"Cap" in response.content


def test_detail_missing_is_404(client) -> None:
    assert client.get("/category/999").status_code == 404


def test_create_route_is_not_an_id(client) -> None:
    response = client.get("/category/create")
    assert response.status_code == 200
    assert response.context["title"] == "Create Category"


def test_create_redirects_to_new_category(client) -> None:
    response = client.post("/category/create", {"name": "Hat", "description": "Headwear"})

    hat = Category.objects.get()
    assert response.status_code == 302
    assert response["Location"] == f"/category/{hat.pk}"


def test_create_duplicate_redirects_to_existing(client, make_category) -> None:
    hat = make_category("Hat")

    response = client.post("/category/create", {"name": "HAT", "description": "x"})

    assert response.status_code == 302
    assert response["Location"] == f"/category/{hat.pk}"
    assert Category.objects.count() == 1


def test_create_invalid_rerenders_form(client) -> None:
    response = client.post("/category/create", {"name": "ab", "description": "Headwear"})

    assert response.status_code == 200
    assert NAME_ERROR.encode() in response.content
    assert response.context["category"].description == "Headwear"
    assert [e.message for e in response.context["errors"]] == [NAME_ERROR]
    assert not Category.objects.exists()


def test_update_get_prefills_form(client, make_category) -> None:
    hat = make_category("Hat")

    response = client.get(f"/category/{hat.pk}/update")

    assert response.status_code == 200
    assert response.context["form"].initial["name"] == "Hat"


def test_update_get_and_post_missing_are_404(client) -> None:
    assert client.get("/category/999/update").status_code == 404
    assert client.post("/category/999/update", {"name": "Whatever"}).status_code == 404


def test_update_redirects(client, make_category) -> None:
    hat = make_category("Hat")

    response = client.post(f"/category/{hat.pk}/update", {"name": "Caps"})

    assert response.status_code == 302
    assert response["Location"] == f"/category/{hat.pk}"
    hat.refresh_from_db()
    assert hat.name == "Caps"


def test_update_conflict_rerenders_with_single_error(client, make_category) -> None:
    make_category("Hat")
    hoodie = make_category("Hoodie", "Outerwear")

    response = client.post(f"/category/{hoodie.pk}/update", {"name": "hat"})

    assert response.status_code == 200
    assert response.content.count(DUPLICATE_ERROR.encode()) == 1
    assert response.context["form"].errors == {"name": [DUPLICATE_ERROR]}
    hoodie.refresh_from_db()
    assert hoodie.name == "Hoodie"


def test_delete_get_lists_blocking_items(client, make_category, make_item) -> None:
    hat = make_category("Hat")
    make_item("Cap", category=hat)

    response = client.get(f"/category/{hat.pk}/delete")

    assert response.status_code == 200
    assert [i.name for i in response.context["category_items"]] == ["Cap"]
    assert b"Delete the following items" in response.content


def test_delete_get_missing_is_404(client) -> None:
    assert client.get("/category/999/delete").status_code == 404


def test_delete_post_blocked(client, make_category, make_item) -> None:
    hat = make_category("Hat")
    make_item("Cap", category=hat)

    response = client.post(f"/category/{hat.pk}/delete")

    assert response.status_code == 200
    assert [i.name for i in response.context["category_items"]] == ["Cap"]
    assert Category.objects.filter(pk=hat.pk).exists()


def test_delete_post_removes_and_redirects(client, make_category) -> None:
    hat = make_category("Hat")

    response = client.post(f"/category/{hat.pk}/delete")

    assert response.status_code == 302
    assert response["Location"] == "/categories"
    assert not Category.objects.exists()


def test_delete_post_missing_redirects(client) -> None:
    response = client.post("/category/999/delete")
    assert response.status_code == 302
    assert response["Location"] == "/categories"
