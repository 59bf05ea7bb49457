from django.urls import path
from . import views

app_name = "items"

urlpatterns = [
    # "create" doit précéder les routes par identifiant
    path("item/create", views.item_create, name="create"),
    path("item/<int:pk>/delete", views.item_delete, name="delete"),
    path("item/<int:pk>/update", views.item_update, name="update"),
    path("item/<int:pk>", views.item_detail, name="detail"),
    path("items", views.item_list, name="list"),
]
