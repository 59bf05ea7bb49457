from django.urls import path
from . import views

app_name = "categories"

urlpatterns = [
    # "create" doit précéder les routes par identifiant
    path("category/create", views.category_create, name="create"),
    path("category/<int:pk>/delete", views.category_delete, name="delete"),
    path("category/<int:pk>/update", views.category_update, name="update"),
    path("category/<int:pk>", views.category_detail, name="detail"),
    path("categories", views.category_list, name="list"),
]
