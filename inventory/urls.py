# inventory/urls.py
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("apps.ui.urls")),
    path("", include("apps.items.urls")),
    path("", include("apps.categories.urls")),
]
