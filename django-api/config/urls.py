"""URL configuration for the lesson booking API.

Catalog routes are mounted at the root; the Django admin lives under /admin/.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("catalog.urls")),
]

handler404 = "catalog.handlers.views.endpoint_not_found"
