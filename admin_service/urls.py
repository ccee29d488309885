"""URL configuration for the admin service.

All core endpoints are served under ``/api/v1/system/``.
"""

from django.urls import include, path

urlpatterns = [
    path("api/v1/system/", include("core.urls")),
]
