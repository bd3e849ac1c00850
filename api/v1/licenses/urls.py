"""
URL configuration for license API endpoints.
"""

from django.urls import path

from api.v1.licenses import views

app_name = "licenses"

urlpatterns = [
    path(
        "<path:package_name>/activate",
        views.ActivateLicenseView.as_view(),
        name="activate-license",
    ),
    path(
        "<path:package_name>/status",
        views.GetLicenseStatusView.as_view(),
        name="get-license-status",
    ),
]
