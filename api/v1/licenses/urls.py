"""
URL configuration for license activation endpoints.
"""

from django.urls import path

from api.v1.licenses import views

app_name = "licenses"

urlpatterns = [
    path(
        "validate",
        views.ActivateLicenseView.as_view(),
        name="activate-license",
    ),
]
