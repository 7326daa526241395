"""
URL configuration for token-protected data endpoints.
"""

from django.urls import path

from api.v1.data import views

app_name = "data"

urlpatterns = [
    path(
        "profile",
        views.ProfileView.as_view(),
        name="profile",
    ),
]
