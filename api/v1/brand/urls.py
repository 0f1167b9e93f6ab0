"""
URL configuration for brand API endpoints.
"""

from django.urls import path

from api.v1.brand import views

app_name = "brands"

urlpatterns = [
    path(
        "",
        views.BrandListCreateView.as_view(),
        name="brand-list",
    ),
    path(
        "count",
        views.BrandCountView.as_view(),
        name="brand-count",
    ),
    path(
        "<int:brand_id>",
        views.BrandDetailView.as_view(),
        name="brand-detail",
    ),
]
