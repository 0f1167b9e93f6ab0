"""
URL configuration for exchange API endpoints.
"""

from django.urls import path

from api.v1.exchange import views

app_name = "exchange"

urlpatterns = [
    path(
        "issue",
        views.IssueTokensView.as_view(),
        name="issue-tokens",
    ),
    path(
        "exchange",
        views.ExchangeTokensView.as_view(),
        name="exchange-tokens",
    ),
    path(
        "balances/<int:brand_id>",
        views.UserBalanceView.as_view(),
        name="user-balance",
    ),
]
