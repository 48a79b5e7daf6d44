"""
Food Ledger Django adapter URL routing.
"""

from django.urls import path

from adapters.django_api import views


urlpatterns = [
    path("ledger/operations", views.operations_view),
    path("ledger/query", views.query_view),
    path("ledger/submit", views.submit_view),
]
