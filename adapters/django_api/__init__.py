"""
Food Ledger Django HTTP adapter.
Thin framework glue over foodledger/gateway handlers.
"""

from adapters.django_api.wiring import (
    build_dependencies,
    get_dependencies,
    reset_dependencies,
)

__all__ = [
    "build_dependencies",
    "get_dependencies",
    "reset_dependencies",
]
