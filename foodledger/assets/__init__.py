"""
Food Ledger Assets — Public API
==================================
"""

from foodledger.assets.catalog import SEED_CATALOG
from foodledger.assets.product import Actor, Location, Product

__all__ = [
    "Actor",
    "Location",
    "Product",
    "SEED_CATALOG",
]
