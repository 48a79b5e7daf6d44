"""
Food Ledger — World State App Configuration
==============================================
Registers the WorldStateEntry model so the ORM-backed store has a table.

This app:
- Stores one row per live world-state key
- Applies write sets atomically

This app does NOT:
- Interpret values (they are opaque bytes here)
- Order or endorse transactions
"""

from django.apps import AppConfig


class WorldStateConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "foodledger.world_state"
    label = "world_state"
    verbose_name = "Food Ledger World State"
