"""
Food Ledger World State — Storage Model
==========================================
One row per live key. The value column holds the exact bytes a
transaction wrote; the store never decodes or re-encodes them.

A deleted key has no row. There is no soft delete and no history here;
history belongs to the ledger, not to the world state.
"""

from django.db import models


class WorldStateEntry(models.Model):
    key = models.CharField(
        max_length=255,
        primary_key=True,
        help_text="World-state key (product id).",
    )

    value = models.BinaryField(
        help_text="Canonical bytes written by the last committed transaction.",
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the key was last written. Not part of the value.",
    )

    class Meta:
        db_table = "foodledger_world_state"
        ordering = ["key"]

    def __str__(self):
        return f"{self.key} ({len(self.value or b'')} bytes)"
