"""
Food Ledger World State — Persistence Repository
===================================================
Synchronous ORM helpers. The async store wraps the ones that need a
database transaction.
"""

from __future__ import annotations

from typing import Mapping, Optional

from django.db import transaction

from foodledger.world_state.models import WorldStateEntry


def apply_write_set(write_set: Mapping[str, Optional[bytes]]) -> None:
    """
    Apply every put and delete in one database transaction.

    Keys are applied in sorted order so two stores replaying the same
    write set issue the same statements.
    """
    with transaction.atomic():
        for key in sorted(write_set):
            value = write_set[key]
            if value is None:
                WorldStateEntry.objects.filter(key=key).delete()
            else:
                WorldStateEntry.objects.update_or_create(
                    key=key,
                    defaults={"value": bytes(value)},
                )


def load_state() -> dict[str, bytes]:
    """Full committed state in key order."""
    return {
        key: bytes(value)
        for key, value in WorldStateEntry.objects.order_by("key").values_list(
            "key", "value"
        )
    }
