"""
Food Ledger World State — Django ORM Store
=============================================
WorldStateStore backed by the WorldStateEntry table, using Django's
async ORM API so the contract can await every call.

Key order in range_scan follows the database collation. SQLite and the
PostgreSQL "C" collation both compare bytewise, which matches Python
string ordering for the ASCII ids this ledger uses.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator, Optional

from asgiref.sync import sync_to_async

from foodledger.world_state import repository
from foodledger.world_state.errors import validate_key, validate_value
from foodledger.world_state.models import WorldStateEntry
from foodledger.world_state.protocol import WriteSet

logger = logging.getLogger("foodledger.world_state")


class DjangoWorldState:
    async def get(self, key: str) -> Optional[bytes]:
        entry = await WorldStateEntry.objects.filter(key=key).afirst()
        if entry is None:
            return None
        return bytes(entry.value)

    async def put(self, key: str, value: bytes) -> None:
        validate_key(key)
        validate_value(value)
        await WorldStateEntry.objects.aupdate_or_create(
            key=key,
            defaults={"value": bytes(value)},
        )

    async def delete(self, key: str) -> None:
        await WorldStateEntry.objects.filter(key=key).adelete()

    async def range_scan(
        self, start_key: str, end_key: str
    ) -> AsyncIterator[tuple[str, bytes]]:
        query = WorldStateEntry.objects.all()
        if start_key:
            query = query.filter(key__gte=start_key)
        if end_key:
            query = query.filter(key__lt=end_key)

        async for key, value in query.order_by("key").values_list("key", "value"):
            yield key, bytes(value)

    async def apply_write_set(self, write_set: WriteSet) -> None:
        for key in write_set:
            validate_key(key)
            if write_set[key] is not None:
                validate_value(write_set[key])

        await sync_to_async(repository.apply_write_set)(dict(write_set))
        logger.debug(f"Applied write set of {len(write_set)} key(s) to database")
