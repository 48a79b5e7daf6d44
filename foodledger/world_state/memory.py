"""
Food Ledger World State — In-Memory Store
============================================
Dict-backed store for tests, local runs and the dev gateway.
Scans iterate a sorted snapshot of keys taken when iteration starts.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator, Optional

from foodledger.world_state.errors import validate_key, validate_value
from foodledger.world_state.protocol import WriteSet, key_in_range

logger = logging.getLogger("foodledger.world_state")


class InMemoryWorldState:
    def __init__(self, initial: Optional[dict[str, bytes]] = None):
        self._data: dict[str, bytes] = {}
        for key, value in (initial or {}).items():
            validate_key(key)
            validate_value(value)
            self._data[key] = bytes(value)

    async def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    async def put(self, key: str, value: bytes) -> None:
        validate_key(key)
        validate_value(value)
        self._data[key] = bytes(value)

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def range_scan(
        self, start_key: str, end_key: str
    ) -> AsyncIterator[tuple[str, bytes]]:
        snapshot = {
            key: value
            for key, value in self._data.items()
            if key_in_range(key, start_key, end_key)
        }
        for key in sorted(snapshot):
            yield key, snapshot[key]

    async def apply_write_set(self, write_set: WriteSet) -> None:
        for key in write_set:
            validate_key(key)
            if write_set[key] is not None:
                validate_value(write_set[key])

        for key in sorted(write_set):
            value = write_set[key]
            if value is None:
                self._data.pop(key, None)
            else:
                self._data[key] = bytes(value)

        logger.debug(f"Applied write set of {len(write_set)} key(s)")

    def snapshot(self) -> dict[str, bytes]:
        """Copy of the committed state, for inspection."""
        return dict(self._data)

    def __len__(self) -> int:
        return len(self._data)
