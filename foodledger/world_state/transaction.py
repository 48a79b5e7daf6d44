"""
Food Ledger World State — Transactional View
===============================================
One TransactionalWorldState per transaction execution.

Reads go to the committed store unless this transaction already wrote
the key. Writes are buffered and only reach the committed store through
commit(), in one apply_write_set call. A failed or discarded
transaction leaves the committed store untouched.

The view records:
    read_set:  keys read from the committed store
    write_set: keys put (bytes) or deleted (None)

This view does NOT detect conflicts between concurrent transactions.
That is the hosting platform's job, using the recorded sets.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator, Optional

from foodledger.world_state.errors import (
    TransactionClosedError,
    validate_key,
    validate_value,
)
from foodledger.world_state.protocol import CommittableWorldState, key_in_range

logger = logging.getLogger("foodledger.world_state")


class TransactionalWorldState:
    def __init__(self, base: CommittableWorldState, tx_id: str = ""):
        self._base = base
        self._tx_id = tx_id
        self._writes: dict[str, Optional[bytes]] = {}
        self._read_keys: set[str] = set()
        self._closed = False

    @property
    def tx_id(self) -> str:
        return self._tx_id

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def read_set(self) -> frozenset[str]:
        return frozenset(self._read_keys)

    @property
    def write_set(self) -> dict[str, Optional[bytes]]:
        return {key: self._writes[key] for key in sorted(self._writes)}

    def _ensure_open(self) -> None:
        if self._closed:
            raise TransactionClosedError(self._tx_id)

    # ══════════════════════════════════════════════════════════
    # STORE PROTOCOL
    # ══════════════════════════════════════════════════════════

    async def get(self, key: str) -> Optional[bytes]:
        self._ensure_open()
        if key in self._writes:
            return self._writes[key]
        value = await self._base.get(key)
        self._read_keys.add(key)
        return value

    async def put(self, key: str, value: bytes) -> None:
        self._ensure_open()
        validate_key(key)
        validate_value(value)
        self._writes[key] = bytes(value)

    async def delete(self, key: str) -> None:
        self._ensure_open()
        validate_key(key)
        self._writes[key] = None

    async def range_scan(
        self, start_key: str, end_key: str
    ) -> AsyncIterator[tuple[str, bytes]]:
        self._ensure_open()
        pending = sorted(
            (key, value)
            for key, value in self._writes.items()
            if key_in_range(key, start_key, end_key)
        )
        index = 0

        async for key, value in self._base.range_scan(start_key, end_key):
            while index < len(pending) and pending[index][0] < key:
                if pending[index][1] is not None:
                    yield pending[index]
                index += 1

            if index < len(pending) and pending[index][0] == key:
                # own write shadows the committed value
                if pending[index][1] is not None:
                    yield pending[index]
                index += 1
                continue

            self._read_keys.add(key)
            yield key, value

        for key, value in pending[index:]:
            if value is not None:
                yield key, value

    # ══════════════════════════════════════════════════════════
    # LIFECYCLE
    # ══════════════════════════════════════════════════════════

    async def commit(self) -> dict[str, Optional[bytes]]:
        """Apply the write set to the committed store. Returns it."""
        self._ensure_open()
        write_set = self.write_set
        self._closed = True
        if write_set:
            await self._base.apply_write_set(write_set)
        logger.debug(
            f"Transaction {self._tx_id} committed {len(write_set)} write(s)"
        )
        return write_set

    def discard(self) -> None:
        if not self._closed:
            logger.debug(
                f"Transaction {self._tx_id} discarded "
                f"{len(self._writes)} pending write(s)"
            )
        self._closed = True
