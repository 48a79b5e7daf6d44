"""
Food Ledger World State — Store Protocol
===========================================
The abstract transactional key-value interface the contract consumes.
The hosting platform provides the real implementation; this package
ships an in-memory one and a Django ORM one.

Every call is an async round-trip. The contract awaits them one at a
time, never concurrently, within a single transaction.

range_scan bounds:
    start_key inclusive, end_key exclusive.
    An empty bound is open on that side; ("", "") scans everything.
    The iterator is lazy, finite, and consumed once.
"""

from __future__ import annotations

from typing import AsyncIterator, Mapping, Optional, Protocol, runtime_checkable


WriteSet = Mapping[str, Optional[bytes]]


@runtime_checkable
class WorldStateStore(Protocol):
    async def get(self, key: str) -> Optional[bytes]:
        ...

    async def put(self, key: str, value: bytes) -> None:
        ...

    async def delete(self, key: str) -> None:
        ...

    def range_scan(
        self, start_key: str, end_key: str
    ) -> AsyncIterator[tuple[str, bytes]]:
        ...


@runtime_checkable
class CommittableWorldState(WorldStateStore, Protocol):
    """
    A store that can apply a whole write set atomically.
    None values in the write set are deletes.
    """

    async def apply_write_set(self, write_set: WriteSet) -> None:
        ...


def key_in_range(key: str, start_key: str, end_key: str) -> bool:
    if start_key and key < start_key:
        return False
    if end_key and key >= end_key:
        return False
    return True
