"""
Food Ledger Contract — Transaction Context
=============================================
The explicit handle every operation receives. It carries the store the
operation may touch; operations reach nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass

from foodledger.world_state.protocol import WorldStateStore


@dataclass(frozen=True)
class TransactionContext:
    tx_id: str
    store: WorldStateStore

    def __post_init__(self):
        if not isinstance(self.tx_id, str):
            raise ValueError("tx_id must be a string.")
        if self.store is None:
            raise ValueError("store is required.")
