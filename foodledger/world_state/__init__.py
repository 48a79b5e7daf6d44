"""
Food Ledger World State — Public API
=======================================
Store protocol, in-memory store and the per-transaction view.

The Django ORM store lives in foodledger.world_state.orm and is imported
from there, so this package stays importable without configured settings.
"""

from foodledger.world_state.errors import (
    InvalidKeyError,
    TransactionClosedError,
    WorldStateError,
)
from foodledger.world_state.memory import InMemoryWorldState
from foodledger.world_state.protocol import (
    CommittableWorldState,
    WorldStateStore,
    WriteSet,
)
from foodledger.world_state.transaction import TransactionalWorldState

__all__ = [
    "CommittableWorldState",
    "InMemoryWorldState",
    "InvalidKeyError",
    "TransactionClosedError",
    "TransactionalWorldState",
    "WorldStateError",
    "WorldStateStore",
    "WriteSet",
]
