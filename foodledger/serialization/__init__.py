"""
Food Ledger Serialization — Public API
=========================================
Deterministic encoding shared by every write path.
"""

from foodledger.serialization.canonical import (
    canonical_bytes,
    canonical_serialize,
    compute_write_set_hash,
)

__all__ = [
    "canonical_bytes",
    "canonical_serialize",
    "compute_write_set_hash",
]
