"""
Food Ledger — Canonical Serialization
========================================
Every ledger node re-executes each transaction and must compute the same
write-set bytes. Logically equal records therefore serialize to identical
bytes, whatever order their fields were assigned in.

Rules:
- Mapping keys sorted at every nesting level
- No whitespace variability (separators=(',', ':'))
- ensure_ascii=True for cross-platform consistency
- NaN / Infinity rejected (not valid JSON)
- No default=str fallback: unknown types are an error, not a guess

Same input ALWAYS produces same output.
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping
from typing import Any, Optional


# ══════════════════════════════════════════════════════════════
# NORMALIZATION
# ══════════════════════════════════════════════════════════════

def _canonicalize(value: Any) -> Any:
    if isinstance(value, Mapping):
        for key in value:
            if not isinstance(key, str):
                raise TypeError(
                    f"Mapping keys must be strings, got {type(key).__name__}."
                )
        return {key: _canonicalize(value[key]) for key in sorted(value)}

    if isinstance(value, (list, tuple)):
        return [_canonicalize(item) for item in value]

    if value is None or isinstance(value, (str, bool, int, float)):
        return value

    raise TypeError(
        f"Value of type {type(value).__name__} has no canonical encoding."
    )


# ══════════════════════════════════════════════════════════════
# CANONICAL SERIALIZATION
# ══════════════════════════════════════════════════════════════

def canonical_serialize(value: Any) -> str:
    """
    Produce a deterministic JSON string from value.

    Raises:
        TypeError:  value contains a non-JSON type or a non-string key.
        ValueError: value contains NaN or Infinity.
    """
    return json.dumps(
        _canonicalize(value),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=True,
        allow_nan=False,
    )


def canonical_bytes(value: Any) -> bytes:
    """UTF-8 bytes of canonical_serialize(value). This is what gets stored."""
    return canonical_serialize(value).encode("utf-8")


# ══════════════════════════════════════════════════════════════
# WRITE-SET DIGEST
# ══════════════════════════════════════════════════════════════

def compute_write_set_hash(write_set: Mapping[str, Optional[bytes]]) -> str:
    """
    SHA-256 digest of a transaction's write set.

    Formula:
        SHA256(canonical_json([[key, hex(value) | null], ...]))

    Entries are taken in key order; None marks a delete. Nodes that agree
    on the write set agree on the digest.
    """
    entries = [
        [key, None if write_set[key] is None else bytes(write_set[key]).hex()]
        for key in sorted(write_set)
    ]
    return hashlib.sha256(canonical_bytes(entries)).hexdigest()
