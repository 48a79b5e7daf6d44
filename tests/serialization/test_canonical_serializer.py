"""
Tests for foodledger.serialization — canonical bytes and write-set digest.
"""

from __future__ import annotations

import json
from collections import OrderedDict
from types import MappingProxyType

import pytest

from foodledger.serialization import (
    canonical_bytes,
    canonical_serialize,
    compute_write_set_hash,
)


# ── Determinism ──────────────────────────────────────────────

class TestCanonicalSerialize:
    def test_field_assignment_order_does_not_matter(self):
        first = {}
        first["name"] = "Apple"
        first["price"] = 30
        first["location"] = {"lat": 19.5, "lng": 72.0}

        second = {}
        second["location"] = {"lng": 72.0, "lat": 19.5}
        second["price"] = 30
        second["name"] = "Apple"

        assert canonical_bytes(first) == canonical_bytes(second)

    def test_keys_sorted_at_every_level(self):
        value = {"b": {"z": 1, "a": {"y": 2, "x": 3}}, "a": [{"d": 4, "c": 5}]}
        assert canonical_serialize(value) == (
            '{"a":[{"c":5,"d":4}],"b":{"a":{"x":3,"y":2},"z":1}}'
        )

    def test_no_whitespace(self):
        encoded = canonical_serialize({"a": [1, 2], "b": "x y"})
        assert encoded == '{"a":[1,2],"b":"x y"}'

    def test_non_ascii_is_escaped(self):
        assert canonical_serialize({"name": "Crème"}) == '{"name":"Cr\\u00e8me"}'

    def test_any_mapping_type_is_accepted(self):
        ordered = OrderedDict([("b", 1), ("a", 2)])
        proxy = MappingProxyType({"b": 1, "a": 2})
        assert canonical_serialize(ordered) == canonical_serialize(proxy) == '{"a":2,"b":1}'

    def test_tuples_encode_as_lists(self):
        assert canonical_serialize({"a": (1, 2)}) == canonical_serialize({"a": [1, 2]})

    def test_output_is_valid_json(self):
        value = {"x": [1, 2.5, None, True, "s"]}
        assert json.loads(canonical_serialize(value)) == value

    def test_bytes_are_utf8_of_text(self):
        value = {"k": "v"}
        assert canonical_bytes(value) == canonical_serialize(value).encode("utf-8")


# ── Rejections ───────────────────────────────────────────────

class TestCanonicalRejections:
    def test_nan_rejected(self):
        with pytest.raises(ValueError):
            canonical_serialize({"price": float("nan")})

    def test_infinity_rejected(self):
        with pytest.raises(ValueError):
            canonical_serialize({"price": float("inf")})

    def test_non_string_key_rejected(self):
        with pytest.raises(TypeError, match="keys must be strings"):
            canonical_serialize({1: "a"})

    def test_unknown_type_rejected(self):
        with pytest.raises(TypeError, match="no canonical encoding"):
            canonical_serialize({"when": object()})


# ── Write-set digest ─────────────────────────────────────────

class TestWriteSetHash:
    def test_same_write_set_same_hash(self):
        first = {"2": b"b", "1": b"a"}
        second = {"1": b"a", "2": b"b"}
        assert compute_write_set_hash(first) == compute_write_set_hash(second)

    def test_delete_differs_from_empty_value(self):
        assert compute_write_set_hash({"1": None}) != compute_write_set_hash({"1": b""})

    def test_value_change_changes_hash(self):
        assert compute_write_set_hash({"1": b"a"}) != compute_write_set_hash({"1": b"b"})

    def test_hash_is_hex_sha256(self):
        digest = compute_write_set_hash({})
        assert len(digest) == 64
        int(digest, 16)
