"""
Food Ledger Assets — Product Model
=====================================
The food product tracked through the supply chain.

Rules:
- product_id is the world-state key and never changes after creation
- Every other field is replaced wholesale on update
- price is a non-negative finite number (bool is not a number here)
- location is a pair of finite float coordinates
- actor is the current holder's role: PRODUCER | RETAILER | CONSUMER
- image_url is opaque; only its presence is checked

Stored form (canonical JSON, keys sorted):
    {"actor", "id", "imageUrl", "location": {"lat", "lng"},
     "name", "price", "quantity"}
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping, Union

from foodledger.serialization import canonical_bytes


Number = Union[int, float]


# ══════════════════════════════════════════════════════════════
# ACTOR
# ══════════════════════════════════════════════════════════════

class Actor(str, Enum):
    """Supply-chain role of whoever currently holds the product."""
    PRODUCER = "PRODUCER"
    RETAILER = "RETAILER"
    CONSUMER = "CONSUMER"

    @classmethod
    def parse(cls, value: Any) -> "Actor":
        if isinstance(value, Actor):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        allowed = ", ".join(member.value for member in cls)
        raise ValueError(f"actor must be one of {allowed}, got {value!r}.")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# ══════════════════════════════════════════════════════════════
# LOCATION
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Location:
    lat: float
    lng: float

    def __post_init__(self):
        for field_name in ("lat", "lng"):
            value = getattr(self, field_name)
            if not _is_number(value):
                raise ValueError(f"location.{field_name} must be a number.")
            if not math.isfinite(value):
                raise ValueError(f"location.{field_name} must be finite.")
            object.__setattr__(self, field_name, float(value))

    @classmethod
    def parse(cls, value: Any) -> "Location":
        """Accept a Location, a {lat, lng} mapping, or JSON text of one."""
        if isinstance(value, Location):
            return value
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError as exc:
                raise ValueError("location must be valid JSON.") from exc
        if not isinstance(value, Mapping):
            raise ValueError("location must be an object with lat and lng.")
        if "lat" not in value or "lng" not in value:
            raise ValueError("location must contain lat and lng.")
        return cls(lat=value["lat"], lng=value["lng"])

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}


# ══════════════════════════════════════════════════════════════
# PRODUCT
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Product:
    product_id: str
    name: str
    quantity: str
    price: Number
    location: Location
    actor: Actor
    image_url: str

    def __post_init__(self):
        if not self.product_id or not isinstance(self.product_id, str):
            raise ValueError("id must be a non-empty string.")
        if not isinstance(self.name, str):
            raise ValueError("name must be a string.")
        if not isinstance(self.quantity, str):
            raise ValueError("quantity must be a string.")

        if not _is_number(self.price):
            raise ValueError("price must be a number.")
        if not math.isfinite(self.price) or self.price < 0:
            raise ValueError("price must be a non-negative finite number.")

        if not isinstance(self.location, Location):
            object.__setattr__(self, "location", Location.parse(self.location))
        object.__setattr__(self, "actor", Actor.parse(self.actor))

        if not self.image_url or not isinstance(self.image_url, str):
            raise ValueError("imageUrl must be a non-empty string.")

    # ── Stored form ───────────────────────────────────────────

    def to_record(self) -> dict:
        return {
            "id": self.product_id,
            "name": self.name,
            "quantity": self.quantity,
            "price": self.price,
            "location": self.location.to_dict(),
            "actor": self.actor.value,
            "imageUrl": self.image_url,
        }

    def to_bytes(self) -> bytes:
        return canonical_bytes(self.to_record())

    @classmethod
    def from_record(cls, key: str, record: Mapping[str, Any]) -> "Product":
        """
        Rebuild from a stored record. The store key is authoritative;
        records written without an embedded id are accepted.
        """
        missing = [
            field_name
            for field_name in ("name", "quantity", "price", "location", "actor", "imageUrl")
            if field_name not in record
        ]
        if missing:
            raise ValueError(
                f"Stored record for {key} is missing: {', '.join(missing)}."
            )
        return cls(
            product_id=key,
            name=record["name"],
            quantity=record["quantity"],
            price=record["price"],
            location=record["location"],
            actor=record["actor"],
            image_url=record["imageUrl"],
        )

    @classmethod
    def from_bytes(cls, key: str, data: Union[bytes, str]) -> "Product":
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8")
        record = json.loads(data)
        if not isinstance(record, Mapping):
            raise ValueError(f"Stored value for {key} is not an object.")
        return cls.from_record(key, record)

    def with_actor(self, actor: Union[Actor, str]) -> "Product":
        return replace(self, actor=Actor.parse(actor))
