"""
Food Ledger Contract — Operation Registry
============================================
The explicit table of invocable transactions.

Each entry maps a transaction name (as invokers send it) to:
    handler:    async contract method (ctx, *args) → Result
    read_only:  True if the operation never writes
    parameters: positional parameters with their coercers

Rules:
- Each name registers exactly once
- Registry locks after bootstrap (no dynamic injection)
- Thread-safe for concurrent access
- Immutable after lock
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import Lock
from typing import Awaitable, Callable, Optional

from foodledger.contract import arguments
from foodledger.contract.arguments import Parameter
from foodledger.contract.food import FoodContract
from foodledger.contract.results import Result

logger = logging.getLogger("foodledger.contract")


Handler = Callable[..., Awaitable[Result]]


# ══════════════════════════════════════════════════════════════
# REGISTRY ERRORS
# ══════════════════════════════════════════════════════════════

class OperationRegistryError(Exception):
    """Base error for operation registry operations."""
    pass


class DuplicateOperationError(OperationRegistryError):
    """Operation name already registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Operation '{name}' is already registered.")


class RegistryLockedError(OperationRegistryError):
    """Registry is locked; no modifications allowed."""

    def __init__(self):
        super().__init__(
            "Operation registry is locked after bootstrap. "
            "No dynamic registration allowed."
        )


# ══════════════════════════════════════════════════════════════
# OPERATION SPEC
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class OperationSpec:
    name: str
    handler: Handler
    read_only: bool = False
    parameters: tuple[Parameter, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")
        if not callable(self.handler):
            raise ValueError(
                f"handler must be callable, got {type(self.handler).__name__}."
            )
        if not isinstance(self.parameters, tuple):
            raise ValueError("parameters must be a tuple.")


# ══════════════════════════════════════════════════════════════
# OPERATION REGISTRY
# ══════════════════════════════════════════════════════════════

class OperationRegistry:
    """
    Usage:
        registry = OperationRegistry()
        registry.register(OperationSpec("GetProduct", contract.get_product,
                                        read_only=True, parameters=(...)))
        registry.lock()

        spec = registry.get("GetProduct")
    """

    def __init__(self):
        self._operations: dict[str, OperationSpec] = {}
        self._locked = False
        self._lock = Lock()

    def register(self, spec: OperationSpec) -> None:
        with self._lock:
            if self._locked:
                raise RegistryLockedError()
            if spec.name in self._operations:
                raise DuplicateOperationError(spec.name)
            self._operations[spec.name] = spec

        logger.debug(
            f"Operation registered: {spec.name} "
            f"({'read-only' if spec.read_only else 'write'})"
        )

    def lock(self) -> None:
        with self._lock:
            self._locked = True

    @property
    def is_locked(self) -> bool:
        with self._lock:
            return self._locked

    def get(self, name: str) -> Optional[OperationSpec]:
        with self._lock:
            return self._operations.get(name)

    def is_read_only(self, name: str) -> bool:
        spec = self.get(name)
        return spec is not None and spec.read_only

    def operation_names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(sorted(self._operations))


# ══════════════════════════════════════════════════════════════
# FOOD CONTRACT TABLE
# ══════════════════════════════════════════════════════════════

_PRODUCT_FIELDS = {
    "name": Parameter("name"),
    "id": Parameter("id"),
    "quantity": Parameter("quantity"),
    "price": Parameter("price", arguments.number),
    "location": Parameter("location", arguments.location),
    "actor": Parameter("actor", arguments.actor),
    "imageUrl": Parameter("imageUrl"),
}


def _fields(*names: str) -> tuple[Parameter, ...]:
    return tuple(_PRODUCT_FIELDS[name] for name in names)


def build_food_registry(contract: Optional[FoodContract] = None) -> OperationRegistry:
    """Register every food transaction and lock the table."""
    contract = contract or FoodContract()
    registry = OperationRegistry()

    for spec in (
        OperationSpec("InitLedger", contract.init_ledger),
        OperationSpec(
            "ProductExists",
            contract.product_exists,
            read_only=True,
            parameters=_fields("id"),
        ),
        OperationSpec(
            "CreateProduct",
            contract.create_product,
            parameters=_fields(
                "name", "id", "quantity", "price", "location", "actor", "imageUrl"
            ),
        ),
        OperationSpec(
            "GetProduct",
            contract.get_product,
            read_only=True,
            parameters=_fields("id"),
        ),
        OperationSpec(
            "GetAllProducts",
            contract.get_all_products,
            read_only=True,
        ),
        OperationSpec(
            "UpdateProduct",
            contract.update_product,
            parameters=_fields(
                "id", "quantity", "price", "name", "location", "actor", "imageUrl"
            ),
        ),
        OperationSpec(
            "DeleteProduct",
            contract.delete_product,
            parameters=_fields("id"),
        ),
        OperationSpec(
            "TransferProduct",
            contract.transfer_product,
            parameters=(Parameter("id"), Parameter("newActor", arguments.actor)),
        ),
    ):
        registry.register(spec)

    registry.lock()
    logger.info(
        f"Food contract registered {len(registry.operation_names())} operations"
    )
    return registry
