"""
Tests for OperationRegistry — the explicit transaction table.
"""

from __future__ import annotations

import pytest

from foodledger.contract import (
    DuplicateOperationError,
    OperationRegistry,
    OperationSpec,
    RegistryLockedError,
    Result,
    build_food_registry,
)
from foodledger.contract.arguments import Parameter, coerce_arguments, number


async def _noop(ctx) -> Result:
    return Result.success()


class TestRegistration:
    def test_register_and_get(self):
        registry = OperationRegistry()
        registry.register(OperationSpec("Ping", _noop, read_only=True))
        assert registry.get("Ping").read_only
        assert registry.get("Missing") is None

    def test_duplicate_rejected(self):
        registry = OperationRegistry()
        registry.register(OperationSpec("Ping", _noop))
        with pytest.raises(DuplicateOperationError):
            registry.register(OperationSpec("Ping", _noop))

    def test_locked_rejects_registration(self):
        registry = OperationRegistry()
        registry.lock()
        with pytest.raises(RegistryLockedError):
            registry.register(OperationSpec("Ping", _noop))

    def test_spec_requires_callable(self):
        with pytest.raises(ValueError, match="callable"):
            OperationSpec("Ping", "not-a-function")


class TestFoodRegistry:
    def test_all_transactions_registered(self):
        registry = build_food_registry()
        assert registry.operation_names() == (
            "CreateProduct",
            "DeleteProduct",
            "GetAllProducts",
            "GetProduct",
            "InitLedger",
            "ProductExists",
            "TransferProduct",
            "UpdateProduct",
        )
        assert registry.is_locked

    def test_read_only_flags(self):
        registry = build_food_registry()
        read_only = {
            name for name in registry.operation_names() if registry.is_read_only(name)
        }
        assert read_only == {"ProductExists", "GetProduct", "GetAllProducts"}

    def test_positional_argument_order(self):
        registry = build_food_registry()
        create = [p.name for p in registry.get("CreateProduct").parameters]
        update = [p.name for p in registry.get("UpdateProduct").parameters]
        transfer = [p.name for p in registry.get("TransferProduct").parameters]
        assert create == ["name", "id", "quantity", "price", "location", "actor", "imageUrl"]
        assert update == ["id", "quantity", "price", "name", "location", "actor", "imageUrl"]
        assert transfer == ["id", "newActor"]


class TestArgumentCoercion:
    def test_numeric_text(self):
        assert number("30") == 30
        assert number("12.5") == 12.5
        assert number(7) == 7

    @pytest.mark.parametrize("value", ["abc", "true", True, None, "[1]"])
    def test_non_numbers_rejected(self, value):
        with pytest.raises(ValueError, match="not a number"):
            number(value)

    def test_arity_checked(self):
        with pytest.raises(ValueError, match="expected 1 argument"):
            coerce_arguments((Parameter("id"),), ())

    def test_error_names_parameter(self):
        with pytest.raises(ValueError, match="^price:"):
            coerce_arguments((Parameter("price", number),), ("cheap",))
