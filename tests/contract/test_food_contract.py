"""
Food Ledger Contract — Food Transactions Tests
=================================================
Contract methods called directly with an explicit TransactionContext
over an in-memory store.

Scenarios:
1. Existence and lookup of ids never created
2. Create / duplicate create
3. Update, delete, transfer on missing ids write nothing
4. Transfer returns the previous actor and changes only actor
5. GetAllProducts returns live records in key order
6. Every write path stores canonical bytes
7. Seed catalog via InitLedger
"""

from __future__ import annotations

import json

import pytest

from foodledger.contract import (
    AlreadyExistsError,
    FoodContract,
    InvalidArgumentError,
    NotFoundError,
    TransactionContext,
)
from foodledger.serialization import canonical_bytes
from foodledger.world_state import InMemoryWorldState


PEAR = dict(
    name="Pear",
    quantity="40 crates",
    price=75,
    location={"lat": 18.52, "lng": 73.85},
    actor="PRODUCER",
    image_url="https://example.com/pear.jpg",
)


# ══════════════════════════════════════════════════════════════
# FIXTURES
# ══════════════════════════════════════════════════════════════

@pytest.fixture
def store():
    return InMemoryWorldState()


@pytest.fixture
def ctx(store):
    return TransactionContext(tx_id="test-tx", store=store)


@pytest.fixture
def contract():
    return FoodContract()


async def _create(contract, ctx, product_id, **overrides):
    fields = {**PEAR, **overrides}
    return await contract.create_product(
        ctx,
        fields["name"],
        product_id,
        fields["quantity"],
        fields["price"],
        fields["location"],
        fields["actor"],
        fields["image_url"],
    )


def _assert_canonical(value: bytes) -> None:
    assert value == canonical_bytes(json.loads(value))


# ══════════════════════════════════════════════════════════════
# 1. NEVER-CREATED IDS
# ══════════════════════════════════════════════════════════════

class TestMissingIds:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("product_id", ["1", "9", "does-not-exist"])
    async def test_missing_id_does_not_exist(self, contract, ctx, product_id):
        exists = await contract.product_exists(ctx, product_id)
        assert exists.ok
        assert exists.value is False

        result = await contract.get_product(ctx, product_id)
        assert not result.ok
        assert isinstance(result.error, NotFoundError)
        assert result.error.key == product_id

    @pytest.mark.asyncio
    async def test_empty_value_counts_as_absent(self, contract):
        store = InMemoryWorldState({"7": b""})
        ctx = TransactionContext(tx_id="t", store=store)
        assert (await contract.product_exists(ctx, "7")).value is False


# ══════════════════════════════════════════════════════════════
# 2. CREATE
# ══════════════════════════════════════════════════════════════

class TestCreate:
    @pytest.mark.asyncio
    async def test_create_then_exists(self, contract, ctx):
        created = await _create(contract, ctx, "X")
        assert created.ok
        assert created.value == "Product with X created successfully"
        assert (await contract.product_exists(ctx, "X")).value is True

    @pytest.mark.asyncio
    async def test_duplicate_create_rejected(self, contract, ctx, store):
        await _create(contract, ctx, "X")
        before = store.snapshot()

        second = await _create(contract, ctx, "X", name="Other")

        assert not second.ok
        assert isinstance(second.error, AlreadyExistsError)
        assert second.error.code == "ALREADY_EXISTS"
        assert store.snapshot() == before

    @pytest.mark.asyncio
    async def test_invalid_fields_rejected_without_write(self, contract, ctx, store):
        result = await _create(contract, ctx, "X", price=-5)
        assert isinstance(result.error, InvalidArgumentError)
        assert store.snapshot() == {}

    @pytest.mark.asyncio
    async def test_get_returns_stored_text(self, contract, ctx):
        await _create(contract, ctx, "X")
        result = await contract.get_product(ctx, "X")
        record = json.loads(result.value)
        assert record["name"] == "Pear"
        assert record["id"] == "X"
        assert record["location"] == {"lat": 18.52, "lng": 73.85}


# ══════════════════════════════════════════════════════════════
# 3. WRITES ON MISSING IDS
# ══════════════════════════════════════════════════════════════

class TestWritesOnMissingIds:
    @pytest.mark.asyncio
    async def test_update_missing(self, contract, ctx, store):
        result = await contract.update_product(
            ctx, "nope", "1 box", 10, "Kiwi", {"lat": 0, "lng": 0},
            "RETAILER", "https://example.com/kiwi.jpg",
        )
        assert isinstance(result.error, NotFoundError)
        assert store.snapshot() == {}

    @pytest.mark.asyncio
    async def test_delete_missing(self, contract, ctx, store):
        result = await contract.delete_product(ctx, "nope")
        assert isinstance(result.error, NotFoundError)
        assert store.snapshot() == {}

    @pytest.mark.asyncio
    async def test_transfer_missing(self, contract, ctx, store):
        result = await contract.transfer_product(ctx, "nope", "RETAILER")
        assert isinstance(result.error, NotFoundError)
        assert store.snapshot() == {}


# ══════════════════════════════════════════════════════════════
# 4. UPDATE / DELETE / TRANSFER
# ══════════════════════════════════════════════════════════════

class TestMutations:
    @pytest.mark.asyncio
    async def test_update_replaces_whole_record(self, contract, ctx):
        await _create(contract, ctx, "X")
        result = await contract.update_product(
            ctx, "X", "2 crates", 90.5, "Asian Pear", {"lat": 1, "lng": 2},
            "CONSUMER", "https://example.com/asian-pear.jpg",
        )
        assert result.ok
        assert result.value is None

        record = json.loads((await contract.get_product(ctx, "X")).value)
        assert record == {
            "id": "X",
            "name": "Asian Pear",
            "quantity": "2 crates",
            "price": 90.5,
            "location": {"lat": 1.0, "lng": 2.0},
            "actor": "CONSUMER",
            "imageUrl": "https://example.com/asian-pear.jpg",
        }

    @pytest.mark.asyncio
    async def test_create_delete_get(self, contract, ctx):
        await _create(contract, ctx, "9", name="Pear")
        deleted = await contract.delete_product(ctx, "9")
        assert deleted.ok

        result = await contract.get_product(ctx, "9")
        assert isinstance(result.error, NotFoundError)

    @pytest.mark.asyncio
    async def test_transfer_returns_previous_actor(self, contract, ctx):
        await _create(contract, ctx, "10", actor="PRODUCER")
        before = json.loads((await contract.get_product(ctx, "10")).value)

        result = await contract.transfer_product(ctx, "10", "RETAILER")

        assert result.ok
        assert result.value == "PRODUCER"
        after = json.loads((await contract.get_product(ctx, "10")).value)
        assert after["actor"] == "RETAILER"
        assert {k: v for k, v in after.items() if k != "actor"} == {
            k: v for k, v in before.items() if k != "actor"
        }

    @pytest.mark.asyncio
    async def test_transfer_chain(self, contract, ctx):
        await _create(contract, ctx, "10", actor="PRODUCER")
        assert (await contract.transfer_product(ctx, "10", "RETAILER")).value == "PRODUCER"
        assert (await contract.transfer_product(ctx, "10", "CONSUMER")).value == "RETAILER"

    @pytest.mark.asyncio
    async def test_transfer_unknown_actor_rejected(self, contract, ctx, store):
        await _create(contract, ctx, "10")
        before = store.snapshot()
        result = await contract.transfer_product(ctx, "10", "FARMER")
        assert isinstance(result.error, InvalidArgumentError)
        assert store.snapshot() == before


# ══════════════════════════════════════════════════════════════
# 5. GET ALL PRODUCTS
# ══════════════════════════════════════════════════════════════

class TestGetAllProducts:
    @pytest.mark.asyncio
    async def test_empty_ledger(self, contract, ctx):
        result = await contract.get_all_products(ctx)
        assert result.ok
        assert result.value == "[]"

    @pytest.mark.asyncio
    async def test_live_records_in_key_order(self, contract, ctx):
        for product_id in ("b", "a", "c"):
            await _create(contract, ctx, product_id, name=f"item-{product_id}")
        await contract.delete_product(ctx, "b")

        records = json.loads((await contract.get_all_products(ctx)).value)

        assert [record["id"] for record in records] == ["a", "c"]
        assert len(records) == 2

    @pytest.mark.asyncio
    async def test_malformed_value_returned_as_raw_text(self, contract):
        store = InMemoryWorldState({"1": b'{"name":"ok"}', "2": b"not json{"})
        ctx = TransactionContext(tx_id="t", store=store)

        records = json.loads((await contract.get_all_products(ctx)).value)

        assert records == [{"name": "ok"}, "not json{"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "stored", [b'{"price": NaN}', b'{"price": -Infinity}', b'{"price": 1e400}']
    )
    async def test_non_finite_numbers_returned_as_raw_text(self, contract, stored):
        store = InMemoryWorldState({"1": stored, "2": b"not json"})
        ctx = TransactionContext(tx_id="t", store=store)

        result = await contract.get_all_products(ctx)

        assert result.ok
        assert json.loads(result.value) == [stored.decode(), "not json"]


# ══════════════════════════════════════════════════════════════
# 6. CANONICAL WRITES
# ══════════════════════════════════════════════════════════════

class TestCanonicalWrites:
    @pytest.mark.asyncio
    async def test_every_write_path_stores_canonical_bytes(self, contract, ctx, store):
        await contract.init_ledger(ctx)
        await _create(contract, ctx, "X")
        await contract.update_product(
            ctx, "1", "99 cartons", 31, "Apple", {"lng": 72.0, "lat": 19.5},
            "PRODUCER", "https://example.com/apple.jpg",
        )
        await contract.transfer_product(ctx, "2", "RETAILER")

        for value in store.snapshot().values():
            _assert_canonical(value)

    @pytest.mark.asyncio
    async def test_create_and_update_of_same_record_store_identical_bytes(self, contract):
        first = InMemoryWorldState()
        await _create(contract, TransactionContext(tx_id="a", store=first), "X")

        second = InMemoryWorldState()
        ctx = TransactionContext(tx_id="b", store=second)
        await _create(contract, ctx, "X", name="Draft", actor="CONSUMER")
        await contract.update_product(
            ctx, "X", PEAR["quantity"], PEAR["price"], PEAR["name"],
            {"lng": 73.85, "lat": 18.52}, PEAR["actor"], PEAR["image_url"],
        )

        assert first.snapshot() == second.snapshot()


# ══════════════════════════════════════════════════════════════
# 7. INIT LEDGER
# ══════════════════════════════════════════════════════════════

class TestInitLedger:
    @pytest.mark.asyncio
    async def test_seeds_eight_products(self, contract, ctx, store):
        result = await contract.init_ledger(ctx)
        assert result.ok
        assert sorted(store.snapshot()) == [str(i) for i in range(1, 9)]

    @pytest.mark.asyncio
    async def test_first_product_is_apple(self, contract, ctx):
        await contract.init_ledger(ctx)
        record = json.loads((await contract.get_product(ctx, "1")).value)
        assert record["name"] == "Apple"
        assert record["price"] == 30

    @pytest.mark.asyncio
    async def test_reinit_overwrites_with_seed(self, contract, ctx, store):
        await contract.init_ledger(ctx)
        seeded = store.snapshot()
        await contract.transfer_product(ctx, "1", "PRODUCER")

        await contract.init_ledger(ctx)

        assert store.snapshot() == seeded
