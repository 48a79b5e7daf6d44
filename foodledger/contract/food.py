"""
Food Ledger Contract — Food Product Transactions
===================================================
The transaction functions over the world state.

State machine per product id:
    NonExistent → Exists            (create_product)
    Exists      → Exists            (update_product, transfer_product)
    Exists      → NonExistent       (delete_product)

Rules (NON-NEGOTIABLE):
- Every write goes through Product.to_bytes() (canonical JSON)
- Existence is checked before any write; failures write nothing
- Store calls are awaited one at a time
- No clocks, no randomness, no process state: the same context
  and arguments always produce the same write set

This contract does NOT:
- Commit (the dispatcher does, after success)
- Detect conflicts between transactions (the platform does)
- Retry
"""

from __future__ import annotations

import json
import math
import logging
from typing import Any

from foodledger.assets.catalog import SEED_CATALOG
from foodledger.assets.product import Actor, Product
from foodledger.contract.context import TransactionContext
from foodledger.contract.results import (
    AlreadyExistsError,
    InvalidArgumentError,
    NotFoundError,
    Result,
)
from foodledger.serialization import canonical_serialize

logger = logging.getLogger("foodledger.contract")


def _reject_constant(name: str):
    raise ValueError(f"Non-finite constant {name} is not JSON compliant")


def _finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"Out of range float {text}")
    return value


def _parse_record(text: str) -> Any:
    """json.loads limited to what canonical JSON can write back."""
    return json.loads(
        text, parse_constant=_reject_constant, parse_float=_finite_float
    )


class FoodContract:
    """Provenance contract for food products moving between actors."""

    name = "food"

    # ══════════════════════════════════════════════════════════
    # INTERNAL HELPERS
    # ══════════════════════════════════════════════════════════

    @staticmethod
    async def _exists(ctx: TransactionContext, product_id: str) -> bool:
        value = await ctx.store.get(product_id)
        return bool(value)

    @staticmethod
    def _build_product(product_id: str, **fields: Any) -> Product | InvalidArgumentError:
        try:
            return Product(product_id=product_id, **fields)
        except ValueError as exc:
            return InvalidArgumentError(message=str(exc), key=product_id)

    # ══════════════════════════════════════════════════════════
    # TRANSACTIONS
    # ══════════════════════════════════════════════════════════

    async def init_ledger(self, ctx: TransactionContext) -> Result:
        """Write the seed catalog under "1".."N". Always overwrites."""
        logger.info(f"[{ctx.tx_id}] InitLedger start")

        for product in SEED_CATALOG:
            await ctx.store.put(product.product_id, product.to_bytes())
            logger.debug(f"[{ctx.tx_id}] Seeded {product.product_id}: {product.name}")

        logger.info(f"[{ctx.tx_id}] InitLedger end ({len(SEED_CATALOG)} products)")
        return Result.success()

    async def product_exists(self, ctx: TransactionContext, product_id: str) -> Result:
        return Result.success(await self._exists(ctx, product_id))

    async def create_product(
        self,
        ctx: TransactionContext,
        name: str,
        product_id: str,
        quantity: str,
        price,
        location,
        actor,
        image_url: str,
    ) -> Result:
        logger.info(f"[{ctx.tx_id}] CreateProduct {product_id}")

        if await self._exists(ctx, product_id):
            return Result.failure(AlreadyExistsError.for_key(product_id))

        product = self._build_product(
            product_id,
            name=name,
            quantity=quantity,
            price=price,
            location=location,
            actor=actor,
            image_url=image_url,
        )
        if isinstance(product, InvalidArgumentError):
            return Result.failure(product)

        await ctx.store.put(product_id, product.to_bytes())
        return Result.success(f"Product with {product_id} created successfully")

    async def get_product(self, ctx: TransactionContext, product_id: str) -> Result:
        value = await ctx.store.get(product_id)
        if not value:
            return Result.failure(NotFoundError.for_key(product_id))
        return Result.success(bytes(value).decode("utf-8"))

    async def get_all_products(self, ctx: TransactionContext) -> Result:
        """
        Every live record in key order, as a JSON array.

        A value that is not valid JSON (non-finite numbers included) is
        returned as its raw text
        instead of failing the scan.
        """
        records: list[Any] = []

        async for key, value in ctx.store.range_scan("", ""):
            text = bytes(value).decode("utf-8", errors="replace")
            try:
                record = _parse_record(text)
            except ValueError:
                logger.warning(
                    f"[{ctx.tx_id}] Record {key} is not valid JSON; "
                    "returning raw text"
                )
                record = text
            records.append(record)

        return Result.success(canonical_serialize(records))

    async def update_product(
        self,
        ctx: TransactionContext,
        product_id: str,
        quantity: str,
        price,
        name: str,
        location,
        actor,
        image_url: str,
    ) -> Result:
        logger.info(f"[{ctx.tx_id}] UpdateProduct {product_id}")

        if not await self._exists(ctx, product_id):
            return Result.failure(NotFoundError.for_key(product_id))

        product = self._build_product(
            product_id,
            name=name,
            quantity=quantity,
            price=price,
            location=location,
            actor=actor,
            image_url=image_url,
        )
        if isinstance(product, InvalidArgumentError):
            return Result.failure(product)

        await ctx.store.put(product_id, product.to_bytes())
        return Result.success()

    async def delete_product(self, ctx: TransactionContext, product_id: str) -> Result:
        logger.info(f"[{ctx.tx_id}] DeleteProduct {product_id}")

        if not await self._exists(ctx, product_id):
            return Result.failure(NotFoundError.for_key(product_id))

        await ctx.store.delete(product_id)
        return Result.success()

    async def transfer_product(
        self,
        ctx: TransactionContext,
        product_id: str,
        new_actor,
    ) -> Result:
        """Hand the product to new_actor. Returns the previous actor."""
        logger.info(f"[{ctx.tx_id}] TransferProduct {product_id} -> {new_actor}")

        current = await self.get_product(ctx, product_id)
        if not current.ok:
            return current

        try:
            new_actor = Actor.parse(new_actor)
        except ValueError as exc:
            return Result.failure(
                InvalidArgumentError(message=str(exc), key=product_id)
            )

        product = Product.from_bytes(product_id, current.value)
        previous_actor = product.actor

        updated = await self.update_product(
            ctx,
            product_id,
            product.quantity,
            product.price,
            product.name,
            product.location,
            new_actor,
            product.image_url,
        )
        if not updated.ok:
            return updated

        logger.info(
            f"[{ctx.tx_id}] Product {product_id} transferred "
            f"{previous_actor.value} -> {new_actor.value}"
        )
        return Result.success(previous_actor.value)
