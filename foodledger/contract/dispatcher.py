"""
Food Ledger Contract — Transaction Dispatcher
================================================
Accept invocation → Look up → Coerce args → Execute → Commit or discard.

Two paths:
    submit(name, args)    execute; on success commit the write set
    evaluate(name, args)  execute read-only operations; never commit

Every invocation runs as one transaction over a fresh
TransactionalWorldState. Invocations on one dispatcher never
interleave: each runs to completion before the next starts, across
threads and event loops alike.

Failure handling:
- Unknown name               → UnknownOperationError
- Write op on evaluate path  → ReadOnlyViolationError
- Bad arity / bad values     → InvalidArgumentError
- Store call raises          → TransactionAbortedError, nothing applied
- Contract returns a failure → returned as-is, nothing applied

Anything else propagates after the transaction is discarded.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Callable, Optional, Sequence

from django.db import DatabaseError

from foodledger.contract.arguments import coerce_arguments
from foodledger.contract.context import TransactionContext
from foodledger.contract.registry import OperationRegistry
from foodledger.contract.results import (
    InvalidArgumentError,
    ReadOnlyViolationError,
    Result,
    TransactionAbortedError,
    UnknownOperationError,
)
from foodledger.serialization import compute_write_set_hash
from foodledger.world_state.errors import WorldStateError
from foodledger.world_state.protocol import CommittableWorldState
from foodledger.world_state.transaction import TransactionalWorldState

logger = logging.getLogger("foodledger.dispatch")


STORE_FAILURES = (WorldStateError, DatabaseError, OSError)


def new_tx_id() -> str:
    return uuid.uuid4().hex


# ══════════════════════════════════════════════════════════════
# RECEIPT
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class TransactionReceipt:
    """
    What one invocation produced.

    write_set is what the transaction wrote (or would have written, for
    evaluate); committed says whether it reached the store.
    """

    tx_id: str
    operation: str
    result: Result
    committed: bool = False
    read_set: frozenset[str] = field(default_factory=frozenset)
    write_set: dict[str, Optional[bytes]] = field(default_factory=dict)
    write_set_hash: str = ""

    @property
    def ok(self) -> bool:
        return self.result.ok


# ══════════════════════════════════════════════════════════════
# TRANSACTION DISPATCHER
# ══════════════════════════════════════════════════════════════

class TransactionDispatcher:
    """
    Usage:
        dispatcher = TransactionDispatcher(build_food_registry(), store)

        receipt = await dispatcher.submit("CreateProduct", [...])
        receipt = await dispatcher.evaluate("GetProduct", ["1"])
    """

    def __init__(
        self,
        registry: OperationRegistry,
        store: CommittableWorldState,
        id_provider: Callable[[], str] = new_tx_id,
    ):
        self._registry = registry
        self._store = store
        self._id_provider = id_provider
        self._lock = Lock()

    @property
    def registry(self) -> OperationRegistry:
        return self._registry

    async def submit(self, operation: str, args: Sequence[Any] = ()) -> TransactionReceipt:
        return await self._invoke(operation, args, commit=True)

    async def evaluate(self, operation: str, args: Sequence[Any] = ()) -> TransactionReceipt:
        return await self._invoke(operation, args, commit=False)

    def _rejected(self, tx_id: str, operation: str, error) -> TransactionReceipt:
        logger.info(f"[{tx_id}] {operation} rejected: {error.code} {error.message}")
        return TransactionReceipt(
            tx_id=tx_id,
            operation=operation,
            result=Result.failure(error),
        )

    async def _acquire(self) -> None:
        # Callers may run on different threads, each with its own loop.
        if not self._lock.acquire(blocking=False):
            await asyncio.to_thread(self._lock.acquire)

    async def _invoke(
        self,
        operation: str,
        args: Sequence[Any],
        *,
        commit: bool,
    ) -> TransactionReceipt:
        tx_id = self._id_provider()

        spec = self._registry.get(operation)
        if spec is None:
            return self._rejected(
                tx_id,
                operation,
                UnknownOperationError(
                    message=f"Unknown operation '{operation}'.",
                    key=operation,
                ),
            )

        if not commit and not spec.read_only:
            return self._rejected(
                tx_id,
                operation,
                ReadOnlyViolationError(
                    message=(
                        f"Operation '{operation}' writes state and must be "
                        "submitted, not evaluated."
                    ),
                    key=operation,
                ),
            )

        try:
            coerced = coerce_arguments(spec.parameters, tuple(args))
        except ValueError as exc:
            return self._rejected(
                tx_id,
                operation,
                InvalidArgumentError(message=str(exc), key=operation),
            )

        await self._acquire()
        try:
            view = TransactionalWorldState(self._store, tx_id=tx_id)
            ctx = TransactionContext(tx_id=tx_id, store=view)
            try:
                result = await spec.handler(ctx, *coerced)
                write_set = view.write_set
                committed = False
                if result.ok and commit:
                    await view.commit()
                    committed = True
            except STORE_FAILURES as exc:
                logger.error(
                    f"[{tx_id}] {operation} aborted: "
                    f"{type(exc).__name__}: {exc}"
                )
                return TransactionReceipt(
                    tx_id=tx_id,
                    operation=operation,
                    result=Result.failure(
                        TransactionAbortedError(
                            message=f"Store call failed: {type(exc).__name__}.",
                            key=operation,
                        )
                    ),
                )
            finally:
                view.discard()
        finally:
            self._lock.release()

        if not result.ok:
            # A failed transaction never reports writes.
            write_set = {}
            logger.info(
                f"[{tx_id}] {operation} failed: "
                f"{result.error.code} {result.error.message}"
            )
        else:
            logger.info(
                f"[{tx_id}] {operation} "
                f"{'committed' if committed else 'evaluated'} "
                f"({len(write_set)} write(s))"
            )

        return TransactionReceipt(
            tx_id=tx_id,
            operation=operation,
            result=result,
            committed=committed,
            read_set=view.read_set,
            write_set=write_set,
            write_set_hash=compute_write_set_hash(write_set),
        )
