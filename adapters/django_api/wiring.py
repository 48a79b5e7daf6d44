"""
Food Ledger Django Adapter Wiring
====================================
Constructs GatewayDependencies for local/staging live runs.

This module is adapter-only glue:
- no contract changes
- one dispatcher per process, built on first use
- optional InitLedger seed; requests wait for it, a failed seed is retried
- store backend chosen by settings.FOODLEDGER_WORLD_STATE_BACKEND
"""

from __future__ import annotations

import asyncio
import logging
import threading

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from foodledger.contract import TransactionDispatcher, build_food_registry
from foodledger.gateway import GatewayDependencies
from foodledger.world_state import CommittableWorldState, InMemoryWorldState

logger = logging.getLogger("foodledger.gateway")

BACKEND_MEMORY = "memory"
BACKEND_ORM = "orm"

_DEPENDENCIES_LOCK = threading.Lock()
_DEPENDENCIES: GatewayDependencies | None = None
_SEED_LOCK = threading.Lock()
_SEEDED = False


def _build_store() -> CommittableWorldState:
    backend = getattr(settings, "FOODLEDGER_WORLD_STATE_BACKEND", BACKEND_MEMORY)
    if backend == BACKEND_MEMORY:
        return InMemoryWorldState()
    if backend == BACKEND_ORM:
        from foodledger.world_state.orm import DjangoWorldState

        return DjangoWorldState()
    raise ImproperlyConfigured(
        f"FOODLEDGER_WORLD_STATE_BACKEND must be '{BACKEND_MEMORY}' or "
        f"'{BACKEND_ORM}', got {backend!r}."
    )


def build_dependencies() -> GatewayDependencies:
    global _DEPENDENCIES

    with _DEPENDENCIES_LOCK:
        if _DEPENDENCIES is None:
            store = _build_store()
            _DEPENDENCIES = GatewayDependencies(
                dispatcher=TransactionDispatcher(build_food_registry(), store),
            )
            logger.info(
                f"Gateway wired with {type(store).__name__} world state"
            )
        return _DEPENDENCIES


async def _seed_once(dependencies: GatewayDependencies) -> None:
    global _SEEDED

    if not _SEED_LOCK.acquire(blocking=False):
        await asyncio.to_thread(_SEED_LOCK.acquire)
    try:
        if _SEEDED:
            return
        receipt = await dependencies.dispatcher.submit("InitLedger")
        if not receipt.ok:
            error = receipt.result.error
            logger.error(
                f"Seeding ledger on start failed (tx {receipt.tx_id}): "
                f"{error.code} {error.message}"
            )
            return
        _SEEDED = True
        logger.info(f"Seeded ledger on start (tx {receipt.tx_id})")
    finally:
        _SEED_LOCK.release()


async def get_dependencies() -> GatewayDependencies:
    """build_dependencies(), seeding the ledger once if configured."""
    dependencies = build_dependencies()
    if getattr(settings, "FOODLEDGER_SEED_ON_START", False) and not _SEEDED:
        await _seed_once(dependencies)
    return dependencies


def reset_dependencies() -> None:
    """Drop the wired dispatcher. Tests use this between cases."""
    global _DEPENDENCIES, _SEEDED

    with _DEPENDENCIES_LOCK:
        _DEPENDENCIES = None
        _SEEDED = False
