"""
Food Ledger Gateway — Dependencies
=====================================
What the handlers need, injected by the framework adapter.
"""

from __future__ import annotations

from dataclasses import dataclass

from foodledger.contract.dispatcher import TransactionDispatcher


@dataclass(frozen=True)
class GatewayDependencies:
    dispatcher: TransactionDispatcher
