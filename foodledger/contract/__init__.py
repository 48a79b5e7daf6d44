"""
Food Ledger Contract — Public API
====================================
Transaction functions, their explicit context, the result contract,
the registration table and the dispatcher that runs them.
"""

from foodledger.contract.context import TransactionContext
from foodledger.contract.dispatcher import TransactionDispatcher, TransactionReceipt
from foodledger.contract.food import FoodContract
from foodledger.contract.registry import (
    DuplicateOperationError,
    OperationRegistry,
    OperationRegistryError,
    OperationSpec,
    RegistryLockedError,
    build_food_registry,
)
from foodledger.contract.results import (
    AlreadyExistsError,
    ContractError,
    InvalidArgumentError,
    NotFoundError,
    ReadOnlyViolationError,
    Result,
    TransactionAbortedError,
    UnknownOperationError,
)

__all__ = [
    "AlreadyExistsError",
    "ContractError",
    "DuplicateOperationError",
    "FoodContract",
    "InvalidArgumentError",
    "NotFoundError",
    "OperationRegistry",
    "OperationRegistryError",
    "OperationSpec",
    "ReadOnlyViolationError",
    "RegistryLockedError",
    "Result",
    "TransactionAbortedError",
    "TransactionContext",
    "TransactionDispatcher",
    "TransactionReceipt",
    "UnknownOperationError",
    "build_food_registry",
]
