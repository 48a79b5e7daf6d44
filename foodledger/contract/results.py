"""
Food Ledger Contract — Result Contract
=========================================
Every operation returns exactly one Result. Missing and duplicate
records are values the caller checks, not exceptions.

SUCCESS → value set, error is None
FAILURE → error set (a ContractError), value is None

Rules:
- Result is immutable (frozen dataclass)
- A failure carries a ContractError with a stable code
- Failures are decided before any write, so a failed
  transaction never leaves partial state
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional


# ══════════════════════════════════════════════════════════════
# CONTRACT ERRORS (values, not exceptions)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ContractError:
    """
    Structured failure of a contract operation.

    Fields:
        message: Human-readable explanation.
        key:     World-state key (or operation name) the failure is about.
    """

    message: str
    key: Optional[str] = None

    code: ClassVar[str] = "CONTRACT_ERROR"

    def __post_init__(self):
        if not self.message or not isinstance(self.message, str):
            raise ValueError("message must be a non-empty string.")

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "key": self.key}


@dataclass(frozen=True)
class NotFoundError(ContractError):
    """Operation targets an id with no current record."""

    code: ClassVar[str] = "NOT_FOUND"

    @classmethod
    def for_key(cls, key: str) -> "NotFoundError":
        return cls(message=f"The product {key} does not exist.", key=key)


@dataclass(frozen=True)
class AlreadyExistsError(ContractError):
    """Create targets an id that already has a record."""

    code: ClassVar[str] = "ALREADY_EXISTS"

    @classmethod
    def for_key(cls, key: str) -> "AlreadyExistsError":
        return cls(message=f"A food product with {key} already exists.", key=key)


@dataclass(frozen=True)
class InvalidArgumentError(ContractError):
    code: ClassVar[str] = "INVALID_ARGUMENT"


@dataclass(frozen=True)
class UnknownOperationError(ContractError):
    code: ClassVar[str] = "UNKNOWN_OPERATION"


@dataclass(frozen=True)
class ReadOnlyViolationError(ContractError):
    """A write operation was sent down the query (never-commit) path."""

    code: ClassVar[str] = "READ_ONLY_VIOLATION"


@dataclass(frozen=True)
class TransactionAbortedError(ContractError):
    """A store call failed; nothing was applied."""

    code: ClassVar[str] = "TRANSACTION_ABORTED"


# ══════════════════════════════════════════════════════════════
# RESULT
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Result:
    value: Any = None
    error: Optional[ContractError] = None

    def __post_init__(self):
        if self.error is not None:
            if not isinstance(self.error, ContractError):
                raise ValueError(
                    f"error must be ContractError, got {type(self.error).__name__}."
                )
            if self.value is not None:
                raise ValueError("A failed Result must not carry a value.")

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ContractError) -> "Result":
        if error is None:
            raise ValueError("failure() requires a ContractError.")
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None
