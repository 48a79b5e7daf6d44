"""
Food Ledger Gateway — Contracts
==================================
Framework-agnostic request/response DTOs for the query/submit surface.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class InvocationRequest:
    fn: str
    args: tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.fn or not isinstance(self.fn, str):
            raise ValueError("fn must be a non-empty string.")
        if not isinstance(self.args, tuple):
            raise ValueError("args must be a tuple.")

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> "InvocationRequest":
        if "fn" not in body:
            raise ValueError("fn is required.")
        args = body.get("args", [])
        if not isinstance(args, list):
            raise ValueError("args must be a list.")
        return cls(fn=body["fn"], args=tuple(args))


@dataclass(frozen=True)
class HttpApiErrorBody:
    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class HttpApiResponse:
    ok: bool
    data: Any = None
    error: Optional[HttpApiErrorBody] = None

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"ok": True, "data": self.data}
        if self.error is None:
            raise ValueError("error must be set when ok is False.")
        return {"ok": False, "error": self.error.to_dict()}
