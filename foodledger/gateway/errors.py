"""
Food Ledger Gateway — Error Mapping
=====================================
Stable transport mapping for contract failures.
One table decides the HTTP status of every error code.
"""

from __future__ import annotations

from typing import Any, Optional

from foodledger.contract.results import ContractError
from foodledger.gateway.contracts import HttpApiErrorBody, HttpApiResponse


HTTP_STATUS_BY_CODE = {
    "NOT_FOUND": 404,
    "UNKNOWN_OPERATION": 404,
    "ALREADY_EXISTS": 409,
    "INVALID_ARGUMENT": 400,
    "INVALID_REQUEST": 400,
    "READ_ONLY_VIOLATION": 400,
    "METHOD_NOT_ALLOWED": 405,
    "TRANSACTION_ABORTED": 503,
}


def http_status(payload: dict[str, Any]) -> int:
    if payload.get("ok"):
        return 200
    code = payload.get("error", {}).get("code")
    return HTTP_STATUS_BY_CODE.get(code, 500)


def error_response(
    *,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return HttpApiResponse(
        ok=False,
        error=HttpApiErrorBody(
            code=code,
            message=message,
            details=details or {},
        ),
    ).to_dict()


def success_response(data: Any) -> dict[str, Any]:
    return HttpApiResponse(ok=True, data=data).to_dict()


def contract_error_response(
    error: ContractError,
    *,
    extra_details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    details: dict[str, Any] = {}
    if error.key is not None:
        details["key"] = error.key
    if extra_details:
        details.update(extra_details)
    return error_response(code=error.code, message=error.message, details=details)
