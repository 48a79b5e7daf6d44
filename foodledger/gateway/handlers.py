"""
Food Ledger Gateway — Handlers
=================================
query  → dispatcher.evaluate (read-only operations, never commits)
submit → dispatcher.submit   (commits on success)

Handlers return response dicts; the adapter picks the HTTP status
with errors.http_status().
"""

from __future__ import annotations

import logging
from typing import Any

from foodledger.contract.dispatcher import TransactionReceipt
from foodledger.gateway.contracts import InvocationRequest
from foodledger.gateway.dependencies import GatewayDependencies
from foodledger.gateway.errors import contract_error_response, success_response

logger = logging.getLogger("foodledger.gateway")


def _receipt_response(receipt: TransactionReceipt) -> dict[str, Any]:
    if not receipt.ok:
        return contract_error_response(
            receipt.result.error,
            extra_details={"tx_id": receipt.tx_id, "fn": receipt.operation},
        )
    return success_response(
        {
            "tx_id": receipt.tx_id,
            "fn": receipt.operation,
            "result": receipt.result.value,
            "committed": receipt.committed,
            "write_set_hash": receipt.write_set_hash,
        }
    )


async def post_query(
    request: InvocationRequest,
    dependencies: GatewayDependencies,
) -> dict[str, Any]:
    receipt = await dependencies.dispatcher.evaluate(request.fn, request.args)
    logger.debug(f"query {request.fn} -> ok={receipt.ok}")
    return _receipt_response(receipt)


async def post_submit(
    request: InvocationRequest,
    dependencies: GatewayDependencies,
) -> dict[str, Any]:
    receipt = await dependencies.dispatcher.submit(request.fn, request.args)
    logger.debug(f"submit {request.fn} -> ok={receipt.ok}")
    return _receipt_response(receipt)
