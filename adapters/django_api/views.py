"""
Food Ledger Django Adapter Views
===================================
Pass-through HTTP views over foodledger.gateway handlers.
"""

from __future__ import annotations

import json
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from adapters.django_api.wiring import get_dependencies
from foodledger.gateway import InvocationRequest, post_query, post_submit
from foodledger.gateway.errors import error_response, http_status


def _json_error(code: str, message: str) -> JsonResponse:
    payload = error_response(code=code, message=message, details={})
    return JsonResponse(payload, status=http_status(payload))


def _parse_json_body(request: HttpRequest) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        parsed = json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object.")
    return parsed


def _method_not_allowed() -> JsonResponse:
    return _json_error(
        "METHOD_NOT_ALLOWED",
        "Method not allowed for this endpoint.",
    )


async def _dispatch(handler, request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    try:
        contract = InvocationRequest.from_body(_parse_json_body(request))
    except ValueError as exc:
        return _json_error("INVALID_REQUEST", str(exc))

    payload = await handler(contract, await get_dependencies())
    return JsonResponse(payload, status=http_status(payload))


@csrf_exempt
async def query_view(request: HttpRequest) -> JsonResponse:
    return await _dispatch(post_query, request)


@csrf_exempt
async def submit_view(request: HttpRequest) -> JsonResponse:
    return await _dispatch(post_submit, request)


async def operations_view(request: HttpRequest) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()
    registry = (await get_dependencies()).dispatcher.registry
    items = []
    for name in registry.operation_names():
        spec = registry.get(name)
        items.append(
            {
                "fn": spec.name,
                "read_only": spec.read_only,
                "args": [parameter.name for parameter in spec.parameters],
            }
        )
    return JsonResponse({"ok": True, "data": {"items": items, "count": len(items)}})
