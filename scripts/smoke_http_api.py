"""
Manual smoke runner for the Food Ledger Django adapter endpoints.

Start a gateway first:
    django-admin migrate --settings=config.settings --pythonpath .
    django-admin runserver --settings=config.settings --pythonpath .

Usage:
    python scripts/smoke_http_api.py
    python scripts/smoke_http_api.py --base-url http://127.0.0.1:8000
"""

from __future__ import annotations

import argparse
import json
from urllib import error, request


PEAR_ARGS = (
    "Pear",
    "10",
    "40 crates",
    "75",
    json.dumps({"lat": 18.52, "lng": 73.85}),
    "PRODUCER",
    "https://example.com/pear.jpg",
)

def _call(
    *,
    method: str,
    url: str,
    body: dict | None = None,
) -> tuple[int, dict]:
    encoded = None
    headers = {}
    if body is not None:
        encoded = json.dumps(body).encode("utf-8")
        headers["Content-Type"] = "application/json"

    req = request.Request(url=url, method=method, headers=headers, data=encoded)
    try:
        with request.urlopen(req) as response:
            return response.status, json.loads(response.read().decode("utf-8"))
    except error.HTTPError as exc:
        return exc.code, json.loads(exc.read().decode("utf-8"))


def _print_case(label: str, status: int, payload: dict) -> None:
    print(f"\n[{label}] status={status}")
    print(json.dumps(payload, indent=2, sort_keys=True))


def run(base_url: str) -> None:
    api = base_url.rstrip("/") + "/v1/ledger"

    def submit(fn: str, *args) -> tuple[int, dict]:
        return _call(method="POST", url=f"{api}/submit", body={"fn": fn, "args": list(args)})

    def query(fn: str, *args) -> tuple[int, dict]:
        return _call(method="POST", url=f"{api}/query", body={"fn": fn, "args": list(args)})

    _print_case("operations", *_call(method="GET", url=f"{api}/operations"))
    _print_case("init-ledger", *submit("InitLedger"))
    _print_case("get-product-1", *query("GetProduct", "1"))
    _print_case("create-product-10", *submit("CreateProduct", *PEAR_ARGS))
    _print_case("create-product-10-again", *submit("CreateProduct", *PEAR_ARGS))
    _print_case("transfer-product-10", *submit("TransferProduct", "10", "RETAILER"))
    _print_case("get-product-10", *query("GetProduct", "10"))
    _print_case("query-write-op", *query("DeleteProduct", "10"))
    _print_case("delete-product-10", *submit("DeleteProduct", "10"))
    _print_case("get-missing-10", *query("GetProduct", "10"))
    _print_case("get-all-products", *query("GetAllProducts"))


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--base-url",
        default="http://127.0.0.1:8000",
        help="Gateway base URL.",
    )
    args = parser.parse_args()
    run(args.base_url)


if __name__ == "__main__":
    main()
