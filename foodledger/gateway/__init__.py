"""
Food Ledger Gateway.
Framework-agnostic query/submit handlers over the transaction dispatcher.
"""

from foodledger.gateway.contracts import InvocationRequest
from foodledger.gateway.dependencies import GatewayDependencies
from foodledger.gateway.handlers import post_query, post_submit

__all__ = [
    "GatewayDependencies",
    "InvocationRequest",
    "post_query",
    "post_submit",
]
