"""
Infrastructure layer for Relayer Adapter

Provides:
- ChainCallTransport / Web3CallTransport: read-only eth_call execution
- ContractInvoker: encode call, execute, decode typed result
- CorrelationContext: request-scoped correlation IDs for logging
"""

from .transport import (
    ChainCallTransport,
    Web3CallTransport,
    create_web3,
    classify_call_error,
)
from .invoker import ContractInvoker, find_function, has_method
from .correlation import CorrelationContext, get_correlation_id, log_prefix

__all__ = [
    "ChainCallTransport",
    "Web3CallTransport",
    "create_web3",
    "classify_call_error",
    "ContractInvoker",
    "find_function",
    "has_method",
    "CorrelationContext",
    "get_correlation_id",
    "log_prefix",
]
