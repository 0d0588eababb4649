"""
Type definitions for Relayer Adapter
"""

from .relayer import (
    TokenInfo,
    PairToken,
    LendingPairToken,
    RelayerInfo,
    LendingRelayerInfo,
    union_addresses,
)
from .native_tokens import (
    NativeTokenRegistry,
    NATIVE_TOKEN_DECIMALS,
    to_address,
)

__all__ = [
    # Records
    "TokenInfo",
    "PairToken",
    "LendingPairToken",
    "RelayerInfo",
    "LendingRelayerInfo",
    "union_addresses",
    # Native coin
    "NativeTokenRegistry",
    "NATIVE_TOKEN_DECIMALS",
    "to_address",
]
