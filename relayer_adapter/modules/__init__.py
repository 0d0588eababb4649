"""
Functional modules for RelayerClient

Provides high-level operations:
- TokenInfoResolver: Token name/symbol/decimals
- RelayerInfoAssembler: Relayer tokens, pairs and fees
- LendingRelayerInfoAssembler: Lending tokens, terms and fee
"""

from .token import TokenInfoResolver
from .relayer import RelayerInfoAssembler
from .lending import LendingRelayerInfoAssembler, parse_term

__all__ = [
    "TokenInfoResolver",
    "RelayerInfoAssembler",
    "LendingRelayerInfoAssembler",
    "parse_term",
]
