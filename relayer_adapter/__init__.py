"""
Relayer Adapter - Read relayer registrations from TomoX-style registries

Provides read-only operations for:
- Relayer registry: supported tokens, trading pairs, maker/taker fee
- Lending registry: lending tokens, (term, token) pairs, lending fee
- ERC20-like tokens: name, symbol, decimals
"""

from .client import RelayerClient
from .types import (
    TokenInfo,
    PairToken,
    LendingPairToken,
    RelayerInfo,
    LendingRelayerInfo,
    NativeTokenRegistry,
)
from .errors import (
    ErrorCode,
    RelayerAdapterError,
    AbiUnavailableError,
    RelayerLookupUnavailableError,
    EncodingError,
    CallError,
    DecodingError,
    TermParseError,
    ConfigurationError,
)
from .abi import AbiProvider, AbiName
from .infra import ChainCallTransport, Web3CallTransport, ContractInvoker, create_web3
from .modules import TokenInfoResolver, RelayerInfoAssembler, LendingRelayerInfoAssembler

__all__ = [
    # Client
    "RelayerClient",
    # Types
    "TokenInfo",
    "PairToken",
    "LendingPairToken",
    "RelayerInfo",
    "LendingRelayerInfo",
    "NativeTokenRegistry",
    # Errors
    "ErrorCode",
    "RelayerAdapterError",
    "AbiUnavailableError",
    "RelayerLookupUnavailableError",
    "EncodingError",
    "CallError",
    "DecodingError",
    "TermParseError",
    "ConfigurationError",
    # ABI
    "AbiProvider",
    "AbiName",
    # Infrastructure
    "ChainCallTransport",
    "Web3CallTransport",
    "ContractInvoker",
    "create_web3",
    # Modules
    "TokenInfoResolver",
    "RelayerInfoAssembler",
    "LendingRelayerInfoAssembler",
]

__version__ = "1.0.0"
