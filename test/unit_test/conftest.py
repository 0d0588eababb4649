"""
Shared fixtures for relayer adapter unit tests.

FakeTransport stands in for the chain: responses are ABI-encoded with
eth_abi exactly as a node would return them, so the whole encode / call /
decode path runs without network access.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest
from eth_abi import encode
from eth_utils import function_abi_to_4byte_selector, to_checksum_address
from eth_utils.abi import collapse_if_tuple

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from relayer_adapter.abi import AbiProvider, AbiName
from relayer_adapter.infra import ContractInvoker, find_function
from relayer_adapter.modules import (
    TokenInfoResolver,
    RelayerInfoAssembler,
    LendingRelayerInfoAssembler,
)
from relayer_adapter.types import NativeTokenRegistry

NATIVE = "0x0000000000000000000000000000000000000001"


def addr(n: int) -> str:
    """Deterministic checksummed test address"""
    return to_checksum_address("0x" + f"{0xA0000 + n:040x}")


COINBASE = addr(100)
RELAYER_REGISTRY = addr(200)
LENDING_REGISTRY = addr(201)

# Mainnet token addresses whose EIP-55 form is mixed case
USDT_ADDRESS = "0xdAC17F958D2ee523a2206206994597C13D831ec7"
WETH_ADDRESS = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
USDC_ADDRESS = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


class FakeTransport:
    """In-memory ChainCallTransport keyed by (contract, selector)"""

    def __init__(self):
        self._responses: Dict[Tuple[str, bytes], Any] = {}
        self.calls: List[Tuple[str, bytes]] = []

    def respond(self, to: str, abi: List[Dict[str, Any]], method: str, values: List[Any]):
        fn = find_function(abi, method)
        types = [collapse_if_tuple(o) for o in fn["outputs"]]
        key = (to_checksum_address(to), function_abi_to_4byte_selector(fn))
        self._responses[key] = encode(types, values)

    def respond_raw(self, to: str, abi: List[Dict[str, Any]], method: str, raw: bytes):
        fn = find_function(abi, method)
        self._responses[(to_checksum_address(to), function_abi_to_4byte_selector(fn))] = raw

    def fail(self, to: str, abi: List[Dict[str, Any]], method: str, error: Exception):
        fn = find_function(abi, method)
        self._responses[(to_checksum_address(to), function_abi_to_4byte_selector(fn))] = error

    def execute_call(self, to: str, data: bytes) -> bytes:
        self.calls.append((to, data))
        response = self._responses.get((to, data[:4]))
        if response is None:
            raise AssertionError(f"Unexpected call to {to} selector {data[:4].hex()}")
        if isinstance(response, Exception):
            raise response
        return response

    def calls_to(self, to: str) -> List[bytes]:
        return [data for target, data in self.calls if target == to_checksum_address(to)]


def selector(abi: List[Dict[str, Any]], method: str) -> bytes:
    return function_abi_to_4byte_selector(find_function(abi, method))


def write_abi(tmp_path: Path, name: str, abi: Any) -> str:
    path = tmp_path / name
    path.write_text(json.dumps(abi))
    return str(path)


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def abi_provider():
    return AbiProvider()


@pytest.fixture
def relayer_abi(abi_provider):
    return abi_provider.get_abi(AbiName.RELAYER_REGISTRY)


@pytest.fixture
def lending_abi(abi_provider):
    return abi_provider.get_abi(AbiName.LENDING_REGISTRY)


@pytest.fixture
def token_abi(abi_provider):
    return abi_provider.get_abi(AbiName.TOKEN)


@pytest.fixture
def native_tokens():
    return NativeTokenRegistry([NATIVE], "TOMO")


@pytest.fixture
def invoker(transport):
    return ContractInvoker(transport)


@pytest.fixture
def resolver(invoker, native_tokens, abi_provider):
    return TokenInfoResolver(invoker, native_tokens, abi_provider)


@pytest.fixture
def relayer_assembler(invoker, resolver, abi_provider):
    return RelayerInfoAssembler(invoker, resolver, abi_provider)


@pytest.fixture
def lending_assembler(invoker, resolver, abi_provider):
    return LendingRelayerInfoAssembler(invoker, resolver, abi_provider)


@pytest.fixture
def register_token(transport, token_abi):
    """Register ERC20 metadata responses for a token address"""
    def _register(address: str, name: str, symbol: str, decimals: int = 18):
        transport.respond(address, token_abi, "name", [name])
        transport.respond(address, token_abi, "symbol", [symbol])
        transport.respond(address, token_abi, "decimals", [decimals])
    return _register
