"""
Token Module

Resolves ERC20-like token metadata (name, symbol, decimals) with three
read-only calls. The native coin has no contract and gets a constant
descriptor instead.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..abi import AbiProvider, AbiName
from ..infra.invoker import ContractInvoker
from ..infra.correlation import log_prefix
from ..infra.schema import expect_str, expect_uint
from ..types import TokenInfo, NativeTokenRegistry, to_address

logger = logging.getLogger(__name__)


class TokenInfoResolver:
    """
    Token metadata lookups

    Usage:
        resolver = TokenInfoResolver(invoker, native_registry, abi_provider)
        info = resolver.resolve("0x...", token_abi)
        info = resolver.resolve_from_path("0x...", "abi/ERC20.json")
    """

    def __init__(
        self,
        invoker: ContractInvoker,
        native_tokens: NativeTokenRegistry,
        abi_provider: Optional[AbiProvider] = None,
    ):
        self._invoker = invoker
        self._native_tokens = native_tokens
        self._abi_provider = abi_provider or AbiProvider()

    @property
    def native_tokens(self) -> NativeTokenRegistry:
        return self._native_tokens

    def is_native_token(self, token_address: str) -> bool:
        return self._native_tokens.is_native_token(token_address)

    def native_token_info(self, token_address: Optional[str] = None) -> TokenInfo:
        return self._native_tokens.token_info(token_address)

    def resolve(self, token_address: str, token_abi: List[Dict[str, Any]]) -> TokenInfo:
        """
        Get token info

        Calls name(), symbol() and decimals() in that order. The first
        failing call aborts the lookup; nothing is retried.

        Args:
            token_address: Token contract address
            token_abi: Parsed ERC20-like ABI

        Returns:
            TokenInfo

        Raises:
            EncodingError, CallError, DecodingError
        """
        address = to_address(token_address)
        if self._native_tokens.is_native_token(address):
            return self._native_tokens.token_info(address)

        name = expect_str(self._invoker.call(address, token_abi, "name"), "name")
        symbol = expect_str(self._invoker.call(address, token_abi, "symbol"), "symbol")
        decimals = expect_uint(self._invoker.call(address, token_abi, "decimals"), 8, "decimals")

        logger.debug(f"{log_prefix()}Token data: {name} {symbol} {decimals} {address}")
        return TokenInfo(name=name, symbol=symbol, decimals=decimals, address=address)

    def resolve_from_path(self, token_address: str, abi_path: Union[str, Path]) -> TokenInfo:
        """Get token info using an ABI loaded from file"""
        token_abi = self._abi_provider.get_abi_from_path(abi_path)
        return self.resolve(token_address, token_abi)

    def get(self, token_address: str) -> TokenInfo:
        """Get token info using the configured token ABI"""
        return self.resolve(token_address, self._abi_provider.get_abi(AbiName.TOKEN))
