"""
RelayerClient - Unified entry point for relayer registry reads

Wires the chain transport, ABI provider and native coin registry into the
token, relayer and lending modules.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union, TYPE_CHECKING

from .abi import AbiProvider
from .config import Config, config as global_config
from .errors import ConfigurationError
from .infra import ChainCallTransport, ContractInvoker, Web3CallTransport
from .types import (
    NativeTokenRegistry,
    RelayerInfo,
    LendingRelayerInfo,
    TokenInfo,
)


class RelayerClient:
    """
    Unified relayer registry client

    Provides access through functional modules:
    - tokens: Token metadata
    - relayer: Relayer tokens, pairs and fees
    - lending: Lending tokens, terms and fee

    Usage:
        client = RelayerClient(rpc_url="https://rpc.tomochain.com")
        info = client.get_relayer_info(coinbase, registry_address)

        # Or with any ChainCallTransport
        client = RelayerClient(transport=my_transport)
    """

    def __init__(
        self,
        rpc_url: Optional[str] = None,
        transport: Optional[ChainCallTransport] = None,
        abi_provider: Optional[AbiProvider] = None,
        native_tokens: Optional[NativeTokenRegistry] = None,
        config: Optional[Config] = None,
    ):
        """
        Initialize RelayerClient

        Args:
            rpc_url: RPC endpoint URL (defaults to config.chain.rpc_url)
            transport: Ready-made transport; takes precedence over rpc_url
            abi_provider: ABI provider (defaults to bundled ABIs + config overrides)
            native_tokens: Native coin registry (defaults to config.native)
            config: Configuration (defaults to the global config)
        """
        self._config = config or global_config

        if transport is None:
            url = rpc_url or self._config.chain.rpc_url
            if not url:
                raise ConfigurationError.missing("RELAYER_RPC_URL")
            transport = Web3CallTransport.from_url(
                url,
                chain_id=self._config.chain.chain_id,
                timeout=self._config.chain.timeout_seconds,
            )

        self._transport = transport
        self._invoker = ContractInvoker(transport)
        self._abi_provider = abi_provider or AbiProvider.from_config(self._config.abi)
        self._native_tokens = native_tokens or NativeTokenRegistry.from_config(self._config.native)

        # Lazy-loaded modules
        self._tokens: Optional["TokenInfoResolver"] = None
        self._relayer: Optional["RelayerInfoAssembler"] = None
        self._lending: Optional["LendingRelayerInfoAssembler"] = None

    @property
    def transport(self) -> ChainCallTransport:
        return self._transport

    @property
    def invoker(self) -> ContractInvoker:
        return self._invoker

    @property
    def abi_provider(self) -> AbiProvider:
        return self._abi_provider

    @property
    def tokens(self) -> "TokenInfoResolver":
        """Token metadata module"""
        if self._tokens is None:
            from .modules.token import TokenInfoResolver
            self._tokens = TokenInfoResolver(self._invoker, self._native_tokens, self._abi_provider)
        return self._tokens

    @property
    def relayer(self) -> "RelayerInfoAssembler":
        """Relayer registry module"""
        if self._relayer is None:
            from .modules.relayer import RelayerInfoAssembler
            self._relayer = RelayerInfoAssembler(self._invoker, self.tokens, self._abi_provider)
        return self._relayer

    @property
    def lending(self) -> "LendingRelayerInfoAssembler":
        """Lending registry module"""
        if self._lending is None:
            from .modules.lending import LendingRelayerInfoAssembler
            self._lending = LendingRelayerInfoAssembler(self._invoker, self.tokens, self._abi_provider)
        return self._lending

    def get_relayer_info(self, coinbase: str, registry_address: Optional[str] = None) -> RelayerInfo:
        """Relayer info; registry defaults to config.chain.relayer_registry_address"""
        registry = registry_address or self._config.chain.relayer_registry_address
        if not registry:
            raise ConfigurationError.missing("RELAYER_REGISTRY_ADDRESS")
        return self.relayer.get_relayer_info(coinbase, registry)

    def get_lending_relayer_info(
        self,
        coinbase: str,
        registry_address: Optional[str] = None,
    ) -> LendingRelayerInfo:
        """Lending relayer info; registry defaults to config.chain.lending_registry_address"""
        registry = registry_address or self._config.chain.lending_registry_address
        if not registry:
            raise ConfigurationError.missing("LENDING_REGISTRY_ADDRESS")
        return self.lending.get_lending_relayer_info(coinbase, registry)

    def get_token_info(self, token_address: str) -> TokenInfo:
        return self.tokens.get(token_address)

    def get_token_info_from_path(self, token_address: str, abi_path: Union[str, Path]) -> TokenInfo:
        return self.tokens.resolve_from_path(token_address, abi_path)

    def close(self):
        """Release the ABI cache"""
        self._abi_provider.clear_cache()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"RelayerClient(transport={self._transport!r})"


# Type hints for modules (resolved at runtime)
if TYPE_CHECKING:
    from .modules.token import TokenInfoResolver
    from .modules.relayer import RelayerInfoAssembler
    from .modules.lending import LendingRelayerInfoAssembler
