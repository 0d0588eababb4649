"""
Relayer Module

Reads a relayer's spot trading configuration from the relayer registry:
supported tokens, trading pairs and fees.
"""

import logging
from typing import Dict

from eth_typing import ChecksumAddress

from ..abi import AbiProvider, AbiName
from ..errors import RelayerLookupUnavailableError
from ..infra.invoker import ContractInvoker, has_method
from ..infra.correlation import CorrelationContext, log_prefix
from ..infra.schema import expect_uint, expect_address_list
from ..types import RelayerInfo, PairToken, TokenInfo, union_addresses
from .token import TokenInfoResolver

logger = logging.getLogger(__name__)

GET_RELAYER_METHOD = "getRelayerByCoinbase"

# (index, owner, deposit, fee, fromTokens, toTokens)
RELAYER_TUPLE_SIZE = 6
FEE_INDEX = 3
FROM_TOKENS_INDEX = 4
TO_TOKENS_INDEX = 5


class RelayerInfoAssembler:
    """
    Builds RelayerInfo from one registry call

    Usage:
        assembler = RelayerInfoAssembler(invoker, token_resolver, abi_provider)
        info = assembler.get_relayer_info(coinbase, registry_address)
        for pair in info.pairs:
            print(info.tokens[pair.base_token].symbol, info.tokens[pair.quote_token].symbol)
    """

    def __init__(
        self,
        invoker: ContractInvoker,
        token_resolver: TokenInfoResolver,
        abi_provider: AbiProvider,
    ):
        self._invoker = invoker
        self._token_resolver = token_resolver
        self._abi_provider = abi_provider

    def get_relayer_info(self, coinbase: str, registry_address: str) -> RelayerInfo:
        """
        Get relayer tokens, pairs and fees

        An unregistered coinbase (registry tuple of unexpected size) yields
        an empty RelayerInfo. Pairs stay empty when the from/to token lists
        differ in length.

        Args:
            coinbase: Relayer coinbase address
            registry_address: Relayer registry contract address

        Returns:
            RelayerInfo

        Raises:
            AbiUnavailableError: Registry or token ABI cannot be loaded
            RelayerLookupUnavailableError: Registry ABI lacks getRelayerByCoinbase
            EncodingError, CallError, DecodingError: Registry or token call failed
        """
        relayer_abi = self._abi_provider.get_abi(AbiName.RELAYER_REGISTRY)
        token_abi = self._abi_provider.get_abi(AbiName.TOKEN)

        if not has_method(relayer_abi, GET_RELAYER_METHOD):
            raise RelayerLookupUnavailableError.missing_method(GET_RELAYER_METHOD)

        with CorrelationContext("relayer"):
            logger.debug(f"{log_prefix()}GetRelayer: coinbase={coinbase} registry={registry_address}")

            contract_data = self._invoker.call_values(
                registry_address, relayer_abi, GET_RELAYER_METHOD, coinbase
            )
            if len(contract_data) != RELAYER_TUPLE_SIZE:
                logger.info(
                    f"{log_prefix()}Relayer {coinbase} not registered "
                    f"(got {len(contract_data)} values)"
                )
                return RelayerInfo.empty()

            # The registry stores a single trade fee used for both sides
            fee = expect_uint(contract_data[FEE_INDEX], 16, "makeFee")
            from_tokens = expect_address_list(contract_data[FROM_TOKENS_INDEX], "fromTokens")
            to_tokens = expect_address_list(contract_data[TO_TOKENS_INDEX], "toTokens")
            logger.debug(f"{log_prefix()}Relayer data: from={from_tokens} to={to_tokens}")

            info = RelayerInfo(
                tokens=self._resolve_tokens(union_addresses(from_tokens, to_tokens), token_abi),
                make_fee=fee,
                take_fee=fee,
            )

            if len(from_tokens) == len(to_tokens):
                info.pairs = [
                    PairToken(base_token=base, quote_token=quote)
                    for base, quote in zip(from_tokens, to_tokens)
                ]
            else:
                logger.warning(
                    f"{log_prefix()}Relayer {coinbase} token lists differ in length "
                    f"({len(from_tokens)} != {len(to_tokens)}), skipping pairs"
                )

            logger.info(
                f"{log_prefix()}Relayer {coinbase}: {len(info.tokens)} tokens, "
                f"{len(info.pairs)} pairs, fee={fee}"
            )
            return info

    def _resolve_tokens(self, addresses, token_abi) -> Dict[ChecksumAddress, TokenInfo]:
        return {
            address: self._token_resolver.resolve(address, token_abi)
            for address in addresses
        }
