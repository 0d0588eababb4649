"""
Lending Module

Reads a relayer's lending configuration from the lending registry:
lending tokens, (term, token) pairs and the lending fee.
"""

import logging
import re
from typing import Any

from ..abi import AbiProvider, AbiName
from ..errors import RelayerLookupUnavailableError, TermParseError
from ..infra.invoker import ContractInvoker, has_method
from ..infra.correlation import CorrelationContext, log_prefix
from ..infra.schema import MAX_UINT64, expect_uint, expect_list, expect_address_list
from ..types import LendingRelayerInfo, LendingPairToken, union_addresses
from .token import TokenInfoResolver

logger = logging.getLogger(__name__)

GET_LENDING_RELAYER_METHOD = "getLendingRelayerByCoinbase"

# (fee, lendingTokens, terms, collaterals)
LENDING_TUPLE_SIZE = 4
FEE_INDEX = 0
LENDING_TOKENS_INDEX = 1
TERMS_INDEX = 2

_DECIMAL_RE = re.compile(r"[0-9]+")


def parse_term(value: Any) -> int:
    """
    Parse a lending term into an unsigned 64-bit integer

    Terms arrive as arbitrary-precision integers; their decimal string form
    must be plain digits and fit in 64 bits.

    Raises:
        TermParseError: Malformed or out of range
    """
    text = str(value)
    if isinstance(value, bool) or not _DECIMAL_RE.fullmatch(text):
        raise TermParseError(f"Invalid lending term: {text!r}", term=value)
    term = int(text)
    if term > MAX_UINT64:
        raise TermParseError(f"Lending term out of uint64 range: {text}", term=value)
    return term


class LendingRelayerInfoAssembler:
    """
    Builds LendingRelayerInfo from one lending registry call

    Usage:
        assembler = LendingRelayerInfoAssembler(invoker, token_resolver, abi_provider)
        info = assembler.get_lending_relayer_info(coinbase, lending_registry_address)
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

    def get_lending_relayer_info(self, coinbase: str, registry_address: str) -> LendingRelayerInfo:
        """
        Get lending tokens, lending pairs and fee

        Args:
            coinbase: Relayer coinbase address
            registry_address: Lending registry contract address

        Returns:
            LendingRelayerInfo

        Raises:
            AbiUnavailableError: Lending or token ABI cannot be loaded
            RelayerLookupUnavailableError: ABI lacks getLendingRelayerByCoinbase
            EncodingError, CallError, DecodingError: Registry or token call failed
            TermParseError: A term is malformed or exceeds 64 bits; the
                partially built result is attached as `partial`
        """
        lending_abi = self._abi_provider.get_abi(AbiName.LENDING_REGISTRY)
        token_abi = self._abi_provider.get_abi(AbiName.TOKEN)

        if not has_method(lending_abi, GET_LENDING_RELAYER_METHOD):
            raise RelayerLookupUnavailableError.missing_method(GET_LENDING_RELAYER_METHOD)

        with CorrelationContext("lending"):
            logger.debug(f"{log_prefix()}GetLendingRelayer: coinbase={coinbase} registry={registry_address}")

            contract_data = self._invoker.call_values(
                registry_address, lending_abi, GET_LENDING_RELAYER_METHOD, coinbase
            )
            if len(contract_data) != LENDING_TUPLE_SIZE:
                logger.info(
                    f"{log_prefix()}Lending relayer {coinbase} not registered "
                    f"(got {len(contract_data)} values)"
                )
                return LendingRelayerInfo.empty()

            fee = expect_uint(contract_data[FEE_INDEX], 16, "fee")
            lending_tokens = expect_address_list(contract_data[LENDING_TOKENS_INDEX], "lendingTokens")
            terms = expect_list(contract_data[TERMS_INDEX], "terms")
            logger.debug(f"{log_prefix()}Lending data: tokens={lending_tokens} terms={terms}")

            info = LendingRelayerInfo(fee=fee)
            # Only the lending token list feeds the token set
            for address in union_addresses(lending_tokens, lending_tokens):
                info.tokens[address] = self._token_resolver.resolve(address, token_abi)

            if len(terms) == len(lending_tokens):
                for raw_term, token in zip(terms, lending_tokens):
                    try:
                        term = parse_term(raw_term)
                    except TermParseError as e:
                        e.partial = info
                        logger.error(f"{log_prefix()}Lending relayer {coinbase}: {e}")
                        raise
                    info.lending_pairs.append(LendingPairToken(term=term, lending_token=token))
            else:
                logger.warning(
                    f"{log_prefix()}Lending relayer {coinbase} terms/tokens differ in length "
                    f"({len(terms)} != {len(lending_tokens)}), skipping pairs"
                )

            logger.info(
                f"{log_prefix()}Lending relayer {coinbase}: {len(info.tokens)} tokens, "
                f"{len(info.lending_pairs)} pairs, fee={fee}"
            )
            return info
