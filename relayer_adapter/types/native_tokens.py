"""
Native coin registry

The chain's base asset has no token contract, so relayer token lists refer
to it through sentinel addresses. This module classifies addresses and
builds the constant descriptor used in place of on-chain metadata.
"""

from typing import Iterable, FrozenSet, Optional, Union

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from ..errors import EncodingError, ConfigurationError
from .relayer import TokenInfo

NATIVE_TOKEN_DECIMALS = 18


def to_address(value: Union[str, bytes]) -> ChecksumAddress:
    """
    Normalize an address to its EIP-55 checksummed form

    Args:
        value: Hex string (any case) or 20 raw bytes

    Returns:
        Checksummed address

    Raises:
        EncodingError: If the value is not a valid address
    """
    try:
        return to_checksum_address(value)
    except (ValueError, TypeError) as e:
        raise EncodingError.invalid_address(value, e)


class NativeTokenRegistry:
    """
    Set of addresses that denote the native coin

    Usage:
        registry = NativeTokenRegistry(["0x0000000000000000000000000000000000000001"], "TOMO")
        if registry.is_native_token(address):
            info = registry.token_info(address)
    """

    def __init__(
        self,
        addresses: Iterable[str],
        symbol: str,
        decimals: int = NATIVE_TOKEN_DECIMALS,
    ):
        if not symbol:
            raise ConfigurationError.missing("native token symbol")
        try:
            self._addresses: FrozenSet[ChecksumAddress] = frozenset(
                to_address(address) for address in addresses
            )
        except EncodingError as e:
            raise ConfigurationError.invalid("native token addresses", e.message)
        self._symbol = symbol
        self._decimals = decimals

    @classmethod
    def from_config(cls, native_config=None) -> "NativeTokenRegistry":
        """Build registry from NativeTokenConfig (global config if None)"""
        if native_config is None:
            from ..config import config
            native_config = config.native
        return cls(native_config.addresses, native_config.symbol, native_config.decimals)

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def addresses(self) -> FrozenSet[ChecksumAddress]:
        return self._addresses

    def is_native_token(self, address: str) -> bool:
        """Check if address is one of the native coin sentinels"""
        try:
            return to_address(address) in self._addresses
        except EncodingError:
            return False

    def token_info(self, address: Optional[str] = None) -> TokenInfo:
        """Constant native coin descriptor"""
        if address is None:
            address = min(self._addresses) if self._addresses else ""
        return TokenInfo(
            name=self._symbol,
            symbol=self._symbol,
            decimals=self._decimals,
            address=address,
        )

    def __repr__(self) -> str:
        return f"NativeTokenRegistry(symbol={self._symbol}, addresses={sorted(self._addresses)})"
