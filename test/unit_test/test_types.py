"""
Test Types Module

Tests for relayer_adapter.types package.
"""

import dataclasses
import sys
from pathlib import Path

import pytest

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from relayer_adapter.errors import EncodingError, ConfigurationError
from relayer_adapter.types import (
    TokenInfo,
    PairToken,
    LendingPairToken,
    RelayerInfo,
    LendingRelayerInfo,
    NativeTokenRegistry,
    union_addresses,
    to_address,
)
from conftest import addr, NATIVE


class TestTokenInfo:
    """Tests for TokenInfo"""

    def test_fields(self):
        info = TokenInfo(name="Tether USD", symbol="USDT", decimals=6, address=addr(1))
        assert info.name == "Tether USD"
        assert info.decimals == 6
        assert str(info) == "USDT"

    def test_frozen(self):
        info = TokenInfo(name="Tether USD", symbol="USDT", decimals=6)
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.symbol = "XXX"

    def test_value_equality(self):
        assert TokenInfo("A", "A", 18, addr(1)) == TokenInfo("A", "A", 18, addr(1))
        assert PairToken(addr(1), addr(2)) == PairToken(addr(1), addr(2))
        assert LendingPairToken(86400, addr(1)) == LendingPairToken(86400, addr(1))


class TestRelayerInfo:
    """Tests for RelayerInfo / LendingRelayerInfo"""

    def test_empty(self):
        info = RelayerInfo.empty()
        assert info.is_empty
        assert info.tokens == {}
        assert info.pairs == []
        assert info.make_fee == 0 and info.take_fee == 0

    def test_empty_results_are_fresh(self):
        first = RelayerInfo.empty()
        first.tokens[addr(1)] = TokenInfo("A", "A", 18)
        assert RelayerInfo.empty().tokens == {}

    def test_pair_symbols(self):
        base, quote = addr(1), addr(2)
        info = RelayerInfo(
            tokens={
                base: TokenInfo("Wrapped BTC", "BTC", 8, base),
                quote: TokenInfo("Tether USD", "USDT", 6, quote),
            },
            pairs=[PairToken(base, quote)],
        )
        assert info.pair_symbols() == ["BTC/USDT"]
        assert not info.is_empty

    def test_lending_empty(self):
        info = LendingRelayerInfo.empty()
        assert info.is_empty
        assert info.fee == 0


class TestUnionAddresses:
    """Tests for ordered address union"""

    def test_union_preserves_first_seen_order(self):
        a, b, c = addr(1), addr(2), addr(3)
        assert union_addresses([a, b], [c, a]) == [a, b, c]

    def test_union_collapses_duplicates_within_list(self):
        a, b = addr(1), addr(2)
        assert union_addresses([a, a, b, a], [b, b]) == [a, b]

    def test_union_with_itself(self):
        a, b = addr(1), addr(2)
        tokens = [b, a, b]
        assert union_addresses(tokens, tokens) == [b, a]

    def test_union_empty(self):
        assert union_addresses([], []) == []


class TestToAddress:
    """Tests for address normalization"""

    def test_lowercase_is_checksummed(self):
        assert to_address(addr(5).lower()) == addr(5)

    def test_invalid_address(self):
        with pytest.raises(EncodingError):
            to_address("0x1234")

    def test_non_string(self):
        with pytest.raises(EncodingError):
            to_address(12345)


class TestNativeTokenRegistry:
    """Tests for native coin registry"""

    def test_is_native_token(self, native_tokens):
        assert native_tokens.is_native_token(NATIVE)
        assert native_tokens.is_native_token(NATIVE.lower())
        assert not native_tokens.is_native_token(addr(2))

    def test_invalid_address_is_not_native(self, native_tokens):
        assert not native_tokens.is_native_token("not-an-address")

    def test_token_info(self, native_tokens):
        info = native_tokens.token_info(NATIVE)
        assert info == TokenInfo(name="TOMO", symbol="TOMO", decimals=18, address=to_address(NATIVE))

    def test_multiple_sentinels(self):
        registry = NativeTokenRegistry([NATIVE, addr(9)], "ETH")
        assert registry.is_native_token(addr(9))
        assert registry.token_info(addr(9)).symbol == "ETH"

    def test_invalid_config(self):
        with pytest.raises(ConfigurationError):
            NativeTokenRegistry(["0xnothex"], "TOMO")
        with pytest.raises(ConfigurationError):
            NativeTokenRegistry([NATIVE], "")

    def test_from_config(self):
        from relayer_adapter.config import NativeTokenConfig

        registry = NativeTokenRegistry.from_config(
            NativeTokenConfig(addresses=[addr(7)], symbol="XDC")
        )
        assert registry.symbol == "XDC"
        assert registry.is_native_token(addr(7))
        assert not registry.is_native_token(NATIVE)
