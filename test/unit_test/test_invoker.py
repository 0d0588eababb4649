"""
Contract Invoker Unit Tests

Tests encode / call / decode against the in-memory transport.
"""

import sys
from pathlib import Path

import pytest
from eth_abi import encode

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from relayer_adapter.errors import (
    EncodingError,
    CallError,
    DecodingError,
    ErrorCode,
)
from relayer_adapter.infra import find_function, has_method
from relayer_adapter.infra.schema import expect_address_list
from conftest import addr, COINBASE, RELAYER_REGISTRY, USDT_ADDRESS, WETH_ADDRESS

TOKEN = addr(10)


class TestAbiLookup:
    """Tests for function lookup"""

    def test_find_function(self, token_abi):
        assert find_function(token_abi, "decimals")["name"] == "decimals"
        assert find_function(token_abi, "transfer") is None

    def test_has_method(self, relayer_abi):
        assert has_method(relayer_abi, "getRelayerByCoinbase")
        assert not has_method(relayer_abi, "getLendingRelayerByCoinbase")

    def test_events_are_not_functions(self):
        abi = [{"type": "event", "name": "Transfer", "inputs": []}]
        assert find_function(abi, "Transfer") is None


class TestEncodeCall:
    """Tests for call data encoding"""

    def test_known_selectors(self, invoker, token_abi):
        assert invoker.encode_call(token_abi, "name") == bytes.fromhex("06fdde03")
        assert invoker.encode_call(token_abi, "symbol") == bytes.fromhex("95d89b41")
        assert invoker.encode_call(token_abi, "decimals") == bytes.fromhex("313ce567")

    def test_address_argument(self, invoker, token_abi):
        data = invoker.encode_call(token_abi, "balanceOf", TOKEN.lower())
        assert data[:4] == bytes.fromhex("70a08231")
        assert data[4:] == encode(["address"], [TOKEN])

    def test_unknown_method(self, invoker, token_abi):
        with pytest.raises(EncodingError) as exc_info:
            invoker.encode_call(token_abi, "transfer", TOKEN, 1)
        assert exc_info.value.code == ErrorCode.METHOD_NOT_FOUND

    def test_wrong_argument_count(self, invoker, relayer_abi):
        with pytest.raises(EncodingError) as exc_info:
            invoker.encode_call(relayer_abi, "getRelayerByCoinbase")
        assert exc_info.value.code == ErrorCode.INVALID_ARGUMENTS

    def test_invalid_address_argument(self, invoker, relayer_abi):
        with pytest.raises(EncodingError) as exc_info:
            invoker.encode_call(relayer_abi, "getRelayerByCoinbase", "0xdeadbeef")
        assert exc_info.value.code == ErrorCode.INVALID_ADDRESS

    def test_wrong_argument_type(self, invoker):
        abi = [{
            "type": "function",
            "name": "setFee",
            "inputs": [{"name": "fee", "type": "uint16"}],
            "outputs": [],
        }]
        with pytest.raises(EncodingError):
            invoker.encode_call(abi, "setFee", 70000)
        with pytest.raises(EncodingError):
            invoker.encode_call(abi, "setFee", "ten")


class TestCall:
    """Tests for full call round trip"""

    def test_single_output_returns_value(self, invoker, transport, token_abi):
        transport.respond(TOKEN, token_abi, "symbol", ["USDT"])
        assert invoker.call(TOKEN, token_abi, "symbol") == "USDT"

    def test_call_targets_contract_with_payload(self, invoker, transport, token_abi):
        transport.respond(TOKEN, token_abi, "decimals", [6])
        invoker.call(TOKEN.lower(), token_abi, "decimals")
        assert transport.calls == [(TOKEN, bytes.fromhex("313ce567"))]

    def test_multiple_outputs_return_tuple(self, invoker, transport, relayer_abi):
        transport.respond(RELAYER_REGISTRY, relayer_abi, "getRelayerByCoinbase", [
            1, COINBASE, 10 ** 18, 10, [addr(1)], [addr(2)],
        ])
        result = invoker.call(RELAYER_REGISTRY, relayer_abi, "getRelayerByCoinbase", COINBASE)
        assert isinstance(result, tuple)
        assert len(result) == 6
        assert result[3] == 10
        assert [a.lower() for a in result[4]] == [addr(1).lower()]

    def test_call_values_always_tuple(self, invoker, transport, token_abi):
        transport.respond(TOKEN, token_abi, "decimals", [8])
        assert invoker.call_values(TOKEN, token_abi, "decimals") == (8,)

    def test_unknown_method_does_not_call(self, invoker, transport, token_abi):
        with pytest.raises(EncodingError):
            invoker.call(TOKEN, token_abi, "owner")
        assert transport.calls == []

    def test_invalid_contract_address(self, invoker, token_abi):
        with pytest.raises(EncodingError):
            invoker.call("0x123", token_abi, "name")


class TestCallFailures:
    """Tests for transport and decoding failures"""

    def test_generic_transport_error(self, invoker, transport, token_abi):
        transport.fail(TOKEN, token_abi, "name", RuntimeError("node error"))
        with pytest.raises(CallError) as exc_info:
            invoker.call(TOKEN, token_abi, "name")
        assert exc_info.value.code == ErrorCode.CALL_FAILED
        assert isinstance(exc_info.value.original_error, RuntimeError)

    def test_timeout(self, invoker, transport, token_abi):
        transport.fail(TOKEN, token_abi, "name", TimeoutError("read timed out"))
        with pytest.raises(CallError) as exc_info:
            invoker.call(TOKEN, token_abi, "name")
        assert exc_info.value.code == ErrorCode.CALL_TIMEOUT

    def test_call_error_passes_through(self, invoker, transport, token_abi):
        original = CallError.reverted(TOKEN, RuntimeError("execution reverted"))
        transport.fail(TOKEN, token_abi, "name", original)
        with pytest.raises(CallError) as exc_info:
            invoker.call(TOKEN, token_abi, "name")
        assert exc_info.value is original

    def test_empty_return_data(self, invoker, transport, token_abi):
        transport.respond_raw(TOKEN, token_abi, "decimals", b"")
        with pytest.raises(DecodingError) as exc_info:
            invoker.call(TOKEN, token_abi, "decimals")
        assert exc_info.value.method == "decimals"

    def test_out_of_range_value(self, invoker, transport, token_abi):
        transport.respond_raw(TOKEN, token_abi, "decimals", encode(["uint256"], [300]))
        with pytest.raises(DecodingError):
            invoker.call(TOKEN, token_abi, "decimals")

    def test_truncated_tuple(self, invoker, transport, relayer_abi):
        transport.respond_raw(RELAYER_REGISTRY, relayer_abi, "getRelayerByCoinbase", encode(["uint256"], [1]))
        with pytest.raises(DecodingError):
            invoker.call(RELAYER_REGISTRY, relayer_abi, "getRelayerByCoinbase", COINBASE)


class TestDecodedAddressLists:
    """Tests for address array normalization"""

    def test_lowercase_decoded_addresses(self, invoker, transport, relayer_abi):
        transport.respond(RELAYER_REGISTRY, relayer_abi, "getRelayerByCoinbase", [
            1, COINBASE, 0, 10, [USDT_ADDRESS], [WETH_ADDRESS],
        ])
        result = invoker.call(RELAYER_REGISTRY, relayer_abi, "getRelayerByCoinbase", COINBASE)

        # eth_abi hands back lowercase hex
        assert list(result[4]) == [USDT_ADDRESS.lower()]
        assert expect_address_list(result[4], "fromTokens") == [USDT_ADDRESS]
        assert expect_address_list(result[5], "toTokens") == [WETH_ADDRESS]

    def test_rejects_non_addresses(self):
        with pytest.raises(DecodingError) as exc_info:
            expect_address_list(["0x1234"], "fromTokens")
        assert exc_info.value.code == ErrorCode.UNEXPECTED_TYPE
        with pytest.raises(DecodingError):
            expect_address_list([b"\x00" * 20], "fromTokens")
        with pytest.raises(DecodingError):
            expect_address_list("0x" + "00" * 20, "fromTokens")
