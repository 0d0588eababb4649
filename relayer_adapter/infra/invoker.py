"""
Contract Invoker

Generic read-only contract call: pack the method selector and arguments
with the ABI, execute through the transport, unpack the typed result.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from eth_abi import encode, decode
from eth_abi.exceptions import EncodingError as AbiEncodingError
from eth_abi.exceptions import DecodingError as AbiDecodingError
from eth_utils import function_abi_to_4byte_selector
from eth_utils.abi import collapse_if_tuple

from ..errors import (
    RelayerAdapterError,
    EncodingError,
    DecodingError,
)
from ..types.native_tokens import to_address
from .correlation import log_prefix
from .transport import ChainCallTransport, classify_call_error

logger = logging.getLogger(__name__)


def find_function(abi: List[Dict[str, Any]], method: str) -> Optional[Dict[str, Any]]:
    """Return the function entry named `method`, or None"""
    for entry in abi:
        if entry.get("type", "function") == "function" and entry.get("name") == method:
            return entry
    return None


def has_method(abi: List[Dict[str, Any]], method: str) -> bool:
    return find_function(abi, method) is not None


def _types(params: List[Dict[str, Any]]) -> List[str]:
    return [collapse_if_tuple(param) for param in params]


class ContractInvoker:
    """
    Encodes, executes and decodes read-only contract calls

    Transport failures are always fatal: they raise CallError and nothing
    is decoded.

    Usage:
        invoker = ContractInvoker(transport)
        symbol = invoker.call(token_address, token_abi, "symbol")
        values = invoker.call_values(registry, relayer_abi, "getRelayerByCoinbase", coinbase)
    """

    def __init__(self, transport: ChainCallTransport):
        self._transport = transport

    @property
    def transport(self) -> ChainCallTransport:
        return self._transport

    def encode_call(self, abi: List[Dict[str, Any]], method: str, *args: Any) -> bytes:
        """
        Build call data for `method`

        Raises:
            EncodingError: Unknown method, wrong argument count or types
        """
        fn = find_function(abi, method)
        if fn is None:
            raise EncodingError.unknown_method(method)

        inputs = fn.get("inputs", [])
        if len(args) != len(inputs):
            raise EncodingError.invalid_arguments(
                method, f"expected {len(inputs)} arguments, got {len(args)}"
            )

        input_types = _types(inputs)
        values = [
            to_address(arg) if typ == "address" else arg
            for typ, arg in zip(input_types, args)
        ]
        try:
            return function_abi_to_4byte_selector(fn) + encode(input_types, values)
        except (AbiEncodingError, TypeError, ValueError, OverflowError) as e:
            raise EncodingError.invalid_arguments(method, str(e), e)

    def decode_result(self, abi: List[Dict[str, Any]], method: str, raw: bytes) -> Tuple[Any, ...]:
        """
        Decode raw return data into the method's declared outputs

        Raises:
            EncodingError: Unknown method
            DecodingError: Data does not match the output types
        """
        fn = find_function(abi, method)
        if fn is None:
            raise EncodingError.unknown_method(method)

        output_types = _types(fn.get("outputs", []))
        try:
            return tuple(decode(output_types, raw))
        except (AbiDecodingError, TypeError, ValueError) as e:
            raise DecodingError.failed(method, e)

    def call_values(
        self,
        contract_address: str,
        abi: List[Dict[str, Any]],
        method: str,
        *args: Any,
    ) -> Tuple[Any, ...]:
        """
        Execute call and return every decoded output as a tuple

        Raises:
            EncodingError, CallError, DecodingError
        """
        contract = to_address(contract_address)
        data = self.encode_call(abi, method, *args)

        try:
            raw = self._transport.execute_call(contract, data)
        except RelayerAdapterError:
            raise
        except Exception as e:
            raise classify_call_error(contract, e) from e

        logger.debug(f"{log_prefix()}{method}@{contract} returned {len(raw)} bytes")
        return self.decode_result(abi, method, raw)

    def call(
        self,
        contract_address: str,
        abi: List[Dict[str, Any]],
        method: str,
        *args: Any,
    ) -> Any:
        """
        Execute call and return the decoded value

        A single-output method yields the bare value, otherwise the tuple
        of outputs.
        """
        values = self.call_values(contract_address, abi, method, *args)
        if len(values) == 1:
            return values[0]
        return values
