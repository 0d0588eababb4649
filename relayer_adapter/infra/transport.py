"""
Chain call transport

The only chain operation the adapter needs: execute a read-only call with
already encoded input against the latest block and return the raw bytes.
Connection handling, node selection and timeouts belong to the web3
provider behind the transport.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

from web3 import Web3, HTTPProvider
from web3.exceptions import ContractLogicError, Web3Exception
from web3.middleware import ExtraDataToPOAMiddleware

from ..errors import CallError, ConfigurationError

logger = logging.getLogger(__name__)

# TomoChain mainnet/testnet run PoSV and need the extraData middleware
POA_CHAIN_IDS = (88, 89)

TIMEOUT_KEYWORDS = ("timeout", "timed out")
CONNECTION_KEYWORDS = ("connection", "network", "socket", "refused", "unreachable")


@runtime_checkable
class ChainCallTransport(Protocol):
    """Executes read-only contract calls"""

    def execute_call(self, to: str, data: bytes) -> bytes:
        """
        Call contract `to` with encoded input `data` at the latest block

        Raises:
            CallError: Network failure, node error or reverted call
        """
        ...


def classify_call_error(contract: str, error: Exception) -> CallError:
    """
    Map a transport exception to a CallError

    Reverts are not recoverable; timeouts and connection failures are.
    """
    if isinstance(error, CallError):
        return error
    if isinstance(error, ContractLogicError):
        return CallError.reverted(contract, error)
    if isinstance(error, TimeoutError):
        return CallError.timeout(contract, error)

    error_str = str(error).lower()
    if any(keyword in error_str for keyword in TIMEOUT_KEYWORDS):
        return CallError.timeout(contract, error)
    if any(keyword in error_str for keyword in CONNECTION_KEYWORDS):
        return CallError.connection_failed(contract, error)
    return CallError.failed(contract, error)


class Web3CallTransport:
    """
    ChainCallTransport backed by a web3.py client

    Usage:
        transport = Web3CallTransport(create_web3("https://rpc.tomochain.com"))
        raw = transport.execute_call(registry_address, payload)
    """

    def __init__(self, web3: "Web3"):
        self._web3 = web3

    @classmethod
    def from_url(
        cls,
        rpc_url: str,
        chain_id: Optional[int] = None,
        timeout: float = 30,
    ) -> "Web3CallTransport":
        return cls(create_web3(rpc_url, chain_id=chain_id, timeout=timeout))

    @property
    def web3(self) -> "Web3":
        return self._web3

    def execute_call(self, to: str, data: bytes) -> bytes:
        try:
            result = self._web3.eth.call({"to": to, "data": data}, "latest")
        except (Web3Exception, OSError, ValueError) as e:
            error = classify_call_error(to, e)
            logger.error(f"eth_call to {to} failed: {error}")
            raise error from e
        return bytes(result)

    def __repr__(self) -> str:
        return f"Web3CallTransport(provider={self._web3.provider})"


def create_web3(
    rpc_url: str,
    chain_id: Optional[int] = None,
    timeout: float = 30,
) -> "Web3":
    """
    Create Web3 instance for a chain

    Args:
        rpc_url: RPC endpoint URL
        chain_id: Chain ID (88 for TomoChain). If None, will detect from RPC.
        timeout: Request timeout in seconds

    Returns:
        Configured Web3 instance
    """
    if not rpc_url:
        raise ConfigurationError.missing("RELAYER_RPC_URL")

    provider = HTTPProvider(
        rpc_url,
        request_kwargs={"timeout": timeout},
    )

    web3 = Web3(provider)

    if chain_id is None:
        try:
            chain_id = web3.eth.chain_id
        except Exception as e:
            logger.warning(f"Failed to detect chain ID from RPC, skipping PoA middleware: {e}")

    if chain_id in POA_CHAIN_IDS:
        web3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

    return web3
