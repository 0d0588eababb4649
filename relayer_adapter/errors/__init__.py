"""
Error definitions for Relayer Adapter
"""

from .exceptions import (
    ErrorCode,
    RelayerAdapterError,
    AbiUnavailableError,
    RelayerLookupUnavailableError,
    EncodingError,
    CallError,
    DecodingError,
    TermParseError,
    ConfigurationError,
)

__all__ = [
    "ErrorCode",
    "RelayerAdapterError",
    "AbiUnavailableError",
    "RelayerLookupUnavailableError",
    "EncodingError",
    "CallError",
    "DecodingError",
    "TermParseError",
    "ConfigurationError",
]
