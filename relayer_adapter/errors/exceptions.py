"""
Exception definitions for Relayer Adapter
"""

from enum import Enum
from typing import Any, Optional


class ErrorCode(Enum):
    """
    Unified error codes for relayer registry reads

    1xxx - ABI errors
    2xxx - Call encoding errors
    3xxx - Chain call errors
    4xxx - Result decoding errors
    5xxx - Registry errors
    9xxx - Configuration errors
    """
    # ABI errors
    ABI_NOT_FOUND = "1001"
    ABI_INVALID = "1002"

    # Encoding errors
    METHOD_NOT_FOUND = "2001"
    INVALID_ARGUMENTS = "2002"
    INVALID_ADDRESS = "2003"

    # Call errors (recoverable unless reverted)
    CALL_FAILED = "3001"
    CALL_REVERTED = "3002"
    CALL_TIMEOUT = "3003"
    CALL_CONNECTION_FAILED = "3004"

    # Decoding errors
    DECODE_FAILED = "4001"
    UNEXPECTED_TYPE = "4002"

    # Registry errors
    RELAYER_LOOKUP_UNAVAILABLE = "5001"
    TERM_PARSE_FAILED = "5002"

    # Configuration errors
    CONFIG_INVALID = "9001"
    CONFIG_MISSING = "9002"


class RelayerAdapterError(Exception):
    """
    Base exception for all relayer adapter errors

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        recoverable: Whether the error might succeed on retry
        original_error: The underlying exception if any
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        recoverable: bool = False,
        original_error: Optional[Exception] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.recoverable = recoverable
        self.original_error = original_error
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"

    @property
    def should_retry(self) -> bool:
        """Indicate if the operation should be retried by the caller"""
        return self.recoverable


class AbiUnavailableError(RelayerAdapterError):
    """
    ABI could not be loaded or parsed

    Raised when:
    - The ABI file does not exist or cannot be read
    - The file is not valid JSON or not an ABI array
    - An unknown ABI identifier is requested
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ABI_NOT_FOUND,
        source: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            code,
            recoverable=False,
            original_error=original_error,
            details={"source": source} if source else None,
        )
        self.source = source

    @classmethod
    def not_found(cls, source: str, error: Exception = None) -> "AbiUnavailableError":
        return cls(
            f"ABI not found: {source}",
            ErrorCode.ABI_NOT_FOUND,
            source=source,
            original_error=error,
        )

    @classmethod
    def invalid(cls, source: str, reason: str, error: Exception = None) -> "AbiUnavailableError":
        return cls(
            f"Invalid ABI {source}: {reason}",
            ErrorCode.ABI_INVALID,
            source=source,
            original_error=error,
        )


class RelayerLookupUnavailableError(RelayerAdapterError):
    """
    The registry ABI does not expose the expected lookup method.

    This is a configuration or contract version mismatch, not a chain failure.
    """

    def __init__(self, message: str, method: Optional[str] = None):
        super().__init__(
            message,
            ErrorCode.RELAYER_LOOKUP_UNAVAILABLE,
            recoverable=False,
            details={"method": method},
        )
        self.method = method

    @classmethod
    def missing_method(cls, method: str) -> "RelayerLookupUnavailableError":
        return cls(f"Can not get relayer information: ABI has no method '{method}'", method=method)


class EncodingError(RelayerAdapterError):
    """
    Call arguments could not be encoded

    Raised when:
    - The method is unknown to the ABI
    - Argument count or types do not match the method inputs
    - An address is malformed
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_ARGUMENTS,
        method: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            code,
            recoverable=False,
            original_error=original_error,
            details={"method": method} if method else None,
        )
        self.method = method

    @classmethod
    def unknown_method(cls, method: str) -> "EncodingError":
        return cls(
            f"Method '{method}' not found in ABI",
            ErrorCode.METHOD_NOT_FOUND,
            method=method,
        )

    @classmethod
    def invalid_arguments(cls, method: str, reason: str, error: Exception = None) -> "EncodingError":
        return cls(
            f"Invalid arguments for '{method}': {reason}",
            ErrorCode.INVALID_ARGUMENTS,
            method=method,
            original_error=error,
        )

    @classmethod
    def invalid_address(cls, value: Any, error: Exception = None) -> "EncodingError":
        return cls(
            f"Invalid address: {value!r}",
            ErrorCode.INVALID_ADDRESS,
            original_error=error,
        )


class CallError(RelayerAdapterError):
    """
    Read-only chain call failed

    Raised when:
    - The node rejects or reverts the call
    - The request times out
    - The connection to the node fails
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CALL_FAILED,
        recoverable: bool = True,
        original_error: Optional[Exception] = None,
        contract: Optional[str] = None,
    ):
        super().__init__(
            message,
            code,
            recoverable=recoverable,
            original_error=original_error,
            details={"contract": contract} if contract else None,
        )
        self.contract = contract

    @classmethod
    def failed(cls, contract: str, error: Exception) -> "CallError":
        return cls(
            f"Call to {contract} failed: {error}",
            ErrorCode.CALL_FAILED,
            original_error=error,
            contract=contract,
        )

    @classmethod
    def reverted(cls, contract: str, error: Exception) -> "CallError":
        return cls(
            f"Call to {contract} reverted: {error}",
            ErrorCode.CALL_REVERTED,
            recoverable=False,
            original_error=error,
            contract=contract,
        )

    @classmethod
    def timeout(cls, contract: str, error: Exception = None) -> "CallError":
        return cls(
            f"Call to {contract} timed out",
            ErrorCode.CALL_TIMEOUT,
            original_error=error,
            contract=contract,
        )

    @classmethod
    def connection_failed(cls, contract: str, error: Exception = None) -> "CallError":
        return cls(
            f"Connection failed while calling {contract}: {error}",
            ErrorCode.CALL_CONNECTION_FAILED,
            original_error=error,
            contract=contract,
        )


class DecodingError(RelayerAdapterError):
    """
    Return data does not match the expected output shape or type
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DECODE_FAILED,
        method: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            code,
            recoverable=False,
            original_error=original_error,
            details={"method": method} if method else None,
        )
        self.method = method

    @classmethod
    def failed(cls, method: str, error: Exception) -> "DecodingError":
        return cls(
            f"Failed to decode result of '{method}': {error}",
            ErrorCode.DECODE_FAILED,
            method=method,
            original_error=error,
        )

    @classmethod
    def unexpected_type(cls, field: str, expected: str, value: Any) -> "DecodingError":
        return cls(
            f"Unexpected value for {field}: expected {expected}, got {type(value).__name__} {value!r}",
            ErrorCode.UNEXPECTED_TYPE,
            method=field,
        )


class TermParseError(RelayerAdapterError):
    """
    A lending term is malformed or does not fit in 64 bits.

    Attributes:
        term: The raw term value
        partial: The lending relayer info built before the failure
    """

    def __init__(
        self,
        message: str,
        term: Any = None,
        partial: Any = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            ErrorCode.TERM_PARSE_FAILED,
            recoverable=False,
            original_error=original_error,
            details={"term": str(term)},
        )
        self.term = term
        self.partial = partial


class ConfigurationError(RelayerAdapterError):
    """
    Configuration-related errors

    Raised when:
    - Required configuration is missing
    - Configuration values are invalid
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_INVALID,
    ):
        super().__init__(message, code, recoverable=False)

    @classmethod
    def missing(cls, param: str) -> "ConfigurationError":
        return cls(f"Missing required configuration: {param}", ErrorCode.CONFIG_MISSING)

    @classmethod
    def invalid(cls, param: str, reason: str) -> "ConfigurationError":
        return cls(f"Invalid configuration '{param}': {reason}", ErrorCode.CONFIG_INVALID)
