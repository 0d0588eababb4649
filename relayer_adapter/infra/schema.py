"""
Typed checks over decoded contract outputs

eth_abi decodes according to whatever ABI was loaded, so a replaced ABI
file can still hand back values of the wrong kind. These helpers pin each
tuple field to the type the adapter relies on and raise DecodingError
otherwise.
"""

from typing import Any, List

from eth_typing import ChecksumAddress

from ..errors import DecodingError, EncodingError
from ..types.native_tokens import to_address

MAX_UINT8 = 2 ** 8 - 1
MAX_UINT16 = 2 ** 16 - 1
MAX_UINT64 = 2 ** 64 - 1


def expect_str(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise DecodingError.unexpected_type(field, "string", value)
    return value


def expect_uint(value: Any, bits: int, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodingError.unexpected_type(field, f"uint{bits}", value)
    if value < 0 or value > 2 ** bits - 1:
        raise DecodingError.unexpected_type(field, f"uint{bits}", value)
    return value


def expect_list(value: Any, field: str) -> List[Any]:
    if not isinstance(value, (list, tuple)):
        raise DecodingError.unexpected_type(field, "array", value)
    return list(value)


def expect_address_list(value: Any, field: str) -> List[ChecksumAddress]:
    """Address array with every element in checksummed form"""
    addresses = []
    for address in expect_list(value, field):
        if not isinstance(address, str):
            raise DecodingError.unexpected_type(f"{field}[]", "address", address)
        # eth_abi decodes addresses lowercase
        try:
            addresses.append(to_address(address))
        except EncodingError:
            raise DecodingError.unexpected_type(f"{field}[]", "address", address)
    return addresses
