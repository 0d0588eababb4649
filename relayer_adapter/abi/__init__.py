"""
Contract ABIs for relayer registry reads
"""

from .provider import AbiProvider, AbiName, ParsedAbi, BUNDLED_ABI_DIR

__all__ = [
    "AbiProvider",
    "AbiName",
    "ParsedAbi",
    "BUNDLED_ABI_DIR",
]
