"""
Relayer registry records

Typed views over the tuples returned by the relayer and lending
registries. Every record is built fresh per query and never updated.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from eth_typing import ChecksumAddress


@dataclass(frozen=True)
class TokenInfo:
    """
    Token metadata

    Attributes:
        name: Token name (e.g., "Tether USD")
        symbol: Token symbol (e.g., "USDT")
        decimals: Number of decimal places (0-255)
        address: Token contract address
    """
    name: str
    symbol: str
    decimals: int
    address: str = ""

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class PairToken:
    """Spot trading pair registered for a relayer"""
    base_token: ChecksumAddress
    quote_token: ChecksumAddress

    def __str__(self) -> str:
        return f"{self.base_token}/{self.quote_token}"


@dataclass(frozen=True)
class LendingPairToken:
    """Lending pair: loan term (seconds) and the lent token"""
    term: int
    lending_token: ChecksumAddress


@dataclass
class RelayerInfo:
    """
    Spot trading configuration of one relayer

    Attributes:
        tokens: Metadata of every token referenced by the relayer
        pairs: Trading pairs in registry order
        make_fee: Maker fee
        take_fee: Taker fee
    """
    tokens: Dict[ChecksumAddress, TokenInfo] = field(default_factory=dict)
    pairs: List[PairToken] = field(default_factory=list)
    make_fee: int = 0
    take_fee: int = 0

    @classmethod
    def empty(cls) -> "RelayerInfo":
        """Result for a coinbase that is not registered"""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.tokens and not self.pairs

    def pair_symbols(self) -> List[str]:
        """Pairs as "BASE/QUOTE" symbol strings"""
        return [
            f"{self.tokens[p.base_token].symbol}/{self.tokens[p.quote_token].symbol}"
            for p in self.pairs
        ]


@dataclass
class LendingRelayerInfo:
    """
    Lending configuration of one relayer

    Attributes:
        tokens: Metadata of every lending token
        lending_pairs: (term, token) pairs in registry order
        fee: Lending fee
    """
    tokens: Dict[ChecksumAddress, TokenInfo] = field(default_factory=dict)
    lending_pairs: List[LendingPairToken] = field(default_factory=list)
    fee: int = 0

    @classmethod
    def empty(cls) -> "LendingRelayerInfo":
        """Result for a coinbase that is not registered"""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.tokens and not self.lending_pairs


def union_addresses(*lists: Iterable[ChecksumAddress]) -> List[ChecksumAddress]:
    """
    Ordered union of address lists

    Each address appears once, at the position it was first seen.
    """
    seen = {}
    for addresses in lists:
        for address in addresses:
            seen.setdefault(address, None)
    return list(seen)
