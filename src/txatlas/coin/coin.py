from dataclasses import dataclass


@dataclass(frozen=True)
class Coin:
    """
    Native currency of a blockchain.
    """

    index: int          # SLIP-44 index
    symbol: str
    title: str
    website: str
    decimals: int
