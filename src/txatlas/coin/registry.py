from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping

from txatlas.coin.coin import Coin
from txatlas.core.errors import UnknownCoinError


ONT = Coin(index=1024, symbol="ONT", title="Ontology", website="https://ont.io", decimals=0)
AION = Coin(index=425, symbol="AION", title="Aion", website="https://aion.network", decimals=18)


def _build(*coins: Coin) -> Mapping[str, Coin]:
    table: Dict[str, Coin] = {}
    for c in coins:
        handle = c.symbol.lower()
        if handle in table:
            raise ValueError(f"Duplicate coin handle: {handle}")
        table[handle] = c
    return MappingProxyType(table)


# Read-only after import; engines receive this mapping by reference.
COINS: Mapping[str, Coin] = _build(ONT, AION)


def get_coin(handle: str, coins: Mapping[str, Coin] = COINS) -> Coin:
    key = (handle or "").strip().lower()
    try:
        return coins[key]
    except KeyError:
        raise UnknownCoinError(f"Unknown coin: {handle!r}") from None
