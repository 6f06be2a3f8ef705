from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Mapping, Optional, Union

from txatlas.coin.coin import Coin
from txatlas.coin.registry import COINS, get_coin
from txatlas.core.errors import MalformedAmountError
from txatlas.core.models import Tx
from txatlas.logging_setup import get_logger

logger = get_logger(__name__)


class NormalizationEngine(ABC):
    """
    Maps one chain's native records into canonical transactions.

    Implementations are pure: no I/O, no caches, no mutable state after
    construction, so one instance can be shared across threads.
    """

    coin_handle: str = ""
    default_asset: str = ""

    def __init__(self, coins: Mapping[str, Coin] = COINS) -> None:
        self.coin = get_coin(self.coin_handle, coins)

    # --- raw page decoding ---

    @abstractmethod
    def decode_page(self, raw: Union[bytes, str]) -> List[Any]:
        raise NotImplementedError

    # --- single record ---

    @abstractmethod
    def normalize(self, record: Any, asset: Optional[str] = None) -> List[Tx]:
        """
        Returns [] when the record does not concern ``asset`` (not an error),
        otherwise one Tx per independent transfer, all sharing the record id.

        Raises MalformedAmountError for unparseable amounts or fees.
        """
        raise NotImplementedError

    # --- whole page ---

    def normalize_page(self, records: Iterable[Any], asset: Optional[str] = None) -> List[Tx]:
        out: List[Tx] = []
        for r in records:
            try:
                out.extend(self.normalize(r, asset))
            except MalformedAmountError as e:
                logger.warning("%s: dropping record %s: %s", self.coin.symbol, _record_id(r), e)
        return out

    def match_asset(self, asset: Optional[str]) -> str:
        return normalize_asset(asset or self.default_asset)


def normalize_asset(name: Optional[str]) -> str:
    return (name or "").strip().lower()


def _record_id(record: Any) -> str:
    for attr in ("txn_hash", "transaction_hash", "id"):
        val = getattr(record, attr, None)
        if val:
            return str(val)
    return "<unknown>"
