from __future__ import annotations

import dataclasses
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional

from txatlas.config import settings
from txatlas.core.enums import Direction
from txatlas.core.models import Tx
from txatlas.logging_setup import get_logger
from txatlas.ports.chain_data_port import FetchClient
from txatlas.ports.normalizer_port import NormalizationEngine

logger = get_logger(__name__)


class TransactionService:
    """
    Fetch -> decode -> normalize for one chain.

    - Fetch errors (DataSourceError, DecodeError) propagate unchanged
    - Malformed records are dropped by the engine, siblings are kept
    - Output keeps the upstream record order
    """

    def __init__(self, client: FetchClient, engine: NormalizationEngine) -> None:
        self.client = client
        self.engine = engine

    def get_txs(self, address: str, asset: Optional[str] = None) -> List[Tx]:
        records = self.client.get_txs_of_address(address, asset)
        txs = self.engine.normalize_page(records, asset)
        logger.info(
            "%s: %d record(s) -> %d transaction(s) for %s",
            self.engine.coin.symbol, len(records), len(txs), address,
        )
        return [with_direction(tx, address) for tx in txs]

    def get_txs_for_addresses(
        self,
        addresses: Iterable[str],
        asset: Optional[str] = None,
        concurrency: int = settings.FETCH_CONCURRENCY,
    ) -> Dict[str, List[Tx]]:
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        addrs = list(dict.fromkeys(addresses))
        if not addrs:
            return {}

        with ThreadPoolExecutor(max_workers=min(concurrency, len(addrs))) as pool:
            # map() re-raises the first failure in input order
            results = list(pool.map(lambda a: self.get_txs(a, asset), addrs))
        return dict(zip(addrs, results))


def _addr_key(addr: str) -> str:
    a = (addr or "").strip().lower()
    return a[2:] if a.startswith("0x") else a


def infer_direction(tx: Tx, address: str) -> Optional[Direction]:
    addr = _addr_key(address)
    if not addr:
        return None
    is_from = _addr_key(tx.from_address) == addr
    is_to = _addr_key(tx.to_address) == addr
    if is_from and is_to:
        return Direction.SELF
    if is_from:
        return Direction.OUTGOING
    if is_to:
        return Direction.INCOMING
    return None


def with_direction(tx: Tx, address: str) -> Tx:
    direction = infer_direction(tx, address)
    if direction == tx.direction:
        return tx
    return dataclasses.replace(tx, direction=direction)
