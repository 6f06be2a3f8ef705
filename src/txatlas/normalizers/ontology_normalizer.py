from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple, Union

from txatlas.core.dto import OntologyTransfer, OntologyTx, TokenMeta
from txatlas.core.enums import TxStatus
from txatlas.core.models import Meta, NativeTokenTransfer, Transfer, Tx
from txatlas.core.numbers import parse_amount, sum_smallest_units, to_smallest_unit
from txatlas.decoders import ontology_decoder
from txatlas.logging_setup import get_logger
from txatlas.ports.normalizer_port import NormalizationEngine, normalize_asset

logger = get_logger(__name__)


ONT_ASSET_NAME = "ont"
ONG_ASSET_NAME = "ong"

# Gas token; network fees are paid in ONG
ONG = TokenMeta(token_id=ONG_ASSET_NAME, symbol="ONG", decimals=9, name="Ontology Gas")

# Fee settlements are ONG transfers to this contract
GOVERNANCE_ADDRESS = "AFmseVrdL9f9oyCzZefL9tG6UbviEH9ugK"

CONFIRMED = 1


class OntologyNormalizer(NormalizationEngine):
    """
    Ontology explorer records -> canonical transactions.

    - ``ont`` entries become ``transfer`` (ONT is indivisible)
    - ``ong`` entries become ``native_token_transfer`` with ONG metadata
    - entries for the same (from, to) pair are summed, distinct pairs split
      into separate transactions sharing the record hash
    - the ONG fee settlement is already carried in ``fee``; it is dropped
      when the record has other ONG transfers, and reported with value "0"
      when it is the only one
    """

    coin_handle = "ont"
    default_asset = ONT_ASSET_NAME

    def decode_page(self, raw: Union[bytes, str]) -> List[OntologyTx]:
        return ontology_decoder.decode_page(raw)

    def normalize(self, record: OntologyTx, asset: Optional[str] = None) -> List[Tx]:
        wanted = self.match_asset(asset)
        if wanted not in (ONT_ASSET_NAME, ONG_ASSET_NAME):
            return []

        matched = [t for t in record.transfers if normalize_asset(t.asset_name) == wanted]
        if not matched:
            return []

        fee = to_smallest_unit(record.fee, ONG.decimals)
        status = self._status(record)

        if wanted == ONT_ASSET_NAME:
            groups = _group_by_pair(matched, self.coin.decimals)
        else:
            transfers, settlements = _split_fee_settlements(matched, record.fee)
            if transfers:
                if settlements:
                    logger.debug("%s: excluding %d fee settlement(s)", record.txn_hash, len(settlements))
                groups = _group_by_pair(transfers, ONG.decimals)
            else:
                groups = [(f, t, "0") for f, t, _ in _group_by_pair(settlements, ONG.decimals)]

        return [
            Tx(
                id=record.txn_hash,
                coin=self.coin.index,
                from_address=from_addr,
                to_address=to_addr,
                fee=fee,
                date=record.txn_time,
                block=record.height,
                status=status,
                meta=self._meta(wanted, from_addr, to_addr, value),
            )
            for from_addr, to_addr, value in groups
        ]

    @staticmethod
    def _status(record: OntologyTx) -> TxStatus:
        if record.confirm_flag == CONFIRMED:
            return TxStatus.COMPLETED
        return TxStatus.FAILED

    @staticmethod
    def _meta(asset: str, from_addr: str, to_addr: str, value: str) -> Meta:
        if asset == ONG_ASSET_NAME:
            return NativeTokenTransfer(
                name=ONG.name,
                symbol=ONG.symbol,
                token_id=ONG.token_id,
                decimals=ONG.decimals,
                value=value,
                from_address=from_addr,
                to_address=to_addr,
            )
        return Transfer(value=value)


def _split_fee_settlements(
    transfers: Sequence[OntologyTransfer],
    fee: str,
) -> Tuple[List[OntologyTransfer], List[OntologyTransfer]]:
    fee_amount = parse_amount(fee)
    regular: List[OntologyTransfer] = []
    settlements: List[OntologyTransfer] = []
    for t in transfers:
        if t.to_address == GOVERNANCE_ADDRESS and parse_amount(t.amount) == fee_amount:
            settlements.append(t)
        else:
            regular.append(t)
    return regular, settlements


def _group_by_pair(transfers: Sequence[OntologyTransfer], exponent: int) -> List[Tuple[str, str, str]]:
    """
    Sum amounts per (from, to) pair, keeping first-seen order.
    """
    values: Dict[Tuple[str, str], List[str]] = {}
    for t in transfers:
        values.setdefault((t.from_address, t.to_address), []).append(
            to_smallest_unit(t.amount, exponent)
        )
    return [(f, to, sum_smallest_units(v)) for (f, to), v in values.items()]
