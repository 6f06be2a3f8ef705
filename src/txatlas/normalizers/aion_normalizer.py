from __future__ import annotations

from typing import List, Optional, Union

from txatlas.core.dto import AionTx
from txatlas.core.enums import TxStatus
from txatlas.core.errors import MalformedAmountError
from txatlas.core.models import ContractCall, Meta, Transfer, Tx, Unsupported
from txatlas.core.numbers import to_smallest_unit
from txatlas.decoders import aion_decoder
from txatlas.ports.normalizer_port import NormalizationEngine


AION_ASSET_NAME = "aion"

MICROS_PER_SECOND = 1_000_000


class AionNormalizer(NormalizationEngine):
    coin_handle = "aion"
    default_asset = AION_ASSET_NAME

    def decode_page(self, raw: Union[bytes, str]) -> List[AionTx]:
        return aion_decoder.decode_page(raw)

    def normalize(self, record: AionTx, asset: Optional[str] = None) -> List[Tx]:
        if self.match_asset(asset) != AION_ASSET_NAME:
            return []

        value = to_smallest_unit(record.value, self.coin.decimals)

        return [
            Tx(
                id=record.transaction_hash,
                coin=self.coin.index,
                from_address=_with_prefix(record.from_addr),
                to_address=_with_prefix(record.to_addr),
                fee=self._fee(record),
                date=record.transaction_timestamp // MICROS_PER_SECOND,
                block=record.block_number,
                status=self._status(record),
                meta=self._meta(record, value),
                error=record.tx_error,
            )
        ]

    @staticmethod
    def _fee(record: AionTx) -> str:
        # energy is already priced in the smallest unit
        if record.nrg_consumed < 0 or record.nrg_price < 0:
            raise MalformedAmountError(
                f"Negative energy values: consumed={record.nrg_consumed} price={record.nrg_price}"
            )
        return str(record.nrg_consumed * record.nrg_price)

    @staticmethod
    def _status(record: AionTx) -> TxStatus:
        if record.tx_error:
            return TxStatus.FAILED
        if record.block_number == 0:
            return TxStatus.PENDING
        return TxStatus.COMPLETED

    @staticmethod
    def _meta(record: AionTx, value: str) -> Meta:
        if not record.to_addr:
            return Unsupported(reason="contract creation")
        if record.data and record.data not in ("0x", "0x0"):
            return ContractCall(input=record.data, value=value)
        return Transfer(value=value)


def _with_prefix(addr: str) -> str:
    if not addr or addr.startswith("0x"):
        return addr
    return "0x" + addr
