from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from txatlas.core.enums import Direction, TxStatus, TxType


# Meta variants (one per TxType)

@dataclass(frozen=True)
class Transfer:
    TYPE: ClassVar[TxType] = TxType.TRANSFER

    value: str                  # smallest units


@dataclass(frozen=True)
class NativeTokenTransfer:
    TYPE: ClassVar[TxType] = TxType.NATIVE_TOKEN_TRANSFER

    name: str
    symbol: str
    token_id: str
    decimals: int
    value: str                  # smallest units of the token
    from_address: str
    to_address: str


@dataclass(frozen=True)
class ContractCall:
    TYPE: ClassVar[TxType] = TxType.CONTRACT_CALL

    input: str
    value: str


@dataclass(frozen=True)
class Unsupported:
    TYPE: ClassVar[TxType] = TxType.UNSUPPORTED

    reason: str = ""


Meta = Union[Transfer, NativeTokenTransfer, ContractCall, Unsupported]



# Canonical transaction

@dataclass(frozen=True)
class Tx:
    """
    Chain-agnostic transaction as delivered to API callers.

    ``type`` is read from the meta variant, so a ``transfer`` carrying token
    fields cannot be built.
    """

    id: str
    coin: int                   # SLIP-44 index
    from_address: str
    to_address: str
    fee: str                    # smallest units of the fee currency
    date: int
    block: int
    status: TxStatus
    meta: Meta

    error: str = ""
    direction: Optional[Direction] = None

    @property
    def type(self) -> TxType:
        return self.meta.TYPE
