from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class TokenMeta:
    token_id: str
    symbol: str
    decimals: int
    name: str


# ---- Ontology explorer ----

@dataclass(frozen=True)
class OntologyTransfer:
    from_address: str
    to_address: str
    amount: str             # display units, e.g. "2.000000000"
    asset_name: str


@dataclass(frozen=True)
class OntologyTx:
    txn_hash: str
    txn_type: int = 0
    confirm_flag: int = 0
    fee: str = "0"          # ONG, display units
    block_index: int = 0
    txn_time: int = 0
    height: int = 0
    transfers: Tuple[OntologyTransfer, ...] = ()


# ---- Aion dashboard ----

@dataclass(frozen=True)
class AionTx:
    transaction_hash: str
    from_addr: str = ""
    to_addr: str = ""
    value: Decimal = Decimal("0")   # AION, display units
    nrg_consumed: int = 0
    nrg_price: int = 0
    transaction_timestamp: int = 0  # microseconds
    block_number: int = 0
    tx_error: str = ""
    data: str = ""
