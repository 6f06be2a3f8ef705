from __future__ import annotations

from typing import Any, Dict

from txatlas.coin.coin import Coin
from txatlas.core.models import ContractCall, Meta, NativeTokenTransfer, Transfer, Tx, Unsupported


def meta_to_dict(m: Meta) -> Dict[str, Any]:
    if isinstance(m, Transfer):
        return {"value": m.value}
    if isinstance(m, NativeTokenTransfer):
        return {
            "name": m.name,
            "symbol": m.symbol,
            "token_id": m.token_id,
            "decimals": m.decimals,
            "value": m.value,
            "from": m.from_address,
            "to": m.to_address,
        }
    if isinstance(m, ContractCall):
        return {"input": m.input, "value": m.value}
    if isinstance(m, Unsupported):
        return {"reason": m.reason}
    raise TypeError(f"Unknown meta variant: {type(m).__name__}")


def tx_to_dict(tx: Tx) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "id": tx.id,
        "coin": tx.coin,
        "from": tx.from_address,
        "to": tx.to_address,
        "fee": tx.fee,
        "date": tx.date,
        "block": tx.block,
        "status": tx.status.value,
        "type": tx.type.value,
    }
    if tx.error:
        d["error"] = tx.error
    if tx.direction is not None:
        d["direction"] = tx.direction.value
    d["meta"] = meta_to_dict(tx.meta)
    return d


def coin_to_dict(c: Coin) -> Dict[str, Any]:
    return {
        "index": c.index,
        "symbol": c.symbol,
        "name": c.title,
        "link": c.website,
        "decimals": c.decimals,
    }
