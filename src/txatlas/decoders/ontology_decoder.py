from __future__ import annotations

from typing import Any, List, Union

from txatlas.core.dto import OntologyTransfer, OntologyTx
from txatlas.decoders.json_fields import (
    as_list,
    as_object,
    load_json,
    opt_int,
    opt_str,
    required_str,
)


def decode_transfer(obj: Any) -> OntologyTransfer:
    o = as_object(obj, "TransferList entry")
    return OntologyTransfer(
        from_address=opt_str(o, "FromAddress"),
        to_address=opt_str(o, "ToAddress"),
        amount=opt_str(o, "Amount", default="0"),
        asset_name=opt_str(o, "AssetName"),
    )


def decode_tx(obj: Any) -> OntologyTx:
    o = as_object(obj, "Transaction")
    return OntologyTx(
        txn_hash=required_str(o, "TxnHash"),
        txn_type=opt_int(o, "TxnType"),
        confirm_flag=opt_int(o, "ConfirmFlag"),
        fee=opt_str(o, "Fee", default="0"),
        block_index=opt_int(o, "BlockIndex"),
        txn_time=opt_int(o, "TxnTime"),
        height=opt_int(o, "Height"),
        transfers=tuple(decode_transfer(t) for t in as_list(o.get("TransferList"), "TransferList")),
    )


def decode_page(raw: Union[bytes, str]) -> List[OntologyTx]:
    """
    Decode an explorer address page: {"Result": {"TxnList": [...]}}.
    """
    page = as_object(load_json(raw), "Page")
    result = page.get("Result")
    if result is None:
        return []
    result = as_object(result, "Result")
    return [decode_tx(t) for t in as_list(result.get("TxnList"), "TxnList")]
