from __future__ import annotations

from typing import Any, List, Union

from txatlas.core.dto import AionTx
from txatlas.decoders.json_fields import (
    as_list,
    as_object,
    load_json,
    opt_decimal,
    opt_int,
    opt_str,
    required_str,
)


def decode_tx(obj: Any) -> AionTx:
    o = as_object(obj, "Transaction")
    return AionTx(
        transaction_hash=required_str(o, "transactionHash"),
        from_addr=opt_str(o, "fromAddr"),
        to_addr=opt_str(o, "toAddr"),
        value=opt_decimal(o, "value"),
        nrg_consumed=opt_int(o, "nrgConsumed"),
        nrg_price=opt_int(o, "nrgPrice"),
        transaction_timestamp=opt_int(o, "transactionTimestamp"),
        block_number=opt_int(o, "blockNumber"),
        tx_error=opt_str(o, "txError"),
        data=opt_str(o, "data"),
    )


def decode_page(raw: Union[bytes, str]) -> List[AionTx]:
    # numbers are kept as Decimal so "value" survives without float rounding
    page = as_object(load_json(raw, parse_decimal=True), "Page")
    return [decode_tx(t) for t in as_list(page.get("content"), "content")]
