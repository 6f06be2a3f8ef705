from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from txatlas.core.models import Tx
from txatlas.io.schemas import tx_to_dict


def dumps_txs(txs: Iterable[Tx], indent: int = 2) -> str:
    # order of the input is the order of the output
    return json.dumps([tx_to_dict(t) for t in txs], indent=indent)


def write_txs_json(txs: Iterable[Tx], out_path: str) -> str:
    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        f.write(dumps_txs(txs))
        f.write("\n")
    return str(p)
