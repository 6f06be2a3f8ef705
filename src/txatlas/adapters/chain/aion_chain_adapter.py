from __future__ import annotations

from typing import List, Optional

from txatlas.adapters.chain.http_chain_adapter import HttpChainAdapter
from txatlas.config import settings
from txatlas.core.dto import AionTx
from txatlas.decoders.aion_decoder import decode_page


class AionChainAdapter(HttpChainAdapter):
    name = "aion"

    def __init__(self, base_url: str = settings.AION_BASE_URL, **kwargs) -> None:
        super().__init__(base_url, **kwargs)

    def get_txs_of_address(self, address: str, asset: Optional[str] = None) -> List[AionTx]:
        raw = self._get(
            "getTransactionsByAddress",
            params={"accountAddress": address, "size": str(self._page_size)},
        )
        return decode_page(raw)
