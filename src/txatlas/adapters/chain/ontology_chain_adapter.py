from __future__ import annotations

from typing import List, Optional

from txatlas.adapters.chain.http_chain_adapter import HttpChainAdapter
from txatlas.config import settings
from txatlas.core.dto import OntologyTx
from txatlas.decoders.ontology_decoder import decode_page
from txatlas.normalizers.ontology_normalizer import ONT_ASSET_NAME
from txatlas.ports.normalizer_port import normalize_asset


class OntologyChainAdapter(HttpChainAdapter):
    name = "ontology"

    def __init__(self, base_url: str = settings.ONTOLOGY_BASE_URL, **kwargs) -> None:
        super().__init__(base_url, **kwargs)

    def get_txs_of_address(self, address: str, asset: Optional[str] = None) -> List[OntologyTx]:
        # explorer history is per asset
        asset_name = normalize_asset(asset) or ONT_ASSET_NAME
        raw = self._get(f"address/{address}/{asset_name}/{self._page_size}/1")
        return decode_page(raw)
