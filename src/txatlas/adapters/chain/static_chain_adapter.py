from txatlas.ports.chain_data_port import FetchClient
from typing import Any, Callable, Dict, List, Optional, Union

RawPage = Union[bytes, str]

class StaticChainAdapter(FetchClient):
    def __init__(self,
                 decode: Callable[[RawPage], List[Any]],
                 pages: Optional[Dict[str, RawPage]] = None,
                 default_page: Optional[RawPage] = None,
                 ):
        self._decode = decode
        self._pages = {k.lower(): v for k, v in (pages or {}).items()}
        self._default = default_page

    def get_txs_of_address(self, address, asset=None):
        raw = self._pages.get(address.lower(), self._default)
        if raw is None:
            return []
        return self._decode(raw)
