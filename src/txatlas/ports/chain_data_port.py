from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional

class FetchClient(ABC):
    """
    Abstract Class for fetching one page of native records for an address.

    Retries, rate limiting and timeouts live in the implementation; callers
    get either decoded records or an exception.
    """

    @abstractmethod
    def get_txs_of_address(self, address: str, asset: Optional[str] = None) -> List[Any]:
        raise NotImplementedError
