from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional

from txatlas.adapters.chain.aion_chain_adapter import AionChainAdapter
from txatlas.adapters.chain.ontology_chain_adapter import OntologyChainAdapter
from txatlas.coin.coin import Coin
from txatlas.coin.registry import COINS
from txatlas.core.errors import UnknownCoinError
from txatlas.normalizers.aion_normalizer import AionNormalizer
from txatlas.normalizers.ontology_normalizer import OntologyNormalizer
from txatlas.ports.chain_data_port import FetchClient
from txatlas.ports.normalizer_port import NormalizationEngine


@dataclass(frozen=True)
class Platform:
    handle: str
    engine: NormalizationEngine
    client_factory: Callable[[], FetchClient]

    @property
    def coin(self) -> Coin:
        return self.engine.coin


class PlatformRegistry:
    """
    Chain handle ("ont", "aion") -> engine + fetch client factory.
    Built once at startup; read-only afterwards.
    """

    def __init__(self, platforms: List[Platform]) -> None:
        self._platforms: Dict[str, Platform] = {}
        for p in platforms:
            if p.handle in self._platforms:
                raise ValueError(f"Duplicate platform: {p.handle}")
            self._platforms[p.handle] = p

    def get(self, handle: str) -> Platform:
        key = (handle or "").strip().lower()
        try:
            return self._platforms[key]
        except KeyError:
            raise UnknownCoinError(f"Unsupported coin: {handle!r}") from None

    def handles(self) -> List[str]:
        return sorted(self._platforms)


def build_platforms(coins: Mapping[str, Coin] = COINS,
                    client_overrides: Optional[Dict[str, Callable[[], FetchClient]]] = None,
                    ) -> PlatformRegistry:
    factories: Dict[str, Callable[[], FetchClient]] = {
        "ont": OntologyChainAdapter,
        "aion": AionChainAdapter,
    }
    factories.update(client_overrides or {})
    return PlatformRegistry([
        Platform(handle="ont", engine=OntologyNormalizer(coins), client_factory=factories["ont"]),
        Platform(handle="aion", engine=AionNormalizer(coins), client_factory=factories["aion"]),
    ])
