from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from txatlas.adapters.chain.rate_limiter import SimpleRateLimiter, backoff_sleep
from txatlas.config import settings
from txatlas.core.errors import DataSourceError, RateLimitError
from txatlas.logging_setup import get_logger
from txatlas.ports.chain_data_port import FetchClient

logger = get_logger(__name__)


class HttpChainAdapter(FetchClient):
    """
    Shared HTTP plumbing for explorer clients: one session, rate limit,
    timeout and retries with jittered backoff.
    """

    name = "http"

    def __init__(
        self,
        base_url: str,
        timeout_sec: int = settings.HTTP_TIMEOUT_SEC,
        max_retries: int = settings.HTTP_MAX_RETRIES,
        requests_per_sec: float = settings.HTTP_REQUESTS_PER_SEC,
        page_size: int = settings.TX_PER_PAGE,
        session: Optional[requests.Session] = None,
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be >= 1")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_sec
        self._max_retries = max_retries
        self._page_size = page_size
        self._rl = SimpleRateLimiter(requests_per_sec)
        self._session = session or requests.Session()

    # ---------- internal ----------

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> bytes:
        url = f"{self._base_url}/{path.lstrip('/')}"
        last_err: Optional[Exception] = None

        for attempt in range(self._max_retries):
            try:
                self._rl.wait()
                resp = self._session.get(url, params=params, timeout=self._timeout)
                if resp.status_code == 429:
                    raise RateLimitError(f"{self.name}: rate limited ({url})")
                resp.raise_for_status()
                return resp.content
            except (requests.RequestException, RateLimitError) as e:
                last_err = e
                logger.warning(
                    "%s: request failed (attempt %d/%d): %s",
                    self.name, attempt + 1, self._max_retries, e,
                )
                if attempt + 1 < self._max_retries:
                    backoff_sleep(attempt)

        logger.error("%s: giving up on %s", self.name, url)
        raise DataSourceError(f"{self.name} failed after retries: {last_err}") from last_err
