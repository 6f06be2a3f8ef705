from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from txatlas.adapters.chain.static_chain_adapter import StaticChainAdapter
from txatlas.config import settings
from txatlas.core.errors import AtlasError, UnknownCoinError
from txatlas.io.output_writer import dumps_txs, write_txs_json
from txatlas.io.schemas import coin_to_dict
from txatlas.logging_setup import configure_logging, get_logger
from txatlas.services.platform_registry import PlatformRegistry, build_platforms
from txatlas.services.transaction_service import TransactionService

logger = get_logger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="txatlas", description="Canonical transaction history across chains")
    p.add_argument("--coin", help="Chain handle, e.g. ont or aion")
    p.add_argument("--address", help="Address whose history to fetch")
    p.add_argument("--asset", help="Asset within the chain (e.g. ont or ong); defaults to the chain's coin")
    p.add_argument("--input", help="Normalize a saved raw explorer page instead of fetching")
    p.add_argument("--out", help="Write JSON here instead of stdout")
    p.add_argument("--list-coins", action="store_true", help="Print supported coins and exit")
    p.add_argument("--log-level", default=None, help="Logging level (default: TXATLAS_LOG_LEVEL or INFO)")
    return p


def main(argv: Optional[List[str]] = None, registry: Optional[PlatformRegistry] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.log_level or settings.LOG_LEVEL)

    registry = registry or build_platforms()

    if args.list_coins:
        coins = [coin_to_dict(registry.get(h).coin) for h in registry.handles()]
        print(json.dumps(coins, indent=2))
        return 0

    if not args.coin:
        print("Missing --coin", file=sys.stderr)
        return 2
    if not args.address and not args.input:
        print("Missing --address (or --input)", file=sys.stderr)
        return 2

    try:
        platform = registry.get(args.coin)
    except UnknownCoinError as e:
        print(str(e), file=sys.stderr)
        return 2

    if args.input:
        try:
            raw = Path(args.input).read_bytes()
        except OSError as e:
            print(f"Cannot read --input: {e}", file=sys.stderr)
            return 2
        client = StaticChainAdapter(platform.engine.decode_page, default_page=raw)
    else:
        client = platform.client_factory()

    svc = TransactionService(client=client, engine=platform.engine)
    try:
        txs = svc.get_txs(args.address or "", args.asset)
    except AtlasError as exc:
        logger.error("%s: %s", exc.__class__.__name__, exc)
        return 1

    if args.out:
        path = write_txs_json(txs, args.out)
        print(f"Wrote: {path}")
    else:
        print(dumps_txs(txs))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
