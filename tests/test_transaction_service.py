import json
import unittest

from txatlas.adapters.chain.static_chain_adapter import StaticChainAdapter
from txatlas.core.enums import Direction
from txatlas.core.errors import DataSourceError, DecodeError, UnknownCoinError
from txatlas.normalizers.aion_normalizer import AionNormalizer
from txatlas.normalizers.ontology_normalizer import OntologyNormalizer
from txatlas.ports.chain_data_port import FetchClient
from txatlas.services.platform_registry import build_platforms
from txatlas.services.transaction_service import TransactionService, infer_direction


ALICE = "AUyL4TZ1zFEcSKDJrjFnD7vsq5iFZMZqT7"
BOB = "AQ9kzzHNLCcyrPwJuVMrSPgGzqmuQNVwMF"


def _page(*txs) -> str:
    return json.dumps({"Result": {"TxnList": list(txs)}})


def _tx(txn_hash, transfers, confirm_flag=1):
    return {
        "TxnHash": txn_hash,
        "ConfirmFlag": confirm_flag,
        "Fee": "0.010000000",
        "TxnTime": 1556952450,
        "Height": 10,
        "TransferList": [
            {"FromAddress": f, "ToAddress": t, "Amount": a, "AssetName": n}
            for f, t, a, n in transfers
        ],
    }


class _FailingClient(FetchClient):
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def get_txs_of_address(self, address, asset=None):
        raise self.exc


class TransactionServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = OntologyNormalizer()

    def _service(self, pages) -> TransactionService:
        client = StaticChainAdapter(self.engine.decode_page, pages=pages)
        return TransactionService(client=client, engine=self.engine)

    def test_page_is_normalized_in_order_with_direction(self) -> None:
        page = _page(
            _tx("0x1", [(ALICE, BOB, "1", "ont")]),
            _tx("0x2", [(BOB, ALICE, "2", "ont")]),
            _tx("0x3", [(ALICE, BOB, "1", "ong")]),
            _tx("0x4", [(ALICE, BOB, "oops", "ont")]),
            _tx("0x5", [(ALICE, ALICE, "3", "ont")]),
        )
        svc = self._service({ALICE: page})

        txs = svc.get_txs(ALICE, "ont")

        self.assertEqual([t.id for t in txs], ["0x1", "0x2", "0x5"])
        self.assertEqual(
            [t.direction for t in txs],
            [Direction.OUTGOING, Direction.INCOMING, Direction.SELF],
        )

    def test_unknown_address_yields_empty_history(self) -> None:
        self.assertEqual(self._service({}).get_txs(ALICE), [])

    def test_fetch_errors_propagate_unchanged(self) -> None:
        err = DataSourceError("explorer down")
        svc = TransactionService(client=_FailingClient(err), engine=self.engine)
        with self.assertRaises(DataSourceError) as ctx:
            svc.get_txs(ALICE)
        self.assertIs(ctx.exception, err)

    def test_decode_errors_propagate(self) -> None:
        svc = self._service({ALICE: "not json"})
        with self.assertRaises(DecodeError):
            svc.get_txs(ALICE)

    def test_many_addresses(self) -> None:
        svc = self._service({
            ALICE: _page(_tx("0x1", [(ALICE, BOB, "1", "ont")])),
            BOB: _page(_tx("0x2", [(ALICE, BOB, "2", "ont")]), _tx("0x3", [(BOB, ALICE, "5", "ont")])),
        })

        result = svc.get_txs_for_addresses([BOB, ALICE, BOB], "ont", concurrency=2)

        self.assertEqual(list(result), [BOB, ALICE])
        self.assertEqual([t.id for t in result[BOB]], ["0x2", "0x3"])
        self.assertEqual(result[ALICE][0].direction, Direction.OUTGOING)

    def test_many_addresses_surfaces_first_error(self) -> None:
        svc = TransactionService(client=_FailingClient(DataSourceError("down")), engine=self.engine)
        with self.assertRaises(DataSourceError):
            svc.get_txs_for_addresses([ALICE, BOB])

    def test_concurrency_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            self._service({}).get_txs_for_addresses([ALICE], concurrency=0)


class DirectionTests(unittest.TestCase):
    def test_hex_prefix_and_case_are_ignored(self) -> None:
        engine = AionNormalizer()
        page = '{"content": [{"transactionHash": "h", "fromAddr": "ab", "toAddr": "cd", "blockNumber": 1}]}'
        tx = engine.normalize(engine.decode_page(page)[0])[0]

        self.assertEqual(infer_direction(tx, "AB"), Direction.OUTGOING)
        self.assertEqual(infer_direction(tx, "0xCD"), Direction.INCOMING)
        self.assertIsNone(infer_direction(tx, "ef"))
        self.assertIsNone(infer_direction(tx, ""))


class PlatformRegistryTests(unittest.TestCase):
    def test_known_platforms(self) -> None:
        registry = build_platforms()
        self.assertEqual(registry.handles(), ["aion", "ont"])
        self.assertEqual(registry.get("ONT").coin.index, 1024)
        self.assertIsInstance(registry.get("aion").engine, AionNormalizer)

    def test_unknown_platform(self) -> None:
        with self.assertRaises(UnknownCoinError):
            build_platforms().get("btc")

    def test_client_override(self) -> None:
        client = _FailingClient(DataSourceError("x"))
        registry = build_platforms(client_overrides={"ont": lambda: client})
        self.assertIs(registry.get("ont").client_factory(), client)


if __name__ == "__main__":
    unittest.main()
