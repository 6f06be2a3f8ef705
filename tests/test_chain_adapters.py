import unittest
from unittest import mock

import requests

from txatlas.adapters.chain.aion_chain_adapter import AionChainAdapter
from txatlas.adapters.chain.ontology_chain_adapter import OntologyChainAdapter
from txatlas.core.errors import DataSourceError, DecodeError


def _response(status: int = 200, body: bytes = b"{}") -> mock.Mock:
    resp = mock.Mock()
    resp.status_code = status
    resp.content = body
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    else:
        resp.raise_for_status.return_value = None
    return resp


def _adapter(cls, session, **kwargs):
    return cls(
        base_url="https://explorer.test/api/",
        session=session,
        requests_per_sec=1000.0,
        page_size=25,
        **kwargs,
    )


@mock.patch("txatlas.adapters.chain.http_chain_adapter.backoff_sleep")
class OntologyChainAdapterTests(unittest.TestCase):
    def test_requests_asset_history(self, _sleep) -> None:
        session = mock.Mock()
        session.get.return_value = _response(body=b'{"Result": {"TxnList": [{"TxnHash": "h"}]}}')
        adapter = _adapter(OntologyChainAdapter, session)

        txs = adapter.get_txs_of_address("AUyL4TZ1zFEcSKDJrjFnD7vsq5iFZMZqT7", "ONG")

        self.assertEqual([t.txn_hash for t in txs], ["h"])
        url = session.get.call_args[0][0]
        self.assertEqual(url, "https://explorer.test/api/address/AUyL4TZ1zFEcSKDJrjFnD7vsq5iFZMZqT7/ong/25/1")

    def test_defaults_to_ont(self, _sleep) -> None:
        session = mock.Mock()
        session.get.return_value = _response()
        _adapter(OntologyChainAdapter, session).get_txs_of_address("A")
        self.assertTrue(session.get.call_args[0][0].endswith("/address/A/ont/25/1"))

    def test_retries_then_succeeds(self, sleep) -> None:
        session = mock.Mock()
        session.get.side_effect = [
            requests.ConnectionError("reset"),
            _response(status=503),
            _response(body=b'{"Result": {"TxnList": []}}'),
        ]
        adapter = _adapter(OntologyChainAdapter, session, max_retries=3)

        self.assertEqual(adapter.get_txs_of_address("A"), [])
        self.assertEqual(session.get.call_count, 3)
        self.assertEqual(sleep.call_count, 2)

    def test_gives_up_with_data_source_error(self, _sleep) -> None:
        session = mock.Mock()
        session.get.side_effect = requests.Timeout("slow")
        adapter = _adapter(OntologyChainAdapter, session, max_retries=2)

        with self.assertRaises(DataSourceError) as ctx:
            adapter.get_txs_of_address("A")
        self.assertIsInstance(ctx.exception.__cause__, requests.Timeout)
        self.assertEqual(session.get.call_count, 2)

    def test_rate_limit_status_is_retried(self, _sleep) -> None:
        session = mock.Mock()
        session.get.side_effect = [_response(status=429), _response()]
        adapter = _adapter(OntologyChainAdapter, session, max_retries=2)
        self.assertEqual(adapter.get_txs_of_address("A"), [])

    def test_decode_error_is_not_retried(self, _sleep) -> None:
        session = mock.Mock()
        session.get.return_value = _response(body=b"not json")
        adapter = _adapter(OntologyChainAdapter, session, max_retries=3)

        with self.assertRaises(DecodeError):
            adapter.get_txs_of_address("A")
        self.assertEqual(session.get.call_count, 1)


@mock.patch("txatlas.adapters.chain.http_chain_adapter.backoff_sleep")
class AionChainAdapterTests(unittest.TestCase):
    def test_query_parameters(self, _sleep) -> None:
        session = mock.Mock()
        session.get.return_value = _response(body=b'{"content": [{"transactionHash": "h", "value": 1.5}]}')
        adapter = _adapter(AionChainAdapter, session, timeout_sec=7)

        txs = adapter.get_txs_of_address("a0d6")

        self.assertEqual(txs[0].transaction_hash, "h")
        args, kwargs = session.get.call_args
        self.assertEqual(args[0], "https://explorer.test/api/getTransactionsByAddress")
        self.assertEqual(kwargs["params"], {"accountAddress": "a0d6", "size": "25"})
        self.assertEqual(kwargs["timeout"], 7)


if __name__ == "__main__":
    unittest.main()
