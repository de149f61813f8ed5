"""Pytest fixtures shared by the test suite."""
import json
from typing import Any

import pytest

from ethrpc.api import Ethereum
from ethrpc.providers.rpc_client import RPCClient

ENDPOINT = "http://localhost:8545"


class FakeAdapter:
    """
    Scripted transport.

    Each queued reply is either a dict (sent back with the request id filled
    in unless it already carries an ``id`` key), a raw string, or an
    exception instance to raise.
    """

    def __init__(self) -> None:
        self.replies: list[Any] = []
        self.requests: list[dict[str, Any]] = []
        self.endpoints: list[str] = []
        self.closed = False

    def queue(self, *replies: Any) -> None:
        self.replies.extend(replies)

    def queue_result(self, result: Any) -> None:
        self.replies.append({"jsonrpc": "2.0", "result": result})

    def queue_error(self, code: int, message: str) -> None:
        self.replies.append({"jsonrpc": "2.0", "error": {"code": code, "message": message}})

    @property
    def last_request(self) -> dict[str, Any]:
        return self.requests[-1]

    async def exchange(self, endpoint: str, request: str) -> str:
        envelope = json.loads(request)
        self.requests.append(envelope)
        self.endpoints.append(endpoint)

        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, str):
            return reply
        reply = dict(reply)
        reply.setdefault("id", envelope["id"])
        return json.dumps(reply)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def adapter() -> FakeAdapter:
    return FakeAdapter()


@pytest.fixture
def rpc_client(adapter: FakeAdapter) -> RPCClient:
    return RPCClient(adapter, ENDPOINT)


@pytest.fixture
def ethereum(adapter: FakeAdapter) -> Ethereum:
    return Ethereum(adapter, ENDPOINT)


@pytest.fixture
def raw_transaction() -> dict[str, Any]:
    return {
        "hash": "0xc6ef2fc5426d6ad6fd9e2a26abeab0aa2411b7ab17f30a99d3cb96aed1d1055b",
        "nonce": "0x15",
        "blockHash": "0xbeab0aa2411b7ab17f30a99d3cb9c6ef2fc5426d6ad6fd9e2a26a6aed1d1055b",
        "blockNumber": "0x15df",
        "transactionIndex": "0x1",
        "from": "0x407d73d8a49eeb85d32cf465507dd71d507100c1",
        "to": "0x85f43d8a49eeb85d32cf465507dd71d507100c1d",
        "value": "0x7f110",
        "gas": "0x7f110",
        "gasPrice": "0x09184e72a000",
        "input": "0x603880600c6000396000f300603880600c6000396000f3603880600c6000396000f360",
    }


@pytest.fixture
def raw_block(raw_transaction: dict[str, Any]) -> dict[str, Any]:
    return {
        "number": "0x1b4",
        "hash": "0xdc0818cf78f21a8e70579cb46a43643f78291264dda342ae31049421c82d21ae",
        "parentHash": "0xe99e022112df268087ea7eafaf4790497fd21dbeeb6bd7a1721df161a6657a54",
        "nonce": "0x689056015818adbe",
        "sha3Uncles": "0x1dcc4de8dec75d7aab85b567b6ccd41ad312451b948a7413f0a142fd40d49347",
        "logsBloom": "0x" + "00" * 256,
        "transactionsRoot": "0x56e81f171bcc55a6ff8345e692c0f86e5b48e01b996cadc001622fb5e363b421",
        "stateRoot": "0xddc8b0234c2e0cad087c8b389aa7ef01f7d79b2570bccb77ce48648aa61c904d",
        "receiptsRoot": "0x56e81f171bcc55a6ff8345e692c0f86e5b48e01b996cadc001622fb5e363b421",
        "miner": "0xbb7b8287f3f0a933474a79eae42cbca977791171",
        "difficulty": "0x4ea3f27bc",
        "totalDifficulty": "0x78ed983323d",
        "extraData": "0x476574682f4c5649562f76312e302e302f6c696e75782f676f312e342e32",
        "size": "0x220",
        "gasLimit": "0x1388",
        "gasUsed": "0x0",
        "timestamp": "0x55ba467c",
        "transactions": [raw_transaction],
        "uncles": [],
    }
