"""Tests for request/response correlation in the RPC client."""
import json
import logging

import pytest

from ethrpc.errors import (
    ArgumentError,
    ConfigurationError,
    ProtocolError,
    TransportError,
)
from ethrpc.providers import rpc_client as rpc_client_module
from ethrpc.providers.rpc_client import RPCClient


class TestEnvelope:
    """Request envelopes and id allocation."""

    @pytest.mark.asyncio
    async def test_envelope_shape(self, rpc_client, adapter):
        adapter.queue_result("Geth/v1.0")

        response = await rpc_client.request("web3_clientVersion")

        assert response["result"] == "Geth/v1.0"
        assert adapter.last_request == {
            "jsonrpc": "2.0",
            "method": "web3_clientVersion",
            "params": [],
            "id": 1,
        }

    @pytest.mark.asyncio
    async def test_ids_increase_by_one(self, rpc_client, adapter):
        adapter.queue({"result": "0x1"}, {"result": "0x2"}, {"result": "0x3"})

        for _ in range(3):
            await rpc_client.request("eth_blockNumber")

        assert [r["id"] for r in adapter.requests] == [1, 2, 3]
        assert rpc_client.id == 3

    @pytest.mark.asyncio
    async def test_named_params_are_sent_as_object(self, rpc_client, adapter):
        adapter.queue({"result": True})

        await rpc_client.request("custom_method", {"a": 1})

        assert adapter.last_request["params"] == {"a": 1}

    @pytest.mark.asyncio
    async def test_bad_arguments(self, rpc_client):
        with pytest.raises(ArgumentError):
            await rpc_client.request("")
        with pytest.raises(ArgumentError):
            await rpc_client.request("eth_blockNumber", "0x1")

    @pytest.mark.asyncio
    async def test_no_endpoint(self, adapter):
        client = RPCClient(adapter)
        with pytest.raises(ConfigurationError):
            await client.request("eth_blockNumber")
        assert adapter.requests == []

    @pytest.mark.asyncio
    async def test_id_space_exhausted(self, rpc_client, monkeypatch):
        monkeypatch.setattr(rpc_client_module, "MAX_REQUEST_ID", 1)
        rpc_client._request_id = 1
        with pytest.raises(ConfigurationError):
            await rpc_client.request("eth_blockNumber")


class TestReplyValidation:
    """Validation of reply envelopes."""

    @pytest.mark.asyncio
    async def test_error_reply_is_returned(self, rpc_client, adapter):
        adapter.queue_error(-32601, "Method not found")

        response = await rpc_client.request("eth_nope")

        assert response["error"]["code"] == -32601
        # Recording is the caller's decision
        assert not rpc_client.last_error

    @pytest.mark.asyncio
    async def test_id_mismatch(self, rpc_client, adapter):
        adapter.queue({"result": "0x1", "id": 99})

        with pytest.raises(ProtocolError):
            await rpc_client.request("eth_blockNumber")
        assert not rpc_client.last_error

    @pytest.mark.asyncio
    async def test_reply_for_next_id(self, rpc_client, adapter):
        adapter.queue({"result": "0x1"}, {"error": {"code": -1, "message": "late"}, "id": 3})

        await rpc_client.request("eth_blockNumber")
        with pytest.raises(ProtocolError):
            await rpc_client.request("eth_getBalance", ["0x00", "latest"])
        assert not rpc_client.last_error

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "reply",
        [
            json.dumps([1, 2]),
            json.dumps({"jsonrpc": "2.0", "id": 1}),
            json.dumps({"jsonrpc": "2.0", "id": 1, "result": 1, "error": {"code": 1}}),
            json.dumps({"jsonrpc": "2.0", "id": 1, "error": "boom"}),
        ],
    )
    async def test_malformed_envelopes(self, rpc_client, adapter, reply):
        adapter.queue(reply)
        with pytest.raises(ProtocolError):
            await rpc_client.request("eth_blockNumber")

    @pytest.mark.asyncio
    async def test_non_json_body(self, rpc_client, adapter):
        adapter.queue("<html>bad gateway</html>")
        with pytest.raises(TransportError):
            await rpc_client.request("eth_blockNumber")

    @pytest.mark.asyncio
    async def test_transport_errors_propagate(self, rpc_client, adapter):
        adapter.queue(TransportError("Connection refused"))
        with pytest.raises(TransportError, match="refused"):
            await rpc_client.request("eth_blockNumber")


class TestRecordError:
    """Last error bookkeeping."""

    def test_record_error_updates_last_error(self, rpc_client):
        info = rpc_client.record_error(
            "eth_getBalance",
            {"id": 7, "error": {"code": -32602, "message": "invalid argument", "data": "x"}},
        )

        assert info.code == -32602
        assert rpc_client.last_error.code == -32602
        assert rpc_client.last_error.message == "invalid argument"
        assert rpc_client.last_error.request_id == 7
        assert rpc_client.last_error.info.data == "x"
        assert "Invalid params" in str(rpc_client.last_error)

    def test_later_error_overwrites(self, rpc_client):
        rpc_client.record_error("a", {"id": 1, "error": {"code": -1, "message": "first"}})
        rpc_client.record_error("b", {"id": 2, "error": {"code": -2, "message": "second"}})

        assert rpc_client.last_error.message == "second"
        assert rpc_client.last_error.request_id == 2

    def test_logged_when_enabled(self, adapter, caplog):
        client = RPCClient(adapter, "http://localhost:8545", log_rpc_errors=True)
        with caplog.at_level(logging.WARNING, logger="ethrpc.providers.rpc_client"):
            client.record_error("eth_call", {"id": 3, "error": {"code": -32000, "message": "reverted"}})

        assert "ERROR::eth_call" in caplog.text
        assert "reverted" in caplog.text

    def test_not_logged_by_default(self, adapter, caplog):
        client = RPCClient(adapter, "http://localhost:8545", log_rpc_errors=False)
        with caplog.at_level(logging.WARNING, logger="ethrpc.providers.rpc_client"):
            client.record_error("eth_call", {"id": 3, "error": {"code": -32000, "message": "reverted"}})

        assert caplog.text == ""
