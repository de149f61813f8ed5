"""Tests for the HTTP transport adapter."""
import json

import httpx
import pytest

from ethrpc.errors import ConfigurationError, TransportError
from ethrpc.transports import ADAPTERS, HTTPAdapter, WebSocketAdapter, create_adapter

ENDPOINT = "http://localhost:8545"


def _echo_handler(request: httpx.Request) -> httpx.Response:
    envelope = json.loads(request.content)
    return httpx.Response(200, json={"jsonrpc": "2.0", "id": envelope["id"], "result": "0x1"})


class TestHTTPAdapter:
    """POST exchanges through httpx."""

    @pytest.mark.asyncio
    async def test_posts_json_body(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return _echo_handler(request)

        adapter = HTTPAdapter(transport=httpx.MockTransport(handler))
        body = await adapter.exchange(ENDPOINT, json.dumps({"id": 4, "method": "eth_blockNumber"}))

        assert json.loads(body)["result"] == "0x1"
        assert seen[0].method == "POST"
        assert seen[0].headers["content-type"] == "application/json"
        assert json.loads(seen[0].content)["id"] == 4

    @pytest.mark.asyncio
    async def test_http_status_error(self):
        adapter = HTTPAdapter(transport=httpx.MockTransport(lambda r: httpx.Response(503, text="busy")))

        with pytest.raises(TransportError) as excinfo:
            await adapter.exchange(ENDPOINT, json.dumps({"id": 1}))

        assert excinfo.value.status_code == 503

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        adapter = HTTPAdapter(timeout=0.1, transport=httpx.MockTransport(handler))

        with pytest.raises(TransportError, match="timeout"):
            await adapter.exchange(ENDPOINT, json.dumps({"id": 1}))

    @pytest.mark.asyncio
    async def test_connection_refused(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        adapter = HTTPAdapter(transport=httpx.MockTransport(handler))

        with pytest.raises(TransportError):
            await adapter.exchange(ENDPOINT, json.dumps({"id": 1}))

    @pytest.mark.asyncio
    async def test_pooled_client_is_reused_until_closed(self):
        adapter = HTTPAdapter(pooled=True, transport=httpx.MockTransport(_echo_handler))

        await adapter.exchange(ENDPOINT, json.dumps({"id": 1}))
        client = adapter._client
        await adapter.exchange(ENDPOINT, json.dumps({"id": 2}))

        assert adapter._client is client
        await adapter.close()
        assert adapter._client is None


class TestAdapterRegistry:
    """Scheme to adapter lookup."""

    def test_schemes(self):
        assert ADAPTERS["https"] is HTTPAdapter
        assert isinstance(create_adapter("ws"), WebSocketAdapter)

    def test_unknown_scheme(self):
        with pytest.raises(ConfigurationError):
            create_adapter("ftp")
