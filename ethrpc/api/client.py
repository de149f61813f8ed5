"""The Ethereum client facade."""
import logging
from typing import Any, Optional

from ..config import ClientConfig, config
from ..errors import LastError
from ..providers import endpoint
from ..providers.rpc_client import RPCClient
from ..transports import HTTPAdapter, WebSocketAdapter, create_adapter
from .eth import EthApi
from .net import NetApi
from .shh import ShhApi
from .web3 import Web3Api

logger = logging.getLogger(__name__)


class Ethereum:
    """
    JSON-RPC client for an Ethereum node.

    API methods live on the ``web3``, ``net``, ``eth`` and ``shh`` namespaces
    and return ``RPCResult``. The most recent node error is also mirrored in
    ``last_error``.
    """

    def __init__(
        self,
        adapter: Any,
        uri: Optional[str] = None,
        log_rpc_errors: Optional[bool] = None,
    ) -> None:
        self.scheme = config.ws_scheme if isinstance(adapter, WebSocketAdapter) else config.http_scheme
        self.rpc_client = RPCClient(adapter, uri, log_rpc_errors=log_rpc_errors)
        self.web3 = Web3Api(self.rpc_client)
        self.net = NetApi(self.rpc_client)
        self.eth = EthApi(self.rpc_client)
        self.shh = ShhApi(self.rpc_client)

    @classmethod
    def http(
        cls,
        host: Optional[str] = None,
        port: Optional[int] = None,
        *,
        timeout: Optional[float] = None,
        pooled: Optional[bool] = None,
        secure: bool = False,
    ) -> "Ethereum":
        """Client over HTTP POST to ``host:port``."""
        scheme = "https" if secure else config.http_scheme
        uri = endpoint.from_parameters(host or config.host, port or config.port, scheme)
        return cls(HTTPAdapter(timeout=timeout, pooled=pooled), uri)

    @classmethod
    def websocket(
        cls,
        host: Optional[str] = None,
        port: Optional[int] = None,
        *,
        timeout: Optional[float] = None,
        secure: bool = False,
    ) -> "Ethereum":
        """Client over a shared WebSocket to ``host:port``."""
        scheme = "wss" if secure else config.ws_scheme
        uri = endpoint.from_parameters(host or config.host, port or config.port, scheme)
        return cls(WebSocketAdapter(timeout=timeout), uri)

    @classmethod
    def from_config(cls, settings: Optional[ClientConfig] = None) -> "Ethereum":
        """Client built from ``ClientConfig`` (environment by default)."""
        settings = settings or config
        if settings.transport == "ws":
            options = {"open_timeout": settings.ws_open_timeout}
        else:
            options = {"pooled": settings.http_pooled}
        adapter = create_adapter(settings.scheme, timeout=settings.request_timeout, **options)

        uri = endpoint.from_string(settings.endpoint_url, settings.scheme)
        return cls(adapter, uri, log_rpc_errors=settings.log_rpc_errors)

    @property
    def uri(self) -> Optional[str]:
        return self.rpc_client.endpoint

    @property
    def last_error(self) -> LastError:
        return self.rpc_client.last_error

    def connect_string(self, uri: str) -> None:
        """Connect using a string such as ``http://thehost.com:1234``."""
        self.rpc_client.connect(endpoint.from_string(uri, self.scheme))
        logger.info(f"Using endpoint {self.uri}")

    def connect_parameters(self, host: str, port: Optional[int] = None) -> None:
        """Connect by host and optional port (default 8545)."""
        self.rpc_client.connect(endpoint.from_parameters(host, port, self.scheme))
        logger.info(f"Using endpoint {self.uri}")

    async def close(self) -> None:
        await self.rpc_client.close()

    async def __aenter__(self) -> "Ethereum":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
