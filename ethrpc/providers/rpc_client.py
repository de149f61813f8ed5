"""JSON-RPC 2.0 client for Ethereum nodes."""
import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from ..config import config
from ..errors import (
    ArgumentError,
    ConfigurationError,
    LastError,
    ProtocolError,
    RPCErrorInfo,
    TransportError,
    describe_error_code,
)

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"
RESULT_KEY = "result"
ERROR_KEY = "error"

# Largest integer a JSON peer is guaranteed to represent exactly
MAX_REQUEST_ID = 2**53 - 1

Params = Union[Sequence[Any], Mapping[str, Any], None]


class RPCClient:
    """
    Async JSON-RPC 2.0 client.

    Owns one transport adapter for its lifetime, allocates request ids and
    validates every reply envelope. Node error objects are returned to the
    caller, who records them with ``record_error``.
    """

    def __init__(
        self,
        adapter: Any,
        endpoint: Optional[str] = None,
        log_rpc_errors: Optional[bool] = None,
    ) -> None:
        self._adapter = adapter
        self.endpoint = endpoint
        self.log_rpc_errors = config.log_rpc_errors if log_rpc_errors is None else log_rpc_errors
        self.last_error = LastError()
        self._request_id = 0

    @property
    def adapter(self) -> Any:
        return self._adapter

    @property
    def id(self) -> int:
        """Id of the most recently issued request (0 before the first)."""
        return self._request_id

    def connect(self, endpoint: str) -> None:
        """Point the client at a validated endpoint URI."""
        self.endpoint = endpoint

    def _next_id(self) -> int:
        if self._request_id >= MAX_REQUEST_ID:
            raise ConfigurationError("Request id space exhausted")
        self._request_id += 1
        return self._request_id

    async def request(self, method: str, params: Params = None) -> dict[str, Any]:
        """
        Send a request and return the validated reply envelope.

        Args:
            method: RPC method name
            params: Positional list, named-field map, or None for no params

        Returns:
            Reply envelope holding either ``result`` or ``error``

        Raises:
            ArgumentError: If the method or params are malformed
            ConfigurationError: If no endpoint is set
            TransportError: If the exchange fails or the body is not JSON
            ProtocolError: If the reply envelope is invalid or the id mismatches
        """
        if not isinstance(method, str) or not method:
            raise ArgumentError("RPC method must be a non-empty string")

        if params is None:
            wire_params: Any = []
        elif isinstance(params, Mapping):
            wire_params = dict(params)
        elif isinstance(params, Sequence) and not isinstance(params, (str, bytes)):
            wire_params = list(params)
        else:
            raise ArgumentError(f"RPC params must be a list or a map, got {type(params).__name__}")

        if not self.endpoint:
            raise ConfigurationError("No endpoint configured for the RPC client")

        request_id = self._next_id()
        payload = {
            "jsonrpc": JSONRPC_VERSION,
            "method": method,
            "params": wire_params,
            "id": request_id,
        }

        logger.debug(f"-> {method} id={request_id}")
        reply_text = await self._adapter.exchange(self.endpoint, json.dumps(payload))

        try:
            data = json.loads(reply_text)
        except (TypeError, json.JSONDecodeError) as e:
            raise TransportError(f"Malformed reply body for {method}: {e}") from e

        self._validate(data, request_id)
        logger.debug(f"<- {method} id={request_id}")
        return data

    @staticmethod
    def _validate(data: Any, request_id: int) -> None:
        if not isinstance(data, dict):
            raise ProtocolError(f"Reply is not a JSON object: {type(data).__name__}")

        has_result = RESULT_KEY in data
        has_error = ERROR_KEY in data
        if has_result == has_error:
            raise ProtocolError("Reply must carry exactly one of result or error")

        if has_error and not isinstance(data[ERROR_KEY], dict):
            raise ProtocolError("Reply error member is not an object")

        if data.get("id") != request_id:
            raise ProtocolError(
                f"Reply id {data.get('id')!r} does not match request id {request_id}"
            )

    def record_error(self, method: str, response: dict[str, Any]) -> RPCErrorInfo:
        """Store the error object of ``response`` as the last error."""
        error = response.get(ERROR_KEY) or {}
        code = error.get("code")
        info = RPCErrorInfo(
            code=code if isinstance(code, int) and not isinstance(code, bool) else None,
            message=str(error.get("message", "")),
            data=error.get("data"),
            request_id=response.get("id"),
            method=method,
        )
        self.last_error.update(info)

        level = logging.WARNING if self.log_rpc_errors else logging.DEBUG
        logger.log(
            level,
            f"ERROR::{method} - {info.code} <{describe_error_code(info.code)}> "
            f"{info.message} (id {info.request_id})",
        )
        return info

    async def close(self) -> None:
        """Release the transport adapter."""
        await self._adapter.close()

    async def __aenter__(self) -> "RPCClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
