"""Shared plumbing for the API namespaces."""
import logging
from typing import Any, Callable, Optional, Union

from ..codec import HexData, data_list_to_hex, data_to_hex
from ..default_block import BlockTag, DefaultBlock
from ..errors import ArgumentError
from ..models.result import RPCResult
from ..providers.rpc_client import RESULT_KEY, Params, RPCClient

logger = logging.getLogger(__name__)

BlockParam = Union[DefaultBlock, BlockTag, int, str]


class ApiModule:
    """Base class for one RPC namespace bound to a client."""

    namespace = ""

    def __init__(self, client: RPCClient) -> None:
        self._client = client

    @property
    def client(self) -> RPCClient:
        return self._client

    async def _call(
        self,
        method: str,
        params: Params = None,
        decode: Optional[Callable[[Any], Any]] = None,
        null_value: Any = None,
    ) -> RPCResult:
        """
        Issue one request and wrap the outcome.

        A ``null`` result yields ``null_value``; otherwise ``decode`` (if
        given) is applied to the result. A node error is recorded as the
        client's last error and returned in ``RPCResult.error``.
        """
        response = await self._client.request(method, params)

        if RESULT_KEY in response:
            result = response[RESULT_KEY]
            if result is None:
                return RPCResult(value=null_value)
            return RPCResult(value=decode(result) if decode else result)

        info = self._client.record_error(method, response)
        return RPCResult(error=info)

    def _require(self, operation: str, **arguments: Any) -> None:
        for name, value in arguments.items():
            if value is None:
                raise ArgumentError(f"{self.namespace}.{operation} - {name} is required")

    @staticmethod
    def _block(block: BlockParam) -> str:
        return DefaultBlock.coerce(block).render()

    @staticmethod
    def _data_or_list(value: Union[HexData, list[HexData]]) -> Union[str, list[str]]:
        if isinstance(value, (list, tuple)):
            return data_list_to_hex(value)
        return data_to_hex(value)

    @staticmethod
    def _topics(topics: list[Any]) -> list[Any]:
        # Topic filters are positional; None is a wildcard and nested lists mean OR
        encoded = []
        for topic in topics:
            if topic is None:
                encoded.append(None)
            elif isinstance(topic, (list, tuple)):
                encoded.append(data_list_to_hex(topic))
            else:
                encoded.append(data_to_hex(topic))
        return encoded
