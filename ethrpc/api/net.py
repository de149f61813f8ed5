"""net_* methods."""
from ..codec import hex_to_int
from ..models.result import RPCResult
from .base import ApiModule
from .methods import RPCMethods


class NetApi(ApiModule):
    """Network methods (net_* namespace)."""

    namespace = "net"

    async def version(self) -> RPCResult[str]:
        """Network id."""
        return await self._call(RPCMethods.net_version)

    async def listening(self) -> RPCResult[bool]:
        """True when the node is listening for peers."""
        return await self._call(RPCMethods.net_listening)

    async def peer_count(self) -> RPCResult[int]:
        """Number of connected peers."""
        return await self._call(RPCMethods.net_peer_count, decode=hex_to_int)
