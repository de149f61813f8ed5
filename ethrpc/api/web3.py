"""web3_* methods."""
from ..codec import HexData, data_to_hex, hex_to_bytes
from ..models.result import RPCResult
from .base import ApiModule
from .methods import RPCMethods


class Web3Api(ApiModule):
    """Client information methods (web3_* namespace)."""

    namespace = "web3"

    async def client_version(self) -> RPCResult[str]:
        """Current client version string."""
        return await self._call(RPCMethods.web3_client_version)

    async def sha3(self, data: HexData) -> RPCResult[bytes]:
        """Keccak-256 (not the standardized SHA3-256) of the given data."""
        self._require("sha3", data=data)
        return await self._call(RPCMethods.web3_sha3, [data_to_hex(data)], hex_to_bytes)
