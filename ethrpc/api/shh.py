"""shh_* (whisper) methods."""
from typing import Optional

from ..codec import HexData, data_list_to_hex, data_to_hex, int_to_hex, remove_null
from ..models.result import RPCResult
from .base import ApiModule
from .methods import RPCMethods


class ShhApi(ApiModule):
    """Whisper methods (shh_* namespace)."""

    namespace = "shh"

    async def version(self) -> RPCResult[str]:
        """Current whisper protocol version."""
        return await self._call(RPCMethods.shh_version)

    async def post(
        self,
        topics: list[HexData],
        payload: HexData,
        priority: int,
        ttl: int,
        to: Optional[HexData] = None,
        from_address: Optional[HexData] = None,
    ) -> RPCResult[bool]:
        """
        Send a whisper message.

        Args:
            topics: Topics for the receiver to identify messages
            payload: Message payload
            priority: Message priority
            ttl: Time to live in seconds
            to: Receiver identity; when set the message is encrypted for it
            from_address: Sender identity

        Returns:
            True if the message was sent
        """
        self._require("post", topics=topics, payload=payload, priority=priority, ttl=ttl)
        message = remove_null(
            {
                "from": data_to_hex(from_address) if from_address is not None else None,
                "to": data_to_hex(to) if to is not None else None,
                "topics": data_list_to_hex(topics),
                "payload": data_to_hex(payload),
                "priority": int_to_hex(priority),
                "ttl": int_to_hex(ttl),
            }
        )
        return await self._call(RPCMethods.shh_post, [message])
