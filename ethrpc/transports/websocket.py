"""WebSocket transport adapter."""
import asyncio
import json
import logging
from typing import Any, Callable, Optional

import websockets
from websockets.exceptions import ConnectionClosed, WebSocketException

from ..config import config
from ..errors import ProtocolError, TransportError

logger = logging.getLogger(__name__)


class WebSocketAdapter:
    """
    Sends each envelope as one text frame over a shared socket.

    The socket is opened on first use. A reader task routes every reply frame
    to the exchange waiting for its ``id``, so concurrent calls never see each
    other's replies. When the socket fails or closes, every exchange still
    waiting fails with ``TransportError``; the next exchange reconnects.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        open_timeout: Optional[float] = None,
        connect: Optional[Callable[..., Any]] = None,
    ) -> None:
        self.timeout = timeout if timeout is not None else config.request_timeout
        self.open_timeout = open_timeout if open_timeout is not None else config.ws_open_timeout
        self._connect = connect or websockets.connect
        self._connection: Any = None
        self._endpoint: Optional[str] = None
        self._reader: Optional[asyncio.Task] = None
        self._pending: dict[Any, asyncio.Future] = {}
        self._lock = asyncio.Lock()

    @property
    def connected(self) -> bool:
        return self._connection is not None

    async def exchange(self, endpoint: str, request: str) -> str:
        """Send one envelope and wait for the frame carrying its id."""
        request_id = self._request_id(request)
        connection, pending = await self._ensure_connection(endpoint)

        if request_id in pending:
            raise ProtocolError(f"Request id {request_id} is already in flight")

        future = asyncio.get_running_loop().create_future()
        pending[request_id] = future
        try:
            try:
                await connection.send(request)
            except ConnectionClosed as e:
                raise TransportError(f"WebSocket closed before send: {e}") from e

            return await asyncio.wait_for(future, timeout=self.timeout)

        except asyncio.TimeoutError as e:
            logger.warning(f"No reply for request {request_id} within {self.timeout}s")
            raise TransportError("Request timeout") from e
        finally:
            if pending.get(request_id) is future:
                del pending[request_id]

    async def close(self) -> None:
        """Close the socket and fail anything still waiting on it."""
        async with self._lock:
            await self._close_connection()

    @staticmethod
    def _request_id(request: str) -> Any:
        try:
            envelope = json.loads(request)
        except json.JSONDecodeError as e:
            raise ProtocolError(f"Request envelope is not JSON: {e}") from e
        if not isinstance(envelope, dict) or envelope.get("id") is None:
            raise ProtocolError("Request envelope has no id")
        return envelope["id"]

    async def _ensure_connection(self, endpoint: str) -> tuple[Any, dict[Any, asyncio.Future]]:
        async with self._lock:
            if self._connection is not None and self._endpoint == endpoint:
                return self._connection, self._pending

            if self._connection is not None:
                logger.info(f"Endpoint changed, closing socket to {self._endpoint}")
                await self._close_connection()

            try:
                connection = await self._connect(endpoint, open_timeout=self.open_timeout)
            except asyncio.TimeoutError as e:
                raise TransportError(f"WebSocket open timeout for {endpoint}") from e
            except (OSError, WebSocketException) as e:
                logger.warning(f"WebSocket connect to {endpoint} failed: {e}")
                raise TransportError(f"WebSocket connect failed: {e}") from e

            logger.debug(f"WebSocket connected to {endpoint}")
            self._connection = connection
            self._endpoint = endpoint
            self._pending = {}
            self._reader = asyncio.create_task(
                self._read_loop(connection, self._pending),
                name="ethrpc_ws_reader",
            )
            return self._connection, self._pending

    async def _close_connection(self) -> None:
        connection, reader = self._connection, self._reader
        self._connection = None
        self._reader = None
        self._endpoint = None

        if reader is not None:
            reader.cancel()
            await asyncio.gather(reader, return_exceptions=True)
        if connection is not None:
            await self._close_socket(connection)

    @staticmethod
    async def _close_socket(connection: Any) -> None:
        try:
            await connection.close()
        except (OSError, WebSocketException) as e:
            logger.debug(f"Error closing WebSocket: {e}")

    async def _read_loop(self, connection: Any, pending: dict[Any, asyncio.Future]) -> None:
        error = TransportError("WebSocket connection closed")
        try:
            async for frame in connection:
                self._dispatch(frame, pending)
        except ConnectionClosed as e:
            logger.warning(f"WebSocket closed: {e}")
            error = TransportError(f"WebSocket closed: {e}")
        except (OSError, WebSocketException) as e:
            logger.error(f"WebSocket error: {e}")
            error = TransportError(f"WebSocket error: {e}")
        finally:
            # Still the active socket means close() did not run; release it here
            owned = self._connection is connection
            if owned:
                self._connection = None
                self._reader = None
                self._endpoint = None
            self._fail_pending(pending, error)
            if owned:
                await self._close_socket(connection)

    @staticmethod
    def _dispatch(frame: Any, pending: dict[Any, asyncio.Future]) -> None:
        if isinstance(frame, bytes):
            frame = frame.decode("utf-8", errors="replace")

        try:
            reply = json.loads(frame)
            reply_id = reply.get("id") if isinstance(reply, dict) else None
        except json.JSONDecodeError:
            reply_id = None

        # Only scalar ids can match a request
        if isinstance(reply_id, bool) or not isinstance(reply_id, (int, str)):
            future = None
        else:
            future = pending.get(reply_id)

        # A frame that cannot be routed goes to the only waiting exchange, so
        # the client can report it as malformed or mismatched.
        if future is None and len(pending) == 1:
            future = next(iter(pending.values()))

        if future is None:
            logger.warning(f"Dropping unroutable WebSocket frame (id {reply_id})")
            return

        if not future.done():
            future.set_result(frame)

    @staticmethod
    def _fail_pending(pending: dict[Any, asyncio.Future], error: TransportError) -> None:
        for future in pending.values():
            if not future.done():
                future.set_exception(error)
        pending.clear()
