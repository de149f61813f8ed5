"""HTTP transport adapter."""
import logging
from typing import Optional

import httpx

from ..config import config
from ..errors import TransportError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class HTTPAdapter:
    """
    POSTs each envelope to the endpoint and returns the response body.

    By default a fresh ``httpx.AsyncClient`` is opened and closed around every
    exchange. With ``pooled=True`` one client is kept until ``close()``.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        pooled: Optional[bool] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout = timeout if timeout is not None else config.request_timeout
        self.pooled = pooled if pooled is not None else config.http_pooled
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def exchange(self, endpoint: str, request: str) -> str:
        """POST one envelope and return the full response body."""
        try:
            if self.pooled:
                if self._client is None:
                    self._client = self._new_client()
                return await self._post(self._client, endpoint, request)

            async with self._new_client() as client:
                return await self._post(client, endpoint, request)

        except httpx.TimeoutException as e:
            logger.warning(f"Request to {endpoint} timed out after {self.timeout}s")
            raise TransportError(f"Request timeout: {e}") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"Node at {endpoint} returned HTTP {status}")
            raise TransportError(f"HTTP status {status}", status_code=status) from e
        except httpx.HTTPError as e:
            logger.warning(f"HTTP error talking to {endpoint}: {e}")
            raise TransportError(f"HTTP error: {e}") from e

    async def _post(self, client: httpx.AsyncClient, endpoint: str, request: str) -> str:
        response = await client.post(endpoint, content=request, headers=JSON_HEADERS)
        response.raise_for_status()
        return response.text

    async def close(self) -> None:
        """Close the pooled client, if any."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
