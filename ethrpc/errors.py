"""Error taxonomy and the per-client last-error record."""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


# JSON-RPC 2.0 reserved error codes
STANDARD_ERROR_CODES = {
    -32700: "Parse error",
    -32600: "Invalid request",
    -32601: "Method not found",
    -32602: "Invalid params",
    -32603: "Internal error",
}

# Implementation-defined server error range
SERVER_ERROR_RANGE = range(-32099, -32000 + 1)


def describe_error_code(code: Optional[int]) -> str:
    """Human-readable name for a JSON-RPC error code."""
    if code is None:
        return "Unknown error"

    if code in STANDARD_ERROR_CODES:
        return STANDARD_ERROR_CODES[code]
    elif code in SERVER_ERROR_RANGE:
        return f"Server error {code}"
    else:
        return f"Application error {code}"


class EthereumRPCError(Exception):
    """Base class for every error raised by the client."""


class TransportError(EthereumRPCError):
    """The exchange with the node failed (connect, timeout, status, closed socket)."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ProtocolError(EthereumRPCError):
    """The node replied with an envelope that breaks JSON-RPC 2.0 rules."""


class EncodingError(EthereumRPCError, ValueError):
    """A value could not be converted to or from its hex wire form."""


class ArgumentError(EthereumRPCError, ValueError):
    """A required argument is missing or has the wrong shape."""


class ConfigurationError(EthereumRPCError):
    """The client is not set up to issue requests."""


class RPCErrorInfo(BaseModel):
    """An error object returned by the node."""

    model_config = ConfigDict(frozen=True)

    code: Optional[int] = None
    message: str = ""
    data: Any = None
    request_id: Optional[int] = None
    method: Optional[str] = None

    def __str__(self) -> str:
        return f"RPC Error {self.code}: {self.message} (id {self.request_id})"


class RPCError(EthereumRPCError):
    """Raised by ``RPCResult.unwrap()`` when the node returned an error object."""

    def __init__(self, info: RPCErrorInfo) -> None:
        self.info = info
        self.code = info.code
        self.message = info.message
        super().__init__(f"RPC Error {info.code}: {info.message}")


class LastError:
    """
    Mutable slot holding the most recent node error of one client.

    Overwritten on every new error. ``code``, ``message`` and ``request_id``
    stay ``None`` until the first error is recorded.
    """

    def __init__(self) -> None:
        self.info: Optional[RPCErrorInfo] = None

    def update(self, info: RPCErrorInfo) -> None:
        self.info = info

    def clear(self) -> None:
        self.info = None

    @property
    def code(self) -> Optional[int]:
        return self.info.code if self.info else None

    @property
    def message(self) -> Optional[str]:
        return self.info.message if self.info else None

    @property
    def request_id(self) -> Optional[int]:
        return self.info.request_id if self.info else None

    def __bool__(self) -> bool:
        return self.info is not None

    def __str__(self) -> str:
        if self.info is None:
            return "No error"
        return (
            f"Code : {self.info.code} <{describe_error_code(self.info.code)}>, "
            f"Message : {self.info.message}, Id : {self.info.request_id}"
        )
