"""Async Ethereum JSON-RPC 2.0 client over HTTP and WebSocket."""
from .api import Ethereum
from .codec import (
    bytes_to_hex,
    data_to_hex,
    hex_to_bytes,
    hex_to_int,
    int_to_hex,
)
from .config import ClientConfig
from .default_block import BlockTag, DefaultBlock
from .errors import (
    ArgumentError,
    ConfigurationError,
    EncodingError,
    EthereumRPCError,
    LastError,
    ProtocolError,
    RPCError,
    RPCErrorInfo,
    TransportError,
)
from .models import (
    Block,
    Filter,
    Log,
    RPCResult,
    SyncStatus,
    Transaction,
    TransactionReceipt,
    Work,
)
from .providers import RPCClient
from .transports import HTTPAdapter, TransportAdapter, WebSocketAdapter

__all__ = [
    "ArgumentError",
    "Block",
    "BlockTag",
    "ClientConfig",
    "ConfigurationError",
    "DefaultBlock",
    "EncodingError",
    "Ethereum",
    "EthereumRPCError",
    "Filter",
    "HTTPAdapter",
    "LastError",
    "Log",
    "ProtocolError",
    "RPCClient",
    "RPCError",
    "RPCErrorInfo",
    "RPCResult",
    "SyncStatus",
    "Transaction",
    "TransactionReceipt",
    "TransportAdapter",
    "TransportError",
    "WebSocketAdapter",
    "Work",
    "bytes_to_hex",
    "data_to_hex",
    "hex_to_bytes",
    "hex_to_int",
    "int_to_hex",
]
