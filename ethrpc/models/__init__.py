"""Typed entities decoded from JSON-RPC results."""
from .block import Block
from .log import Filter, Log
from .receipt import TransactionReceipt
from .result import RPCResult
from .sync_status import SyncStatus
from .transaction import Transaction
from .work import Work

__all__ = [
    "Block",
    "Filter",
    "Log",
    "RPCResult",
    "SyncStatus",
    "Transaction",
    "TransactionReceipt",
    "Work",
]
