"""RPC client and endpoint resolution."""
from .rpc_client import RPCClient

__all__ = ["RPCClient"]
