"""High-level JSON-RPC API namespaces."""
from .client import Ethereum
from .eth import EthApi
from .methods import RPCMethods
from .net import NetApi
from .shh import ShhApi
from .web3 import Web3Api

__all__ = ["Ethereum", "EthApi", "NetApi", "RPCMethods", "ShhApi", "Web3Api"]
