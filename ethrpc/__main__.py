"""Probe a node from the command line: python -m ethrpc."""
import argparse
import asyncio
import logging
import sys
from typing import Optional

from .api import Ethereum
from .config import config
from .errors import EthereumRPCError, TransportError

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ethrpc", description="Probe an Ethereum JSON-RPC node")
    parser.add_argument("--host", default=config.host, help="Node host")
    parser.add_argument("--port", type=int, default=config.port, help="Node port")
    parser.add_argument("--ws", action="store_true", help="Use the WebSocket transport")
    parser.add_argument(
        "--timeout", type=float, default=config.request_timeout, help="Request timeout in seconds"
    )
    return parser.parse_args(argv)


async def probe(args: argparse.Namespace) -> None:
    """Print basic node information."""
    if args.ws:
        client = Ethereum.websocket(args.host, args.port, timeout=args.timeout)
    else:
        client = Ethereum.http(args.host, args.port, timeout=args.timeout)

    async with client:
        logger.info(f"Probing {client.uri}")

        version = await client.web3.client_version()
        network = await client.net.version()
        block = await client.eth.block_number()
        sync = await client.eth.syncing()

        print(f"Client version : {version.value if version else version.error}")
        print(f"Network        : {network.value if network else network.error}")
        print(f"Block number   : {block.value if block else block.error}")
        if sync and sync.value is not None and sync.value.syncing:
            status = sync.value
            print(f"Syncing        : {status.current_block}/{status.highest_block}")
        else:
            print(f"Syncing        : {False if sync else sync.error}")


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    try:
        asyncio.run(probe(args))
    except TransportError as e:
        logger.error(f"Node unreachable: {e}")
        return 1
    except EthereumRPCError as e:
        logger.error(f"Probe failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
