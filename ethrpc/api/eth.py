"""eth_* methods."""
from typing import Any, Optional, Union

from ..codec import (
    HexData,
    data_to_hex,
    hex_list_to_bytes,
    hex_to_bytes,
    hex_to_int,
    int_to_hex,
    remove_null,
)
from ..models import Block, Filter, SyncStatus, Transaction, TransactionReceipt, Work
from ..models.result import RPCResult
from .base import ApiModule, BlockParam
from .methods import RPCMethods

AddressFilter = Union[HexData, list[HexData]]


class EthApi(ApiModule):
    """
    Chain state, transaction, filter and mining methods (eth_* namespace).

    Addresses, hashes and payloads are accepted as ``bytes`` or hex strings
    and returned as ``bytes``. Quantities are plain ``int``. Block selectors
    accept a ``DefaultBlock``, a block number or a tag name.
    """

    namespace = "eth"

    # Node state

    async def protocol_version(self) -> RPCResult[str]:
        return await self._call(RPCMethods.protocol_version)

    async def syncing(self) -> RPCResult[SyncStatus]:
        """Sync status; ``syncing`` is False when the node is in sync."""
        return await self._call(RPCMethods.syncing, decode=SyncStatus.from_raw)

    async def coinbase(self) -> RPCResult[bytes]:
        return await self._call(RPCMethods.coinbase, decode=hex_to_bytes)

    async def mining(self) -> RPCResult[bool]:
        return await self._call(RPCMethods.mining)

    async def hashrate(self) -> RPCResult[int]:
        """Hashes per second the node is mining with."""
        return await self._call(RPCMethods.hashrate, decode=hex_to_int)

    async def gas_price(self) -> RPCResult[int]:
        """Current price per gas in wei."""
        return await self._call(RPCMethods.gas_price, decode=hex_to_int)

    async def accounts(self) -> RPCResult[list[bytes]]:
        """Addresses owned by the client."""
        return await self._call(RPCMethods.accounts, decode=hex_list_to_bytes)

    async def block_number(self) -> RPCResult[int]:
        """Number of the most recent block."""
        return await self._call(RPCMethods.block_number, decode=hex_to_int)

    # Account state

    async def get_balance(self, address: HexData, block: BlockParam) -> RPCResult[int]:
        """Balance in wei of ``address`` at ``block``."""
        self._require("get_balance", address=address, block=block)
        params = [data_to_hex(address), self._block(block)]
        return await self._call(RPCMethods.get_balance, params, hex_to_int)

    async def get_storage_at(
        self, address: HexData, position: int, block: BlockParam
    ) -> RPCResult[bytes]:
        """Value of a storage slot of ``address`` at ``block``."""
        self._require("get_storage_at", address=address, position=position, block=block)
        params = [data_to_hex(address), int_to_hex(position), self._block(block)]
        return await self._call(RPCMethods.get_storage_at, params, hex_to_bytes)

    async def get_transaction_count(self, address: HexData, block: BlockParam) -> RPCResult[int]:
        """Number of transactions sent from ``address``."""
        self._require("get_transaction_count", address=address, block=block)
        params = [data_to_hex(address), self._block(block)]
        return await self._call(RPCMethods.get_transaction_count, params, hex_to_int)

    async def get_code(self, address: HexData, block: BlockParam) -> RPCResult[bytes]:
        """Contract code at ``address``."""
        self._require("get_code", address=address, block=block)
        params = [data_to_hex(address), self._block(block)]
        return await self._call(RPCMethods.get_code, params, hex_to_bytes)

    # Block counts. A null result (unknown block) reads as a count of 0.

    async def get_block_transaction_count_by_hash(self, block_hash: HexData) -> RPCResult[int]:
        self._require("get_block_transaction_count_by_hash", block_hash=block_hash)
        return await self._call(
            RPCMethods.get_block_transaction_count_by_hash,
            [data_to_hex(block_hash)],
            hex_to_int,
            null_value=0,
        )

    async def get_block_transaction_count_by_number(self, block: BlockParam) -> RPCResult[int]:
        self._require("get_block_transaction_count_by_number", block=block)
        return await self._call(
            RPCMethods.get_block_transaction_count_by_number,
            [self._block(block)],
            hex_to_int,
            null_value=0,
        )

    async def get_uncle_count_by_hash(self, block_hash: HexData) -> RPCResult[int]:
        self._require("get_uncle_count_by_hash", block_hash=block_hash)
        return await self._call(
            RPCMethods.get_uncle_count_by_block_hash,
            [data_to_hex(block_hash)],
            hex_to_int,
            null_value=0,
        )

    async def get_uncle_count_by_number(self, block: BlockParam) -> RPCResult[int]:
        self._require("get_uncle_count_by_number", block=block)
        return await self._call(
            RPCMethods.get_uncle_count_by_block_number,
            [self._block(block)],
            hex_to_int,
            null_value=0,
        )

    # Transactions

    async def sign(self, address: HexData, message: HexData) -> RPCResult[bytes]:
        """Signature of ``message`` by the (unlocked) ``address``."""
        self._require("sign", address=address, message=message)
        params = [data_to_hex(address), data_to_hex(message)]
        return await self._call(RPCMethods.sign, params, hex_to_bytes)

    async def send_transaction(
        self,
        from_address: HexData,
        data: Optional[HexData] = None,
        *,
        to: Optional[HexData] = None,
        gas: Optional[int] = None,
        gas_price: Optional[int] = None,
        value: Optional[int] = None,
        nonce: Optional[int] = None,
    ) -> RPCResult[bytes]:
        """
        Create a message call, or a contract creation when ``to`` is omitted.

        Args:
            from_address: Sending address (must be unlocked on the node)
            data: Contract code or encoded call data
            to: Receiving address
            gas: Gas provided for execution
            gas_price: Price per gas in wei
            value: Value sent in wei
            nonce: Nonce override, replaces a pending transaction

        Returns:
            Transaction hash
        """
        self._require("send_transaction", from_address=from_address)
        transaction = self._transaction_object(
            from_address=from_address,
            to=to,
            gas=gas,
            gas_price=gas_price,
            value=value,
            data=data,
            nonce=nonce,
        )
        return await self._call(RPCMethods.send_transaction, [transaction], hex_to_bytes)

    async def send_raw_transaction(self, signed_transaction: HexData) -> RPCResult[bytes]:
        """Submit a signed transaction; returns its hash."""
        self._require("send_raw_transaction", signed_transaction=signed_transaction)
        return await self._call(
            RPCMethods.send_raw_transaction,
            [data_to_hex(signed_transaction)],
            hex_to_bytes,
        )

    async def call(
        self,
        to: HexData,
        block: BlockParam,
        *,
        from_address: Optional[HexData] = None,
        gas: Optional[int] = None,
        gas_price: Optional[int] = None,
        value: Optional[int] = None,
        data: Optional[HexData] = None,
    ) -> RPCResult[bytes]:
        """Execute a message call without creating a transaction."""
        self._require("call", to=to, block=block)
        transaction = self._transaction_object(
            from_address=from_address,
            to=to,
            gas=gas,
            gas_price=gas_price,
            value=value,
            data=data,
        )
        return await self._call(RPCMethods.call, [transaction, self._block(block)], hex_to_bytes)

    async def estimate_gas(
        self,
        *,
        to: Optional[HexData] = None,
        from_address: Optional[HexData] = None,
        gas: Optional[int] = None,
        gas_price: Optional[int] = None,
        value: Optional[int] = None,
        data: Optional[HexData] = None,
    ) -> RPCResult[int]:
        """Gas a call or transaction would use. All fields are optional."""
        transaction = self._transaction_object(
            from_address=from_address,
            to=to,
            gas=gas,
            gas_price=gas_price,
            value=value,
            data=data,
        )
        return await self._call(RPCMethods.estimate_gas, [transaction], hex_to_int)

    @staticmethod
    def _transaction_object(
        from_address: Optional[HexData] = None,
        to: Optional[HexData] = None,
        gas: Optional[int] = None,
        gas_price: Optional[int] = None,
        value: Optional[int] = None,
        data: Optional[HexData] = None,
        nonce: Optional[int] = None,
    ) -> dict[str, Any]:
        # Omitted fields must be absent on the wire, not null
        return remove_null(
            {
                "from": data_to_hex(from_address) if from_address is not None else None,
                "to": data_to_hex(to) if to is not None else None,
                "gas": int_to_hex(gas) if gas is not None else None,
                "gasPrice": int_to_hex(gas_price) if gas_price is not None else None,
                "value": int_to_hex(value) if value is not None else None,
                "data": data_to_hex(data) if data is not None else None,
                "nonce": int_to_hex(nonce) if nonce is not None else None,
            }
        )

    # Blocks

    async def get_block_by_hash(self, block_hash: HexData, full: bool = True) -> RPCResult[Block]:
        """
        Block by hash, with full transactions when ``full`` is True.

        The value is None when no block was found.
        """
        self._require("get_block_by_hash", block_hash=block_hash)
        params = [data_to_hex(block_hash), full]
        return await self._call(RPCMethods.get_block_by_hash, params, Block.from_raw)

    async def get_block_by_number(self, block: BlockParam, full: bool = True) -> RPCResult[Block]:
        """Block by number or tag; see ``get_block_by_hash``."""
        self._require("get_block_by_number", block=block)
        params = [self._block(block), full]
        return await self._call(RPCMethods.get_block_by_number, params, Block.from_raw)

    async def get_uncle_by_block_hash_and_index(
        self, block_hash: HexData, index: int
    ) -> RPCResult[Block]:
        """Uncle of a block by position. Uncles carry no transactions."""
        self._require("get_uncle_by_block_hash_and_index", block_hash=block_hash, index=index)
        params = [data_to_hex(block_hash), int_to_hex(index)]
        return await self._call(RPCMethods.get_uncle_by_block_hash_and_index, params, Block.from_raw)

    async def get_uncle_by_block_number_and_index(
        self, block: BlockParam, index: int
    ) -> RPCResult[Block]:
        self._require("get_uncle_by_block_number_and_index", block=block, index=index)
        params = [self._block(block), int_to_hex(index)]
        return await self._call(
            RPCMethods.get_uncle_by_block_number_and_index, params, Block.from_raw
        )

    async def get_transaction_by_hash(self, tx_hash: HexData) -> RPCResult[Transaction]:
        """Transaction by hash; the value is None when not found."""
        self._require("get_transaction_by_hash", tx_hash=tx_hash)
        return await self._call(
            RPCMethods.get_transaction_by_hash, [data_to_hex(tx_hash)], Transaction.from_raw
        )

    async def get_transaction_by_block_hash_and_index(
        self, block_hash: HexData, index: int
    ) -> RPCResult[Transaction]:
        self._require("get_transaction_by_block_hash_and_index", block_hash=block_hash, index=index)
        params = [data_to_hex(block_hash), int_to_hex(index)]
        return await self._call(
            RPCMethods.get_transaction_by_block_hash_and_index, params, Transaction.from_raw
        )

    async def get_transaction_by_block_number_and_index(
        self, block: BlockParam, index: int
    ) -> RPCResult[Transaction]:
        self._require("get_transaction_by_block_number_and_index", block=block, index=index)
        params = [self._block(block), int_to_hex(index)]
        return await self._call(
            RPCMethods.get_transaction_by_block_number_and_index, params, Transaction.from_raw
        )

    async def get_transaction_receipt(self, tx_hash: HexData) -> RPCResult[TransactionReceipt]:
        """Receipt by transaction hash. Not available for pending transactions."""
        self._require("get_transaction_receipt", tx_hash=tx_hash)
        return await self._call(
            RPCMethods.get_transaction_receipt,
            [data_to_hex(tx_hash)],
            TransactionReceipt.from_raw,
        )

    # Filters

    async def new_filter(
        self,
        from_block: Optional[BlockParam] = None,
        to_block: Optional[BlockParam] = None,
        address: Optional[AddressFilter] = None,
        topics: Optional[list[Any]] = None,
    ) -> RPCResult[int]:
        """
        Create a log filter; poll it with ``get_filter_changes``.

        Topics are order-dependent: ``None`` matches anything in that
        position and a nested list matches any of its entries.

        Returns:
            Filter id
        """
        params = self._filter_object(from_block, to_block, address, topics)
        return await self._call(RPCMethods.new_filter, [params], hex_to_int)

    async def new_block_filter(self) -> RPCResult[int]:
        """Create a filter notified of new blocks."""
        return await self._call(RPCMethods.new_block_filter, [], hex_to_int)

    async def new_pending_transaction_filter(self) -> RPCResult[int]:
        """Create a filter notified of new pending transactions."""
        return await self._call(RPCMethods.new_pending_transaction_filter, [], hex_to_int)

    async def uninstall_filter(self, filter_id: int) -> RPCResult[bool]:
        """Remove a filter; True if it existed."""
        self._require("uninstall_filter", filter_id=filter_id)
        return await self._call(RPCMethods.uninstall_filter, [int_to_hex(filter_id)])

    async def get_filter_changes(self, filter_id: int) -> RPCResult[Filter]:
        """Entries since the last poll of ``filter_id``."""
        self._require("get_filter_changes", filter_id=filter_id)
        return await self._call(
            RPCMethods.get_filter_changes, [int_to_hex(filter_id)], Filter.from_raw
        )

    async def get_filter_logs(self, filter_id: int) -> RPCResult[Filter]:
        """All logs matching ``filter_id``."""
        self._require("get_filter_logs", filter_id=filter_id)
        return await self._call(RPCMethods.get_filter_logs, [int_to_hex(filter_id)], Filter.from_raw)

    async def get_logs(
        self,
        from_block: Optional[BlockParam] = None,
        to_block: Optional[BlockParam] = None,
        address: Optional[AddressFilter] = None,
        topics: Optional[list[Any]] = None,
    ) -> RPCResult[Filter]:
        """Logs matching a filter definition; see ``new_filter``."""
        params = self._filter_object(from_block, to_block, address, topics)
        return await self._call(RPCMethods.get_logs, [params], Filter.from_raw)

    def _filter_object(
        self,
        from_block: Optional[BlockParam],
        to_block: Optional[BlockParam],
        address: Optional[AddressFilter],
        topics: Optional[list[Any]],
    ) -> dict[str, Any]:
        return remove_null(
            {
                "fromBlock": self._block(from_block) if from_block is not None else None,
                "toBlock": self._block(to_block) if to_block is not None else None,
                "address": self._data_or_list(address) if address is not None else None,
                "topics": self._topics(topics) if topics is not None else None,
            }
        )

    # Mining

    async def get_work(self) -> RPCResult[Work]:
        """Current block pow-hash, DAG seed hash and boundary condition."""
        return await self._call(RPCMethods.get_work, [], Work.from_raw)

    async def submit_work(
        self, nonce: HexData, pow_hash: HexData, mix_digest: HexData
    ) -> RPCResult[bool]:
        """Submit a proof-of-work solution; True if it is valid."""
        self._require("submit_work", nonce=nonce, pow_hash=pow_hash, mix_digest=mix_digest)
        params = [data_to_hex(nonce), data_to_hex(pow_hash), data_to_hex(mix_digest)]
        return await self._call(RPCMethods.submit_work, params)

    async def submit_hashrate(self, hashrate: int, client_id: HexData) -> RPCResult[bool]:
        """Report mining hashrate under a random 32-byte client id."""
        self._require("submit_hashrate", hashrate=hashrate, client_id=client_id)
        params = [int_to_hex(hashrate), data_to_hex(client_id)]
        return await self._call(RPCMethods.submit_hashrate, params)
