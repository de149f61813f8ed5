"""Tests for the typed result decoders."""
import logging
from datetime import datetime, timezone

import pytest

from ethrpc.errors import RPCError, RPCErrorInfo
from ethrpc.models import (
    Block,
    Filter,
    Log,
    RPCResult,
    SyncStatus,
    Transaction,
    TransactionReceipt,
    Work,
)


RAW_LOG = {
    "removed": False,
    "logIndex": "0x1",
    "transactionIndex": "0x0",
    "transactionHash": "0xdf829c5a142f1fccd7d8216c5785ac562ff41e2dcfdf5785ac562ff41e2dcf",
    "blockHash": "0x8216c5785ac562ff41e2dcfdf5785ac562ff41e2dcfdf829c5a142f1fccd7d",
    "blockNumber": "0x1b4",
    "address": "0x16c5785ac562ff41e2dcfdf829c5a142f1fccd7d",
    "data": "0x0000000000000000000000000000000000000000000000000000000000000001",
    "topics": ["0x59ebeb90bc63057b6515673c3ecf9438e5058bca0f92585014eced636878c9a5"],
}


class TestBlock:
    """Block decoding."""

    def test_full_block(self, raw_block):
        block = Block.from_raw(raw_block)

        assert block.number == 436
        assert block.hash == bytes.fromhex(raw_block["hash"][2:])
        assert block.nonce == bytes.fromhex("689056015818adbe")
        assert block.difficulty == 0x4EA3F27BC
        assert block.gas_used == 0
        assert block.uncles == []
        assert block.time == datetime.fromtimestamp(0x55BA467C, tz=timezone.utc)
        assert not block.transactions_are_hashes
        assert isinstance(block.transactions[0], Transaction)
        assert block.transactions[0].value == 0x7F110

    def test_transaction_hashes(self, raw_block):
        raw_block["transactions"] = [
            "0x" + "11" * 32,
            "0x" + "22" * 32,
        ]

        block = Block.from_raw(raw_block)

        assert block.transactions_are_hashes
        assert block.transactions == [b"\x11" * 32, b"\x22" * 32]

    def test_pending_block_has_no_number(self, raw_block):
        for key in ("number", "hash", "nonce", "logsBloom"):
            raw_block[key] = None

        block = Block.from_raw(raw_block)

        assert block.is_pending
        assert block.number is None
        assert block.hash is None
        assert block.parent_hash is not None

    def test_missing_keys_stay_unset(self):
        block = Block.from_raw({"number": "0x1"})

        assert block.number == 1
        assert block.transactions is None
        assert block.miner is None

    def test_malformed_field_is_logged_and_unset(self, raw_block, caplog):
        raw_block["gasLimit"] = "not-hex"

        with caplog.at_level(logging.WARNING):
            block = Block.from_raw(raw_block)

        assert block.gas_limit is None
        assert block.number == 436
        assert "gasLimit" in caplog.text

    def test_envelope_is_unwrapped(self, raw_block):
        block = Block.from_raw({"jsonrpc": "2.0", "id": 1, "result": raw_block})
        assert block.number == 436


class TestTransaction:
    """Transaction decoding."""

    def test_fields(self, raw_transaction):
        tx = Transaction.from_raw(raw_transaction)

        assert tx.nonce == 0x15
        assert tx.block_number == 0x15DF
        assert tx.from_address == bytes.fromhex("407d73d8a49eeb85d32cf465507dd71d507100c1")
        assert tx.gas_price == 0x09184E72A000
        assert not tx.is_pending

    def test_contract_creation_has_no_recipient(self, raw_transaction):
        raw_transaction["to"] = None
        raw_transaction["blockNumber"] = None

        tx = Transaction.from_raw(raw_transaction)

        assert tx.to_address is None
        assert tx.is_pending


class TestReceipt:
    """Receipt decoding."""

    def test_receipt_with_logs(self):
        receipt = TransactionReceipt.from_raw(
            {
                "transactionHash": RAW_LOG["transactionHash"],
                "blockNumber": "0xb",
                "cumulativeGasUsed": "0x33bc",
                "gasUsed": "0x4dc",
                "contractAddress": None,
                "status": "0x1",
                "logs": [RAW_LOG],
            }
        )

        assert receipt.gas_used == 0x4DC
        assert receipt.contract_address is None
        assert receipt.succeeded is True
        assert receipt.logs[0].log_index == 1

    def test_pre_byzantium_receipt(self):
        receipt = TransactionReceipt.from_raw({"root": "0x" + "ab" * 32})
        assert receipt.succeeded is None
        assert receipt.root == b"\xab" * 32


class TestFilter:
    """Filter change decoding."""

    def test_logs(self):
        result = Filter.from_raw([RAW_LOG])

        assert not result.hashes_only
        assert len(result) == 1
        log = result.logs[0]
        assert isinstance(log, Log)
        assert log.removed is False
        assert log.block_number == 436
        assert log.topics[0].hex().startswith("59ebeb90")

    def test_hashes(self):
        result = Filter.from_raw(["0x" + "aa" * 32])

        assert result.hashes_only
        assert result.hashes == [b"\xaa" * 32]
        assert len(result) == 1

    def test_empty(self):
        result = Filter.from_raw([])
        assert result.logs == []
        assert len(result) == 0


class TestSyncStatus:
    """eth_syncing decoding."""

    def test_not_syncing(self):
        assert SyncStatus.from_raw(False).syncing is False

    def test_syncing(self):
        status = SyncStatus.from_raw(
            {"startingBlock": "0x384", "currentBlock": "0x386", "highestBlock": "0x454"}
        )

        assert status.syncing
        assert status.starting_block == 900
        assert status.current_block == 902
        assert status.highest_block == 1108


class TestWork:
    """eth_getWork decoding."""

    def test_three_elements(self):
        work = Work.from_raw(["0x1", "0x5EED", "0xd1ff1c01710000000000000000000000"])

        assert work.pow_hash == 1
        assert work.seed_hash == 0x5EED
        assert work.boundary_condition == 0xD1FF1C01710000000000000000000000

    def test_from_envelope(self):
        work = Work.from_raw({"result": ["0x1", "0x2", "0x3"]})
        assert (work.pow_hash, work.seed_hash, work.boundary_condition) == (1, 2, 3)

    def test_wrong_length_leaves_fields_unset(self):
        work = Work.from_raw(["0x1", "0x2"])

        assert work.pow_hash is None
        assert work.seed_hash is None
        assert work.boundary_condition is None


class TestRPCResult:
    """Success-or-error wrapper."""

    def test_ok(self):
        result = RPCResult(value=5)
        assert result.ok
        assert result
        assert result.unwrap() == 5

    def test_error(self):
        result = RPCResult(error=RPCErrorInfo(code=-32602, message="invalid", request_id=3))

        assert not result
        with pytest.raises(RPCError) as excinfo:
            result.unwrap()
        assert excinfo.value.code == -32602
