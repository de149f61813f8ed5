"""Block entity."""
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

from ..codec import remove_null
from ._fields import FieldReader, unwrap_result
from .transaction import Transaction

logger = logging.getLogger(__name__)


class Block(BaseModel):
    """
    A block as returned by eth_getBlockBy* and eth_getUncleBy*.

    ``number``, ``hash``, ``nonce`` and ``logs_bloom`` are unset for a pending
    block. ``transactions`` holds either transaction hashes or full
    ``Transaction`` entities; ``transactions_are_hashes`` records which.
    """

    model_config = ConfigDict(frozen=True)

    number: Optional[int] = None
    hash: Optional[bytes] = None
    parent_hash: Optional[bytes] = None
    nonce: Optional[bytes] = None
    sha3_uncles: Optional[bytes] = None
    logs_bloom: Optional[bytes] = None
    transactions_root: Optional[bytes] = None
    state_root: Optional[bytes] = None
    receipts_root: Optional[bytes] = None
    miner: Optional[bytes] = None
    difficulty: Optional[int] = None
    total_difficulty: Optional[int] = None
    extra_data: Optional[bytes] = None
    size: Optional[int] = None
    gas_limit: Optional[int] = None
    gas_used: Optional[int] = None
    timestamp: Optional[int] = None
    mix_hash: Optional[bytes] = None
    base_fee_per_gas: Optional[int] = None
    uncles: Optional[list[bytes]] = None
    transactions: Optional[list[Union[bytes, Transaction]]] = None
    transactions_are_hashes: bool = False

    @classmethod
    def from_raw(cls, raw: Any) -> "Block":
        """Build a Block from a raw result map."""
        raw = unwrap_result(raw)
        if not isinstance(raw, Mapping):
            logger.warning(f"Block result is not an object: {raw!r}")
            return cls()

        fields = FieldReader(raw, "Block")
        values = {
            "number": fields.quantity("number"),
            "hash": fields.data("hash"),
            "parent_hash": fields.data("parentHash"),
            "nonce": fields.data("nonce"),
            "sha3_uncles": fields.data("sha3Uncles"),
            "logs_bloom": fields.data("logsBloom"),
            "transactions_root": fields.data("transactionsRoot"),
            "state_root": fields.data("stateRoot"),
            "receipts_root": fields.data("receiptsRoot"),
            "miner": fields.data("miner"),
            "difficulty": fields.quantity("difficulty"),
            "total_difficulty": fields.quantity("totalDifficulty"),
            "extra_data": fields.data("extraData"),
            "size": fields.quantity("size"),
            "gas_limit": fields.quantity("gasLimit"),
            "gas_used": fields.quantity("gasUsed"),
            "timestamp": fields.quantity("timestamp"),
            "mix_hash": fields.data("mixHash"),
            "base_fee_per_gas": fields.quantity("baseFeePerGas"),
            "uncles": fields.data_list("uncles"),
        }

        transactions = fields.sequence("transactions")
        if transactions is not None:
            values.update(_decode_transactions(transactions))

        return cls(**remove_null(values))

    @property
    def is_pending(self) -> bool:
        return self.number is None

    @property
    def time(self) -> Optional[datetime]:
        """Block timestamp as an aware UTC datetime."""
        if self.timestamp is None:
            return None
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    def __str__(self) -> str:
        return (
            f"Ethereum Block : number={self.number} hash={_hex(self.hash)} "
            f"parent={_hex(self.parent_hash)} miner={_hex(self.miner)} "
            f"difficulty={self.difficulty} gas_used={self.gas_used} time={self.time}"
        )


def _decode_transactions(transactions: list[Any]) -> dict[str, Any]:
    # The first element decides the shape of the whole list
    if not transactions:
        return {"transactions": []}

    if isinstance(transactions[0], str):
        hashes = FieldReader({"transactions": transactions}, "Block").data_list("transactions")
        if hashes is None:
            return {}
        return {"transactions": hashes, "transactions_are_hashes": True}

    return {"transactions": [Transaction.from_raw(tx) for tx in transactions]}


def _hex(value: Optional[bytes]) -> Optional[str]:
    return "0x" + value.hex() if value is not None else None
