"""Log and filter-result entities."""
import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ..codec import remove_null
from ._fields import FieldReader, unwrap_result

logger = logging.getLogger(__name__)


class Log(BaseModel):
    """A log entry from a receipt or a log filter."""

    model_config = ConfigDict(frozen=True)

    removed: Optional[bool] = None
    log_index: Optional[int] = None
    transaction_index: Optional[int] = None
    transaction_hash: Optional[bytes] = None
    block_hash: Optional[bytes] = None
    block_number: Optional[int] = None
    address: Optional[bytes] = None
    data: Optional[bytes] = None
    topics: Optional[list[bytes]] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "Log":
        raw = unwrap_result(raw)
        if not isinstance(raw, Mapping):
            logger.warning(f"Log entry is not an object: {raw!r}")
            return cls()

        fields = FieldReader(raw, "Log")
        return cls(
            **remove_null(
                {
                    "removed": fields.flag("removed"),
                    "log_index": fields.quantity("logIndex"),
                    "transaction_index": fields.quantity("transactionIndex"),
                    "transaction_hash": fields.data("transactionHash"),
                    "block_hash": fields.data("blockHash"),
                    "block_number": fields.quantity("blockNumber"),
                    "address": fields.data("address"),
                    "data": fields.data("data"),
                    "topics": fields.data_list("topics"),
                }
            )
        )


class Filter(BaseModel):
    """
    Result of eth_getFilterChanges, eth_getFilterLogs and eth_getLogs.

    Block and pending-transaction filters yield hashes (``hashes_only``);
    log filters yield ``Log`` entries. An empty poll gives an empty ``logs``.
    """

    model_config = ConfigDict(frozen=True)

    hashes: Optional[list[bytes]] = None
    logs: Optional[list[Log]] = None
    hashes_only: bool = False

    @classmethod
    def from_raw(cls, raw: Any) -> "Filter":
        raw = unwrap_result(raw)
        if not isinstance(raw, list):
            logger.warning(f"Filter result is not a list: {raw!r}")
            return cls()

        if not raw:
            return cls(logs=[])

        if isinstance(raw[0], str):
            hashes = FieldReader({"hashes": raw}, "Filter").data_list("hashes")
            if hashes is None:
                return cls()
            return cls(hashes=hashes, hashes_only=True)

        return cls(logs=[Log.from_raw(entry) for entry in raw])

    def __len__(self) -> int:
        return len(self.hashes if self.hashes_only else (self.logs or []))
