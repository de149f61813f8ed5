"""Transaction receipt entity."""
import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ..codec import remove_null
from ._fields import FieldReader, unwrap_result
from .log import Log

logger = logging.getLogger(__name__)


class TransactionReceipt(BaseModel):
    """A receipt as returned by eth_getTransactionReceipt.

    Pre-Byzantium receipts carry ``root``; later ones carry ``status``.
    """

    model_config = ConfigDict(frozen=True)

    transaction_hash: Optional[bytes] = None
    transaction_index: Optional[int] = None
    block_hash: Optional[bytes] = None
    block_number: Optional[int] = None
    from_address: Optional[bytes] = None
    to_address: Optional[bytes] = None
    cumulative_gas_used: Optional[int] = None
    gas_used: Optional[int] = None
    contract_address: Optional[bytes] = None
    logs: Optional[list[Log]] = None
    logs_bloom: Optional[bytes] = None
    root: Optional[bytes] = None
    status: Optional[int] = None
    effective_gas_price: Optional[int] = None
    type: Optional[int] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "TransactionReceipt":
        """Build a receipt from a raw result map."""
        raw = unwrap_result(raw)
        if not isinstance(raw, Mapping):
            logger.warning(f"Receipt result is not an object: {raw!r}")
            return cls()

        fields = FieldReader(raw, "TransactionReceipt")
        logs = fields.sequence("logs")
        return cls(
            **remove_null(
                {
                    "transaction_hash": fields.data("transactionHash"),
                    "transaction_index": fields.quantity("transactionIndex"),
                    "block_hash": fields.data("blockHash"),
                    "block_number": fields.quantity("blockNumber"),
                    "from_address": fields.data("from"),
                    "to_address": fields.data("to"),
                    "cumulative_gas_used": fields.quantity("cumulativeGasUsed"),
                    "gas_used": fields.quantity("gasUsed"),
                    "contract_address": fields.data("contractAddress"),
                    "logs": [Log.from_raw(entry) for entry in logs] if logs is not None else None,
                    "logs_bloom": fields.data("logsBloom"),
                    "root": fields.data("root"),
                    "status": fields.quantity("status"),
                    "effective_gas_price": fields.quantity("effectiveGasPrice"),
                    "type": fields.quantity("type"),
                }
            )
        )

    @property
    def succeeded(self) -> Optional[bool]:
        """True/False from ``status``; unset for pre-Byzantium receipts."""
        if self.status is None:
            return None
        return self.status == 1
