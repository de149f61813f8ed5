"""Transaction entity."""
import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ..codec import remove_null
from ._fields import FieldReader, unwrap_result

logger = logging.getLogger(__name__)


class Transaction(BaseModel):
    """A transaction as returned by eth_getTransactionBy* and full blocks.

    Block fields are unset while the transaction is pending; ``to_address``
    is unset for contract creation.
    """

    model_config = ConfigDict(frozen=True)

    hash: Optional[bytes] = None
    nonce: Optional[int] = None
    block_hash: Optional[bytes] = None
    block_number: Optional[int] = None
    transaction_index: Optional[int] = None
    from_address: Optional[bytes] = None
    to_address: Optional[bytes] = None
    value: Optional[int] = None
    gas: Optional[int] = None
    gas_price: Optional[int] = None
    input: Optional[bytes] = None
    v: Optional[int] = None
    r: Optional[int] = None
    s: Optional[int] = None

    # Typed transaction fields, present on post-London nodes
    type: Optional[int] = None
    chain_id: Optional[int] = None
    max_fee_per_gas: Optional[int] = None
    max_priority_fee_per_gas: Optional[int] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "Transaction":
        """Build a Transaction from a raw result map."""
        raw = unwrap_result(raw)
        if not isinstance(raw, Mapping):
            logger.warning(f"Transaction result is not an object: {raw!r}")
            return cls()

        fields = FieldReader(raw, "Transaction")
        return cls(
            **remove_null(
                {
                    "hash": fields.data("hash"),
                    "nonce": fields.quantity("nonce"),
                    "block_hash": fields.data("blockHash"),
                    "block_number": fields.quantity("blockNumber"),
                    "transaction_index": fields.quantity("transactionIndex"),
                    "from_address": fields.data("from"),
                    "to_address": fields.data("to"),
                    "value": fields.quantity("value"),
                    "gas": fields.quantity("gas"),
                    "gas_price": fields.quantity("gasPrice"),
                    "input": fields.data("input"),
                    "v": fields.quantity("v"),
                    "r": fields.quantity("r"),
                    "s": fields.quantity("s"),
                    "type": fields.quantity("type"),
                    "chain_id": fields.quantity("chainId"),
                    "max_fee_per_gas": fields.quantity("maxFeePerGas"),
                    "max_priority_fee_per_gas": fields.quantity("maxPriorityFeePerGas"),
                }
            )
        )

    @property
    def is_pending(self) -> bool:
        return self.block_number is None

    def __str__(self) -> str:
        return (
            f"Ethereum Transaction : hash={_hex(self.hash)} block={self.block_number} "
            f"from={_hex(self.from_address)} to={_hex(self.to_address)} value={self.value}"
        )


def _hex(value: Optional[bytes]) -> Optional[str]:
    return "0x" + value.hex() if value is not None else None
