"""Sync status entity."""
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ..codec import remove_null
from ._fields import FieldReader, unwrap_result


class SyncStatus(BaseModel):
    """eth_syncing result. Block fields are only set while syncing."""

    model_config = ConfigDict(frozen=True)

    syncing: bool = False
    starting_block: Optional[int] = None
    current_block: Optional[int] = None
    highest_block: Optional[int] = None
    known_states: Optional[int] = None
    pulled_states: Optional[int] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "SyncStatus":
        raw = unwrap_result(raw)
        if not isinstance(raw, Mapping) or "startingBlock" not in raw:
            return cls(syncing=False)

        fields = FieldReader(raw, "SyncStatus")
        return cls(
            syncing=True,
            **remove_null(
                {
                    "starting_block": fields.quantity("startingBlock"),
                    "current_block": fields.quantity("currentBlock"),
                    "highest_block": fields.quantity("highestBlock"),
                    "known_states": fields.quantity("knownStates"),
                    "pulled_states": fields.quantity("pulledStates"),
                }
            ),
        )
