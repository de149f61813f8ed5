"""Mining work entity."""
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ..codec import remove_null, safe_parse_int
from ._fields import unwrap_result

logger = logging.getLogger(__name__)

WORK_LENGTH = 3


class Work(BaseModel):
    """
    eth_getWork result.

    Decoded positionally from a 3-element list. Any other shape leaves all
    three fields unset.
    """

    model_config = ConfigDict(frozen=True)

    pow_hash: Optional[int] = None
    seed_hash: Optional[int] = None
    boundary_condition: Optional[int] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "Work":
        raw = unwrap_result(raw)
        if not isinstance(raw, (list, tuple)) or len(raw) != WORK_LENGTH:
            logger.warning(f"Work result is not a {WORK_LENGTH}-element list: {raw!r}")
            return cls()

        pow_hash, seed_hash, boundary = (
            safe_parse_int(v) if isinstance(v, str) else None for v in raw
        )
        return cls(
            **remove_null(
                {
                    "pow_hash": pow_hash,
                    "seed_hash": seed_hash,
                    "boundary_condition": boundary,
                }
            )
        )
