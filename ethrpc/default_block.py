"""Default block parameter: a block tag or a concrete block number."""
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .codec import int_to_hex
from .errors import ArgumentError


class BlockTag(str, Enum):
    """Symbolic chain positions."""

    EARLIEST = "earliest"
    LATEST = "latest"
    PENDING = "pending"


class DefaultBlock(BaseModel):
    """
    Block selector used by most state queries.

    Exactly one of ``tag`` or ``number`` is set. Construction with a negative
    number, with both, or with neither raises ``ValueError``.
    """

    model_config = ConfigDict(frozen=True)

    tag: Optional[BlockTag] = None
    number: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _one_selection(self) -> "DefaultBlock":
        if (self.tag is None) == (self.number is None):
            raise ValueError("DefaultBlock needs exactly one of tag or number")
        return self

    @classmethod
    def earliest(cls) -> "DefaultBlock":
        return cls(tag=BlockTag.EARLIEST)

    @classmethod
    def latest(cls) -> "DefaultBlock":
        return cls(tag=BlockTag.LATEST)

    @classmethod
    def pending(cls) -> "DefaultBlock":
        return cls(tag=BlockTag.PENDING)

    @classmethod
    def at(cls, number: int) -> "DefaultBlock":
        return cls(number=number)

    @classmethod
    def coerce(cls, value: Union["DefaultBlock", BlockTag, int, str]) -> "DefaultBlock":
        """
        Build a selector from a DefaultBlock, block number or tag name.

        Raises:
            ArgumentError: If the value is not a known tag or a non-negative number
        """
        if isinstance(value, DefaultBlock):
            return value
        if isinstance(value, bool):
            raise ArgumentError(f"Invalid block selector: {value!r}")
        if isinstance(value, int):
            if value < 0:
                raise ArgumentError(f"Invalid block selector: {value!r}")
            return cls(number=value)
        if isinstance(value, str):
            try:
                tag = BlockTag(value)
            except ValueError:
                raise ArgumentError(f"Invalid block selector: {value!r}") from None
            return cls(tag=tag)
        raise ArgumentError(f"Invalid block selector: {value!r}")

    def render(self) -> str:
        """Wire form: the tag verbatim or the number as a Quantity."""
        if self.tag is not None:
            return self.tag.value
        return int_to_hex(self.number)

    def __str__(self) -> str:
        return self.render()
