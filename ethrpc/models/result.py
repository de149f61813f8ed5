"""Success-or-error value returned by every API method."""
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

from ..errors import RPCError, RPCErrorInfo

T = TypeVar("T")


class RPCResult(BaseModel, Generic[T]):
    """
    Outcome of one API call.

    ``value`` is the decoded result, which may itself be ``None`` when the
    node legitimately returned nothing (e.g. an unknown block). ``error`` is
    set when the node returned an error object.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Optional[T] = None
    error: Optional[RPCErrorInfo] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        """Return the value, raising ``RPCError`` if the call failed."""
        if self.error is not None:
            raise RPCError(self.error)
        return self.value

    def __bool__(self) -> bool:
        return self.ok
