"""Helpers that project raw JSON result maps onto entity fields."""
import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional, TypeVar

from ..codec import safe_parse_bytes, safe_parse_int

logger = logging.getLogger(__name__)

T = TypeVar("T")


def unwrap_result(raw: Any) -> Any:
    """Accept either a bare result or a full ``{"result": ...}`` envelope."""
    if isinstance(raw, Mapping) and "result" in raw:
        return raw["result"]
    return raw


class FieldReader:
    """
    Reads fields from a raw result map one at a time.

    Every accessor returns ``None`` when the key is absent or null, so the
    caller can leave the attribute unset. Present but malformed values are
    logged and also read as ``None``.
    """

    def __init__(self, raw: Mapping[str, Any], entity: str) -> None:
        self.raw = raw
        self.entity = entity

    def _read(self, key: str, parse: Callable[[Any], Optional[T]]) -> Optional[T]:
        value = self.raw.get(key)
        if value is None:
            return None
        parsed = parse(value)
        if parsed is None:
            logger.warning(f"{self.entity}: ignoring malformed {key}={value!r}")
        return parsed

    def quantity(self, key: str) -> Optional[int]:
        return self._read(key, safe_parse_int)

    def data(self, key: str) -> Optional[bytes]:
        return self._read(key, safe_parse_bytes)

    def flag(self, key: str) -> Optional[bool]:
        return self._read(key, lambda v: v if isinstance(v, bool) else None)

    def data_list(self, key: str) -> Optional[list[bytes]]:
        return self._read(key, _parse_bytes_list)

    def sequence(self, key: str) -> Optional[list[Any]]:
        return self._read(key, lambda v: v if isinstance(v, list) else None)


def _parse_bytes_list(values: Any) -> Optional[list[bytes]]:
    if not isinstance(values, list):
        return None
    parsed = [safe_parse_bytes(v) if isinstance(v, str) else None for v in values]
    if any(p is None for p in parsed):
        return None
    return parsed
