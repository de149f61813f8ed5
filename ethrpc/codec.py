"""
Hex codec for the Ethereum JSON-RPC wire format.

Two representations are used on the wire:

- Quantity: ``"0x"`` followed by lowercase hex digits with no leading zeros,
  ``"0x0"`` for zero. Decoded to ``int`` (arbitrary precision).
- Byte-data: ``"0x"`` followed by an even number of hex digits. Leading zero
  bytes are significant (hashes, addresses, payloads). Decoded to ``bytes``.

Encoding functions raise ``EncodingError``; the ``safe_parse_*`` helpers
return ``None`` instead, for optional chain fields that may be missing.
"""
import re
from typing import Any, Iterable, Mapping, Optional, Union

from eth_utils import decode_hex, encode_hex

from .errors import EncodingError


_QUANTITY_RE = re.compile(r"^0[xX][0-9a-fA-F]+$")
_DATA_RE = re.compile(r"^0[xX](?:[0-9a-fA-F]{2})*$")

HexData = Union[bytes, bytearray, str]


def _check_int(n: Any) -> int:
    # bool is an int subclass but never a valid quantity
    if isinstance(n, bool) or not isinstance(n, int):
        raise EncodingError(f"Expected a non-negative integer, got {type(n).__name__}")
    if n < 0:
        raise EncodingError(f"Cannot encode negative integer {n}")
    return n


def int_to_hex(n: int) -> str:
    """Encode a non-negative integer as a Quantity."""
    return hex(_check_int(n))


def hex_to_int(s: str) -> int:
    """Decode a Quantity (case-insensitive) into an integer."""
    if not isinstance(s, str) or not _QUANTITY_RE.match(s):
        raise EncodingError(f"Invalid quantity: {s!r}")
    return int(s, 16)


def bytes_to_hex(b: Union[bytes, bytearray]) -> str:
    """Encode raw bytes as Byte-data."""
    if not isinstance(b, (bytes, bytearray)):
        raise EncodingError(f"Expected bytes, got {type(b).__name__}")
    return encode_hex(bytes(b))


def hex_to_bytes(s: str) -> bytes:
    """Decode Byte-data into raw bytes."""
    if not isinstance(s, str) or not _DATA_RE.match(s):
        raise EncodingError(f"Invalid byte data: {s!r}")
    return decode_hex(s[2:])


def data_to_hex(value: HexData) -> str:
    """
    Encode a Byte-data parameter.

    Accepts raw bytes or an already hex-encoded string, which is validated
    and lower-cased so the output is always canonical.
    """
    if isinstance(value, str):
        if not _DATA_RE.match(value):
            raise EncodingError(f"Invalid byte data: {value!r}")
        return "0x" + value[2:].lower()
    return bytes_to_hex(value)


def int_list_to_hex(values: Iterable[int]) -> list[str]:
    """Encode a sequence of integers; fails without partial output."""
    return [int_to_hex(v) for v in values]


def hex_list_to_int(values: Iterable[str]) -> list[int]:
    """Decode a sequence of Quantities; fails without partial output."""
    return [hex_to_int(v) for v in values]


def hex_list_to_bytes(values: Iterable[str]) -> list[bytes]:
    """Decode a sequence of Byte-data strings; fails without partial output."""
    return [hex_to_bytes(v) for v in values]


def data_list_to_hex(values: Iterable[HexData]) -> list[str]:
    """Encode a sequence of Byte-data parameters; fails without partial output."""
    return [data_to_hex(v) for v in values]


def safe_parse_int(s: Optional[str]) -> Optional[int]:
    """Decode a Quantity, returning ``None`` when absent or malformed."""
    if s is None:
        return None
    try:
        return hex_to_int(s)
    except EncodingError:
        return None


def safe_parse_bytes(s: Optional[str]) -> Optional[bytes]:
    """Decode Byte-data, returning ``None`` when absent or malformed."""
    if s is None:
        return None
    try:
        return hex_to_bytes(s)
    except EncodingError:
        return None


def remove_null(params: Mapping[str, Any]) -> dict[str, Any]:
    """Drop ``None`` values from a parameter map, keeping key order."""
    return {key: value for key, value in params.items() if value is not None}
