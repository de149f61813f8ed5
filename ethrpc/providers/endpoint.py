"""Connection parameter resolution for node endpoints."""
import logging
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

from ..errors import ArgumentError

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8545

# Transport scheme -> accepted secure variant
SECURE_SCHEMES = {
    "http": "https",
    "ws": "wss",
}


def _resolve_scheme(requested: str, given: str) -> str:
    # Secure variants resolve against their base scheme
    if requested in SECURE_SCHEMES.values():
        requested = requested[:-1]
    if requested not in SECURE_SCHEMES:
        raise ArgumentError(f"Unsupported endpoint scheme: {requested}")
    if given == SECURE_SCHEMES[requested]:
        return given
    return requested


def from_parameters(
    host: Optional[str],
    port: Optional[int] = None,
    scheme: str = "http",
) -> str:
    """
    Build an endpoint URI from explicit connection parameters.

    Args:
        host: Node hostname or address
        port: Node port, defaults to 8545
        scheme: Transport scheme ("http" or "ws", or their secure variants)

    Returns:
        Endpoint URI string

    Raises:
        ArgumentError: If the host is missing or the scheme is unsupported
    """
    if not host:
        raise ArgumentError("Endpoint host must be provided")

    resolved = _resolve_scheme(scheme, scheme)
    port = DEFAULT_PORT if port is None else port

    if not 0 < port < 65536:
        raise ArgumentError(f"Invalid endpoint port: {port}")

    return f"{resolved}://{host}:{port}"


def from_string(uri: Optional[str], scheme: str = "http") -> str:
    """
    Validate a connection string of the form ``http://thehost.com:1234``.

    The scheme is forced to ``scheme`` unless the string already uses its
    secure variant. A missing port defaults to 8545.

    Raises:
        ArgumentError: If the string is missing or has no host
    """
    if not uri:
        raise ArgumentError("Endpoint URI must be provided")

    # "host:port" with no scheme parses the host as a scheme
    if "://" not in uri:
        uri = f"{scheme}://{uri}"

    parts = urlsplit(uri)
    if not parts.hostname:
        raise ArgumentError(f"Invalid endpoint host in {uri!r}")

    resolved = _resolve_scheme(scheme, parts.scheme)
    try:
        port = parts.port
    except ValueError as e:
        raise ArgumentError(f"Invalid endpoint port in {uri!r}") from e

    netloc = parts.netloc
    if port is None:
        netloc = f"{netloc}:{DEFAULT_PORT}"

    endpoint = urlunsplit((resolved, netloc, parts.path, parts.query, ""))
    logger.debug(f"Resolved endpoint {uri} -> {endpoint}")
    return endpoint
