"""
Pass-through calls to the platform name resolver.

Everything here blocks the calling thread for as long as the resolver takes; no timeouts or retries are added.
"""
import ipaddress as IP
import socket

from hostkit.core.exceptions import UnknownHostError
from hostkit.core.logging import get_logger

__all__ = ["lookup", "lookup_all", "reverse_lookup"]

logger = get_logger(__name__)


def _sockaddr_bytes(sockaddr: tuple) -> bytes:
    """Packed bytes of the host part of a sockaddr, with any IPv6 scope id removed"""
    host = sockaddr[0].split("%", 1)[0]
    return IP.ip_address(host).packed


def lookup_all(host: str) -> list[bytes]:
    """
    Return the packed bytes of every address registered for the host, in the order the resolver gives them.

    The resolver reports one entry per socket type, so repeated addresses are dropped after their first
    occurrence. Literal addresses are parsed by the resolver without a network lookup.
    """
    try:
        infos = socket.getaddrinfo(host, None)
    except socket.gaierror as e:
        logger.warning(f"Failed to resolve {host!r}: {e}")
        raise UnknownHostError(host, *e.args) from e
    except UnicodeError as e:
        # IDNA encoding rejects the name before any lookup happens
        logger.warning(f"Failed to encode host name {host!r}: {e}")
        raise UnknownHostError(host, str(e)) from e

    addresses = []
    for _family, _type, _proto, _canonname, sockaddr in infos:
        raw = _sockaddr_bytes(sockaddr)
        if raw not in addresses:
            addresses.append(raw)

    if not addresses:
        raise UnknownHostError(host, "no addresses returned")

    logger.debug(f"Resolved {host!r} to {len(addresses)} address(es)")
    return addresses


def lookup(host: str) -> bytes:
    """Return the packed bytes of the primary address for the host"""
    return lookup_all(host)[0]


def reverse_lookup(raw: bytes) -> str:
    """
    Return the host name registered for the address. Falls back to the textual address when the resolver has no
    name for it.
    """
    text = str(IP.ip_address(raw))
    try:
        name, _aliases, _addresses = socket.gethostbyaddr(text)
    except (socket.herror, socket.gaierror) as e:
        logger.debug(f"No reverse entry for {text}: {e}")
        return text
    return name
