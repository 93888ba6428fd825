"""
IP helpers around IPAddress.
Any address-like input converges on IPAddress; nothing here touches the resolver.
"""

from __future__ import annotations

import ipaddress as _ip

from hostkit.net.ip_address import IPAddress

__all__ = ["normalize", "to_display", "IPLike"]

IPLike = str | bytes | bytearray | IPAddress | _ip.IPv4Address | _ip.IPv6Address


def _strip_text(text: str) -> str:
    """Remove surrounding whitespace, URI brackets and any zone index (fe80::1%eth0, fe80::1%25en0)"""
    s = text.strip()
    if s.startswith("[") and s.endswith("]"):
        s = s[1:-1]
    return s.split("%", 1)[0]


def normalize(ip: IPLike) -> IPAddress:
    """
    Return an IPAddress for any supported input.
    - IPAddress values are returned as they are
    - ipaddress objects convert byte for byte, so a v4-mapped IPv6 address keeps all 16 bytes
    - bytes follow IPAddress.from_bytes padding rules
    - strings must be textual addresses; no name resolution happens here
    """
    if isinstance(ip, IPAddress):
        return ip
    if isinstance(ip, (_ip.IPv4Address, _ip.IPv6Address)):
        return IPAddress.from_platform(ip)

    if isinstance(ip, (bytes, bytearray, memoryview)):
        return IPAddress.from_bytes(ip)

    if isinstance(ip, str):
        return IPAddress.from_platform(_ip.ip_address(_strip_text(ip)))

    raise TypeError(f"Unsupported IP input type: {type(ip)}")


def to_display(ip: IPLike) -> str:
    """Human-friendly string: dotted-quad for IPv4 and mapped IPv4; compressed for native v6."""
    platform_ip = normalize(ip).to_platform()
    if isinstance(platform_ip, _ip.IPv6Address) and platform_ip.ipv4_mapped:
        return str(platform_ip.ipv4_mapped)
    return str(platform_ip)
