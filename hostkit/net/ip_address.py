"""
The IPAddress class: an immutable IPv4 or IPv6 address held as its raw bytes

Example:
    ip = IPAddress.of(192, 168, 2, 5)
    print(f"{ip} -> {ip.canonical_host_name()}, loopback? {ip.is_loopback}")

    ip6 = IPAddress.from_hostname("fe80::21d:9ff:fea7:53e3")
    platform_ip = ip6.to_platform()  # ipaddress.IPv6Address
"""
import ipaddress as IP
import json
from typing import Iterable, Optional, Union

from hostkit.core.exceptions import InvalidAddressLength
from hostkit.core.formats import IP as IPFORMAT
from hostkit.net import resolver

__all__ = ["IPAddress", "LOCALHOST", "PlatformAddress"]

PlatformAddress = Union[IP.IPv4Address, IP.IPv6Address]
BytesLike = Union[bytes, bytearray, memoryview]


def _format_input(values: Iterable[int]) -> str:
    return ",".join(str(v) for v in values)


class IPAddress:
    """
    -------------------------------------------------------------
    |   Name    |   Data type   |   Format              |   Size    |
    -------------------------------------------------------------
    |   address |   bytes       |   network byte order  |   4 or 16 |
    -------------------------------------------------------------

    Build instances through the factory classmethods, which pad short input to the canonical width:
        - 1 to 3 bytes are taken as IPv4 and padded with zeros to 4 bytes
        - 5 to 15 bytes are taken as IPv6 and padded with zeros to 16 bytes
        - 4 and 16 bytes are used as-is
        - anything else raises InvalidAddressLength

    Two addresses are equal when their bytes are equal. Higher-level queries go through the platform
    ipaddress type (see to_platform) or the platform resolver.
    """
    LOCALHOST: "IPAddress"

    def __init__(self, address: BytesLike):
        if not isinstance(address, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected bytes but received: {type(address)}")
        address = bytes(address)
        if len(address) not in (IPFORMAT.V4_BYTES, IPFORMAT.V6_BYTES):
            raise InvalidAddressLength(len(address), _format_input(address))
        self._address = address

    # --- Factories --- #

    @classmethod
    def from_bytes(cls, data: Union[BytesLike, Iterable[int]]) -> "IPAddress":
        """
        Create an IPAddress from 1 to 16 byte values. Integers in the signed byte range are read as two's
        complement, so -1 and 255 give the same byte.
        """
        if isinstance(data, (bytes, bytearray, memoryview)):
            raw = bytes(data)
        else:
            values = list(data)
            for v in values:
                if not -128 <= v <= 255:
                    raise ValueError(f"Byte value out of range: {v}")
            raw = bytes(v & IPFORMAT.BYTE_MASK for v in values)

        n = len(raw)
        if n == 0 or n > IPFORMAT.V6_BYTES:
            raise InvalidAddressLength(n, _format_input(raw))

        if n not in (IPFORMAT.V4_BYTES, IPFORMAT.V6_BYTES):
            width = IPFORMAT.V4_BYTES if n < IPFORMAT.V4_BYTES else IPFORMAT.V6_BYTES
            raw = raw + b'\x00' * (width - n)

        return cls(raw)

    @classmethod
    def from_ints(cls, ints: Iterable[int]) -> "IPAddress":
        """
        Create an IPAddress from 1 to 16 integers. Each integer is truncated to its low 8 bits.

        Example:
            IPAddress.from_ints([192, 168, 1, 100])
        """
        return cls.from_bytes(bytes(i & IPFORMAT.BYTE_MASK for i in ints))

    @classmethod
    def of(cls, *ints: int) -> "IPAddress":
        """Create an IPAddress from 1 to 16 integer arguments, truncated to 8 bits each"""
        return cls.from_ints(ints)

    @classmethod
    def from_hostname(cls, host: Optional[str] = None) -> "IPAddress":
        """
        Create an IPAddress for the primary address of a host name or a textual address.

        A missing host name gives the loopback address (RFC 3330 section 2, RFC 2373 section 2.5.3).

        Raises:
            UnknownHostError: the name cannot be resolved
        """
        if not host:
            return LOCALHOST
        return cls.from_bytes(resolver.lookup(host))

    @classmethod
    def all_for_name(cls, host: Optional[str] = None) -> list["IPAddress"]:
        """
        Return every IPAddress registered for the host name, in the order the platform resolver returns them.

        If the host name is a literal address only its format is checked. A missing host name gives a list holding
        the loopback address.

        Raises:
            UnknownHostError: the name cannot be resolved
        """
        if not host:
            return [LOCALHOST]
        return [cls.from_bytes(raw) for raw in resolver.lookup_all(host)]

    @classmethod
    def from_platform(cls, addr: PlatformAddress) -> "IPAddress":
        return cls(addr.packed)

    # --- Conversion --- #

    def to_platform(self) -> PlatformAddress:
        return IP.ip_address(self._address)

    # --- Properties --- #

    @property
    def address(self) -> bytes:
        return self._address

    @property
    def packed(self) -> bytes:
        return self._address

    @property
    def version(self) -> int:
        return 4 if len(self._address) == IPFORMAT.V4_BYTES else 6

    @property
    def is_loopback(self) -> bool:
        return self.to_platform().is_loopback

    def canonical_host_name(self) -> str:
        """Reverse lookup of the address; gives the textual address when no name is registered"""
        return resolver.reverse_lookup(self._address)

    # --- Display --- #

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "address": str(self),
            "bytes": self._address.hex()
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def __str__(self) -> str:
        return str(self.to_platform())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"

    # --- Value semantics --- #

    def __bytes__(self) -> bytes:
        return self._address

    def __eq__(self, other) -> bool:
        if not isinstance(other, IPAddress):
            return NotImplemented
        return self._address == other._address

    def __hash__(self) -> int:
        return hash(self._address)


LOCALHOST = IPAddress(bytes(IPFORMAT.LOCALHOST))
IPAddress.LOCALHOST = LOCALHOST
