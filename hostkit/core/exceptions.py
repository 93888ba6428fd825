"""
The custom exceptions used throughout hostkit
"""
import socket

__all__ = ["InvalidAddressLength", "UnknownHostError", "IteratorError"]


class InvalidAddressLength(ValueError):
    """
    For when a raw address has no canonical form, i.e. it is empty or longer than 16 bytes
    """

    def __init__(self, length: int, address: str):
        self.length = length
        self.address = address
        super().__init__(f"\"{address}\": invalid length {length}")


class UnknownHostError(socket.gaierror):
    """
    Raised when the platform resolver cannot resolve a host name
    """

    def __init__(self, host: str, *args):
        self.host = host
        super().__init__(*args)

    def __str__(self) -> str:
        reason = super().__str__()
        return f"Unknown host {self.host!r}: {reason}" if reason else f"Unknown host {self.host!r}"


class IteratorError(Exception):
    """
    For when asking an exhausted iterator for its next element
    """
    pass
