"""
The reference constants used in hostkit
"""
from typing import Final

__all__ = ["IP", "LOGS"]


class IP:
    """
    Constants used for address normalization
    """
    V4_BYTES: Final[int] = 4
    V6_BYTES: Final[int] = 16
    BYTE_MASK: Final[int] = 0xff
    LOCALHOST: Final[tuple] = (127, 0, 0, 1)


class LOGS:
    DEFAULT_LEVEL: Final[str] = "INFO"
    FORMAT: Final[str] = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'
