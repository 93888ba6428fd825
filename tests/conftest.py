"""
Fixtures used in the tests
"""
import socket

import pytest

from tests.utility import fake_addrinfo


@pytest.fixture()
def stub_resolver(monkeypatch):
    """
    Replace socket.getaddrinfo with a table lookup. Unknown names raise socket.gaierror like the platform does.
    """
    table = {}

    def _getaddrinfo(host, port, *args, **kwargs):
        if host not in table:
            raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")
        return fake_addrinfo(*table[host])

    monkeypatch.setattr(socket, "getaddrinfo", _getaddrinfo)
    return table
