"""
Tests for host name resolution. Stubbed tests pin the ordering behaviour; the rest use the local resolver.
"""
import socket

import pytest

from hostkit.core import UnknownHostError
from hostkit.net import IPAddress, LOCALHOST, lookup_all, reverse_lookup


# --- Missing host name --- #

@pytest.mark.parametrize("host", [None, ""])
def test_missing_host_gives_localhost(host):
    assert IPAddress.from_hostname(host) == LOCALHOST
    assert IPAddress.all_for_name(host) == [LOCALHOST]


def test_from_hostname_default_argument():
    assert IPAddress.from_hostname() is LOCALHOST


# --- Local resolver --- #

def test_localhost_resolves():
    addresses = IPAddress.all_for_name("localhost")
    assert addresses, "localhost resolved to no addresses"
    assert any(ip.is_loopback for ip in addresses), f"No loopback address in {addresses}"


def test_literal_addresses_need_no_lookup():
    assert IPAddress.from_hostname("192.168.2.5") == IPAddress.of(192, 168, 2, 5)
    assert str(IPAddress.from_hostname("fe80::21d:9ff:fea7:53e3")) == "fe80::21d:9ff:fea7:53e3"


def test_invalid_host_raises():
    with pytest.raises(UnknownHostError) as excinfo:
        IPAddress.from_hostname("definitely-invalid.invalid")
    assert excinfo.value.host == "definitely-invalid.invalid"
    assert isinstance(excinfo.value.__cause__, socket.gaierror)


def test_unknown_host_is_platform_error():
    with pytest.raises(socket.gaierror):
        IPAddress.all_for_name("definitely-invalid.invalid")


# --- Stubbed resolver --- #

def test_all_for_name_keeps_resolver_order(stub_resolver):
    stub_resolver["multi.example"] = ["10.0.0.2", "2001:db8::1", "10.0.0.1"]
    addresses = IPAddress.all_for_name("multi.example")
    assert [str(ip) for ip in addresses] == ["10.0.0.2", "2001:db8::1", "10.0.0.1"]


def test_all_for_name_drops_duplicates(stub_resolver):
    stub_resolver["dup.example"] = ["10.0.0.1", "10.0.0.1", "10.0.0.3"]
    assert IPAddress.all_for_name("dup.example") == [IPAddress.of(10, 0, 0, 1), IPAddress.of(10, 0, 0, 3)]


def test_from_hostname_uses_first_address(stub_resolver):
    stub_resolver["primary.example"] = ["2001:db8::5", "10.0.0.9"]
    ip = IPAddress.from_hostname("primary.example")
    assert ip.version == 6
    assert str(ip) == "2001:db8::5"


def test_scope_id_stripped(stub_resolver):
    stub_resolver["linklocal.example"] = ["fe80::1%eth0"]
    assert lookup_all("linklocal.example") == [bytes.fromhex("fe800000000000000000000000000001")]


def test_stubbed_failure_propagates(stub_resolver):
    with pytest.raises(UnknownHostError) as excinfo:
        IPAddress.from_hostname("missing.example")
    assert excinfo.value.errno == socket.EAI_NONAME


def test_no_retry_on_failure(monkeypatch):
    calls = []

    def _failing(host, port, *args, **kwargs):
        calls.append(host)
        raise socket.gaierror(socket.EAI_AGAIN, "Temporary failure in name resolution")

    monkeypatch.setattr(socket, "getaddrinfo", _failing)
    with pytest.raises(UnknownHostError):
        IPAddress.all_for_name("flaky.example")
    assert calls == ["flaky.example"], "Resolution must not be retried"


# --- Reverse lookup --- #

def test_reverse_lookup_falls_back_to_text(monkeypatch):
    def _no_name(addr):
        raise socket.herror(1, "Unknown host")

    monkeypatch.setattr(socket, "gethostbyaddr", _no_name)
    assert reverse_lookup(bytes([192, 0, 2, 1])) == "192.0.2.1"
    assert IPAddress.of(192, 0, 2, 1).canonical_host_name() == "192.0.2.1"


def test_reverse_lookup_returns_name(monkeypatch):
    monkeypatch.setattr(socket, "gethostbyaddr", lambda addr: ("host.example", [], [addr]))
    assert IPAddress.of(192, 0, 2, 7).canonical_host_name() == "host.example"
