"""Test the process-wide default indexes."""

import io
import threading

import netdb
from netdb import defaults
from netdb import (
    NetDB, ProtocolIndex, ServiceIndex, parse_protocols, parse_services,
)


def test_defaults_start_uninitialized():
    assert defaults._protocols is None
    assert defaults._services is None
    assert defaults._ethertypes is None


def test_lookup_initializes_from_builtins():
    """Test that a lookup builds the default service index on first use."""
    dns = netdb.service_by_name("domain", "udp")
    assert dns.port == 53
    assert defaults._services is not None
    assert len(netdb.get_services()) == len(netdb.BUILTIN_SERVICES)


def test_get_returns_same_instance():
    assert netdb.get_protocols() is netdb.get_protocols()
    assert netdb.get_ethertypes() is netdb.get_ethertypes()


def test_preseeded_index_is_used():
    protocols = ProtocolIndex(parse_protocols(io.StringIO("foobar 12\n")))
    netdb.set_protocols(protocols)
    assert netdb.protocol_by_name("foobar").number == 12
    assert netdb.protocol_by_name("tcp") is None

    services = ServiceIndex(parse_services(io.StringIO("crash 666/foobar\n"), protocols))
    netdb.set_services(services)
    assert netdb.service_by_port(666).name == "crash"
    assert netdb.service_by_name("domain", "udp") is None


def test_merge_etc_over_builtin():
    """Test layering a custom index over the default one."""
    custom = ProtocolIndex(parse_protocols(io.StringIO("tcp 6 TRANSMISSION\n")))
    netdb.get_protocols().merge_index(custom)
    assert netdb.protocol_by_name("TRANSMISSION").name == "tcp"
    assert netdb.protocol_by_number(6) is custom.by_number(6)
    assert netdb.protocol_by_name("udp").number == 17


def test_reset_defaults():
    netdb.set_protocols(ProtocolIndex())
    assert netdb.protocol_by_name("tcp") is None
    netdb.reset_defaults()
    assert netdb.protocol_by_name("tcp").number == 6


def test_use_database():
    db = NetDB(protocols=ProtocolIndex(parse_protocols(io.StringIO("foobar 12\n"))))
    netdb.use_database(db)
    assert netdb.get_protocols() is db.protocols
    assert netdb.get_services() is db.services
    assert netdb.get_ethertypes() is db.ethertypes
    assert netdb.ethertype_by_name("IPv4") is None


def test_concurrent_first_use_initializes_once():
    results = []
    barrier = threading.Barrier(8)

    def lookup():
        barrier.wait()
        results.append(netdb.get_services())

    threads = [threading.Thread(target=lookup) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 8
    assert all(index is results[0] for index in results)
