#!/usr/bin/env python3
"""
Using the system's /etc files together with the built-in dataset.

This example demonstrates:
- Merging /etc/protocols and /etc/services over the built-in definitions
- Using only the /etc files
- Building a NetDB from a configuration file
"""

import logging
import sys

import netdb


def merge_etc():
    """Layer the /etc files over the built-in defaults"""
    etc_protocols = netdb.load_protocols("/etc/protocols")
    netdb.get_protocols().merge_index(etc_protocols)
    etc_services = netdb.load_services("/etc/services", netdb.get_protocols())
    netdb.get_services().merge_index(etc_services)

    dns = netdb.service_by_name("domain", "udp")
    print(f"merged:   {dns.name}: {dns.port} via {dns.protocol.name}")


def only_etc():
    """Replace the built-in defaults by the /etc files"""
    netdb.set_protocols(netdb.load_protocols("/etc/protocols"))
    netdb.set_services(netdb.load_services("/etc/services", netdb.get_protocols()))

    dns = netdb.service_by_name("domain", "udp")
    print(f"etc only: {dns.name}: {dns.port} via {dns.protocol.name}")


def from_config(config_path: str):
    """Build a database from a configuration file and install it"""
    db = netdb.NetDB.from_file(config_path)
    netdb.use_database(db)
    print(f"config:   {db!r}")


def main():
    logging.basicConfig(level=logging.INFO)

    merge_etc()
    netdb.reset_defaults()
    only_etc()

    if len(sys.argv) > 1:
        netdb.reset_defaults()
        from_config(sys.argv[1])


if __name__ == "__main__":
    main()
