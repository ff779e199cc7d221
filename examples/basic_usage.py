#!/usr/bin/env python3
"""
Basic usage example for netdb library.

This example demonstrates:
- Looking up services and protocols in the built-in dataset
- Looking up EtherTypes by name and number
"""

import netdb


def main():
    netdb.print_info()
    print()

    dns = netdb.service_by_name("domain", "udp")
    print(f"{dns.name}: {dns.port} via {dns.protocol.name}")

    https = netdb.service_by_port(443, "tcp")
    print(f"Port 443/tcp: {https.name}")

    tcp = netdb.protocol_by_name("tcp")
    print(f"Protocol tcp: {tcp.number}")

    udp = netdb.protocol_by_number(17)
    print(f"Protocol 17: {udp.name} (aliases: {', '.join(udp.aliases)})")

    ipv6 = netdb.ethertype_by_name("IPv6")
    print(f"EtherType {ipv6.name}: {ipv6.number:#06x} ({ipv6.comment})")

    vlan = netdb.ethertype_by_number(0x8100)
    print(f"EtherType {vlan.number:#06x}: {vlan.name}")


if __name__ == "__main__":
    main()
