"""
Built-in protocols, services and EtherTypes dataset.

Protocols and services are taken from the Debian netbase /etc/protocols and
/etc/services files, EtherTypes from the Linux ethertypes table.
"""

from typing import List

from .index import ProtocolIndex
from .models import EtherTypeRecord, ProtocolRecord, ServiceRecord


# name, number, aliases
_PROTOCOLS = [
    ("ip", 0, ("IP",)),
    ("hopopt", 0, ("HOPOPT",)),
    ("icmp", 1, ("ICMP",)),
    ("igmp", 2, ("IGMP",)),
    ("ggp", 3, ("GGP",)),
    ("ipencap", 4, ("IP-ENCAP",)),
    ("st", 5, ("ST",)),
    ("tcp", 6, ("TCP",)),
    ("egp", 8, ("EGP",)),
    ("igp", 9, ("IGP",)),
    ("pup", 12, ("PUP",)),
    ("udp", 17, ("UDP",)),
    ("hmp", 20, ("HMP",)),
    ("xns-idp", 22, ("XNS-IDP",)),
    ("rdp", 27, ("RDP",)),
    ("iso-tp4", 29, ("ISO-TP4",)),
    ("dccp", 33, ("DCCP",)),
    ("xtp", 36, ("XTP",)),
    ("ddp", 37, ("DDP",)),
    ("idpr-cmtp", 38, ("IDPR-CMTP",)),
    ("ipv6", 41, ("IPv6",)),
    ("ipv6-route", 43, ("IPv6-Route",)),
    ("ipv6-frag", 44, ("IPv6-Frag",)),
    ("idrp", 45, ("IDRP",)),
    ("rsvp", 46, ("RSVP",)),
    ("gre", 47, ("GRE",)),
    ("esp", 50, ("IPSEC-ESP",)),
    ("ah", 51, ("IPSEC-AH",)),
    ("skip", 57, ("SKIP",)),
    ("ipv6-icmp", 58, ("IPv6-ICMP",)),
    ("ipv6-nonxt", 59, ("IPv6-NoNxt",)),
    ("ipv6-opts", 60, ("IPv6-Opts",)),
    ("rspf", 73, ("RSPF", "CPHB")),
    ("vmtp", 81, ("VMTP",)),
    ("eigrp", 88, ("EIGRP",)),
    ("ospf", 89, ("OSPFIGP",)),
    ("ax.25", 93, ("AX.25",)),
    ("ipip", 94, ("IPIP",)),
    ("etherip", 97, ("ETHERIP",)),
    ("encap", 98, ("ENCAP",)),
    ("pim", 103, ("PIM",)),
    ("ipcomp", 108, ("IPCOMP",)),
    ("vrrp", 112, ("VRRP",)),
    ("l2tp", 115, ("L2TP",)),
    ("isis", 124, ("ISIS",)),
    ("sctp", 132, ("SCTP",)),
    ("fc", 133, ("FC",)),
    ("mobility-header", 135, ("Mobility-Header",)),
    ("udplite", 136, ("UDPLite",)),
    ("mpls-in-ip", 137, ("MPLS-in-IP",)),
    ("manet", 138, ()),
    ("hip", 139, ("HIP",)),
    ("shim6", 140, ("Shim6",)),
    ("wesp", 141, ("WESP",)),
    ("rohc", 142, ("ROHC",)),
    ("ethernet", 143, ("Ethernet",)),
]

# name, port, protocol, aliases
_SERVICES = [
    ("tcpmux", 1, "tcp", ()),
    ("echo", 7, "tcp", ()),
    ("echo", 7, "udp", ()),
    ("discard", 9, "tcp", ("sink", "null")),
    ("discard", 9, "udp", ("sink", "null")),
    ("systat", 11, "tcp", ("users",)),
    ("daytime", 13, "tcp", ()),
    ("daytime", 13, "udp", ()),
    ("netstat", 15, "tcp", ()),
    ("qotd", 17, "tcp", ("quote",)),
    ("chargen", 19, "tcp", ("ttytst", "source")),
    ("chargen", 19, "udp", ("ttytst", "source")),
    ("ftp-data", 20, "tcp", ()),
    ("ftp", 21, "tcp", ()),
    ("fsp", 21, "udp", ("fspd",)),
    ("ssh", 22, "tcp", ()),
    ("telnet", 23, "tcp", ()),
    ("smtp", 25, "tcp", ("mail",)),
    ("time", 37, "tcp", ("timserver",)),
    ("time", 37, "udp", ("timserver",)),
    ("whois", 43, "tcp", ("nicname",)),
    ("tacacs", 49, "tcp", ()),
    ("tacacs", 49, "udp", ()),
    ("domain", 53, "tcp", ()),
    ("domain", 53, "udp", ()),
    ("gopher", 70, "tcp", ()),
    ("finger", 79, "tcp", ()),
    ("http", 80, "tcp", ("www",)),
    ("kerberos", 88, "tcp", ("kerberos5", "krb5", "kerberos-sec")),
    ("kerberos", 88, "udp", ("kerberos5", "krb5", "kerberos-sec")),
    ("iso-tsap", 102, "tcp", ("tsap",)),
    ("acr-nema", 104, "tcp", ("dicom",)),
    ("pop3", 110, "tcp", ("pop-3",)),
    ("sunrpc", 111, "tcp", ("portmapper",)),
    ("sunrpc", 111, "udp", ("portmapper",)),
    ("auth", 113, "tcp", ("authentication", "tap", "ident")),
    ("nntp", 119, "tcp", ("readnews", "untp")),
    ("ntp", 123, "udp", ()),
    ("epmap", 135, "tcp", ("loc-srv",)),
    ("netbios-ns", 137, "udp", ()),
    ("netbios-dgm", 138, "udp", ()),
    ("netbios-ssn", 139, "tcp", ()),
    ("imap2", 143, "tcp", ("imap",)),
    ("snmp", 161, "tcp", ()),
    ("snmp", 161, "udp", ()),
    ("snmp-trap", 162, "tcp", ("snmptrap",)),
    ("snmp-trap", 162, "udp", ("snmptrap",)),
    ("cmip-man", 163, "tcp", ()),
    ("cmip-man", 163, "udp", ()),
    ("cmip-agent", 164, "tcp", ()),
    ("cmip-agent", 164, "udp", ()),
    ("mailq", 174, "tcp", ()),
    ("xdmcp", 177, "udp", ()),
    ("bgp", 179, "tcp", ()),
    ("smux", 199, "tcp", ()),
    ("qmtp", 209, "tcp", ()),
    ("z3950", 210, "tcp", ("wais",)),
    ("ipx", 213, "udp", ()),
    ("ptp-event", 319, "udp", ()),
    ("ptp-general", 320, "udp", ()),
    ("pawserv", 345, "tcp", ()),
    ("zserv", 346, "tcp", ()),
    ("rpc2portmap", 369, "tcp", ()),
    ("rpc2portmap", 369, "udp", ()),
    ("codaauth2", 370, "tcp", ()),
    ("codaauth2", 370, "udp", ()),
    ("clearcase", 371, "udp", ("Clearcase",)),
    ("ldap", 389, "tcp", ()),
    ("ldap", 389, "udp", ()),
    ("svrloc", 427, "tcp", ()),
    ("svrloc", 427, "udp", ()),
    ("https", 443, "tcp", ()),
    ("https", 443, "udp", ()),
    ("snpp", 444, "tcp", ()),
    ("microsoft-ds", 445, "tcp", ()),
    ("kpasswd", 464, "tcp", ()),
    ("kpasswd", 464, "udp", ()),
    ("submissions", 465, "tcp", ("ssmtp", "smtps", "urd")),
    ("saft", 487, "tcp", ()),
    ("isakmp", 500, "udp", ()),
    ("rtsp", 554, "tcp", ()),
    ("rtsp", 554, "udp", ()),
    ("nqs", 607, "tcp", ()),
    ("asf-rmcp", 623, "udp", ()),
    ("qmqp", 628, "tcp", ()),
    ("ipp", 631, "tcp", ()),
    ("ldp", 646, "tcp", ()),
    ("ldp", 646, "udp", ()),
    ("exec", 512, "tcp", ()),
    ("biff", 512, "udp", ("comsat",)),
    ("login", 513, "tcp", ()),
    ("who", 513, "udp", ("whod",)),
    ("shell", 514, "tcp", ("cmd",)),
    ("syslog", 514, "udp", ()),
    ("printer", 515, "tcp", ("spooler",)),
    ("talk", 517, "udp", ()),
    ("ntalk", 518, "udp", ()),
    ("route", 520, "udp", ("router", "routed")),
    ("gdomap", 538, "tcp", ()),
    ("gdomap", 538, "udp", ()),
    ("uucp", 540, "tcp", ("uucpd",)),
    ("klogin", 543, "tcp", ()),
    ("kshell", 544, "tcp", ("krcmd",)),
    ("dhcpv6-client", 546, "tcp", ()),
    ("dhcpv6-client", 546, "udp", ()),
    ("dhcpv6-server", 547, "tcp", ()),
    ("dhcpv6-server", 547, "udp", ()),
    ("afpovertcp", 548, "tcp", ()),
    ("nntps", 563, "tcp", ("snntp",)),
    ("submission", 587, "tcp", ()),
    ("ldaps", 636, "tcp", ()),
    ("ldaps", 636, "udp", ()),
    ("tinc", 655, "tcp", ()),
    ("tinc", 655, "udp", ()),
    ("silc", 706, "tcp", ()),
    ("kerberos-adm", 749, "tcp", ()),
    ("domain-s", 853, "tcp", ()),
    ("domain-s", 853, "udp", ()),
    ("rsync", 873, "tcp", ()),
    ("ftps-data", 989, "tcp", ()),
    ("ftps", 990, "tcp", ()),
    ("telnets", 992, "tcp", ()),
    ("imaps", 993, "tcp", ()),
    ("pop3s", 995, "tcp", ()),
    ("socks", 1080, "tcp", ()),
    ("proofd", 1093, "tcp", ()),
    ("rootd", 1094, "tcp", ()),
    ("openvpn", 1194, "tcp", ()),
    ("openvpn", 1194, "udp", ()),
    ("rmiregistry", 1099, "tcp", ()),
    ("lotusnote", 1352, "tcp", ("lotusnotes",)),
    ("ms-sql-s", 1433, "tcp", ()),
    ("ms-sql-m", 1434, "udp", ()),
    ("ingreslock", 1524, "tcp", ()),
    ("datametrics", 1645, "tcp", ("old-radius",)),
    ("datametrics", 1645, "udp", ("old-radius",)),
    ("sa-msg-port", 1646, "tcp", ("old-radacct",)),
    ("sa-msg-port", 1646, "udp", ("old-radacct",)),
    ("l2f", 1701, "udp", ("l2tp",)),
    ("radius", 1812, "tcp", ()),
    ("radius", 1812, "udp", ()),
    ("radius-acct", 1813, "tcp", ("radacct",)),
    ("radius-acct", 1813, "udp", ("radacct",)),
    ("cisco-sccp", 2000, "tcp", ()),
    ("nfs", 2049, "tcp", ()),
    ("nfs", 2049, "udp", ()),
    ("gnunet", 2086, "tcp", ()),
    ("gnunet", 2086, "udp", ()),
    ("rtcm-sc104", 2101, "tcp", ()),
    ("rtcm-sc104", 2101, "udp", ()),
    ("gsigatekeeper", 2119, "tcp", ()),
    ("gris", 2135, "tcp", ()),
    ("cvspserver", 2401, "tcp", ()),
    ("venus", 2430, "tcp", ()),
    ("venus", 2430, "udp", ()),
    ("mon", 2583, "tcp", ()),
    ("mon", 2583, "udp", ()),
    ("dict", 2628, "tcp", ()),
    ("f5-globalsite", 2792, "tcp", ()),
    ("gpsd", 2947, "tcp", ()),
    ("gds-db", 3050, "tcp", ("gds_db",)),
    ("icpv2", 3130, "udp", ("icp",)),
    ("isns", 3205, "tcp", ()),
    ("isns", 3205, "udp", ()),
    ("iscsi-target", 3260, "tcp", ()),
    ("mysql", 3306, "tcp", ()),
    ("ms-wbt-server", 3389, "tcp", ()),
    ("nut", 3493, "tcp", ()),
    ("nut", 3493, "udp", ()),
    ("distcc", 3632, "tcp", ()),
    ("daap", 3689, "tcp", ()),
    ("svn", 3690, "tcp", ("subversion",)),
    ("suucp", 4031, "tcp", ()),
    ("sysrqd", 4094, "tcp", ()),
    ("sieve", 4190, "tcp", ()),
    ("epmd", 4369, "tcp", ()),
    ("remctl", 4373, "tcp", ()),
    ("f5-iquery", 4353, "tcp", ()),
    ("ntske", 4460, "tcp", ()),
    ("ipsec-nat-t", 4500, "udp", ()),
    ("iax", 4569, "udp", ()),
    ("mtn", 4691, "tcp", ()),
    ("radmin-port", 4899, "tcp", ()),
    ("sip", 5060, "tcp", ()),
    ("sip", 5060, "udp", ()),
    ("sip-tls", 5061, "tcp", ()),
    ("sip-tls", 5061, "udp", ()),
    ("xmpp-client", 5222, "tcp", ("jabber-client",)),
    ("xmpp-server", 5269, "tcp", ("jabber-server",)),
    ("cfengine", 5308, "tcp", ()),
    ("mdns", 5353, "udp", ()),
    ("postgresql", 5432, "tcp", ("postgres",)),
    ("freeciv", 5556, "tcp", ("rptp",)),
    ("amqps", 5671, "tcp", ()),
    ("amqp", 5672, "tcp", ()),
    ("amqp", 5672, "sctp", ()),
    ("x11", 6000, "tcp", ("x11-0",)),
    ("x11-1", 6001, "tcp", ()),
    ("x11-2", 6002, "tcp", ()),
    ("gnutella-svc", 6346, "tcp", ()),
    ("gnutella-svc", 6346, "udp", ()),
    ("gnutella-rtr", 6347, "tcp", ()),
    ("gnutella-rtr", 6347, "udp", ()),
    ("redis", 6379, "tcp", ()),
    ("sge-qmaster", 6444, "tcp", ("sge_qmaster",)),
    ("sge-execd", 6445, "tcp", ("sge_execd",)),
    ("mysql-proxy", 6446, "tcp", ()),
    ("babel", 6696, "udp", ()),
    ("ircs-u", 6697, "tcp", ()),
    ("bbs", 7000, "tcp", ()),
    ("afs3-fileserver", 7000, "udp", ()),
    ("afs3-callback", 7001, "udp", ()),
    ("afs3-prserver", 7002, "udp", ()),
    ("font-service", 7100, "tcp", ("xfs",)),
    ("http-alt", 8080, "tcp", ("webcache",)),
    ("puppet", 8140, "tcp", ()),
    ("bacula-dir", 9101, "tcp", ()),
    ("bacula-fd", 9102, "tcp", ()),
    ("bacula-sd", 9103, "tcp", ()),
    ("xmms2", 9667, "tcp", ()),
    ("nbd", 10809, "tcp", ()),
    ("zabbix-agent", 10050, "tcp", ()),
    ("zabbix-trapper", 10051, "tcp", ()),
    ("amanda", 10080, "tcp", ()),
    ("dicom", 11112, "tcp", ()),
    ("hkp", 11371, "tcp", ()),
    ("db-lsp", 17500, "tcp", ()),
    ("dcap", 22125, "tcp", ()),
    ("gsiftp", 2811, "tcp", ()),
    ("gsidcap", 22128, "tcp", ()),
    ("wnn6", 22273, "tcp", ()),
]

# name, number, aliases, comment
_ETHERTYPES = [
    ("IPv4", 0x0800, ("ip", "ip4"), "Internet IP (IPv4)"),
    ("X25", 0x0805, (), ""),
    ("ARP", 0x0806, ("ether-arp",), ""),
    ("FR_ARP", 0x0808, (), "Frame Relay ARP [RFC1701]"),
    ("BPQ", 0x08FF, (), "G8BPQ AX.25 Ethernet Packet"),
    ("DEC", 0x6000, (), "DEC Assigned proto"),
    ("DNA_DL", 0x6001, (), "DEC DNA Dump/Load"),
    ("DNA_RC", 0x6002, (), "DEC DNA Remote Console"),
    ("DNA_RT", 0x6003, (), "DEC DNA Routing"),
    ("LAT", 0x6004, (), "DEC LAT"),
    ("DIAG", 0x6005, (), "DEC Diagnostics"),
    ("CUST", 0x6006, (), "DEC Customer use"),
    ("SCA", 0x6007, (), "DEC Systems Comms Arch"),
    ("TEB", 0x6558, (), "Trans Ether Bridging [RFC1701]"),
    ("RAW_FR", 0x6559, (), "Raw Frame Relay [RFC1701]"),
    ("RARP", 0x8035, (), "Reverse ARP [RFC903]"),
    ("AARP", 0x80F3, (), "Appletalk AARP"),
    ("ATALK", 0x809B, (), "Appletalk"),
    ("802_1Q", 0x8100, ("8021q", "1q", "802.1q", "dot1q"), "802.1Q Virtual LAN tagged frame"),
    ("IPX", 0x8137, (), "Novell IPX"),
    ("NetBEUI", 0x8191, (), "NetBEUI"),
    ("IPv6", 0x86DD, ("ip6",), "IP version 6"),
    ("PPP", 0x880B, (), "PPP"),
    ("ATMMPOA", 0x884C, (), "MultiProtocol over ATM"),
    ("PPP_DISC", 0x8863, (), "PPPoE discovery messages"),
    ("PPP_SES", 0x8864, (), "PPPoE session messages"),
    ("ATMFATE", 0x8884, (), "Frame-based ATM Transport over Ethernet"),
    ("LOOP", 0x9000, ("loopback",), ""),
    ("MPLS", 0x8847, (), "MPLS unicast"),
    ("MPLS_MC", 0x8848, (), "MPLS multicast"),
    ("EAPOL", 0x888E, (), "802.1X port-based network access control"),
    ("802_1AD", 0x88A8, ("8021ad", "802.1ad", "qinq"), "802.1ad Provider Bridging"),
    ("AOE", 0x88A2, (), "ATA over Ethernet"),
    ("LLDP", 0x88CC, (), "Link Layer Discovery Protocol"),
    ("MACSEC", 0x88E5, (), "802.1AE MAC Security"),
    ("PTP", 0x88F7, (), "IEEE 1588 Precision Time Protocol"),
    ("FCOE", 0x8906, (), "Fibre Channel over Ethernet"),
    ("FIP", 0x8914, (), "FCoE Initialization Protocol"),
    ("RoMON", 0x88BF, ("mikrotik-rommon", "mt-rommon"), "MikroTik RoMON (unofficial)"),
]


BUILTIN_PROTOCOLS: List[ProtocolRecord] = [
    ProtocolRecord(name=name, number=number, aliases=aliases)
    for name, number, aliases in _PROTOCOLS
]

BUILTIN_ETHERTYPES: List[EtherTypeRecord] = [
    EtherTypeRecord(name=name, number=number, aliases=aliases, comment=comment)
    for name, number, aliases, comment in _ETHERTYPES
]


def _resolve_services(protocols: ProtocolIndex) -> List[ServiceRecord]:
    """Build service records, resolving their protocol names"""
    services = []
    for name, port, protocol_name, aliases in _SERVICES:
        protocol = protocols.by_name(protocol_name)
        if protocol is None:
            continue
        services.append(ServiceRecord(
            name=name,
            port=port,
            protocol_name=protocol_name,
            protocol=protocol,
            aliases=aliases,
        ))
    return services


BUILTIN_SERVICES: List[ServiceRecord] = _resolve_services(ProtocolIndex(BUILTIN_PROTOCOLS))
