"""
netdb - Network protocols, services and EtherTypes database

This package looks up IP protocols, transport services and Ethernet
EtherTypes by name or number, using a built-in dataset and optionally the
well-known /etc/protocols, /etc/services and /etc/ethertypes files.
"""

import logging

from .builtin import BUILTIN_ETHERTYPES, BUILTIN_PROTOCOLS, BUILTIN_SERVICES
from .config import ConfigParser, NetDBConfig, SourcesConfig
from .database import NetDB
from .defaults import (
    ethertype_by_name, ethertype_by_number, get_ethertypes, get_protocols,
    get_services, protocol_by_name, protocol_by_number, reset_defaults,
    service_by_name, service_by_port, set_ethertypes, set_protocols,
    set_services, use_database,
)
from .errors import ConfigError, FormatError, NetdbError, StreamError
from .index import EtherTypeIndex, ProtocolIndex, ServiceIndex
from .loader import load_ethertypes, load_protocols, load_services
from .models import (
    EtherTypeRecord, ProtocolRecord, ServicePort, ServiceProtocol, ServiceRecord
)
from .parsers import parse_ethertypes, parse_protocols, parse_services

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Public API
__version__ = "1.0.0"
__all__ = [
    "ProtocolRecord",
    "ServiceRecord",
    "EtherTypeRecord",
    "ServiceProtocol",
    "ServicePort",
    "ProtocolIndex",
    "ServiceIndex",
    "EtherTypeIndex",
    "parse_protocols",
    "parse_services",
    "parse_ethertypes",
    "load_protocols",
    "load_services",
    "load_ethertypes",
    "BUILTIN_PROTOCOLS",
    "BUILTIN_SERVICES",
    "BUILTIN_ETHERTYPES",
    "protocol_by_name",
    "protocol_by_number",
    "service_by_name",
    "service_by_port",
    "ethertype_by_name",
    "ethertype_by_number",
    "get_protocols",
    "get_services",
    "get_ethertypes",
    "set_protocols",
    "set_services",
    "set_ethertypes",
    "reset_defaults",
    "use_database",
    "NetDB",
    "NetDBConfig",
    "SourcesConfig",
    "ConfigParser",
    "NetdbError",
    "StreamError",
    "FormatError",
    "ConfigError",
]


def print_info():
    """Print netdb library information"""
    print(f"netdb v{__version__}")
    print(f"Builtin protocols:  {len(BUILTIN_PROTOCOLS)}")
    print(f"Builtin services:   {len(BUILTIN_SERVICES)}")
    print(f"Builtin EtherTypes: {len(BUILTIN_ETHERTYPES)}")
