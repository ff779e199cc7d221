"""
Process-wide default indexes and package-level lookups.

The default protocol, service and EtherType indexes start out uninitialized.
The first lookup finding a default uninitialized builds it from the built-in
dataset. To use other data, install indexes with set_protocols(),
set_services(), set_ethertypes() or use_database() before the first lookup.

Concurrency contract: building a default on first use is serialized by a
lock, so concurrent first lookups build each default exactly once. Replacing
defaults while other threads are looking up is not synchronized; do it during
single-threaded startup.
"""

import logging
import threading
from typing import TYPE_CHECKING, Optional

from .builtin import BUILTIN_ETHERTYPES, BUILTIN_PROTOCOLS, BUILTIN_SERVICES
from .index import EtherTypeIndex, ProtocolIndex, ServiceIndex
from .models import EtherTypeRecord, ProtocolRecord, ServiceRecord

if TYPE_CHECKING:
    from .database import NetDB

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_protocols: Optional[ProtocolIndex] = None
_services: Optional[ServiceIndex] = None
_ethertypes: Optional[EtherTypeIndex] = None


def get_protocols() -> ProtocolIndex:
    """Return the default protocol index, building it from builtins if unset"""
    global _protocols
    if _protocols is None:
        with _lock:
            if _protocols is None:
                logger.debug("Initializing default protocols from builtin dataset")
                _protocols = ProtocolIndex(BUILTIN_PROTOCOLS)
    return _protocols


def get_services() -> ServiceIndex:
    """Return the default service index, building it from builtins if unset"""
    global _services
    if _services is None:
        with _lock:
            if _services is None:
                logger.debug("Initializing default services from builtin dataset")
                _services = ServiceIndex(BUILTIN_SERVICES)
    return _services


def get_ethertypes() -> EtherTypeIndex:
    """Return the default EtherType index, building it from builtins if unset"""
    global _ethertypes
    if _ethertypes is None:
        with _lock:
            if _ethertypes is None:
                logger.debug("Initializing default EtherTypes from builtin dataset")
                _ethertypes = EtherTypeIndex(BUILTIN_ETHERTYPES)
    return _ethertypes


def set_protocols(index: Optional[ProtocolIndex]):
    """Replace the default protocol index; None resets it to uninitialized"""
    global _protocols
    with _lock:
        _protocols = index


def set_services(index: Optional[ServiceIndex]):
    """Replace the default service index; None resets it to uninitialized"""
    global _services
    with _lock:
        _services = index


def set_ethertypes(index: Optional[EtherTypeIndex]):
    """Replace the default EtherType index; None resets it to uninitialized"""
    global _ethertypes
    with _lock:
        _ethertypes = index


def reset_defaults():
    """Return all default indexes to the uninitialized state"""
    global _protocols, _services, _ethertypes
    with _lock:
        _protocols = None
        _services = None
        _ethertypes = None


def use_database(db: 'NetDB'):
    """
    Install the indexes of a NetDB context as the defaults.

    Args:
        db: Context whose indexes the package-level lookups should use
    """
    global _protocols, _services, _ethertypes
    with _lock:
        _protocols = db.protocols
        _services = db.services
        _ethertypes = db.ethertypes


def protocol_by_name(name: str) -> Optional[ProtocolRecord]:
    """Return the default protocol with the given (alias) name, or None"""
    return get_protocols().by_name(name)


def protocol_by_number(number: int) -> Optional[ProtocolRecord]:
    """Return the default protocol with the given number, or None"""
    return get_protocols().by_number(number)


def service_by_name(name: str, protocol: str = "") -> Optional[ServiceRecord]:
    """
    Look up a default service by (alias) name and optional protocol name.

    Args:
        name: Service name or alias
        protocol: Protocol name, or empty for the first service of that name

    Returns:
        Matching ServiceRecord, or None
    """
    return get_services().by_name(name, protocol)


def service_by_port(port: int, protocol: str = "") -> Optional[ServiceRecord]:
    """
    Look up a default service by port and optional protocol name.

    Args:
        port: Transport port number
        protocol: Protocol name, or empty for the first service on that port

    Returns:
        Matching ServiceRecord, or None
    """
    return get_services().by_port(port, protocol)


def ethertype_by_name(name: str) -> Optional[EtherTypeRecord]:
    """Return the default EtherType with the given (alias) name, or None"""
    return get_ethertypes().by_name(name)


def ethertype_by_number(number: int) -> Optional[EtherTypeRecord]:
    """Return the default EtherType with the given number, or None"""
    return get_ethertypes().by_number(number)
