"""
Record and index key data models for protocols, services and EtherTypes.
"""

from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Tuple


@dataclass(frozen=True)
class ProtocolRecord:
    """
    Network protocol as appearing in IP headers.

    Attributes:
        name: Official protocol name
        number: Assigned Internet protocol number (0-255)
        aliases: Alternate names, in file order
    """
    name: str
    number: int
    aliases: Tuple[str, ...] = ()

    def __post_init__(self):
        """Validate field values"""
        if not (0 <= self.number <= 255):
            raise ValueError(f"Invalid protocol number: {self.number}")
        # Accept lists for convenience, store tuples
        object.__setattr__(self, 'aliases', tuple(self.aliases))


@dataclass(frozen=True)
class ServiceRecord:
    """
    Network service bound to a transport port and protocol.

    Attributes:
        name: Official service name
        port: Transport port number (0-65535)
        protocol_name: Protocol token exactly as written in the source
        protocol: Resolved protocol, or None if the protocol is unknown
        aliases: Alternate service names, in file order
    """
    name: str
    port: int
    protocol_name: str
    protocol: Optional[ProtocolRecord] = field(default=None, compare=False)
    aliases: Tuple[str, ...] = ()

    def __post_init__(self):
        """Validate field values"""
        if not (0 <= self.port <= 65535):
            raise ValueError(f"Invalid port: {self.port}")
        object.__setattr__(self, 'aliases', tuple(self.aliases))

    def __repr__(self) -> str:
        return (f"ServiceRecord({self.name} {self.port}/{self.protocol_name}, "
                f"aliases={list(self.aliases)})")


@dataclass(frozen=True)
class EtherTypeRecord:
    """
    Ethernet frame payload type.

    Attributes:
        name: Official EtherType name
        number: Two-octet EtherType value (0-0xFFFF)
        aliases: Alternate names, in file order
        comment: Trailing comment text of the entry, may be empty
    """
    name: str
    number: int
    aliases: Tuple[str, ...] = ()
    comment: str = ""

    def __post_init__(self):
        """Validate field values"""
        if not (0 <= self.number <= 0xFFFF):
            raise ValueError(f"Invalid EtherType number: {self.number:#x}")
        object.__setattr__(self, 'aliases', tuple(self.aliases))

    def __repr__(self) -> str:
        return (f"EtherTypeRecord({self.name}={self.number:04X}, "
                f"aliases={list(self.aliases)}, comment={self.comment!r})")


class ServiceProtocol(NamedTuple):
    """Service index key: service name and (possibly empty) protocol name"""
    name: str
    protocol: str = ""


class ServicePort(NamedTuple):
    """Service index key: port number and (possibly empty) protocol name"""
    port: int
    protocol: str = ""
