"""
Lookup indexes over protocol, service and EtherType records.

An index maps names (including aliases) and numbers to records. Records are
immutable and shared by reference between all keys and all indexes holding
them. Indexes only ever grow, through merge() or merge_index().
"""

from typing import Dict, Generic, Iterable, Optional, TypeVar

from .models import (
    EtherTypeRecord, ProtocolRecord, ServicePort, ServiceProtocol, ServiceRecord
)

R = TypeVar('R', ProtocolRecord, EtherTypeRecord)


class NumberedIndex(Generic[R]):
    """
    Index of records having a name, aliases and a unique number.

    Merging is "last write wins": a later record replaces an earlier one
    under any colliding name, alias or number.
    """

    def __init__(self, records: Optional[Iterable[R]] = None):
        """
        Create an index, optionally initialized from records.

        Args:
            records: Records to merge into the new index
        """
        self.names: Dict[str, R] = {}
        self.numbers: Dict[int, R] = {}
        if records is not None:
            self.merge(records)

    def merge(self, records: Iterable[R]):
        """
        Merge records into this index, overriding existing entries.

        Args:
            records: Records in the order they were defined
        """
        for record in records:
            self.names[record.name] = record
            for alias in record.aliases:
                self.names[alias] = record
            self.numbers[record.number] = record

    def merge_index(self, other: 'NumberedIndex[R]'):
        """
        Merge all keys of another index into this index, overriding existing
        entries.

        Args:
            other: Index to take entries from
        """
        self.names.update(other.names)
        self.numbers.update(other.numbers)

    def by_name(self, name: str) -> Optional[R]:
        """Return the record with the given (alias) name, or None"""
        return self.names.get(name)

    def by_number(self, number: int) -> Optional[R]:
        """Return the record with the given number, or None"""
        return self.numbers.get(number)

    def __len__(self) -> int:
        return len(self.numbers)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(names={len(self.names)}, "
                f"numbers={len(self.numbers)})")


class ProtocolIndex(NumberedIndex[ProtocolRecord]):
    """Known network protocols indexed by (alias) name and protocol number"""


class EtherTypeIndex(NumberedIndex[EtherTypeRecord]):
    """Known EtherTypes indexed by (alias) name and EtherType number"""


class ServiceIndex:
    """
    Known network services indexed by (alias) name and by port, each with and
    without protocol name.

    The same service name or port may be defined for several protocols. The
    protocol-agnostic keys (empty protocol name) always refer to the first
    definition merged, while the protocol-qualified keys refer to the latest.
    """

    def __init__(self, records: Optional[Iterable[ServiceRecord]] = None):
        """
        Create an index, optionally initialized from records.

        Args:
            records: Records to merge into the new index
        """
        self.names: Dict[ServiceProtocol, ServiceRecord] = {}
        self.ports: Dict[ServicePort, ServiceRecord] = {}
        if records is not None:
            self.merge(records)

    def merge(self, records: Iterable[ServiceRecord]):
        """
        Merge service records into this index.

        Protocol-agnostic keys are only added when not yet present, while
        protocol-qualified keys always replace existing entries.

        Args:
            records: Records in the order they were defined
        """
        for record in records:
            for name in (record.name,) + record.aliases:
                self.names.setdefault(ServiceProtocol(name), record)
                self.names[ServiceProtocol(name, record.protocol_name)] = record
            self.ports.setdefault(ServicePort(record.port), record)
            self.ports[ServicePort(record.port, record.protocol_name)] = record

    def merge_index(self, other: 'ServiceIndex'):
        """
        Merge all keys of another index into this index, overriding existing
        entries, including the protocol-agnostic ones.

        Args:
            other: Index to take entries from
        """
        self.names.update(other.names)
        self.ports.update(other.ports)

    def by_name(self, name: str, protocol: str = "") -> Optional[ServiceRecord]:
        """
        Look up a service by its (alias) name.

        Args:
            name: Service name or alias
            protocol: Protocol name; if empty, the first service defined with
                this name is returned, whatever its protocol

        Returns:
            Matching ServiceRecord, or None
        """
        return self.names.get(ServiceProtocol(name, protocol))

    def by_port(self, port: int, protocol: str = "") -> Optional[ServiceRecord]:
        """
        Look up a service by its port number.

        Args:
            port: Transport port number
            protocol: Protocol name; if empty, the first service defined on
                this port is returned, whatever its protocol

        Returns:
            Matching ServiceRecord, or None
        """
        return self.ports.get(ServicePort(port, protocol))

    def __len__(self) -> int:
        return sum(1 for key in self.ports if key.protocol)

    def __repr__(self) -> str:
        return f"ServiceIndex(names={len(self.names)}, ports={len(self.ports)})"
