"""
Parsers for the protocols(5), services(5) and ethertypes file formats.

Each parser reads the given stream to exhaustion and returns the records in
file order. Blank lines, comment lines and lines with too few fields never
produce records nor errors. Fatal errors raise and never return a partial
record list.
"""

import logging
from typing import IO, List, Union

from .errors import FormatError
from .index import ProtocolIndex
from .models import EtherTypeRecord, ProtocolRecord, ServiceRecord
from .utils import parse_uint, read_lines, split_fields

logger = logging.getLogger(__name__)

Stream = Union[IO[str], IO[bytes]]


def parse_protocols(stream: Stream) -> List[ProtocolRecord]:
    """
    Parse Internet protocol definitions.

    Args:
        stream: Text or binary stream in protocols(5) format

    Returns:
        List of ProtocolRecord objects

    Raises:
        FormatError: If a protocol number is not a decimal 8 bit number
        StreamError: If the stream cannot be read
    """
    protocols = []
    for line_number, line in read_lines(stream):
        fields, _ = split_fields(line)
        if len(fields) < 2:
            continue

        number = parse_uint(fields[1], 10, 8)
        if number is None:
            raise FormatError(f"invalid protocol number {fields[1]!r}",
                              line_number, line)

        protocols.append(ProtocolRecord(
            name=fields[0],
            number=number,
            aliases=tuple(fields[2:]),
        ))

    return protocols


def parse_services(stream: Stream, protocols: ProtocolIndex) -> List[ServiceRecord]:
    """
    Parse network service definitions.

    Malformed definitions are skipped rather than failing the parse: port
    fields not in "<port>/<protocol>" form, ports that are not decimal 16 bit
    numbers, and protocols not known to the given protocol index.

    Args:
        stream: Text or binary stream in services(5) format
        protocols: Index used to resolve the protocol of each service

    Returns:
        List of ServiceRecord objects, each with a resolved protocol

    Raises:
        StreamError: If the stream cannot be read
    """
    services = []
    for line_number, line in read_lines(stream):
        fields, _ = split_fields(line)
        if len(fields) < 2:
            continue

        port_protocol = fields[1].split('/')
        if len(port_protocol) != 2:
            logger.debug("Skipping line %d: no <port>/<protocol> in %r",
                         line_number, fields[1])
            continue
        port_text, protocol_name = port_protocol

        port = parse_uint(port_text, 10, 16)
        if port is None:
            logger.debug("Skipping line %d: invalid port %r", line_number, port_text)
            continue

        protocol = protocols.by_name(protocol_name)
        if protocol is None:
            logger.debug("Skipping line %d: unknown protocol %r",
                         line_number, protocol_name)
            continue

        services.append(ServiceRecord(
            name=fields[0],
            port=port,
            protocol_name=protocol_name,
            protocol=protocol,
            aliases=tuple(fields[2:]),
        ))

    return services


def parse_ethertypes(stream: Stream) -> List[EtherTypeRecord]:
    """
    Parse EtherType definitions.

    The EtherType number is hexadecimal, without any "0x" prefix. Unlike the
    other formats the comment of an entry is kept.

    Args:
        stream: Text or binary stream in ethertypes format

    Returns:
        List of EtherTypeRecord objects

    Raises:
        FormatError: If an EtherType number is not a hexadecimal 16 bit number
        StreamError: If the stream cannot be read
    """
    ethertypes = []
    for line_number, line in read_lines(stream):
        if line.lstrip().startswith('#'):
            continue
        fields, comment = split_fields(line)
        if len(fields) < 2:
            continue

        number = parse_uint(fields[1], 16, 16)
        if number is None:
            raise FormatError(f"invalid EtherType number {fields[1]!r}",
                              line_number, line)

        ethertypes.append(EtherTypeRecord(
            name=fields[0],
            number=number,
            aliases=tuple(fields[2:]),
            comment=comment,
        ))

    return ethertypes
