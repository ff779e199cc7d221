"""
Load protocols, services and EtherTypes indexes from files.
"""

import logging
from pathlib import Path
from typing import Union

from .index import EtherTypeIndex, ProtocolIndex, ServiceIndex
from .parsers import parse_ethertypes, parse_protocols, parse_services

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _open(path: PathLike):
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return open(path, 'rb')


def load_protocols(path: PathLike) -> ProtocolIndex:
    """
    Load a protocol index from a protocols(5) file.

    Args:
        path: Path of the file, such as /etc/protocols

    Returns:
        ProtocolIndex of the protocols defined in the file

    Raises:
        FileNotFoundError: If the file doesn't exist
        FormatError: If the file contains an invalid protocol number
        StreamError: If the file cannot be read
    """
    with _open(path) as f:
        protocols = parse_protocols(f)
    logger.info("Loaded %d protocols from %s", len(protocols), path)
    return ProtocolIndex(protocols)


def load_services(path: PathLike, protocols: ProtocolIndex) -> ServiceIndex:
    """
    Load a service index from a services(5) file.

    Args:
        path: Path of the file, such as /etc/services
        protocols: Index used to resolve the protocols of services

    Returns:
        ServiceIndex of the services defined in the file

    Raises:
        FileNotFoundError: If the file doesn't exist
        StreamError: If the file cannot be read
    """
    with _open(path) as f:
        services = parse_services(f, protocols)
    logger.info("Loaded %d services from %s", len(services), path)
    return ServiceIndex(services)


def load_ethertypes(path: PathLike) -> EtherTypeIndex:
    """
    Load an EtherType index from an ethertypes file.

    Args:
        path: Path of the file, such as /etc/ethertypes

    Returns:
        EtherTypeIndex of the EtherTypes defined in the file

    Raises:
        FileNotFoundError: If the file doesn't exist
        FormatError: If the file contains an invalid EtherType number
        StreamError: If the file cannot be read
    """
    with _open(path) as f:
        ethertypes = parse_ethertypes(f)
    logger.info("Loaded %d EtherTypes from %s", len(ethertypes), path)
    return EtherTypeIndex(ethertypes)
