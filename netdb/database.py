"""
NetDB context object holding one protocol, service and EtherType index.
"""

import logging
from typing import Callable, List, Optional, TypeVar

from .builtin import BUILTIN_ETHERTYPES, BUILTIN_PROTOCOLS, BUILTIN_SERVICES
from .config import ConfigParser, NetDBConfig
from .index import EtherTypeIndex, ProtocolIndex, ServiceIndex
from .loader import load_ethertypes, load_protocols, load_services
from .models import EtherTypeRecord, ProtocolRecord, ServiceRecord

logger = logging.getLogger(__name__)

IndexT = TypeVar('IndexT', ProtocolIndex, ServiceIndex, EtherTypeIndex)


class NetDB:
    """
    Queryable protocols, services and EtherTypes database.

    Build one at startup, either over the built-in dataset, from a
    configuration, or both layered, then pass it to the code doing lookups
    or install it as the process-wide default with netdb.use_database().

    Example:
        >>> db = NetDB.from_file("netdb.yaml")
        >>> db.service_by_name("domain", "udp").port
        53
    """

    def __init__(self, protocols: Optional[ProtocolIndex] = None,
                 services: Optional[ServiceIndex] = None,
                 ethertypes: Optional[EtherTypeIndex] = None):
        self.protocols = protocols if protocols is not None else ProtocolIndex()
        self.services = services if services is not None else ServiceIndex()
        self.ethertypes = ethertypes if ethertypes is not None else EtherTypeIndex()

    @classmethod
    def builtin(cls) -> 'NetDB':
        """Create a database over the built-in dataset only"""
        return cls(
            ProtocolIndex(BUILTIN_PROTOCOLS),
            ServiceIndex(BUILTIN_SERVICES),
            EtherTypeIndex(BUILTIN_ETHERTYPES),
        )

    @classmethod
    def from_file(cls, config_path: str) -> 'NetDB':
        """
        Create a database from a configuration file.

        Args:
            config_path: Path to YAML or JSON config file

        Returns:
            Initialized NetDB

        Raises:
            FileNotFoundError: If the config file or a source file is missing
            ConfigError: If the configuration is invalid
            FormatError: If a source file contains an invalid number
        """
        return cls.from_config(ConfigParser.load(config_path))

    @classmethod
    def from_config(cls, config: NetDBConfig) -> 'NetDB':
        """
        Create a database from a configuration.

        With config.builtin set, the source files are layered over the
        built-in dataset, otherwise only the source files are used. Later
        files override earlier ones. Services are resolved against the
        complete protocol index.

        Args:
            config: Validated configuration

        Returns:
            Initialized NetDB
        """
        db = cls.builtin() if config.builtin else cls()

        db._load_all(db.protocols, config.sources.protocols,
                     load_protocols, config.ignore_missing)
        db._load_all(db.services, config.sources.services,
                     lambda path: load_services(path, db.protocols),
                     config.ignore_missing)
        db._load_all(db.ethertypes, config.sources.ethertypes,
                     load_ethertypes, config.ignore_missing)

        logger.info("Initialized %r", db)
        return db

    @staticmethod
    def _load_all(index: IndexT, paths: List[str], load: Callable[[str], IndexT],
                  ignore_missing: bool):
        for path in paths:
            try:
                loaded = load(path)
            except FileNotFoundError:
                if not ignore_missing:
                    raise
                logger.warning("Skipping missing source file %s", path)
                continue
            index.merge_index(loaded)

    def protocol_by_name(self, name: str) -> Optional[ProtocolRecord]:
        return self.protocols.by_name(name)

    def protocol_by_number(self, number: int) -> Optional[ProtocolRecord]:
        return self.protocols.by_number(number)

    def service_by_name(self, name: str, protocol: str = "") -> Optional[ServiceRecord]:
        return self.services.by_name(name, protocol)

    def service_by_port(self, port: int, protocol: str = "") -> Optional[ServiceRecord]:
        return self.services.by_port(port, protocol)

    def ethertype_by_name(self, name: str) -> Optional[EtherTypeRecord]:
        return self.ethertypes.by_name(name)

    def ethertype_by_number(self, number: int) -> Optional[EtherTypeRecord]:
        return self.ethertypes.by_number(number)

    def __repr__(self) -> str:
        return (f"NetDB(protocols={len(self.protocols)}, "
                f"services={len(self.services)}, "
                f"ethertypes={len(self.ethertypes)})")
