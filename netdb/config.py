"""
Configuration file parser and validator for netdb.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .errors import ConfigError


def _validate_paths(kind: str, paths: Any) -> Tuple[bool, Optional[str]]:
    if not isinstance(paths, list):
        return False, f"{kind} must be a list of file paths, got {type(paths).__name__}"
    for path in paths:
        if not isinstance(path, str) or not path:
            return False, f"{kind} entries must be non-empty strings, got {path!r}"
    return True, None


@dataclass
class SourcesConfig:
    """Definition files to load, in merge order"""
    protocols: List[str] = field(default_factory=list)
    services: List[str] = field(default_factory=list)
    ethertypes: List[str] = field(default_factory=list)

    def validate(self) -> Tuple[bool, Optional[str]]:
        """Validate source file lists"""
        for kind in ('protocols', 'services', 'ethertypes'):
            valid, error = _validate_paths(kind, getattr(self, kind))
            if not valid:
                return False, error
        return True, None

    def is_empty(self) -> bool:
        return not (self.protocols or self.services or self.ethertypes)


@dataclass
class NetDBConfig:
    """
    Complete netdb configuration.

    Attributes:
        builtin: Start from the built-in dataset and layer the sources over
            it; if False, only the sources are used
        sources: Definition files to load
        ignore_missing: Skip missing source files instead of failing
    """
    builtin: bool = True
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    ignore_missing: bool = False

    def validate(self) -> Tuple[bool, Optional[str]]:
        """
        Validate complete configuration.

        Returns:
            (is_valid, error_message)
        """
        if not isinstance(self.builtin, bool):
            return False, f"builtin must be true or false, got {self.builtin!r}"

        if not isinstance(self.ignore_missing, bool):
            return False, f"ignore_missing must be true or false, got {self.ignore_missing!r}"

        src_valid, src_error = self.sources.validate()
        if not src_valid:
            return False, f"Sources config error: {src_error}"

        if not self.builtin and self.sources.is_empty():
            return False, "Must specify at least one source file when builtin is disabled"

        # Services resolve their protocols against the loaded protocol index
        if not self.builtin and self.sources.services and not self.sources.protocols:
            return False, "services require protocols sources when builtin is disabled"

        return True, None


class ConfigParser:
    """Parse and load configuration files"""

    @staticmethod
    def load(config_path: str) -> NetDBConfig:
        """
        Load configuration from file.

        Supports: .yaml, .yml, .json

        Args:
            config_path: Path to configuration file

        Returns:
            Parsed NetDBConfig object

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigError: If file format unsupported or config invalid
        """
        path = Path(config_path)

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        suffix = path.suffix.lower()

        if suffix in ['.yaml', '.yml']:
            return ConfigParser._load_yaml(path)
        elif suffix == '.json':
            return ConfigParser._load_json(path)
        else:
            raise ConfigError(f"Unsupported config format: {suffix}. Use .yaml, .yml, or .json")

    @staticmethod
    def _load_yaml(path: Path) -> NetDBConfig:
        """Load YAML configuration"""
        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        return ConfigParser.parse_dict(data or {})

    @staticmethod
    def _load_json(path: Path) -> NetDBConfig:
        """Load JSON configuration"""
        with open(path, 'r') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        return ConfigParser.parse_dict(data)

    @staticmethod
    def parse_dict(data: Dict) -> NetDBConfig:
        """
        Parse dictionary into NetDBConfig object.

        Args:
            data: Configuration dictionary

        Returns:
            NetDBConfig object

        Raises:
            ConfigError: If configuration is invalid
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

        src_data = data.get('sources') or {}
        if not isinstance(src_data, dict):
            raise ConfigError("Invalid configuration: sources must be a mapping")

        sources_config = SourcesConfig(
            protocols=src_data.get('protocols', []),
            services=src_data.get('services', []),
            ethertypes=src_data.get('ethertypes', []),
        )

        config = NetDBConfig(
            builtin=data.get('builtin', True),
            sources=sources_config,
            ignore_missing=data.get('ignore_missing', False),
        )

        is_valid, error_msg = config.validate()
        if not is_valid:
            raise ConfigError(f"Invalid configuration: {error_msg}")

        return config
