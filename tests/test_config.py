"""Test configuration loading and validation."""

import json

import pytest

from netdb import ConfigError, ConfigParser, NetDBConfig, SourcesConfig


def test_defaults_are_valid():
    config = NetDBConfig()
    assert config.builtin is True
    assert config.ignore_missing is False
    assert config.sources.is_empty()
    assert config.validate() == (True, None)


def test_builtin_disabled_requires_sources():
    valid, error = NetDBConfig(builtin=False).validate()
    assert not valid
    assert "source" in error

    config = NetDBConfig(builtin=False, sources=SourcesConfig(protocols=["/etc/protocols"]))
    assert config.validate() == (True, None)


@pytest.mark.parametrize("sources", [
    SourcesConfig(protocols="/etc/protocols"),
    SourcesConfig(services=[""]),
    SourcesConfig(ethertypes=[42]),
])
def test_invalid_sources(sources):
    valid, error = NetDBConfig(sources=sources).validate()
    assert not valid
    assert error.startswith("Sources config error")


def test_load_yaml(tmp_path):
    path = tmp_path / "netdb.yaml"
    path.write_text("""
builtin: false
ignore_missing: true
sources:
  protocols:
    - /etc/protocols
  services:
    - /etc/services
""")
    config = ConfigParser.load(str(path))
    assert config.builtin is False
    assert config.ignore_missing is True
    assert config.sources.protocols == ["/etc/protocols"]
    assert config.sources.services == ["/etc/services"]
    assert config.sources.ethertypes == []


def test_load_json(tmp_path):
    path = tmp_path / "netdb.json"
    path.write_text(json.dumps({"sources": {"ethertypes": ["/etc/ethertypes"]}}))
    config = ConfigParser.load(str(path))
    assert config.builtin is True
    assert config.sources.ethertypes == ["/etc/ethertypes"]


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "netdb.yml"
    path.write_text("")
    assert ConfigParser.load(str(path)) == NetDBConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigParser.load(str(tmp_path / "missing.yaml"))


def test_unsupported_format(tmp_path):
    path = tmp_path / "netdb.ini"
    path.write_text("[netdb]\n")
    with pytest.raises(ConfigError):
        ConfigParser.load(str(path))


def test_malformed_yaml(tmp_path):
    path = tmp_path / "netdb.yaml"
    path.write_text("sources: [unclosed\n")
    with pytest.raises(ConfigError):
        ConfigParser.load(str(path))


def test_invalid_config_values(tmp_path):
    path = tmp_path / "netdb.yaml"
    path.write_text("builtin: false\n")
    with pytest.raises(ConfigError, match="Invalid configuration"):
        ConfigParser.load(str(path))


@pytest.mark.parametrize("data", [
    ["not", "a", "mapping"],
    {"sources": ["/etc/services"]},
    {"builtin": "yes"},
])
def test_parse_dict_rejects_bad_structure(data):
    with pytest.raises(ConfigError):
        ConfigParser.parse_dict(data)


def test_services_without_protocols_need_builtin():
    """Test that services cannot be resolved without any protocol source."""
    config = NetDBConfig(builtin=False, sources=SourcesConfig(services=["/etc/services"]))
    valid, error = config.validate()
    assert not valid
    assert "protocols" in error

    config.builtin = True
    assert config.validate() == (True, None)

    config = NetDBConfig(builtin=False, sources=SourcesConfig(
        protocols=["/etc/protocols"], services=["/etc/services"]))
    assert config.validate() == (True, None)
