"""Test the NetDB context object."""

import pytest

from netdb import (
    BUILTIN_PROTOCOLS, ConfigError, FormatError, NetDB, NetDBConfig,
    SourcesConfig,
)


def _sources(data_dir, *missing):
    return SourcesConfig(
        protocols=[str(data_dir / "protocols")],
        services=[str(data_dir / "services")] + [str(data_dir / m) for m in missing],
        ethertypes=[str(data_dir / "ethertypes")],
    )


def test_empty_database():
    db = NetDB()
    assert db.protocol_by_name("tcp") is None
    assert db.service_by_port(53) is None
    assert db.ethertype_by_number(0x0800) is None


def test_builtin_database():
    db = NetDB.builtin()
    assert db.protocol_by_number(6).name == "tcp"
    assert db.service_by_name("domain", "udp").port == 53
    assert db.ethertype_by_name("ip4").number == 0x0800
    assert len(db.protocols) == len({p.number for p in BUILTIN_PROTOCOLS})


def test_sources_layered_over_builtin(data_dir):
    """Test merging the source files over the built-in dataset."""
    db = NetDB.from_config(NetDBConfig(sources=_sources(data_dir)))
    assert db.protocol_by_name("tcp").number == 6
    assert db.protocol_by_name("foobar").number == 12
    assert db.service_by_name("domain", "udp").port == 53
    assert db.service_by_port(666, "baz").protocol.number == 234
    assert db.ethertype_by_name("IPv4") is not None
    assert db.ethertype_by_number(0x9000).name == "test"


def test_sources_only(data_dir):
    db = NetDB.from_config(NetDBConfig(builtin=False, sources=_sources(data_dir)))
    assert db.protocol_by_name("tcp") is None
    assert db.service_by_name("domain", "udp") is None
    assert db.ethertype_by_name("IPv4") is None
    assert db.service_by_name("burn").protocol_name == "foobar"
    assert db.ethertype_by_name("mt-rommon").number == 0x88BF


def test_services_resolve_against_builtin_protocols(tmp_path):
    services = tmp_path / "services"
    services.write_text("frotz 4242/udp\n")
    db = NetDB.from_config(NetDBConfig(sources=SourcesConfig(services=[str(services)])))
    assert db.service_by_port(4242, "udp").protocol.number == 17


def test_missing_source_fails(data_dir):
    with pytest.raises(FileNotFoundError):
        NetDB.from_config(NetDBConfig(sources=_sources(data_dir, "missing")))


def test_missing_source_ignored(data_dir, caplog):
    config = NetDBConfig(sources=_sources(data_dir, "missing"), ignore_missing=True)
    with caplog.at_level("WARNING", logger="netdb.database"):
        db = NetDB.from_config(config)
    assert db.service_by_port(666, "foobar") is not None
    assert "missing" in caplog.text


def test_format_errors_are_not_ignored(data_dir):
    config = NetDBConfig(
        sources=SourcesConfig(ethertypes=[str(data_dir / "bad_ethertypes")]),
        ignore_missing=True,
    )
    with pytest.raises(FormatError):
        NetDB.from_config(config)


def test_from_file(tmp_path, data_dir):
    path = tmp_path / "netdb.yaml"
    path.write_text(f"""
builtin: false
sources:
  protocols: ["{data_dir / 'protocols'}"]
  services: ["{data_dir / 'services'}"]
""")
    db = NetDB.from_file(str(path))
    assert db.service_by_name("crash", "baz").port == 666
    assert db.protocol_by_name("tcp") is None


def test_from_file_rejects_services_without_protocols(tmp_path, data_dir):
    path = tmp_path / "netdb.yaml"
    path.write_text(f"""
builtin: false
sources:
  services: ["{data_dir / 'services'}"]
""")
    with pytest.raises(ConfigError, match="protocols"):
        NetDB.from_file(str(path))
