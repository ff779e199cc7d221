"""Test EtherTypes parsing, indexing and lookup."""

import io

import pytest

from netdb import (
    EtherTypeIndex, EtherTypeRecord, FormatError, StreamError,
    ethertype_by_name, ethertype_by_number, load_ethertypes, parse_ethertypes,
    parse_protocols,
)

ROMON = "RoMON	88BF	mikrotik-rommon mt-rommon		# MikroTik RoMON (unofficial)\n"


def test_parse_descriptions():
    records = parse_ethertypes(io.StringIO("test 9000\n" + ROMON))
    assert records == [
        EtherTypeRecord(name="test", number=0x9000),
        EtherTypeRecord(name="RoMON", number=0x88BF,
                        aliases=("mikrotik-rommon", "mt-rommon"),
                        comment="MikroTik RoMON (unofficial)"),
    ]


def test_number_base_differs_from_protocols():
    """Test that EtherType numbers are hex while protocol numbers are decimal."""
    assert parse_ethertypes(io.StringIO("test 10\n"))[0].number == 0x10
    assert parse_protocols(io.StringIO("test 10\n"))[0].number == 10


def test_ignores_comments_and_empty_lines():
    records = parse_ethertypes(io.StringIO("""
# A comment
		# Another comment

foobar 66
"""))
    assert len(records) == 1
    assert records[0].number == 0x66
    assert records[0].comment == ""


def test_silently_skips_malformed_definitions():
    assert parse_ethertypes(io.StringIO("""
foobar
			""")) == []


@pytest.mark.parametrize("number", ["666x", "10000", "0x800", "-800"])
def test_reports_invalid_definitions(number):
    with pytest.raises(FormatError):
        parse_ethertypes(io.StringIO(f"good 0800\nfoobar {number}\n"))


def test_stream_errors_propagate(closed_stream):
    with pytest.raises(StreamError):
        parse_ethertypes(closed_stream)


def test_builds_index():
    idx = EtherTypeIndex(parse_ethertypes(io.StringIO(ROMON)))
    assert set(idx.names) == {"RoMON", "mikrotik-rommon", "mt-rommon"}
    assert set(idx.numbers) == {0x88BF}
    assert idx.by_name("mt-rommon").number == 0x88BF
    assert idx.by_number(0x88BF).name == "RoMON"
    assert idx.by_number(0x88B0) is None


def test_merge_index():
    idx = EtherTypeIndex(parse_ethertypes(io.StringIO(ROMON)))
    idx.merge_index(EtherTypeIndex(parse_ethertypes(io.StringIO("foobar\t66\n"))))
    assert len(idx.names) == 4
    assert "RoMON" in idx.names
    assert "foobar" in idx.names
    assert set(idx.numbers) == {0x88BF, 0x66}


def test_load_ethertypes(data_dir):
    with pytest.raises(FileNotFoundError):
        load_ethertypes(data_dir / "non-existing-ethertypes")

    idx = load_ethertypes(data_dir / "ethertypes")
    assert idx.by_name("test").number == 0x9000
    assert idx.by_number(0x9000).name == "test"

    with pytest.raises(FormatError):
        load_ethertypes(data_dir / "bad_ethertypes")


def test_builtin_lookups():
    assert ethertype_by_name("IPv4") is not None
    assert ethertype_by_name("ip") is ethertype_by_name("IPv4")
    assert ethertype_by_name("IPX") is not None
    assert ethertype_by_number(2048).name == "IPv4"
    assert ethertype_by_number(0x86DD).name == "IPv6"
    assert ethertype_by_number(0xFFFF) is None


def test_stream_error_after_parsed_records():
    """Test that a read failure after valid lines returns no records."""
    with pytest.raises(StreamError):
        parse_ethertypes(io.BytesIO(b"ok 0800\nbad\xff 86DD\n"))
