"""Configuration and fixtures for pytest tests."""

import io
import os
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir():
    """Provide the directory holding the test definition files."""
    return DATA_DIR


@pytest.fixture
def protocols():
    """Provide a protocol index with the foobar and baz test protocols."""
    from netdb import ProtocolIndex, parse_protocols
    records = parse_protocols(io.StringIO("""
foobar	12
baz		234
"""))
    return ProtocolIndex(records)


@pytest.fixture
def closed_stream():
    """Provide a stream that fails on first read."""
    f = open(__file__, 'rb')
    f.close()  # sic! reading must fail
    return f


@pytest.fixture(autouse=True)
def clean_defaults():
    """Leave the process-wide default indexes uninitialized around each test."""
    from netdb import reset_defaults
    reset_defaults()
    yield
    reset_defaults()
