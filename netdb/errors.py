"""
Exceptions raised by the netdb parsers, loaders and configuration.
"""

from typing import Optional


class NetdbError(Exception):
    """Base class for all netdb errors"""


class StreamError(NetdbError, IOError):
    """The input stream could not be read or decoded"""


class FormatError(NetdbError, ValueError):
    """
    A numeric field could not be parsed where the file format mandates it.

    Attributes:
        line_number: 1-based number of the offending line, if known
        line: Offending line text, if known
    """

    def __init__(self, message: str, line_number: Optional[int] = None,
                 line: Optional[str] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class ConfigError(NetdbError, ValueError):
    """Invalid or unreadable configuration"""
