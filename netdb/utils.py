"""
Line handling helpers shared by the protocols, services and ethertypes parsers.
"""

import re
from typing import IO, Iterator, List, Optional, Tuple, Union

from .errors import StreamError


_DIGITS = {
    10: re.compile(r'[0-9]+'),
    16: re.compile(r'[0-9A-Fa-f]+'),
}


def parse_uint(text: str, base: int, bits: int) -> Optional[int]:
    """
    Parse an unsigned integer that must fit the given bit size.

    Only plain digits of the base are accepted: no sign, no "0x" prefix,
    no digit separators.

    Args:
        text: Token to parse
        base: Number base, 10 or 16
        bits: Maximum bit size of the value

    Returns:
        Parsed value, or None if the token is not a valid number in range
    """
    if not _DIGITS[base].fullmatch(text):
        return None
    value = int(text, base)
    if value >= 1 << bits:
        return None
    return value


def read_lines(stream: Union[IO[str], IO[bytes]]) -> Iterator[Tuple[int, str]]:
    """
    Iterate over the lines of a text or binary stream.

    Binary lines are decoded as UTF-8.

    Args:
        stream: Readable stream, such as an open file

    Yields:
        (line_number, line) pairs, line numbers starting at 1

    Raises:
        StreamError: If the stream cannot be read or decoded
    """
    line_number = 0
    try:
        lines = iter(stream)
    except (OSError, ValueError) as e:
        raise StreamError(f"Failed to read stream: {e}") from e
    while True:
        try:
            line = next(lines)
            if isinstance(line, bytes):
                line = line.decode('utf-8')
        except StopIteration:
            return
        except (OSError, ValueError) as e:
            raise StreamError(f"Failed to read line {line_number + 1}: {e}") from e
        line_number += 1
        yield line_number, line


def split_fields(line: str) -> Tuple[List[str], str]:
    """
    Split a line into whitespace separated fields and a trailing comment.

    Args:
        line: Raw line text

    Returns:
        (fields, comment) with the comment trimmed, empty if there is none
    """
    content, _, comment = line.strip().partition('#')
    return content.split(), comment.strip()
