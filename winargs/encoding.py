"""Conversions between raw OS command lines and text.

Callers holding bytes use decode_command_line. The wide helpers convert the
UTF-16 code units that GetCommandLineW hands back.
"""

import struct
from typing import Sequence

from .exceptions import DecodeFailed


def decode_command_line(raw: bytes, encoding: str = "utf-8") -> str:
    """
    Decode a raw command line to text.

    Decoding is strict: undecodable bytes are an error, never replaced.

    Args:
        raw: The bytes handed over by the OS or read from a file
        encoding: The codec to decode with

    Returns:
        The decoded command line

    Raises:
        DecodeFailed: If the bytes are not valid in the given encoding
    """
    try:
        return raw.decode(encoding)
    except LookupError as e:
        raise DecodeFailed(f"Unknown encoding: {encoding}") from e
    except UnicodeDecodeError as e:
        raise DecodeFailed(
            f"Command line is not valid {encoding} at byte {e.start}"
        ) from e


def decode_wide(units: Sequence[int]) -> str:
    """
    Decode UTF-16 code units, as returned by GetCommandLineW.

    Decoding stops at the first NUL. Unpaired surrogates are an error.
    """
    units = list(units)
    if 0 in units:
        units = units[: units.index(0)]

    try:
        raw = struct.pack(f"<{len(units)}H", *units)
    except struct.error as e:
        raise DecodeFailed(f"Invalid UTF-16 code unit: {e}") from e

    try:
        return raw.decode("utf-16-le")
    except UnicodeDecodeError as e:
        raise DecodeFailed(
            f"Unpaired surrogate at code unit {e.start // 2}"
        ) from e


def encode_wide(text: str) -> list[int]:
    """Encode text to UTF-16 code units, without a terminator."""
    raw = text.encode("utf-16-le")
    return list(struct.unpack(f"<{len(raw) // 2}H", raw))
