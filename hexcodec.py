# Hex text <-> raw bytes, used by the front end and tests
import re

_WHITESPACE = re.compile(r"\s+")
_HEX_DIGITS = set("0123456789abcdefABCDEF")


class HexFormatError(ValueError):
    pass


def encode(data) -> str:
    """Two uppercase hex digits per byte, no separators."""
    return bytes(data).hex().upper()


def decode(text: str) -> bytes:
    """
    Parse hex text into bytes.

    All whitespace is removed first and odd-length input is left-padded
    with a single '0', so "ABC" decodes as 0x0A 0xBC.
    """
    digits = _WHITESPACE.sub("", text)
    for pos, ch in enumerate(digits):
        if ch not in _HEX_DIGITS:
            raise HexFormatError(f"Invalid hex digit {ch!r} at position {pos}")
    if len(digits) % 2 != 0:
        digits = "0" + digits
    return bytes.fromhex(digits)
