# Key / frame input parsing for front ends.
# The byte order used to pack the key lives here rather than in the engine.
import hexcodec

KEY_HEX_CHARS = 16


class KeyFormatError(ValueError):
    pass


class FrameFormatError(ValueError):
    pass


def parse_key(text: str, byteorder: str = "little") -> int:
    """
    Pack the first 16 hex characters of `text` into a 64-bit key.

    With the default little-endian order byte 0 lands in bits 0-7,
    byte 1 in bits 8-15 and so on.
    """
    assert byteorder in ("little", "big"), "byteorder must be 'little' or 'big'"
    text = text.strip()
    if len(text) < KEY_HEX_CHARS:
        raise KeyFormatError(f"Key hex must be at least {KEY_HEX_CHARS} hex chars (64 bits)")
    key_bytes = hexcodec.decode(text[:KEY_HEX_CHARS])
    return int.from_bytes(key_bytes, byteorder)


def parse_frame(text: str) -> int:
    text = text.strip()
    try:
        return int(text, 10)
    except ValueError:
        raise FrameFormatError(f"Frame number must be a decimal integer, got {text!r}") from None
