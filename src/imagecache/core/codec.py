"""Base64 transcoding between raw bytes and text-safe payloads."""

import base64
import binascii

from .errors import DecodeError


def encode(data: bytes) -> str:
    """Encode bytes with the standard padded base64 alphabet."""
    return base64.b64encode(data).decode("ascii")


def decode(text: str) -> bytes:
    """Decode standard padded base64 text.

    Whitespace, characters outside the alphabet, bad padding and non-canonical
    trailing bits are all rejected.

    Raises:
        DecodeError: If ``text`` is not canonical base64.
    """
    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Failed to decode base64: {e}") from e

    # b64decode ignores unused bits in the final symbol
    if encode(data) != text:
        raise DecodeError("Failed to decode base64: invalid trailing bits in last symbol")
    return data
