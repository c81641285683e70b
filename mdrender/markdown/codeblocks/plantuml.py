# mdrender/markdown/codeblocks/plantuml.py
"""
PlantUML text encoding.

The PlantUML server reads the diagram source from the URL itself:

    {server}/png/{encoded}

where ``encoded`` is the UTF-8 source compressed with raw DEFLATE (no zlib
header or checksum) and written out with PlantUML's own base64 variant.
That alphabet is ``0-9 A-Z a-z - _`` and the final group is zero-filled
instead of padded, so the result is always 4 * ceil(n / 3) characters long
for n compressed bytes.
"""

import zlib
from typing import Union

from ..exceptions import InvalidInput

# Info string that routes a fenced block to the PlantUML server (case-sensitive)
DIAGRAM_LANGUAGE = "plantuml"

_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-_"

# Negative wbits selects a raw DEFLATE stream without header or trailer
_RAW_DEFLATE_WBITS = -15


def deflate_raw(data: bytes) -> bytes:
    """Compress ``data`` into a bare DEFLATE stream."""
    compressor = zlib.compressobj(zlib.Z_BEST_COMPRESSION, zlib.DEFLATED, _RAW_DEFLATE_WBITS)
    return compressor.compress(data) + compressor.flush()


def _encode_6bit(value: int) -> str:
    if 0 <= value < len(_ALPHABET):
        return _ALPHABET[value]
    return "?"


def _append_3bytes(b1: int, b2: int, b3: int) -> str:
    c1 = b1 >> 2
    c2 = ((b1 & 0x3) << 4) | (b2 >> 4)
    c3 = ((b2 & 0xF) << 2) | (b3 >> 6)
    c4 = b3 & 0x3F
    return (
        _encode_6bit(c1 & 0x3F)
        + _encode_6bit(c2 & 0x3F)
        + _encode_6bit(c3 & 0x3F)
        + _encode_6bit(c4 & 0x3F)
    )


def encode_64(data: bytes) -> str:
    """Encode bytes with the PlantUML alphabet, zero-filling the last group."""
    length = len(data)
    chunks = []
    for i in range(0, length, 3):
        if i + 2 == length:
            chunks.append(_append_3bytes(data[i], data[i + 1], 0))
        elif i + 1 == length:
            chunks.append(_append_3bytes(data[i], 0, 0))
        else:
            chunks.append(_append_3bytes(data[i], data[i + 1], data[i + 2]))
    return "".join(chunks)


def encode_diagram(diagram: Union[str, bytes]) -> str:
    """
    Encode PlantUML source for use in a server URL.

    Args:
        diagram: Diagram source. ``bytes`` must be valid UTF-8.

    Returns:
        URL-safe token over ``[0-9A-Za-z_-]``

    Raises:
        InvalidInput: If ``diagram`` is bytes that do not decode as UTF-8
    """
    if isinstance(diagram, bytes):
        try:
            diagram = diagram.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidInput(f"Diagram source is not valid UTF-8: {e}") from e

    return encode_64(deflate_raw(diagram.encode("utf-8")))


def plantuml_image_url(server_url: str, diagram: Union[str, bytes]) -> str:
    """Build the PNG image URL for ``diagram`` on the given PlantUML server."""
    return f"{server_url}/png/{encode_diagram(diagram)}"
