"""
Core Component: Byte Serialization (Big-Endian, Index Order)

Stable, deterministic byte frame for a row of disks, used for hashing.

Bit mapping (frozen):
  - One bit per disk: color 1 (dark) sets the bit, color 0 (light) leaves it clear
  - Within each byte: bit 7 → index 0, bit 6 → index 1, ..., bit 0 → index 7
  - Big-endian for the length field

No timestamps, no padding beyond ceil(n/8) bytes.
"""

import math

_MAX_DISKS = 0xFFFFFFFF


def serialize_row_be(colors: list[int]) -> bytes:
    """
    Encode a row of disk colors as a deterministic byte stream for hashing.

    Format (exact):
      - 4 ASCII bytes tag: b"DSK1"
      - 4 bytes n (uint32, big-endian)
      - Payload: ceil(n/8) bytes with bit mapping:
          bit 7 → index 0, bit 6 → index 1, ..., bit 0 → index 7
          next byte continues with index 8 at bit 7, etc.
        A bit is 1 iff colors[index] == 1.

    Args:
        colors: Per-index colors, each 0 (light) or 1 (dark).

    Returns:
        bytes: Deterministic serialization.

    Raises:
        SerializationError: If the row is empty, too long, or holds a color outside {0, 1}.
    """
    n = len(colors)
    if n == 0:
        raise SerializationError("Cannot serialize an empty row")
    if n > _MAX_DISKS:
        raise SerializationError(f"Row too long: n={n}")

    # Build byte stream
    stream = bytearray()

    # Tag (4 ASCII bytes)
    stream.extend(b"DSK1")

    # Length (big-endian uint32)
    stream.extend(n.to_bytes(4, byteorder='big'))

    # Payload
    payload = bytearray(math.ceil(n / 8))
    for idx, color in enumerate(colors):
        if isinstance(color, bool) or color not in (0, 1):
            raise SerializationError(f"Color {color!r} at index {idx} not in (0, 1)")
        if color == 1:
            payload[idx // 8] |= (1 << (7 - (idx % 8)))  # bit 7 → index 0
    stream.extend(payload)

    return bytes(stream)


def serialize_disk_state(state) -> bytes:
    """
    Encode a DiskState as its DSK1 frame.

    Args:
        state: Any object exposing colors() as a sequence of 0/1 ints.

    Returns:
        bytes: Deterministic serialization (see serialize_row_be).
    """
    return serialize_row_be(list(state.colors()))


class SerializationError(Exception):
    """Raised when serialization encounters an invalid row."""
    pass
