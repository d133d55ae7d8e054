"""Conversions between values and 32-bit binary strings."""

import struct

from .constants import BIT_ONE, BIT_ZERO

_WIDTH = 32
_MASK = (1 << _WIDTH) - 1


class BinaryFormatError(ValueError):
    """Raised when a binary string cannot be decoded."""


def _parse_bits(bits: str) -> int:
    if any(ch not in (BIT_ONE, BIT_ZERO) for ch in bits):
        raise BinaryFormatError(f"Binary string may only hold 0 and 1: {bits!r}")
    return int(bits, 2) if bits else 0


def binary_to_float(bits: str) -> float:
    """Decode exactly 32 bits as an IEEE-754 single-precision float."""
    if len(bits) != _WIDTH:
        raise BinaryFormatError("Binary string must be 32 bits long.")
    raw = _parse_bits(bits)
    return struct.unpack(">f", raw.to_bytes(4, "big"))[0]


def binary_to_int(bits: str) -> int:
    """Decode up to 32 bits as a signed 32-bit integer."""
    if len(bits) > _WIDTH:
        raise BinaryFormatError("Binary string must be 32 bits or less.")
    raw = _parse_bits(bits)
    return raw - (1 << _WIDTH) if raw >= 1 << (_WIDTH - 1) else raw


def binary_to_bool(bits: str) -> bool:
    """Decode a boolean from the first character of a binary string."""
    first = bits[:1]
    if first == BIT_ONE:
        return True
    if first == BIT_ZERO:
        return False
    raise BinaryFormatError("Invalid binary string for boolean. Use 0 or 1.")


def int_to_binary(value: int) -> str:
    """Encode the low 32 bits of an integer, two's complement."""
    return format(value & _MASK, "032b")


def float_to_binary(value: float) -> str:
    """Encode a float as the 32 bits of its single-precision form."""
    (raw,) = struct.unpack(">I", struct.pack(">f", value))
    return format(raw, "032b")


def bool_to_binary(value: bool) -> str:
    """Encode a boolean as "1" or "0"."""
    return BIT_ONE if value else BIT_ZERO