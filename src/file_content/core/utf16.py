"""
UTF-16 code unit handling.

Converts raw payload bytes into 16-bit code units for a given byte order,
and code units into text, pairing surrogates for code points outside the
Basic Multilingual Plane.
"""

import struct
from typing import List, Sequence

from .errors import InvalidSurrogateError, UnevenByteSequenceError

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF
SUPPLEMENTARY_PLANE_START = 0x10000

_STRUCT_PREFIX = {
    'big': '>',
    'little': '<',
}


def to_code_units(data: bytes, byte_order: str) -> List[int]:
    """
    Reassemble bytes into 16-bit code units.

    Args:
        data: Payload bytes with any BOM already removed.
        byte_order: 'big' or 'little'.

    Returns:
        List of code unit values, one per byte pair.

    Raises:
        UnevenByteSequenceError: If data has an odd length.
        ValueError: If byte_order is not 'big' or 'little'.
    """
    if byte_order not in _STRUCT_PREFIX:
        raise ValueError(f"byte_order must be 'big' or 'little', got {byte_order!r}")

    if len(data) % 2 != 0:
        raise UnevenByteSequenceError(len(data))

    count = len(data) // 2
    return list(struct.unpack(f"{_STRUCT_PREFIX[byte_order]}{count}H", data))


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_START <= unit <= HIGH_SURROGATE_END


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_START <= unit <= LOW_SURROGATE_END


def decode_code_units(units: Sequence[int]) -> str:
    """
    Decode a sequence of UTF-16 code units into text.

    Args:
        units: Code unit values (0x0000-0xFFFF).

    Returns:
        The decoded string.

    Raises:
        InvalidSurrogateError: On a lone high surrogate, a lone low surrogate,
            or a high surrogate not followed by a low surrogate.
    """
    chars = [''] * len(units)
    written = 0
    index = 0
    total = len(units)

    while index < total:
        unit = units[index]

        if is_high_surrogate(unit):
            if index + 1 >= total or not is_low_surrogate(units[index + 1]):
                raise InvalidSurrogateError(unit, index)
            low = units[index + 1]
            code_point = (
                SUPPLEMENTARY_PLANE_START
                + ((unit - HIGH_SURROGATE_START) << 10)
                + (low - LOW_SURROGATE_START)
            )
            chars[written] = chr(code_point)
            index += 2
        elif is_low_surrogate(unit):
            raise InvalidSurrogateError(unit, index)
        else:
            chars[written] = chr(unit)
            index += 1

        written += 1

    return ''.join(chars[:written])
