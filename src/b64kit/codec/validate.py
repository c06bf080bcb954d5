# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""Check whether bytes or sequences are made of Base64 characters."""


# type annotations
from __future__ import annotations
from typing import Union

# internal libs
from b64kit.codec.tables import PAD, STRICT_DECODE_TABLE, STRICT_INVALID

# public interface
__all__ = ['is_base64_byte', 'is_base64_sequence', 'as_code', ]


def as_code(value: Union[int, str, bytes, bytearray, memoryview]) -> int:
    """Integer code point of a single byte, character, or integer `value`."""
    if isinstance(value, int):
        return value
    if isinstance(value, memoryview):
        value = value.tobytes()
    if len(value) != 1:
        raise ValueError(f'Expected single character, found length {len(value)}')
    return ord(value)


def is_base64_byte(value: Union[int, str, bytes, bytearray, memoryview]) -> bool:
    """True if `value` is the pad character or a member of the alphabet."""
    code = as_code(value)
    if not 0 <= code <= 255:
        return False
    return code == PAD or STRICT_DECODE_TABLE[code] != STRICT_INVALID


def is_base64_sequence(data: Union[bytes, bytearray, memoryview, str]) -> bool:
    """
    True if every element of `data` is a Base64 character.

    An empty sequence is never valid.
    """
    if isinstance(data, memoryview):
        data = data.tobytes()
    if len(data) == 0:
        return False
    return all(is_base64_byte(value) for value in data)
