# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""Encode raw bytes as RFC 2045 Base64 text."""


# type annotations
from __future__ import annotations
from typing import Union

# internal libs
from b64kit.codec.tables import ALPHABET, PAD

# public interface
__all__ = ['encode', 'encode_string', ]


BytesLike = Union[bytes, bytearray, memoryview]


def encode(data: BytesLike) -> bytes:
    """
    Encode raw `data` as Base64 text (ASCII bytes).

    Every 3 input bytes become 4 alphabet characters. A final group of 1 or 2
    bytes is padded with '==' or '=' respectively, so the output length is
    always a multiple of 4. Empty input gives empty output.

    Example:
        >>> encode(b'Man')
        b'TWFu'
        >>> encode(b'M')
        b'TQ=='
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f'Expected bytes-like object, found {data.__class__.__name__}')

    data = bytes(data)
    size = len(data)
    triplets, remainder = divmod(size, 3)
    output = bytearray()

    for index in range(0, triplets * 3, 3):
        group = (data[index] << 16) | (data[index + 1] << 8) | data[index + 2]
        output.append(ALPHABET[(group >> 18) & 0x3f])
        output.append(ALPHABET[(group >> 12) & 0x3f])
        output.append(ALPHABET[(group >> 6) & 0x3f])
        output.append(ALPHABET[group & 0x3f])

    if remainder == 1:
        b1 = data[size - 1]
        output.append(ALPHABET[b1 >> 2])
        output.append(ALPHABET[(b1 & 0x03) << 4])
        output.append(PAD)
        output.append(PAD)
    elif remainder == 2:
        b1, b2 = data[size - 2], data[size - 1]
        output.append(ALPHABET[b1 >> 2])
        output.append(ALPHABET[((b1 & 0x03) << 4) | (b2 >> 4)])
        output.append(ALPHABET[(b2 & 0x0f) << 2])
        output.append(PAD)

    return bytes(output)


def encode_string(text: str, encoding: str = 'utf-8') -> str:
    """Encode `text` (e.g., a 'user:password' credential) and return Base64 as a string."""
    return encode(text.encode(encoding)).decode('ascii')
