# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""
Alphabet and lookup tables for RFC 2045 Base64.

All tables are built once when this module is first imported and are stored
as immutable `bytes` and `tuple` objects. The strict and lenient decoders
each have their own table with their own sentinel so that the two failure
behaviors stay independent.
"""


# type annotations
from typing import Tuple

# public interface
__all__ = ['ALPHABET', 'PAD', 'STRICT_INVALID', 'LENIENT_SKIP',
           'STRICT_DECODE_TABLE', 'LENIENT_DECODE_TABLE', ]


ALPHABET: bytes = b'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/'
PAD: int = ord('=')


# Sentinel values (both mean "not in alphabet")
STRICT_INVALID: int = -1
LENIENT_SKIP: int = 64


def build_decode_table(sentinel: int) -> Tuple[int, ...]:
    """Build 256-entry inverse of `ALPHABET` with `sentinel` for all other byte values."""
    table = [sentinel] * 256
    for value, char in enumerate(ALPHABET):
        table[char] = value
    return tuple(table)


STRICT_DECODE_TABLE: Tuple[int, ...] = build_decode_table(STRICT_INVALID)
LENIENT_DECODE_TABLE: Tuple[int, ...] = build_decode_table(LENIENT_SKIP)
