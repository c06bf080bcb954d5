# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""
Decode RFC 2045 Base64 text.

Two strategies are provided with deliberately different failure behavior:

`decode` is strict. Input must be 4-aligned and padded, with '=' only in the
last one or two positions of the final quantum. Anything else raises a
`Base64Error` before any table lookup happens.

`lenient_decode` never fails. Every character outside the alphabet (padding,
whitespace, line breaks, arbitrary noise) is silently skipped, so there is no
integrity checking of any kind.
"""


# type annotations
from __future__ import annotations
from typing import List, Sequence, Union

# internal libs
from b64kit.core.logging import Logger
from b64kit.codec.tables import (PAD, STRICT_DECODE_TABLE, STRICT_INVALID,
                                 LENIENT_DECODE_TABLE, LENIENT_SKIP)

# public interface
__all__ = ['Base64Error', 'InvalidLength', 'InvalidCharacter',
           'decode', 'decode_string', 'lenient_decode', ]

# initialize module level logger
log = Logger.with_name(__name__)


class Base64Error(ValueError):
    """Malformed input for strict decoding."""


class InvalidLength(Base64Error):
    """Input length is not a multiple of 4."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f'Expected length multiple of 4, found length {length}')


class InvalidCharacter(Base64Error):
    """Input contains a character outside the alphabet or a misplaced pad."""

    def __init__(self, message: str, position: int) -> None:
        self.position = position
        super().__init__(message)

    @classmethod
    def not_in_alphabet(cls, code: int, position: int) -> InvalidCharacter:
        """Character with `code` at `position` is neither alphabet nor pad."""
        width = 2 if code <= 0xff else 4
        return cls(f'Invalid character {chr(code)!r} (0x{code:0{width}x}) at position {position}', position)

    @classmethod
    def misplaced_pad(cls, position: int) -> InvalidCharacter:
        """Pad character at `position` is not allowed there."""
        return cls(f'Unexpected padding at position {position}', position)


def _as_codes(data: Union[bytes, bytearray, memoryview, str]) -> Sequence[int]:
    """Integer code points of `data` (bytes pass through unchanged)."""
    if isinstance(data, str):
        return [ord(char) for char in data]
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f'Expected bytes-like object or str, found {data.__class__.__name__}')


def _check_quantum(codes: Sequence[int], start: int, final: bool) -> None:
    """Validate the 4 characters at `start`; pad is allowed in slots 3 and 4 of the `final` quantum."""
    for slot in range(4):
        position = start + slot
        code = codes[position]
        if code == PAD:
            if not final or slot < 2:
                raise InvalidCharacter.misplaced_pad(position)
        elif code > 0xff or STRICT_DECODE_TABLE[code] == STRICT_INVALID:
            raise InvalidCharacter.not_in_alphabet(code, position)


def decode(data: Union[bytes, bytearray, memoryview, str]) -> bytes:
    """
    Strictly decode Base64 `data` back to raw bytes.

    The result has exactly as many bytes as were encoded: a final quantum
    with a pad in the 3rd position gives 1 byte (the 4th position is then
    ignored), with a pad only in the 4th position gives 2 bytes.
    Empty input gives empty output rather than `InvalidLength`, so that
    `decode(encode(data)) == data` also holds for empty `data`.

    Raises:
        InvalidLength: length of `data` is not a multiple of 4.
        InvalidCharacter: non-alphabet character or misplaced pad.

    Example:
        >>> decode(b'TQ==')
        b'M'
    """
    codes = _as_codes(data)
    size = len(codes)
    if size % 4 != 0:
        raise InvalidLength(size)

    quanta = size // 4
    output = bytearray()
    for index in range(quanta):
        start = index * 4
        _check_quantum(codes, start, final=(index == quanta - 1))
        c1, c2, c3, c4 = codes[start:start + 4]
        v1 = STRICT_DECODE_TABLE[c1]
        v2 = STRICT_DECODE_TABLE[c2]
        output.append(((v1 << 2) | (v2 >> 4)) & 0xff)
        if c3 == PAD:
            continue
        v3 = STRICT_DECODE_TABLE[c3]
        output.append((((v2 & 0x0f) << 4) | (v3 >> 2)) & 0xff)
        if c4 == PAD:
            continue
        v4 = STRICT_DECODE_TABLE[c4]
        output.append((((v3 & 0x03) << 6) | v4) & 0xff)

    return bytes(output)


def decode_string(data: Union[bytes, bytearray, memoryview, str], encoding: str = 'utf-8') -> str:
    """Strictly decode Base64 `data` and interpret the result as `encoding` text."""
    return decode(data).decode(encoding)


def lenient_decode(text: Union[str, bytes, bytearray, memoryview]) -> str:
    """
    Permissively decode Base64-like `text` to a string of byte values.

    Each decoded byte becomes one character with the same code point (Latin-1).
    Characters are looked up by their low 8 bits and any that are not in the
    alphabet are discarded, including '=' and whitespace.

    Warning:
        This never raises and performs no validation: corrupted or interleaved
        input silently yields whatever bits remain. Use `decode` when the
        input must be well-formed.

    Example:
        >>> lenient_decode('TW\\nFu!!')
        'Man'
    """
    if isinstance(text, str):
        codes = (ord(char) & 0xff for char in text)
    elif isinstance(text, (bytes, bytearray, memoryview)):
        codes = iter(bytes(text))
    else:
        raise TypeError(f'Expected str or bytes-like object, found {text.__class__.__name__}')

    acc = 0    # pending bits
    shift = 0  # number of pending bits in `acc`
    skipped = 0
    chars: List[str] = []
    for code in codes:
        value = LENIENT_DECODE_TABLE[code]
        if value == LENIENT_SKIP:
            skipped += 1
            continue
        acc = (acc << 6) | value
        shift += 6
        if shift >= 8:
            shift -= 8
            chars.append(chr((acc >> shift) & 0xff))
            acc &= (1 << shift) - 1

    if skipped:
        log.trace(f'Skipped {skipped} non-alphabet characters')
    return ''.join(chars)
