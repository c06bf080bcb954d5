# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""RFC 2045 Base64 encoding with strict and lenient decoding."""


# internal libs
from b64kit.codec.tables import ALPHABET, PAD
from b64kit.codec.validate import is_base64_byte, is_base64_sequence
from b64kit.codec.encoder import encode, encode_string
from b64kit.codec.decoder import (decode, decode_string, lenient_decode,
                                  Base64Error, InvalidLength, InvalidCharacter)

# public interface
__all__ = ['ALPHABET', 'PAD', 'is_base64_byte', 'is_base64_sequence',
           'encode', 'encode_string', 'decode', 'decode_string', 'lenient_decode',
           'Base64Error', 'InvalidLength', 'InvalidCharacter', ]
