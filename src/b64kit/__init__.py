# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""
RFC 2045 Base64 codec with strict and lenient decoding.

This package provides the encoder, a strict block decoder, a lenient
streaming decoder, validation helpers, and the `b64kit` command-line tool.
"""


# standard libs
import sys

# external libs
from rich.traceback import install as enable_rich_tracebacks

# internal libs (forced initialization)
from b64kit.core.config import config
from b64kit.core import logging

# internal libs
from b64kit.codec import (encode, encode_string, decode, decode_string, lenient_decode,
                          is_base64_byte, is_base64_sequence,
                          Base64Error, InvalidLength, InvalidCharacter)

# public interface
__all__ = ['__appname__', '__version__', '__authors__', '__developer__', '__contact__',
           '__license__', '__copyright__', '__description__',
           '__keywords__',
           'encode', 'encode_string', 'decode', 'decode_string', 'lenient_decode',
           'is_base64_byte', 'is_base64_sequence',
           'Base64Error', 'InvalidLength', 'InvalidCharacter', ]

# project metadata
__appname__     = 'b64kit'
__version__     = '1.0.0'
__authors__     = ['b64kit developers', ]
__developer__   = 'b64kit developers'
__contact__     = 'b64kit@users.noreply.github.com'
__license__     = 'Apache License 2.0'
__copyright__   = 'b64kit developers 2022'
__description__ = 'RFC 2045 Base64 codec with strict and lenient decoding.'
__keywords__    = 'base64 rfc2045 codec encoding decoding'


# Enable rich tracebacks for interactive shells
if sys.stdout.isatty() and hasattr(sys, 'ps1'):
    enable_rich_tracebacks()
