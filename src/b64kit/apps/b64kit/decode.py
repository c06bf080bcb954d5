# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""Decode Base64 back to raw data."""


# type annotations
from __future__ import annotations
from typing import Optional

# standard libs
from functools import partial

# external libs
from cmdkit.app import Application, exit_status
from cmdkit.cli import Interface
from cmdkit.config import ConfigurationError

# internal libs
from b64kit.core.config import config, get_codec_mode
from b64kit.core.logging import Logger
from b64kit.core.exceptions import log_exception
from b64kit.codec import decode, lenient_decode, InvalidLength, InvalidCharacter
from b64kit.apps.b64kit.stream import read_input, write_output

# public interface
__all__ = ['DecodeApp', ]

# application logger
log = Logger.with_name('b64kit')


PROGRAM = 'b64kit decode'
USAGE = f"""\
usage: {PROGRAM} [-h] [FILE] [-o PATH] [--strict | --lenient]
{__doc__}\
"""

HELP = f"""\
{USAGE}

Strict decoding requires well-formed, padded input and fails on any
invalid character. Lenient decoding silently skips every character
outside the alphabet and never fails (no validation at all).

The default mode is taken from the `codec.mode` configuration.

arguments:
FILE                     Path to input file (default: <stdin>).

options:
-o, --output     PATH    Path to output file (default: <stdout>).
    --strict             Reject malformed input.
    --lenient            Ignore non-alphabet characters.
-h, --help               Show this message and exit.\
"""


class DecodeApp(Application):
    """Application class for decode command."""

    interface = Interface(PROGRAM, USAGE, HELP)
    ALLOW_NOARGS = True

    source: Optional[str] = None
    interface.add_argument('source', nargs='?', default=None)

    output: Optional[str] = None
    interface.add_argument('-o', '--output', default=None)

    mode: Optional[str] = None
    mode_interface = interface.add_mutually_exclusive_group()
    mode_interface.add_argument('--strict', action='store_const', const='strict', dest='mode')
    mode_interface.add_argument('--lenient', action='store_const', const='lenient', dest='mode')

    exceptions = {
        FileNotFoundError: partial(log_exception, logger=log.critical,
                                   status=exit_status.runtime_error),
        InvalidLength: partial(log_exception, logger=log.critical,
                               status=exit_status.runtime_error),
        InvalidCharacter: partial(log_exception, logger=log.critical,
                                  status=exit_status.runtime_error),
        ConfigurationError: partial(log_exception, logger=log.critical,
                                    status=exit_status.bad_config),
        **Application.exceptions
    }

    def run(self) -> None:
        """Business logic for `b64kit decode`."""
        mode = self.mode or get_codec_mode(config)
        data = read_input(self.source)
        if mode == 'strict':
            result = decode(data.strip())
        else:
            result = lenient_decode(data).encode('latin-1')
        log.debug(f'Decoded {len(data)} characters to {len(result)} bytes ({mode})')
        write_output(result, self.output)
