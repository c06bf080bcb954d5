# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""Encode raw data as Base64."""


# type annotations
from __future__ import annotations
from typing import Optional

# standard libs
from functools import partial

# external libs
from cmdkit.app import Application, exit_status
from cmdkit.cli import Interface

# internal libs
from b64kit.core.logging import Logger
from b64kit.core.exceptions import log_exception
from b64kit.codec import encode
from b64kit.apps.b64kit.stream import read_input, write_output

# public interface
__all__ = ['EncodeApp', ]

# application logger
log = Logger.with_name('b64kit')


PROGRAM = 'b64kit encode'
USAGE = f"""\
usage: {PROGRAM} [-h] [FILE] [-o PATH]
{__doc__}\
"""

HELP = f"""\
{USAGE}

arguments:
FILE                     Path to input file (default: <stdin>).

options:
-o, --output     PATH    Path to output file (default: <stdout>).
-h, --help               Show this message and exit.\
"""


class EncodeApp(Application):
    """Application class for encode command."""

    interface = Interface(PROGRAM, USAGE, HELP)
    ALLOW_NOARGS = True

    source: Optional[str] = None
    interface.add_argument('source', nargs='?', default=None)

    output: Optional[str] = None
    interface.add_argument('-o', '--output', default=None)

    exceptions = {
        FileNotFoundError: partial(log_exception, logger=log.critical,
                                   status=exit_status.runtime_error),
        **Application.exceptions
    }

    def run(self) -> None:
        """Business logic for `b64kit encode`."""
        data = read_input(self.source)
        text = encode(data)
        log.debug(f'Encoded {len(data)} bytes as {len(text)} characters')
        if self.output is None or self.output == '-':
            print(text.decode('ascii'), flush=True)
        else:
            write_output(text, self.output)
