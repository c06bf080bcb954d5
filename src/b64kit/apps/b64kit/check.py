# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""Check that input is well-formed Base64."""


# type annotations
from __future__ import annotations
from typing import Optional

# standard libs
import sys
from functools import partial

# external libs
from cmdkit.app import Application, exit_status
from cmdkit.cli import Interface
from rich.console import Console

# internal libs
from b64kit.core.logging import Logger
from b64kit.core.exceptions import log_exception
from b64kit.codec import is_base64_sequence, decode, Base64Error
from b64kit.apps.b64kit.stream import read_input

# public interface
__all__ = ['CheckApp', ]

# application logger
log = Logger.with_name('b64kit')


PROGRAM = 'b64kit check'
USAGE = f"""\
usage: {PROGRAM} [-h] [FILE]
{__doc__}\
"""

HELP = f"""\
{USAGE}

Surrounding whitespace is ignored. Empty input is not valid.
Exits with non-zero status if the input would fail strict decoding.

arguments:
FILE                     Path to input file (default: <stdin>).

options:
-h, --help               Show this message and exit.\
"""


class CheckApp(Application):
    """Application class for check command."""

    interface = Interface(PROGRAM, USAGE, HELP)
    ALLOW_NOARGS = True

    source: Optional[str] = None
    interface.add_argument('source', nargs='?', default=None)

    exceptions = {
        RuntimeError: partial(log_exception, logger=log.critical,
                              status=exit_status.runtime_error),
        FileNotFoundError: partial(log_exception, logger=log.critical,
                                   status=exit_status.runtime_error),
        **Application.exceptions
    }

    def run(self) -> None:
        """Business logic for `b64kit check`."""
        data = read_input(self.source).strip()
        if not is_base64_sequence(data):
            raise RuntimeError('Not valid Base64 (empty or contains non-alphabet characters)')
        try:
            size = len(decode(data))
        except Base64Error as error:
            raise RuntimeError(f'Not valid Base64 ({error})') from error
        self.print_result(f'valid ({len(data)} characters, {size} bytes)')

    @staticmethod
    def print_result(message: str) -> None:
        """Print the final verdict (highlighted on a terminal)."""
        if sys.stdout.isatty():
            Console().print(f'[bold green]{message}[/bold green]')
        else:
            print(message, flush=True)
