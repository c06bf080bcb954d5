# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""Entry-point for b64kit command-line interface."""


# type annotations
from __future__ import annotations

# standard libs
import sys

# external libs
from cmdkit.app import Application, ApplicationGroup
from cmdkit.cli import Interface

# internal libs
from b64kit import __version__, __description__, __copyright__, __developer__, __contact__
from b64kit.core.logging import Logger
from b64kit.apps.b64kit import encode, decode, check

# public interface
__all__ = ['B64KitApp', 'main', ]


PROGRAM = 'b64kit'
USAGE = f"""\
usage: {PROGRAM} [-h] [-v] <command> [<args>...]
{__description__}\
"""

EPILOG = f"""\
Copyright {__copyright__}
{__developer__} <{__contact__}>\
"""

HELP = f"""\
{USAGE}

commands:
encode                 {encode.__doc__}
decode                 {decode.__doc__}
check                  {check.__doc__}

options:
-h, --help             Show this message and exit.
-v, --version          Show the version and exit.

Use the -h/--help flag with the above commands to
learn more about their usage.

{EPILOG}\
"""


# initialize application logger
log = Logger.with_name('b64kit')


# logging setup for command-line interface
Application.log_critical = log.critical
Application.log_exception = log.exception


class B64KitApp(ApplicationGroup):
    """Top-level application class for b64kit."""

    interface = Interface(PROGRAM, USAGE, HELP)
    interface.add_argument('command')
    interface.add_argument('-v', '--version', action='version', version=__version__)

    command = None
    commands = {'encode': encode.EncodeApp,
                'decode': decode.DecodeApp,
                'check': check.CheckApp,
                }


def main() -> int:
    """Entry-point for `b64kit` console application."""
    return B64KitApp.main(sys.argv[1:])
