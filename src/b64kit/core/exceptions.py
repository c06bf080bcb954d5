# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""Common exceptions and error handling."""


# type annotations
from __future__ import annotations
from typing import Callable, Optional

# standard libs
import os
import sys
import traceback
from datetime import datetime

# internal libs
from b64kit.core.ansi import Ansi, colorize
from b64kit.core.platform import default_path

# public interface
__all__ = ['log_exception', 'write_traceback', 'dump_traceback', 'display_critical', ]


def display_critical(message: str, module: Optional[str] = None) -> None:
    """Print a critical message to stderr (used before logging is configured)."""
    label = '' if not module else colorize(f'[{module}]', Ansi.FAINT) + ' '
    print(colorize('CRITICAL', Ansi.MAGENTA) + f' {label}{message}', file=sys.stderr)


def dump_traceback(exc: Exception, logdir: Optional[str] = None) -> str:
    """Write formatted traceback for `exc` to a new file in `logdir` and return its path."""
    logdir = logdir or default_path.log
    os.makedirs(logdir, exist_ok=True)
    time = datetime.now().strftime('%Y%m%d-%H%M%S')
    filepath = os.path.join(logdir, f'exception-{time}.log')
    with open(filepath, mode='w') as stream:
        print(''.join(traceback.format_exception(type(exc), exc, exc.__traceback__)), file=stream)
    return filepath


def write_traceback(exc: Exception, module: Optional[str] = None, logdir: Optional[str] = None) -> str:
    """Dump traceback to file and report to stderr directly (logging may not be available)."""
    filepath = dump_traceback(exc, logdir)
    msg = str(exc).replace('\n', ' - ')
    display_critical(f'{exc.__class__.__name__}: {msg}', module=module)
    display_critical(f'Exception traceback written to {filepath}', module=module)
    return filepath


def log_exception(exc: Exception, logger: Callable[[str], None], status: int) -> int:
    """Log the exception and exit with `status`."""
    logger(str(exc))
    return status
