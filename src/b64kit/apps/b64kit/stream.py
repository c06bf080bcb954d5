# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""Reading input and writing output for command-line applications."""


# type annotations
from __future__ import annotations
from typing import Optional

# standard libs
import sys

# public interface
__all__ = ['read_input', 'write_output', ]


def read_input(filepath: Optional[str]) -> bytes:
    """Read all bytes from `filepath` (or stdin if None or '-')."""
    if filepath is None or filepath == '-':
        return sys.stdin.buffer.read()
    with open(filepath, mode='rb') as stream:
        return stream.read()


def write_output(data: bytes, filepath: Optional[str]) -> None:
    """Write `data` to `filepath` (or stdout if None or '-')."""
    if filepath is None or filepath == '-':
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(filepath, mode='wb') as stream:
        stream.write(data)
