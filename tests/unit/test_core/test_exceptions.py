# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for exception handling helpers."""


# standard libs
import os

# external libs
import pytest

# internal libs
from b64kit.core.exceptions import write_traceback, log_exception


@pytest.mark.unit
def test_write_traceback(tmpdir: str, capsys) -> None:
    """Traceback is written to a file and reported on stderr."""
    try:
        raise RuntimeError('broken\nconfiguration')
    except RuntimeError as error:
        path = write_traceback(error, module='b64kit.tests', logdir=tmpdir)
    assert os.path.dirname(path) == tmpdir
    with open(path, mode='r') as stream:
        content = stream.read()
    assert 'Traceback' in content
    assert 'RuntimeError: broken' in content
    err = capsys.readouterr().err
    assert 'RuntimeError: broken - configuration' in err
    assert f'Exception traceback written to {path}' in err


@pytest.mark.unit
def test_log_exception() -> None:
    """Exception message goes to the logger and status is returned."""
    messages = []
    assert log_exception(ValueError('bad input'), logger=messages.append, status=7) == 7
    assert messages == ['bad input']
