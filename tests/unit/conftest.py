# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""Fixtures for unit tests."""


# standard libs
import os
from datetime import datetime

# external libs
import pytest


def pytest_configure(config) -> None:
    """Register custom markers."""
    config.addinivalue_line('markers', 'unit: fast tests without external resources')


@pytest.fixture(scope='package')
def tmpdir() -> str:
    """Ensure a new temporary directory exists and return its path."""
    date = datetime.now().strftime('%Y%m%d-%H%M%S')
    path = f'/tmp/b64kit/tests/{date}'
    os.makedirs(path, exist_ok=True)
    return path
