# SPDX-FileCopyrightText: 2022 b64kit developers
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for logging setup."""


# standard libs
import logging

# external libs
import pytest
from cmdkit.config import ConfigurationError

# internal libs
from b64kit.core.config import LOGGING_STYLES
from b64kit.core.logging import Logger, LogRecord, TRACE, HOSTNAME, INSTANCE, level_from_name


@pytest.mark.unit
class TestLevelFromName:
    """Unit tests for `level_from_name`."""

    @pytest.mark.parametrize('name, level', [
        ('trace', TRACE),
        ('debug', logging.DEBUG),
        ('INFO', logging.INFO),
        ('Warning', logging.WARNING),
        ('error', logging.ERROR),
        ('critical', logging.CRITICAL),
    ])
    def test_valid(self, name: str, level: int) -> None:
        assert level_from_name(name) == level

    def test_unsupported(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            level_from_name('verbose')
        response, = exc_info.value.args
        assert response.startswith('Unsupported logging level \'VERBOSE\'')

    def test_not_a_string(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            level_from_name(10)
        response, = exc_info.value.args
        assert response.startswith('Expected string for logging level, given \'10\'')


@pytest.mark.unit
class TestLogger:
    """Unit tests for extended Logger."""

    def test_trace_level(self) -> None:
        assert TRACE == logging.DEBUG - 5
        assert logging.getLevelName(TRACE) == 'TRACE'

    def test_with_name(self) -> None:
        log = Logger.with_name('b64kit.tests.logging')
        assert isinstance(log, Logger)
        assert log is logging.getLogger('b64kit.tests.logging')

    def test_trace(self, caplog) -> None:
        log = Logger.with_name('b64kit.tests.trace')
        caplog.set_level(TRACE, logger='b64kit.tests.trace')
        log.trace('hello %s', 'world')
        record, = [record for record in caplog.records if record.name == 'b64kit.tests.trace']
        assert record.getMessage() == 'hello world'
        assert record.levelname == 'TRACE'

    def test_record_attributes(self, caplog) -> None:
        """Records carry hostname, instance and ANSI attributes for formatting."""
        log = Logger.with_name('b64kit.tests.record')
        caplog.set_level(logging.INFO, logger='b64kit.tests.record')
        log.info('message')
        record, = [record for record in caplog.records if record.name == 'b64kit.tests.record']
        assert isinstance(record, LogRecord)
        assert record.hostname == HOSTNAME
        assert record.app_id == INSTANCE
        assert record.ansi_reset == '\033[0m'
        assert record.ansi_level == '\033[32m'

    @pytest.mark.parametrize('style', list(LOGGING_STYLES))
    def test_styles_format(self, style: str) -> None:
        """Every logging style only uses attributes provided by the record factory."""
        formatter = logging.Formatter(LOGGING_STYLES[style]['format'],
                                      datefmt=LOGGING_STYLES[style]['datefmt'])
        record = logging.getLogRecordFactory()('b64kit.tests.style', logging.WARNING, __file__, 1,
                                               'styled %s', ('message', ), None)
        assert 'styled message' in formatter.format(record)
