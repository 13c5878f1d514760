"""Tests for package logging."""

from __future__ import annotations

import json

import pytest

from laravel_popo import BasePopo, PropertyNotReadableException, field
from laravel_popo.Log import LogManager, logger, set_log_manager


def stderr_manager(formatter: str = 'laravel') -> LogManager:
    return LogManager({
        'default': 'stderr',
        'channels': {
            'stderr': {'driver': 'stderr', 'level': 'debug', 'formatter': formatter},
        },
    })


class TestLogManager:
    def test_laravel_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        manager = stderr_manager()
        manager.info('POPO created', {'path': 'app/Popo/Invoice.py'})

        line = capsys.readouterr().err.strip()
        assert line.endswith('popo.stderr.INFO: POPO created {"path": "app/Popo/Invoice.py"}')

    def test_json_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        manager = stderr_manager('json')
        manager.error('failed', {'field': 'name'})

        entry = json.loads(capsys.readouterr().err)
        assert entry['level'] == 'ERROR'
        assert entry['channel'] == 'popo.stderr'
        assert entry['context'] == {'field': 'name'}

    def test_level_filters_messages(self, capsys: pytest.CaptureFixture[str]) -> None:
        manager = LogManager({'channels': {'default': {'driver': 'stderr', 'level': 'warning'}}})
        manager.info('hidden')
        manager.warning('shown')

        err = capsys.readouterr().err
        assert 'hidden' not in err
        assert 'shown' in err

    def test_default_driver_can_change(self) -> None:
        manager = stderr_manager()
        manager.set_default_driver('null')

        assert manager.get_default_driver() == 'null'
        assert manager.channel().name == 'null'

    def test_unreadable_property_is_logged(self, capsys: pytest.CaptureFixture[str]) -> None:
        class BrokenPopo(BasePopo):
            name = field()

        set_log_manager(stderr_manager())

        with pytest.raises(PropertyNotReadableException):
            BrokenPopo().to_array()

        err = capsys.readouterr().err
        assert 'ERROR: Property [name] of [BrokenPopo] is not readable.' in err
        assert logger().name == 'stderr'
