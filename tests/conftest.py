from __future__ import annotations

from typing import Iterator

import pytest

from laravel_popo.Log import LogManager, set_log_manager


@pytest.fixture(autouse=True)
def silent_log_manager() -> Iterator[LogManager]:
    """Route package logs to the null channel while a test runs."""
    manager = LogManager({'default': 'null', 'channels': {'null': {'driver': 'null'}}})
    set_log_manager(manager)
    yield manager
    set_log_manager(None)
