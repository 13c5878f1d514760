from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union
from datetime import datetime
import json
import sys


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


class LogChannel:
    """Laravel-style log channel."""

    def __init__(self, name: str, handler: logging.Handler, level: Union[str, int] = logging.INFO) -> None:
        self.name = name
        self.logger = logging.getLogger(f"popo.{name}")
        self.logger.setLevel(_resolve_level(level))
        # A channel owns its logger, rebuilding it must not duplicate output
        for existing in list(self.logger.handlers):
            self.logger.removeHandler(existing)
        self.logger.addHandler(handler)
        self.logger.propagate = False

    def debug(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log info message."""
        self._log(logging.INFO, message, context)

    def warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, context)

    def error(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, context)

    def _log(self, level: int, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        extra = {'context': context} if context else {}
        self.logger.log(level, message, extra=extra)


class LaravelFormatter(logging.Formatter):
    """Laravel-style log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')
        log_line = f"[{timestamp}] {record.name}.{record.levelname}: {record.getMessage()}"

        context = getattr(record, 'context', {})
        if context:
            log_line += f" {json.dumps(context, default=str)}"

        if record.exc_info:
            log_line += f"\n{self.formatException(record.exc_info)}"

        return log_line


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'channel': record.name,
            'message': record.getMessage(),
            'context': getattr(record, 'context', {}),
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class LogManager:
    """Laravel-style log manager."""

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        self._config = config or {}
        self._channels: Dict[str, LogChannel] = {}
        self._default_channel: str = self._config.get('default', 'default')

    def channel(self, name: Optional[str] = None) -> LogChannel:
        """Get a log channel."""
        if name is None:
            name = self._default_channel

        if name not in self._channels:
            self._create_channel(name)

        return self._channels[name]

    def _create_channel(self, name: str) -> None:
        config = self._config.get('channels', {}).get(name, {})
        driver = config.get('driver', 'stdout')
        level = config.get('level', logging.INFO)

        handler: logging.Handler
        if driver == 'stderr':
            handler = logging.StreamHandler(sys.stderr)
        elif driver == 'null':
            handler = logging.NullHandler()
        else:
            handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(self._get_formatter(config))

        self._channels[name] = LogChannel(name, handler, level)

    def _get_formatter(self, config: Dict[str, Any]) -> logging.Formatter:
        if config.get('formatter', 'laravel') == 'json':
            return JsonFormatter()
        return LaravelFormatter()

    def get_default_driver(self) -> str:
        """Get the default log channel name."""
        return self._default_channel

    def set_default_driver(self, name: str) -> None:
        """Set the default log channel name."""
        self._default_channel = name

    # Proxy methods to default channel
    def debug(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.channel().debug(message, context)

    def info(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.channel().info(message, context)

    def warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.channel().warning(message, context)

    def error(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.channel().error(message, context)


# Global log manager instance
log_manager_instance: Optional[LogManager] = None


def get_log_manager() -> LogManager:
    """Get the global log manager instance."""
    global log_manager_instance
    if log_manager_instance is None:
        from laravel_popo.config import get_popo_config
        log_manager_instance = LogManager(get_popo_config()['logging'])
    return log_manager_instance


def set_log_manager(manager: Optional[LogManager]) -> None:
    """Replace the global log manager, None resets it to the configured one."""
    global log_manager_instance
    log_manager_instance = manager


def logger(channel: Optional[str] = None) -> LogChannel:
    """Get a log channel."""
    return get_log_manager().channel(channel)
