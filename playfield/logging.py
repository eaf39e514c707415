"""
Playfield Unified Logging System

Provides consistent, lightweight logging for the game framework and games.
Supports per-module log levels configured in code or from the environment.

Usage:
    from playfield.logging import get_logger

    log = get_logger('frame_driver')
    log.debug("Tick %d", tick)
    log.info("Game started")

Configuration:
    Environment variables:
        PLAYFIELD_LOG_LEVEL=DEBUG          # Global default level
        PLAYFIELD_LOG_FRAME_DRIVER=TRACE   # Module-specific level
        PLAYFIELD_LOG_COLLISION=OFF

    Or programmatically:
        from playfield.logging import configure_logging
        configure_logging(level='DEBUG', modules={'collision': 'INFO'})
"""

import os
import sys
from enum import IntEnum
from typing import Any, Dict, Optional
from functools import lru_cache


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Even more verbose than DEBUG
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


# =============================================================================
# Global configuration
# =============================================================================

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}

_ENV_PREFIX = 'PLAYFIELD_LOG_'


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def _module_key(module: str) -> str:
    """Normalize a module name for level lookup."""
    return module.lower().replace('.', '_').replace('/', '_')


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel."""
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][_module_key(mod)] = _level_from_string(mod_level)


def _load_env_config() -> None:
    """Load configuration from environment variables.

    PLAYFIELD_LOG_LEVEL sets the default level; any other
    PLAYFIELD_LOG_<MODULE> variable sets that module's level
    (PLAYFIELD_LOG_FRAME_DRIVER=DEBUG -> frame_driver: DEBUG).
    """
    global_key = _ENV_PREFIX + 'LEVEL'
    if global_key in os.environ:
        _config['default_level'] = _level_from_string(os.environ[global_key])

    for key, value in os.environ.items():
        if key.startswith(_ENV_PREFIX) and key != global_key:
            module_name = key[len(_ENV_PREFIX):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


# Load env config on import
_load_env_config()


class PlayfieldLogger:
    """
    Logger for a specific module.

    Messages use printf-style arguments, formatted only when the
    message will actually be emitted.
    """

    def __init__(self, module: str):
        self.module = module
        self._module_key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        if self._module_key in _config['module_levels']:
            return _config['module_levels'][self._module_key]
        return _config['default_level']

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if message at given level should be logged."""
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        """Internal log method."""
        if not self.is_enabled_for(level):
            return

        # Format message with args if provided
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(_format_message(self.module, level_name, msg), file=sys.stdout)

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (very verbose)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        """Log at DEBUG level."""
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        """Log at INFO level."""
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        """Log at WARNING level."""
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        """Log at ERROR level."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> PlayfieldLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'frame_driver', 'collision')

    Returns:
        PlayfieldLogger instance for the module
    """
    return PlayfieldLogger(module)
