"""Utility functions and classes"""

from aliasargs.utils.logging_manager import (
    get_logger,
    get_verbosity,
    setup_log_file,
    set_verbosity,
    is_silent,
    cleanup,
    LogLevel
)

__all__ = [
    'get_logger',
    'get_verbosity',
    'setup_log_file',
    'set_verbosity',
    'is_silent',
    'cleanup',
    'LogLevel'
]
