# utils/logging_manager.py
"""Unified logging management for the package and its CLI apps"""

import logging
import sys
import threading
from enum import Enum
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "aliasargs"


class LogLevel(Enum):
    """Simplified verbosity levels"""
    SILENT = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


class LoggingManager:
    """Centralised logging manager for the package logger"""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not hasattr(self, '_initialised'):
            self._initialised = True
            self.log_level = LogLevel.NORMAL
            self.log_file_path: Optional[Path] = None
            self._file_handler: Optional[logging.FileHandler] = None
            self._setup_package_logger()

    def _setup_package_logger(self):
        """Setup package logger with a console handler only initially"""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(logging.DEBUG)

        console = logging.StreamHandler(sys.stderr)
        console.setLevel(self._get_console_level())
        console.setFormatter(self._get_console_formatter())
        package_logger.addHandler(console)
        self._console_handler = console

    def setup_log_file(self, log_path: Path) -> Path:
        """Mirror every package log record into a file"""
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        if self._file_handler is not None:
            package_logger.removeHandler(self._file_handler)
            self._file_handler.close()

        file_handler = logging.FileHandler(log_path, mode='w')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        package_logger.addHandler(file_handler)

        self._file_handler = file_handler
        self.log_file_path = log_path
        package_logger.debug(f"Log file: {log_path}")
        return log_path

    def set_verbosity(self, level: LogLevel):
        """Update verbosity level"""
        self.log_level = level
        self._console_handler.setLevel(self._get_console_level())
        self._console_handler.setFormatter(self._get_console_formatter())

    def _get_console_level(self) -> int:
        """Map LogLevel to logging level for console"""
        mapping = {
            LogLevel.SILENT: logging.CRITICAL + 10,
            LogLevel.NORMAL: logging.WARNING,
            LogLevel.VERBOSE: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG
        }
        return mapping[self.log_level]

    def _get_console_formatter(self) -> logging.Formatter:
        """Get appropriate formatter based on verbosity"""
        if self.log_level == LogLevel.DEBUG:
            return logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        elif self.log_level == LogLevel.VERBOSE:
            return logging.Formatter('[%(levelname)s] %(message)s')
        else:
            return logging.Formatter('%(message)s')

    def is_silent(self) -> bool:
        """Check if in silent mode"""
        return self.log_level == LogLevel.SILENT

    def cleanup(self):
        """Close the log file handler if one was set up"""
        if self._file_handler is not None:
            logging.getLogger(PACKAGE_LOGGER).removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None
            self.log_file_path = None


# Global instance
_manager = LoggingManager()

# Convenience functions
def setup_log_file(log_path: Path) -> Path:
    return _manager.setup_log_file(log_path)

def get_logger(name: str) -> logging.Logger:
    """Get a logger instance"""
    return logging.getLogger(name)

def set_verbosity(level: LogLevel):
    _manager.set_verbosity(level)

def get_verbosity() -> LogLevel:
    return _manager.log_level

def is_silent() -> bool:
    return _manager.is_silent()

def cleanup():
    _manager.cleanup()
