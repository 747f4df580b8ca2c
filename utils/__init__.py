"""
Utility modules for the pool usage monitor.
"""

from .exceptions import (
    PoolMonitorError,
    ConfigError,
    StorageError,
    InvalidReadingError,
    FetchError,
    ReadError,
    ParseError,
    NotifyError,
)

__all__ = [
    'PoolMonitorError',
    'ConfigError',
    'StorageError',
    'InvalidReadingError',
    'FetchError',
    'ReadError',
    'ParseError',
    'NotifyError',
]
