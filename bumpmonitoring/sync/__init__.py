"""
Monitoring config synchronization package.
"""

from .config import ALLOWED_EXTENSIONS, OPTIONAL_CONFIG_PATHS, REQUIRED_CONFIG_PATHS, SyncConfig
from .syncer import PathResolutionError, ReadError, SyncError, Syncer, WriteError, has_allowed_extension

__all__ = [
    'ALLOWED_EXTENSIONS',
    'OPTIONAL_CONFIG_PATHS',
    'REQUIRED_CONFIG_PATHS',
    'PathResolutionError',
    'ReadError',
    'SyncConfig',
    'SyncError',
    'Syncer',
    'WriteError',
    'has_allowed_extension',
]
