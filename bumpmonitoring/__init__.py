"""
bumpmonitoring - Monitoring mixin synchronization
"""

__version__ = "0.1.0"

from bumpmonitoring.sync import SyncConfig, SyncError, Syncer

__all__ = [
    "SyncConfig",
    "SyncError",
    "Syncer",
    "__version__",
]
