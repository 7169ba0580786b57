"""
Sync Configuration
==================

Fixed locations of the monitoring mixins and the immutable configuration
a Syncer is constructed with.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Walked relative to the destination root.
OPTIONAL_CONFIG_PATHS: tuple[str, ...] = (
    "mixins/grafana_dashboards",
    "mixins/prometheus",
)

# Walked relative to the source root.
REQUIRED_CONFIG_PATHS: tuple[str, ...] = ("mixins/lib/config_util.libsonnet",)

ALLOWED_EXTENSIONS: frozenset[str] = frozenset({".jsonnet", ".libsonnet"})

# rw-r--r--
FILE_MODE = 0o644


class SyncConfig(BaseModel):
    """Source and destination roots plus the subpaths and extensions to sync."""

    model_config = ConfigDict(frozen=True)

    source_root: Path = Field(default_factory=lambda: Path(""), description="Root all files are read from")
    destination_root: Path = Field(default_factory=lambda: Path(""), description="Root all files are written to")
    optional_paths: tuple[str, ...] = OPTIONAL_CONFIG_PATHS
    required_paths: tuple[str, ...] = REQUIRED_CONFIG_PATHS
    allowed_extensions: frozenset[str] = ALLOWED_EXTENSIONS
    file_mode: int = FILE_MODE
