"""
Test Configuration and Fixtures
=============================

This module provides pytest fixtures for building source and destination
monitoring trees in a temporary directory.
"""

from pathlib import Path

import pytest

from bumpmonitoring.sync.config import SyncConfig


def write_file(path: Path, content: str | bytes) -> Path:
    """Write content to a file, creating its parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content)
    return path


@pytest.fixture
def src_root(tmp_path: Path) -> Path:
    root = tmp_path / "src"
    root.mkdir()
    return root


@pytest.fixture
def dst_root(tmp_path: Path) -> Path:
    root = tmp_path / "dst"
    root.mkdir()
    return root


@pytest.fixture
def monitoring_trees(src_root: Path, dst_root: Path) -> tuple[Path, Path]:
    """
    Create a source tree with fresh mixins and a destination tree with stale ones.

    Returns:
        tuple[Path, Path]: The source and destination roots
    """
    write_file(src_root / "mixins/lib/config_util.libsonnet", "X")
    write_file(src_root / "mixins/grafana_dashboards/boskos.jsonnet", "boskos-new")
    write_file(src_root / "mixins/grafana_dashboards/nested/ghproxy.libsonnet", "ghproxy-new")
    write_file(src_root / "mixins/prometheus/alerts.jsonnet", "alerts-new")

    write_file(dst_root / "mixins/lib/.keep", "")
    write_file(dst_root / "mixins/grafana_dashboards/boskos.jsonnet", "boskos-old-and-longer")
    write_file(dst_root / "mixins/grafana_dashboards/boskos.json", "{}")
    write_file(dst_root / "mixins/grafana_dashboards/nested/ghproxy.libsonnet", "ghproxy-old")
    write_file(dst_root / "mixins/prometheus/alerts.jsonnet", "alerts-old")
    return src_root, dst_root


@pytest.fixture
def sync_config(monitoring_trees: tuple[Path, Path]) -> SyncConfig:
    src, dst = monitoring_trees
    return SyncConfig(source_root=src, destination_root=dst)


@pytest.fixture
def make_file():
    """Return a helper that writes a file, creating parent directories."""
    return write_file
