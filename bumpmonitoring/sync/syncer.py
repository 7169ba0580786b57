"""
Monitoring Config Synchronization
=================================

This module copies the jsonnet/libsonnet monitoring mixins from a source
tree into a destination tree. Optional configs are discovered in the
destination tree, required configs in the source tree, and every discovered
file is then copied from source to destination.
"""

import os
import stat
from collections.abc import Iterator
from pathlib import Path

from loguru import logger

from bumpmonitoring.sync.config import SyncConfig
from bumpmonitoring.utils.logging import timeit


class SyncError(Exception):
    """Base exception for monitoring config sync errors."""

    action = "Failed syncing"

    def __init__(self, path: str | Path, error: OSError):
        self.path = Path(path)
        self.error = error
        super().__init__(f"{self.action} {str(self.path)!r}: {error}")


class PathResolutionError(SyncError):
    """Raised when a configured subpath cannot be stat'ed."""

    action = "Failed to get the file info for"


class ReadError(SyncError):
    """Raised when a collected file cannot be read from the source tree."""

    action = "Failed reading file"


class WriteError(SyncError):
    """Raised when a collected file cannot be written to the destination tree."""

    action = "Failed writing file"


def file_extension(path: str | Path) -> str:
    """Return the extension of the final path segment, including the dot.

    Unlike ``PurePath.suffix`` a name that starts with a dot counts as an
    extension, so ``.jsonnet`` yields ``.jsonnet``.
    """
    name = Path(path).name
    index = name.rfind(".")
    return name[index:] if index >= 0 else ""


def has_allowed_extension(path: str | Path, allowed_extensions: frozenset[str]) -> bool:
    """Check whether a path's extension is exactly one of the allowed ones."""
    return file_extension(path) in allowed_extensions


def _walk_files(directory: Path) -> Iterator[Path]:
    """Yield every non-directory entry beneath a directory, depth-first in lexical order."""
    try:
        with os.scandir(directory) as entries:
            ordered = sorted(entries, key=lambda entry: entry.name)
    except OSError as error:
        logger.warning(f"Skipping unreadable directory {directory}: {error}")
        return

    for entry in ordered:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_files(Path(entry.path))
        else:
            yield Path(entry.path)


class Syncer:
    """Collects monitoring configs and copies them from source to destination."""

    def __init__(self, config: SyncConfig):
        """Initialize the Syncer.

        Args:
            config: Roots, subpaths and extensions to sync
        """
        self.config = config
        self.paths: list[str] = []

    def _add_path(self, relative_path: str) -> None:
        if has_allowed_extension(relative_path, self.config.allowed_extensions):
            logger.debug(f"Collected {relative_path}")
            self.paths.append(relative_path)

    def collect(self, root_path: str | Path, sub_path: str) -> None:
        """Collect matching files under ``root_path/sub_path``.

        Directories are walked recursively and the files found beneath them are
        recorded relative to ``root_path``. A plain file is recorded as
        ``sub_path`` itself. Only paths with an allowed extension are kept.

        Args:
            root_path: Root the subpath and the collected paths are relative to
            sub_path: Subpath to a directory or a single file

        Raises:
            PathResolutionError: If ``root_path/sub_path`` cannot be stat'ed
        """
        root_path = Path(root_path)
        full_path = root_path / sub_path

        try:
            info = full_path.stat()
        except OSError as error:
            raise PathResolutionError(full_path, error) from error

        if not stat.S_ISDIR(info.st_mode):
            self._add_path(sub_path)
            return

        for leaf_path in _walk_files(full_path):
            self._add_path(os.path.relpath(leaf_path, root_path))

    def collect_all(self) -> list[str]:
        """Collect optional configs from the destination and required configs from the source.

        Returns:
            list[str]: Relative paths in discovery order
        """
        self.paths = []

        logger.info(f"Processing optional configs: {self.config.destination_root}")
        for sub_path in self.config.optional_paths:
            self.collect(self.config.destination_root, sub_path)

        logger.info(f"Processing required configs: {self.config.source_root}")
        for sub_path in self.config.required_paths:
            self.collect(self.config.source_root, sub_path)

        return self.paths

    def copy_file(self, relative_path: str) -> None:
        """Copy one collected file from the source root to the destination root.

        The destination file is created or truncated; its parent directory
        must already exist.

        Raises:
            ReadError: If the source file cannot be read
            WriteError: If the destination file cannot be written
        """
        source = self.config.source_root / relative_path
        destination = self.config.destination_root / relative_path

        try:
            content = source.read_bytes()
        except OSError as error:
            raise ReadError(source, error) from error

        def opener(path, flags):
            return os.open(path, flags | os.O_CREAT | os.O_TRUNC, self.config.file_mode)

        try:
            with open(destination, "wb", opener=opener) as handle:
                handle.write(content)
        except OSError as error:
            raise WriteError(destination, error) from error

        logger.debug(f"Copied {source} -> {destination} ({len(content)} bytes)")

    @timeit
    def sync_all(self) -> list[str]:
        """Collect all configs and copy each of them, stopping at the first failure.

        Files copied before a failure are left in place.

        Returns:
            list[str]: Relative paths that were copied, in copy order

        Raises:
            SyncError: On the first path, read or write failure
        """
        paths = self.collect_all()
        logger.info(f"Files to be copied: {paths}")

        for relative_path in paths:
            self.copy_file(relative_path)

        return list(paths)
