"""
File system adapters: input document reading and output publishing.

Nothing is written until the caller has finished every transformation;
the output directory is created on first write.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path

from cms_listing.core.errors import DocumentIOError

logger = logging.getLogger(__name__)


def read_document(path: Path | str) -> str:
    """Read the input HTML document. Raises DocumentIOError."""
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentIOError(path, e.strerror or str(e)) from e


class OutputStore:
    def __init__(self, base_path: Path | str):
        self.base_path = Path(base_path).resolve()

    def _safe_path(self, path: str) -> Path:
        # Prevent traversal
        target = (self.base_path / path).resolve()
        if target != self.base_path and not target.is_relative_to(self.base_path):
            raise ValueError(f"Path traversal attempt detected: {path}")
        return target

    def write_text(self, name: str, text: str) -> Path:
        """Write a text file under the output root and return its path."""
        target = self._safe_path(name)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        except OSError as e:
            raise DocumentIOError(target, e.strerror or str(e)) from e
        return target

    def copy_tree(self, source: Path | str, name: str) -> Path:
        """Recursively copy a directory under the output root, merging into it."""
        target = self._safe_path(name)
        try:
            shutil.copytree(source, target, dirs_exist_ok=True)
        except OSError as e:
            raise DocumentIOError(target, str(e)) from e
        return target

    def publish_assets(self, asset_dirs: Iterable[str], root: Path | str) -> list[Path]:
        """Copy each existing asset directory from ``root``; missing ones are skipped."""
        root = Path(root)
        copied: list[Path] = []
        for name in asset_dirs:
            source = root / name
            if not source.is_dir():
                logger.info(f"Asset directory {source} not found, skipping")
                continue
            copied.append(self.copy_tree(source, name))
        return copied
