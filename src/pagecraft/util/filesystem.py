"""
Output directory handling for static builds.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from filelock import FileLock

logger = logging.getLogger(__name__)

LOCK_SUFFIX = ".lock"


def lock_path_for(output_dir: Path | str) -> Path:
    """Lock file guarding ``output_dir``; it sits beside the directory so clearing it is safe."""
    target = Path(output_dir).expanduser().resolve()
    return target.with_name(f".{target.name}{LOCK_SUFFIX}")


@contextmanager
def build_lock(output_dir: Path | str, timeout: float = -1) -> Iterator[Path]:
    """
    Hold an exclusive lock on ``output_dir`` for the duration of a build.

    Two builds into the same directory would otherwise interleave
    ``reset_directory`` with page writes.
    """
    lock_path = lock_path_for(output_dir)
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug("Acquiring build lock %s", lock_path)
    with FileLock(str(lock_path), timeout=timeout):
        yield lock_path


def reset_directory(path: Path | str) -> Path:
    """
    Remove a previous build directory (if any) and recreate it empty.
    """
    target = Path(path).expanduser().resolve()
    if target.exists():
        if not target.is_dir():
            raise NotADirectoryError(f"Output path is not a directory: {target}")
        logger.debug("Clearing existing output directory %s", target)
        shutil.rmtree(target)
    target.mkdir(parents=True)
    return target


def copy_tree(source: Path | str, destination: Path | str) -> Optional[Path]:
    """
    Copy static assets into ``destination``; None when ``source`` is not a directory.
    """
    src = Path(source).expanduser().resolve()
    if not src.is_dir():
        logger.warning("Assets directory not found at %s", src)
        return None
    dest = Path(destination)
    shutil.copytree(src, dest, dirs_exist_ok=True)
    logger.debug("Copied assets from %s to %s", src, dest)
    return dest


def write_text_file(path: Path | str, content: str, encoding: str = "utf-8") -> Path:
    """
    Write ``content`` atomically: readers see either the old file or the new one.
    """
    target = Path(path).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, staged = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as handle:
            handle.write(content)
        os.replace(staged, target)
    except BaseException:
        Path(staged).unlink(missing_ok=True)
        raise
    return target
