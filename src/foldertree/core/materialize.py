# src/foldertree/core/materialize.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from ..errors import FilesystemWriteError
from .notation import Entry

logger = logging.getLogger(__name__)

Reporter = Callable[[str], None]
PathLike = Union[str, Path]


def _log_report(message: str) -> None:
    logger.info(message)

def ensure_directory(path: Path, report: Optional[Reporter] = None) -> bool:
    """
    Create `path` (with any missing ancestors) unless it already exists.
    Returns True when something was created.
    """
    if path.exists():
        return False
    (report or _log_report)(f"Creating directory: {path}")
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemWriteError(str(path), e.strerror or str(e)) from e
    return True

def touch_empty(path: Path, report: Optional[Reporter] = None) -> None:
    """Write a zero-byte file, truncating whatever was there."""
    (report or _log_report)(f"Creating file: {path}")
    try:
        path.write_bytes(b"")
    except OSError as e:
        raise FilesystemWriteError(str(path), e.strerror or str(e)) from e

def materialize(base_path: PathLike, forest: Iterable[Entry], report: Optional[Reporter] = None) -> None:
    """
    Create every entry of `forest` under `base_path`, top-down.
    One-directional: nothing on disk is ever removed.
    """
    base = Path(base_path)
    for entry in forest:
        if entry.is_dir:
            target = base / entry.dir_name
            ensure_directory(target, report)
            if entry.children:
                materialize(target, entry.children, report)
        else:
            touch_empty(base / entry.name, report)
