# src/foldertree/errors.py
from __future__ import annotations


class FolderTreeError(Exception):
    """Base class for every error the CLI reports and exits on."""


class InputReadError(FolderTreeError):
    """A referenced notation file could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason} ({path})")


class FilesystemWriteError(FolderTreeError):
    """Creating a directory or file failed while materializing a tree."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"could not create {path}: {reason}")


class NotationError(FolderTreeError):
    """Strict-mode rejection of a notation line (line numbers are 1-based)."""

    def __init__(self, line_no: int, line: str, reason: str):
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_no}: {reason}: {line!r}")


class TreeReadError(FolderTreeError):
    """A folder being printed could not be listed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot list {path}: {reason}")
