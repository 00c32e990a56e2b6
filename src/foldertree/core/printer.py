# src/foldertree/core/printer.py
from __future__ import annotations
import os
from typing import Callable, List, Optional, Sequence

from ..errors import TreeReadError

BRANCH = '├── '
LAST_BRANCH = '└── '
PIPE = '│   '
SPACE = '    '


def format_tree(
    dir_path: str,
    skip: Sequence[str] = (),
    prefix: str = '',
    sort: bool = False,
    last_by_visible: bool = True,
    out_lines: Optional[List[str]] = None,
) -> List[str]:
    """
    Lines for everything below `dir_path`, in os.listdir order unless `sort`.

    `last_by_visible` decides which entry gets the closing branch: the last
    one actually printed (True), or the last one of the raw listing (False),
    in which case a skipped trailing folder leaves the last printed entry on
    an open branch.
    """
    if out_lines is None:
        out_lines = []

    try:
        names = os.listdir(dir_path)
    except OSError as e:
        raise TreeReadError(str(dir_path), e.strerror or str(e)) from e
    if sort:
        names.sort()
    visible = [n for n in names if n not in skip]
    last_name = visible[-1] if last_by_visible and visible else (names[-1] if names else None)

    for name in visible:
        path = os.path.join(dir_path, name)
        is_dir = os.path.isdir(path)
        is_last = name == last_name
        out_lines.append(f"{prefix}{LAST_BRANCH if is_last else BRANCH}{name}{'/' if is_dir else ''}")
        if is_dir:
            extension = SPACE if is_last else PIPE
            format_tree(path, skip, prefix + extension, sort, last_by_visible, out_lines)
    return out_lines

def render_tree(dir_path: str, skip: Sequence[str] = (), sort: bool = False, last_by_visible: bool = True) -> List[str]:
    """Header line (the folder's basename) followed by the tree."""
    header = os.path.basename(os.path.normpath(os.path.abspath(dir_path)))
    return [header] + format_tree(dir_path, skip, sort=sort, last_by_visible=last_by_visible)

def print_tree(
    dir_path: str,
    skip: Sequence[str] = (),
    sort: bool = False,
    last_by_visible: bool = True,
    echo: Callable[[str], None] = print,
) -> List[str]:
    lines = render_tree(dir_path, skip, sort, last_by_visible)
    for line in lines:
        echo(line)
    return lines
