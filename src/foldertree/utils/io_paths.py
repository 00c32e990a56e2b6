"""
io_paths.py — Small I/O helpers shared by the CLI and the interactive menu
Used by:
  • cli/commands.py   (--from, -o/--output)
  • core/interactive.py  (file:<path> references)
"""

from __future__ import annotations
from pathlib import Path
import json
from typing import Any, List, Optional

from ..errors import InputReadError

FILE_REF_PREFIX = "file:"

# ------------------------------------------------------------
# Notation input
# ------------------------------------------------------------

def is_file_ref(value: str) -> bool:
    return value.startswith(FILE_REF_PREFIX)

def strip_file_ref(value: str) -> str:
    """'file: notes/tree.txt' -> 'notes/tree.txt'; plain paths pass through."""
    if is_file_ref(value):
        return value[len(FILE_REF_PREFIX):].strip()
    return value.strip()

def read_notation(ref: str) -> str:
    """
    Load notation text from a path or a `file:<path>` reference (UTF-8).
    Raises InputReadError instead of the underlying OSError.
    """
    path = Path(strip_file_ref(ref))
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        reason = getattr(e, "strerror", None) or str(e)
        raise InputReadError(str(path), reason) from e

# ------------------------------------------------------------
# Output helpers
# ------------------------------------------------------------

def write_lines(lines: List[str], path: Path) -> None:
    """Write lines joined by newlines (UTF-8), creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text('\n'.join(lines), encoding='utf-8')

def write_json(data: Any, path: Optional[Path] = None, indent: int = 2) -> str:
    """Serialize to JSON (UTF-8, indented); also write it to `path` when given."""
    text = json.dumps(data, indent=indent, ensure_ascii=False)
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    return text
