"""
notation.py — indentation notation -> nested tree of Entry

Notation
--------
One entry per line. Everything from the first '#' is a comment, blank lines
are ignored. The run of characters before the first ASCII letter is the
depth marker; its raw length is the depth (spaces, dashes, pipes and
box-drawing prefixes all count the same). The name runs from that letter to
the end of the line. A trailing '/' marks a directory:

    src/
      index.js
      utils/
        helper.js
    README.md

Depths are only compared line against line (`<` / `>=`), never divided into
levels, so an input has to indent consistently with itself.

Strict mode rejects lines with no letter and lines whose depth disagrees
with the siblings already placed under the same parent. Lenient mode (the
default) never raises: letterless lines are dropped and an odd indent just
attaches to whatever ancestor the stack rule picks.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, NamedTuple, Optional

from ..errors import NotationError

logger = logging.getLogger(__name__)

_FIRST_LETTER = re.compile(r"[A-Za-z]")


@dataclass
class Entry:
    """A file, or a directory when the name ends with '/'."""
    name: str
    children: List["Entry"] = field(default_factory=list)

    @property
    def is_dir(self) -> bool:
        return self.name.endswith("/")

    @property
    def dir_name(self) -> str:
        return self.name[:-1] if self.is_dir else self.name

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "children": [c.to_dict() for c in self.children]}


class DepthLine(NamedTuple):
    depth: int
    name: str
    line_no: int = 0  # 1-based position in the raw text, 0 when unknown
    raw: str = ""     # the cleaned line as written, depth marker included


@dataclass
class _Frame:
    depth: int
    children: List[Entry]
    child_depth: Optional[int] = None


# ---------------- line level ----------------

def _numbered_lines(text: str) -> List[tuple]:
    out = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        # leading whitespace is part of the depth marker, only the right side is trimmed
        line = raw.split("#", 1)[0].rstrip()
        if line.strip():
            out.append((line_no, line))
    return out

def clean_lines(text: str) -> List[str]:
    """Drop comments (no escaping of '#') and blank lines; right-trim the rest."""
    return [line for _, line in _numbered_lines(text)]

def split_at_first_letter(line: str, line_no: int = 0) -> DepthLine:
    m = _FIRST_LETTER.search(line)
    if m is None:
        return DepthLine(0, "", line_no, line)
    return DepthLine(m.start(), line[m.start():], line_no, line)

def depth_tag(text: str) -> List[DepthLine]:
    return [split_at_first_letter(line, line_no) for line_no, line in _numbered_lines(text)]


# ---------------- tree level ----------------

def build_forest(lines: Iterable[DepthLine], strict: bool = False) -> List[Entry]:
    """
    Stack-based tree building. The stack starts with a synthetic frame at
    depth -1 owning the forest; frames deeper than or level with the current
    line can't be its ancestors and are popped. Directories push a frame for
    their own children.
    """
    forest: List[Entry] = []
    stack: List[_Frame] = [_Frame(-1, forest)]
    prev: Optional[DepthLine] = None

    for idx, line in enumerate(lines, start=1):
        line_no = line.line_no or idx
        if not line.name:
            if strict:
                raise NotationError(line_no, line.raw, "no letter to start a name")
            logger.warning("Skipping line %d: no letter to start a name", line_no)
            continue

        while stack[-1].depth >= line.depth:
            stack.pop()
        parent = stack[-1]

        if strict:
            if prev is not None and line.depth > prev.depth and not prev.name.endswith("/"):
                raise NotationError(line_no, line.raw or line.name, f"indented under file {prev.name!r}")
            if parent.child_depth is not None and parent.child_depth != line.depth:
                raise NotationError(
                    line_no, line.raw or line.name,
                    f"depth {line.depth} does not match sibling depth {parent.child_depth}",
                )
        if parent.child_depth is None:
            parent.child_depth = line.depth

        entry = Entry(line.name)
        parent.children.append(entry)
        if entry.is_dir:
            stack.append(_Frame(line.depth, entry.children))
        prev = line

    return forest

def parse_notation(text: str, strict: bool = False) -> List[Entry]:
    forest = build_forest(depth_tag(text), strict=strict)
    logger.debug("Parsed %d top-level entries", len(forest))
    return forest

def forest_to_dicts(forest: List[Entry]) -> List[Dict[str, Any]]:
    return [e.to_dict() for e in forest]
